from __future__ import annotations

from bindkit.runtime.capabilities import CapabilityProber
from bindkit.runtime.resize import ResizeCoordinator, SurfaceDimensions
from tests.bindkit.fakes import RecordingHub, StubHost, element


def _coordinator(page, viewport, scheduler, host: StubHost, hub=None) -> ResizeCoordinator:
    return ResizeCoordinator(
        page,
        viewport,
        CapabilityProber(host, ()),
        scheduler,
        resize_capability="_host_resize",
        debounce_ms=100.0,
        diagnostics=hub,
    )


def test_recompute_scales_layout_by_device_pixel_ratio(page, viewport, scheduler) -> None:
    host = StubHost(["_host_resize"])
    hub = RecordingHub()
    viewport.device_pixel_ratio = 2.0
    coordinator = _coordinator(page, viewport, scheduler, host, hub)

    dimensions = coordinator.recompute()

    canvas = element(page, "canvas")
    assert dimensions == SurfaceDimensions(1600, 1200, 800.0, 600.0, 2.0)
    assert (canvas.width, canvas.height) == (1600, 1200)
    assert canvas.style == {"width": "800px", "height": "600px"}
    assert host.calls_for("_host_resize") == [(1600, 1200)]
    assert hub.names() == ["surface.resize"]


def test_recompute_rounds_half_up(page, viewport, scheduler) -> None:
    element(page, "canvas-container").set_layout(333.5, 200.25)
    coordinator = _coordinator(page, viewport, scheduler, StubHost())

    dimensions = coordinator.recompute()
    assert dimensions is not None
    assert (dimensions.width, dimensions.height) == (334, 200)
    assert element(page, "canvas").style["width"] == "333.5px"


def test_recompute_without_resize_capability_still_sizes_surface(page, viewport, scheduler) -> None:
    coordinator = _coordinator(page, viewport, scheduler, StubHost())
    assert coordinator.recompute() is not None
    assert element(page, "canvas").width == 800


def test_recompute_noops_without_surface_or_container(viewport, scheduler) -> None:
    from bindkit.dom.headless import HeadlessDocument

    empty = HeadlessDocument()
    host = StubHost(["_host_resize"])
    coordinator = _coordinator(empty, viewport, scheduler, host)
    assert coordinator.recompute() is None
    assert coordinator.recompute_count == 0
    assert host.calls == []


def test_resize_burst_recomputes_once_with_last_layout(page, viewport, scheduler) -> None:
    host = StubHost(["_host_resize"])
    coordinator = _coordinator(page, viewport, scheduler, host)
    coordinator.listen()
    container = element(page, "canvas-container")

    for width in (900, 1000, 1100, 1200):
        container.set_layout(width, 700)
        viewport.dispatch_resize()
        scheduler.advance(40.0)
    assert coordinator.pending
    assert coordinator.recompute_count == 0

    scheduler.advance(59.0)
    assert coordinator.recompute_count == 0
    scheduler.advance(1.0)
    assert coordinator.recompute_count == 1
    assert not coordinator.pending
    assert host.calls_for("_host_resize") == [(1200, 700)]
    assert scheduler.queued_task_count == 0


def test_listen_is_idempotent(page, viewport, scheduler) -> None:
    coordinator = _coordinator(page, viewport, scheduler, StubHost())
    coordinator.listen()
    coordinator.listen()
    assert viewport.listener_count("resize") == 1
