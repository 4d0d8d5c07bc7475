from __future__ import annotations

import pytest

from bindkit.diagnostics import EventCounter
from bindkit.dom.headless import HeadlessDocument, HeadlessViewport
from bindkit.runtime.config import UiRuntimeConfig
from bindkit.runtime.frames import ManualFrameSource
from bindkit.runtime.scheduler import Scheduler
from alice_ui.app import capabilities
from alice_ui.app.page import build_control_page
from alice_ui.app.runtime import create_alice_runtime, run_alice_app, run_until_closed
from alice_ui.app.shortcuts import ShortcutRouter
from alice_ui.infra.config import AliceAppConfig
from tests.bindkit.fakes import StubHost, value_display


def _setup(host: StubHost, *, ratio: float = 1.0):
    document = build_control_page(HeadlessDocument())
    document.get_element_by_id("canvas-container").set_layout(1000, 500)
    viewport = HeadlessViewport(device_pixel_ratio=ratio)
    frames = ManualFrameSource()
    scheduler = Scheduler()
    runtime = create_alice_runtime(
        host=host,
        document=document,
        viewport=viewport,
        frames=frames,
        scheduler=scheduler,
        config=UiRuntimeConfig(),
    )
    runtime.orchestrator.install()
    document.dispatch_load()
    return document, viewport, frames, scheduler, runtime


def test_full_panel_binds_once_host_exports_arrive() -> None:
    host = StubHost()
    document, viewport, frames, scheduler, runtime = _setup(host, ratio=1.5)
    assert not runtime.orchestrator.bound

    for name in capabilities.REQUIRED_CAPABILITIES:
        host.export(name)
    host.run()

    assert runtime.orchestrator.bound
    assert host.calls_for(capabilities.RESIZE) == [(1500, 750)]
    canvas = document.get_element_by_id("canvas")
    assert (canvas.width, canvas.height) == (1500, 750)
    assert canvas.style == {"width": "1000px", "height": "500px"}
    assert value_display(document, "brightness-slider").text_content == "0.2"
    assert value_display(document, "fov-slider").text_content == "45°"
    assert document.get_element_by_id("point-size-slider").value == "5"

    for index in range(1, 121):
        frames.tick(index * 1000.0 / 120)
    assert document.get_element_by_id("fps-counter").text_content == "FPS: 120"

    viewport.device_pixel_ratio = 2.0
    viewport.dispatch_resize()
    scheduler.advance(50.0)
    viewport.dispatch_resize()
    scheduler.advance(100.0)
    assert host.calls_for(capabilities.RESIZE) == [(1500, 750), (2000, 1000)]


def test_optional_entry_points_are_checked_per_interaction() -> None:
    host = StubHost(capabilities.REQUIRED_CAPABILITIES)
    host.run()
    document, viewport, _, _, _ = _setup(host)
    router = ShortcutRouter(document)

    fov = document.get_element_by_id("fov-slider")
    fov.input("60")
    assert value_display(document, "fov-slider").text_content == "60°"
    assert host.calls_for(capabilities.SET_FOV) == []

    host.export(capabilities.SET_FOV)
    host.export(capabilities.TOGGLE_WIREFRAME)
    fov.input("75.5")
    router.on_key("f")
    router.on_key("g")
    router.on_key("p")

    assert host.calls_for(capabilities.SET_FOV) == [(75.5,)]
    assert host.calls_for(capabilities.TOGGLE_WIREFRAME) == [()]
    assert host.calls_for(capabilities.ADD_TEST_GEOMETRY) == [()]
    assert viewport.alerts[0].startswith("Performance Info:\n")


def test_failing_host_call_does_not_break_other_controls(caplog) -> None:
    host = StubHost(capabilities.REQUIRED_CAPABILITIES)

    def _boom() -> None:
        raise RuntimeError("native failure")

    host.export(capabilities.CLEAR_SCENE, _boom)
    host.run()
    document, _, _, _, runtime = _setup(host)

    document.get_element_by_id("clear-scene").click()
    document.get_element_by_id("add-test-geometry").click()

    assert host.calls_for(capabilities.ADD_TEST_GEOMETRY) == [()]
    assert "button_callback_failed selector=#clear-scene" in caplog.text
    assert runtime.diagnostics.snapshot(name="controls.callback_failed")


def test_run_alice_app_requires_host_library() -> None:
    config = AliceAppConfig(
        host_library=None,
        window_width=640,
        window_height=480,
        window_title="Alice 2",
        max_fps=60.0,
        vsync=True,
    )
    with pytest.raises(RuntimeError, match="ALICE_HOST_LIBRARY"):
        run_alice_app(config)


class _ClosingWindow:
    def __init__(self, on_run) -> None:
        self._on_run = on_run

    def run(self) -> None:
        self._on_run()


def test_run_until_closed_reports_callback_failures(caplog) -> None:
    host = StubHost(capabilities.REQUIRED_CAPABILITIES)

    def _boom() -> None:
        raise RuntimeError("native failure")

    host.export(capabilities.CLEAR_SCENE, _boom)
    host.run()
    counter = EventCounter()
    document, _, _, _, runtime = _setup(host)
    counter.attach(runtime.diagnostics)
    window = _ClosingWindow(document.get_element_by_id("clear-scene").click)

    counts = run_until_closed(window, counter)

    assert counts == {"controls.callback_failed": 1}
    assert "diagnostics_summary" in caplog.text
    assert not counter.attached


def test_run_until_closed_logs_summary_when_loop_raises(caplog) -> None:
    counter = EventCounter()

    def _crash() -> None:
        raise RuntimeError("window lost")

    with caplog.at_level("INFO", logger="alice_ui.runtime"):
        with pytest.raises(RuntimeError, match="window lost"):
            run_until_closed(_ClosingWindow(_crash), counter)
    assert "diagnostics_summary counts={}" in caplog.text
