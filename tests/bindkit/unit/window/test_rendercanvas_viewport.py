from __future__ import annotations

import sys
from types import ModuleType

import pytest

from bindkit.dom.headless import HeadlessDocument
from bindkit.runtime.capabilities import CapabilityProber
from bindkit.runtime.frame_rate import FrameRateSampler
from bindkit.runtime.performance import PerformanceReporter
from bindkit.runtime.resize import ResizeCoordinator
from bindkit.runtime.scheduler import Scheduler
from bindkit.window.rendercanvas_viewport import (
    RenderCanvasViewport,
    create_rendercanvas_viewport,
    run_backend_loop,
)
from tests.bindkit.fakes import StubHost, build_test_page, element


class _Loop:
    def __init__(self) -> None:
        self.ran = 0

    def run(self) -> None:
        self.ran += 1


class _AutoWithLoop:
    def __init__(self) -> None:
        self.loop = _Loop()


class _AutoWithRun:
    def __init__(self) -> None:
        self.ran = 0

    def run(self) -> None:
        self.ran += 1


class _Canvas:
    def __init__(self, *, size: tuple[float, float] = (640.0, 480.0), ratio: float = 2.0) -> None:
        self.handlers: dict[str, list] = {}
        self.size = size
        self.ratio = ratio
        self.titles: list[str] = []
        self.draw_callbacks: list = []

    def add_event_handler(self, handler, event_type: str) -> None:
        self.handlers.setdefault(event_type, []).append(handler)

    def get_logical_size(self) -> tuple[float, float]:
        return self.size

    def get_pixel_ratio(self) -> float:
        return self.ratio

    def get_context(self, kind: str = "wgpu") -> object:
        return kind

    def set_title(self, title: str) -> None:
        self.titles.append(title)

    def request_draw(self, callback) -> None:
        self.draw_callbacks.append(callback)

    def emit(self, event_type: str, **payload) -> None:
        event = {"event_type": event_type, **payload}
        for handler in self.handlers.get(event_type, []):
            handler(event)


class _Clock:
    def __init__(self) -> None:
        self.value = 0.0

    def now_ms(self) -> float:
        return self.value

    def set_ms(self, value: float) -> None:
        self.value = value


def test_viewport_reports_ratio_backend_and_layout() -> None:
    canvas = _Canvas()
    viewport = RenderCanvasViewport(canvas, Scheduler())
    document = HeadlessDocument()
    container = document.create_element("div", element_id="canvas-container")

    viewport.attach_container(container)

    assert viewport.device_pixel_ratio == 2.0
    assert viewport.render_backend == "Available"
    assert container.get_bounding_client_rect().width == 640.0
    canvas.size = (320.0, 200.0)
    assert container.get_bounding_client_rect().height == 200.0


def test_viewport_falls_back_without_canvas_capabilities() -> None:
    viewport = RenderCanvasViewport(object(), Scheduler())
    assert viewport.device_pixel_ratio == 1.0
    assert viewport.render_backend == "Unavailable"
    assert viewport.layout_box().width == 0.0
    viewport.show_alert("Performance Info:\n{}")


def test_canvas_resize_and_key_events_reach_listeners() -> None:
    canvas = _Canvas()
    viewport = RenderCanvasViewport(canvas, Scheduler())
    resized: list[str] = []
    keys: list[str] = []
    viewport.add_event_listener("resize", lambda event: resized.append(event.event_type))
    viewport.add_event_listener("scroll", lambda event: resized.append("scroll"))
    viewport.add_key_listener(keys.append)

    canvas.emit("resize", width=100, height=50)
    canvas.emit("key_down", key="g")
    canvas.emit("key_down", key=None)

    assert resized == ["resize"]
    assert keys == ["g"]


def test_pump_runs_due_timers_then_frame_callbacks() -> None:
    clock = _Clock()
    scheduler = Scheduler()
    viewport = RenderCanvasViewport(_Canvas(), scheduler, clock=clock)
    order: list[str] = []
    scheduler.call_later(100.0, lambda: order.append("timer"))
    viewport.request_frame(lambda ts: order.append(f"frame@{ts:.0f}"))

    clock.set_ms(50.0)
    assert viewport.pump() == 1
    clock.set_ms(150.0)
    assert viewport.pump() == 0

    assert order == ["frame@50", "timer"]
    assert viewport.now_ms() == pytest.approx(150.0)


def test_resize_between_draws_debounces_from_event_time() -> None:
    clock = _Clock()
    canvas = _Canvas()
    scheduler = Scheduler(time_source=clock.now_ms)
    viewport = RenderCanvasViewport(canvas, scheduler, clock=clock)
    page = build_test_page()
    coordinator = ResizeCoordinator(
        page,
        viewport,
        CapabilityProber(StubHost(), ()),
        scheduler,
        resize_capability="_host_resize",
        debounce_ms=100.0,
    )
    coordinator.listen()

    clock.set_ms(1000.0)
    viewport.pump()
    clock.set_ms(1090.0)
    canvas.emit("resize", width=400, height=300)

    clock.set_ms(1106.0)
    viewport.pump()
    assert coordinator.recompute_count == 0
    clock.set_ms(1189.0)
    viewport.pump()
    assert coordinator.recompute_count == 0
    clock.set_ms(1190.0)
    viewport.pump()
    assert coordinator.recompute_count == 1
    assert element(page, "canvas").width == 1600


def test_timer_scheduled_between_draws_counts_from_clock_time() -> None:
    clock = _Clock()
    scheduler = Scheduler(time_source=clock.now_ms)
    viewport = RenderCanvasViewport(_Canvas(), scheduler, clock=clock)
    fired: list[float] = []

    clock.set_ms(500.0)
    scheduler.call_later(100.0, lambda: fired.append(viewport.now_ms()))
    clock.set_ms(599.0)
    viewport.pump()
    clock.set_ms(600.0)
    viewport.pump()

    assert fired == [600.0]


def test_performance_info_headline_reaches_window_title() -> None:
    canvas = _Canvas(ratio=2.0)
    viewport = RenderCanvasViewport(canvas, Scheduler())
    page = build_test_page()
    surface = element(page, "canvas")
    surface.width = 1600
    surface.height = 1200
    sampler = FrameRateSampler(viewport, page)

    PerformanceReporter(page, viewport, sampler).show_performance_info()

    assert canvas.titles == ["Performance Info: FPS 0 | 1600x1200 @2 | Available"]


def test_run_registers_draw_and_starts_loop() -> None:
    canvas = _Canvas()
    auto = _AutoWithLoop()
    viewport = RenderCanvasViewport(canvas, Scheduler(), rc_auto=auto)

    viewport.run()
    viewport.show_alert("Performance Info:\n{}")

    assert canvas.draw_callbacks == [viewport.pump]
    assert auto.loop.ran == 1
    assert canvas.titles == ["Performance Info:"]


def test_show_alert_prefers_explicit_title() -> None:
    canvas = _Canvas()
    viewport = RenderCanvasViewport(canvas, Scheduler())
    viewport.show_alert("Performance Info:\n{}", title="Performance Info: FPS 60")
    assert canvas.titles == ["Performance Info: FPS 60"]


def test_run_backend_loop_prefers_loop_then_run() -> None:
    with_loop = _AutoWithLoop()
    with_run = _AutoWithRun()
    run_backend_loop(with_loop)
    run_backend_loop(with_run)
    assert with_loop.loop.ran == 1
    assert with_run.ran == 1
    with pytest.raises(RuntimeError):
        run_backend_loop(object())


def test_create_rendercanvas_viewport_uses_auto_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    created: dict[str, object] = {}

    class _AutoCanvas(_Canvas):
        def __init__(self, **kwargs) -> None:
            super().__init__()
            created.update(kwargs)

    rendercanvas_mod = ModuleType("rendercanvas")
    auto_mod = ModuleType("rendercanvas.auto")
    auto_mod.RenderCanvas = _AutoCanvas
    auto_mod.loop = _Loop()
    rendercanvas_mod.auto = auto_mod
    monkeypatch.setitem(sys.modules, "rendercanvas", rendercanvas_mod)
    monkeypatch.setitem(sys.modules, "rendercanvas.auto", auto_mod)

    viewport = create_rendercanvas_viewport(Scheduler(), width=800, height=600, title="Alice")

    assert isinstance(viewport.canvas, _AutoCanvas)
    assert created["size"] == (800, 600)
    assert created["title"] == "Alice"
    assert created["update_mode"] == "continuous"
