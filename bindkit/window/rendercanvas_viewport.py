"""Rendercanvas-backed viewport, surface layout and frame source."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from bindkit.api.document import ElementEvent, EventHandler, LayoutBox, ViewportPort
from bindkit.api.frames import FrameCallback, FrameSourcePort
from bindkit.dom.headless import HeadlessElement
from bindkit.runtime.errors import RECOVERABLE_RUNTIME_ERRORS, log_recoverable
from bindkit.runtime.frames import FrameCallbackQueue, MonotonicClock
from bindkit.runtime.scheduler import Scheduler

KeyHandler = Callable[[str], None]

_LOG = logging.getLogger("bindkit.window")


def run_backend_loop(rc_auto: Any) -> None:
    """Run rendercanvas backend loop."""
    loop = getattr(rc_auto, "loop", None)
    if loop is not None and hasattr(loop, "run"):
        loop.run()
        return
    run_func = getattr(rc_auto, "run", None)
    if callable(run_func):
        run_func()
        return
    raise RuntimeError("rendercanvas.auto did not expose a runnable loop.")


class RenderCanvasViewport(ViewportPort, FrameSourcePort):
    """Adapter exposing a rendercanvas canvas as viewport and frame source.

    Every draw pumps the scheduler to the current clock and then dispatches
    pending frame callbacks, so timers and animation frames share one loop.
    """

    def __init__(
        self,
        canvas: Any,
        scheduler: Scheduler,
        *,
        clock: MonotonicClock | None = None,
        rc_auto: Any | None = None,
    ) -> None:
        self.canvas = canvas
        self._scheduler = scheduler
        self._clock = clock or MonotonicClock()
        self._rc_auto = rc_auto
        self._frames = FrameCallbackQueue()
        self._resize_handlers: list[EventHandler] = []
        self._key_handlers: list[KeyHandler] = []
        self._bind_canvas_events()

    @property
    def device_pixel_ratio(self) -> float:
        getter = getattr(self.canvas, "get_pixel_ratio", None)
        if not callable(getter):
            return 1.0
        ratio = getter()
        return float(ratio) if isinstance(ratio, (int, float)) and ratio > 0 else 1.0

    @property
    def render_backend(self) -> str:
        return "Available" if callable(getattr(self.canvas, "get_context", None)) else "Unavailable"

    def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
        if event_type == "resize":
            self._resize_handlers.append(handler)
            return
        _LOG.debug("viewport_event_unsupported type=%s", event_type)

    def add_key_listener(self, handler: KeyHandler) -> None:
        self._key_handlers.append(handler)

    def show_alert(self, text: str, *, title: str | None = None) -> None:
        """Log the full text and put `title` (default: first line) in the window title."""
        _LOG.info("alert %s", text)
        setter = getattr(self.canvas, "set_title", None)
        if callable(setter):
            setter(title or (text.splitlines() or [""])[0])

    def layout_box(self) -> LayoutBox:
        getter = getattr(self.canvas, "get_logical_size", None)
        if not callable(getter):
            return LayoutBox(0.0, 0.0, 0.0, 0.0)
        width, height = getter()
        return LayoutBox(0.0, 0.0, float(width), float(height))

    def attach_container(self, container: HeadlessElement) -> None:
        """Make `container` report the canvas's logical size as its layout box."""
        container.bind_layout(self.layout_box)

    def now_ms(self) -> float:
        return self._clock.now_ms()

    def request_frame(self, callback: FrameCallback) -> None:
        self._frames.request_frame(callback)

    def sync_timers(self) -> float:
        """Run timers due by the clock's current time and return that time."""
        now = max(self._clock.now_ms(), self._scheduler.now_ms)
        self._scheduler.run_due(now)
        return now

    def pump(self) -> int:
        """Advance timers and dispatch one frame of callbacks."""
        return self._frames.dispatch(self.sync_timers())

    def run(self) -> None:
        request_draw = getattr(self.canvas, "request_draw", None)
        if callable(request_draw):
            request_draw(self.pump)
        if self._rc_auto is None:
            return
        run_backend_loop(self._rc_auto)

    def _bind_canvas_events(self) -> None:
        add_handler = getattr(self.canvas, "add_event_handler", None)
        if not callable(add_handler):
            return
        for handler, event_type in ((self._on_resize, "resize"), (self._on_key_down, "key_down")):
            try:
                add_handler(handler, event_type)
            except RECOVERABLE_RUNTIME_ERRORS:
                log_recoverable(_LOG, "canvas_event_bind_failed type=%s", event_type)

    def _on_resize(self, event: object) -> None:
        _ = event
        self.sync_timers()
        for handler in tuple(self._resize_handlers):
            handler(ElementEvent(event_type="resize", target=self))

    def _on_key_down(self, event: object) -> None:
        key = _event_value(event, "key")
        if not isinstance(key, str):
            return
        self.sync_timers()
        for handler in tuple(self._key_handlers):
            handler(key)


def create_rendercanvas_viewport(
    scheduler: Scheduler,
    *,
    width: int = 1200,
    height: int = 720,
    title: str = "Viewer",
    max_fps: float = 60.0,
    vsync: bool = True,
    clock: MonotonicClock | None = None,
) -> RenderCanvasViewport:
    """Create a continuously drawing rendercanvas window and wrap it."""
    try:
        import rendercanvas.auto as rc_auto
    except ImportError as exc:
        raise RuntimeError(
            "Render canvas backend unavailable. Install a desktop backend such as glfw or pyside6."
        ) from exc
    canvas_cls = getattr(rc_auto, "RenderCanvas", None)
    if canvas_cls is None:
        raise RuntimeError("rendercanvas.auto did not expose RenderCanvas.")
    try:
        canvas = canvas_cls(
            size=(int(width), int(height)),
            title=title,
            update_mode="continuous",
            max_fps=float(max_fps),
            vsync=bool(vsync),
        )
    except TypeError:
        canvas = canvas_cls(size=(int(width), int(height)), title=title)
    return RenderCanvasViewport(canvas, scheduler, clock=clock, rc_auto=rc_auto)


def _event_value(event: object, key: str, default: object | None = None) -> object | None:
    if isinstance(event, dict):
        return event.get(key, default)
    return getattr(event, key, default)


__all__ = ["RenderCanvasViewport", "create_rendercanvas_viewport", "run_backend_loop"]
