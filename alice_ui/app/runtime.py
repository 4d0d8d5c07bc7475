"""Alice app composition over the binding runtime."""

from __future__ import annotations

import logging

from bindkit.api.document import DocumentPort, ViewportPort
from bindkit.api.frames import FrameSourcePort
from bindkit.api.host import HostRuntimePort
from bindkit.diagnostics.hub import DiagnosticHub
from bindkit.diagnostics.subscribers.event_counter import EventCounter, log_diagnostics_summary
from bindkit.dom.headless import HeadlessDocument
from bindkit.runtime.bootstrap import BindingRuntime, create_binding_runtime
from bindkit.runtime.config import UiRuntimeConfig, get_ui_runtime_config
from bindkit.runtime.frames import MonotonicClock
from bindkit.runtime.logging import setup_ui_logging
from bindkit.runtime.scheduler import Scheduler
from bindkit.window.rendercanvas_viewport import RenderCanvasViewport, create_rendercanvas_viewport
from alice_ui.app.capabilities import REQUIRED_CAPABILITIES, RESIZE
from alice_ui.app.controls import build_alice_controls
from alice_ui.app.host_library import NativeHostRuntime
from alice_ui.app.page import build_control_page
from alice_ui.app.shortcuts import ShortcutRouter
from alice_ui.infra.config import AliceAppConfig

_LOG = logging.getLogger("alice_ui.runtime")


def create_alice_runtime(
    *,
    host: HostRuntimePort,
    document: DocumentPort,
    viewport: ViewportPort,
    frames: FrameSourcePort,
    scheduler: Scheduler | None = None,
    config: UiRuntimeConfig | None = None,
    diagnostics: DiagnosticHub | None = None,
) -> BindingRuntime:
    return create_binding_runtime(
        host=host,
        document=document,
        viewport=viewport,
        frames=frames,
        required=REQUIRED_CAPABILITIES,
        resize_capability=RESIZE,
        bindings=build_alice_controls,
        scheduler=scheduler,
        config=config,
        diagnostics=diagnostics,
    )


def run_alice_app(app_config: AliceAppConfig) -> None:
    """Open the viewer window, load the native host and run until closed."""
    setup_ui_logging()
    if app_config.host_library is None:
        raise RuntimeError("ALICE_HOST_LIBRARY is not set; point it at the alice2 shared library.")
    ui_config = get_ui_runtime_config()
    clock = MonotonicClock()
    scheduler = Scheduler(time_source=clock.now_ms)
    viewport = create_rendercanvas_viewport(
        scheduler,
        clock=clock,
        width=app_config.window_width,
        height=app_config.window_height,
        title=app_config.window_title,
        max_fps=app_config.max_fps,
        vsync=app_config.vsync,
    )
    document = build_control_page(HeadlessDocument(), config=ui_config)
    container = document.get_element_by_id(ui_config.container_id)
    if container is not None:
        viewport.attach_container(container)

    host = NativeHostRuntime(app_config.host_library)
    runtime = create_alice_runtime(
        host=host,
        document=document,
        viewport=viewport,
        frames=viewport,
        scheduler=scheduler,
        config=ui_config,
    )
    viewport.add_key_listener(ShortcutRouter(document).on_key)
    counter = EventCounter()
    counter.attach(runtime.diagnostics)

    _LOG.info("ui_initializing")
    runtime.orchestrator.install()
    document.dispatch_load()
    host.run()
    run_until_closed(viewport, counter)


def run_until_closed(viewport: RenderCanvasViewport, counter: EventCounter) -> dict[str, int]:
    """Run the window loop, then log what the diagnostics hub saw."""
    try:
        viewport.run()
    finally:
        counts = log_diagnostics_summary(counter, _LOG)
    return counts
