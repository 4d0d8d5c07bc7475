"""Composition of the binding runtime over environment ports."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from bindkit.api.document import DocumentPort, ViewportPort
from bindkit.api.frames import FrameSourcePort
from bindkit.api.host import HostCapability, HostRuntimePort
from bindkit.diagnostics.hub import DiagnosticHub, create_diagnostic_hub
from bindkit.runtime.capabilities import CapabilityProber
from bindkit.runtime.config import UiRuntimeConfig, get_ui_runtime_config
from bindkit.runtime.controls import ControlBinding, ControlRegistry
from bindkit.runtime.frame_rate import FrameRateSampler
from bindkit.runtime.orchestrator import Orchestrator
from bindkit.runtime.performance import PerformanceReporter
from bindkit.runtime.resize import ResizeCoordinator
from bindkit.runtime.scheduler import Scheduler

BindingsFactory = Callable[[PerformanceReporter], Sequence[ControlBinding]]


@dataclass(frozen=True, slots=True)
class BindingRuntime:
    """Composed runtime services sharing one host, scheduler and document."""

    prober: CapabilityProber
    controls: ControlRegistry
    resize: ResizeCoordinator
    sampler: FrameRateSampler
    performance: PerformanceReporter
    orchestrator: Orchestrator
    scheduler: Scheduler
    diagnostics: DiagnosticHub


def create_binding_runtime(
    *,
    host: HostRuntimePort,
    document: DocumentPort,
    viewport: ViewportPort,
    frames: FrameSourcePort,
    required: Iterable[HostCapability],
    resize_capability: HostCapability,
    bindings: BindingsFactory,
    scheduler: Scheduler | None = None,
    config: UiRuntimeConfig | None = None,
    diagnostics: DiagnosticHub | None = None,
) -> BindingRuntime:
    """Wire prober, registry, resize, sampler and orchestrator; nothing runs yet.

    Call `runtime.orchestrator.install()` before the document dispatches
    `load`, or `on_page_load()` directly when the page is already loaded.
    """
    cfg = config or get_ui_runtime_config()
    tasks = scheduler or Scheduler()
    hub = diagnostics or create_diagnostic_hub(
        enabled=cfg.diagnostics_enabled,
        capacity=cfg.diagnostics_capacity,
    )
    prober = CapabilityProber(host, required)
    controls = ControlRegistry(document, prober, diagnostics=hub)
    resize = ResizeCoordinator(
        document,
        viewport,
        prober,
        tasks,
        resize_capability=resize_capability,
        canvas_id=cfg.canvas_id,
        container_id=cfg.container_id,
        debounce_ms=cfg.resize_debounce_ms,
        diagnostics=hub,
    )
    sampler = FrameRateSampler(
        frames,
        document,
        counter_id=cfg.fps_counter_id,
        window_ms=cfg.fps_window_ms,
        diagnostics=hub,
    )
    performance = PerformanceReporter(document, viewport, sampler, canvas_id=cfg.canvas_id)
    orchestrator = Orchestrator(
        document=document,
        prober=prober,
        controls=controls,
        resize=resize,
        sampler=sampler,
        scheduler=tasks,
        bindings=bindings(performance),
        poll_interval_ms=cfg.poll_interval_ms,
        diagnostics=hub,
    )
    return BindingRuntime(
        prober=prober,
        controls=controls,
        resize=resize,
        sampler=sampler,
        performance=performance,
        orchestrator=orchestrator,
        scheduler=tasks,
        diagnostics=hub,
    )


__all__ = ["BindingRuntime", "BindingsFactory", "create_binding_runtime"]
