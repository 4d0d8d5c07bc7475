"""Readiness handshake and one-time binding orchestration."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from bindkit.api.document import DocumentPort
from bindkit.diagnostics.hub import DiagnosticHub
from bindkit.runtime.capabilities import CapabilityProber
from bindkit.runtime.controls import ControlBinding, ControlRegistry
from bindkit.runtime.frame_rate import FrameRateSampler
from bindkit.runtime.resize import ResizeCoordinator
from bindkit.runtime.scheduler import Scheduler

_LOG = logging.getLogger("bindkit.orchestrator")


class OrchestratorState(Enum):
    WAITING_FOR_RUNTIME = "waiting_for_runtime"
    WAITING_FOR_CAPABILITIES = "waiting_for_capabilities"
    BOUND = "bound"


class Orchestrator:
    """Reconciles page load with host initialization and binds exactly once.

    Readiness may be signalled by the page load (when the host already ran),
    by the host's runtime-initialized hook, or by both in either order. Only
    one poll chain is ever scheduled, and `BOUND` is terminal.
    """

    def __init__(
        self,
        *,
        document: DocumentPort,
        prober: CapabilityProber,
        controls: ControlRegistry,
        resize: ResizeCoordinator,
        sampler: FrameRateSampler,
        scheduler: Scheduler,
        bindings: Sequence[ControlBinding],
        poll_interval_ms: float = 100.0,
        diagnostics: DiagnosticHub | None = None,
    ) -> None:
        if poll_interval_ms <= 0.0:
            raise ValueError("poll_interval_ms must be > 0")
        self._document = document
        self._prober = prober
        self._controls = controls
        self._resize = resize
        self._sampler = sampler
        self._scheduler = scheduler
        self._bindings = tuple(bindings)
        self._poll_interval_ms = float(poll_interval_ms)
        self._diagnostics = diagnostics
        self._state = OrchestratorState.WAITING_FOR_RUNTIME
        self._poll_task: int | None = None
        self._poll_attempts = 0
        self._hook_installed = False

    @property
    def state(self) -> OrchestratorState:
        return self._state

    @property
    def bound(self) -> bool:
        return self._state is OrchestratorState.BOUND

    @property
    def poll_attempts(self) -> int:
        return self._poll_attempts

    def install(self) -> None:
        """Wait for the page `load` event before joining the host handshake."""
        self._document.add_event_listener("load", self.on_page_load)

    def on_page_load(self, event: object | None = None) -> None:
        _ = event
        _LOG.info("page_loaded")
        runtime = self._prober.runtime
        if not self._hook_installed:
            existing = runtime.on_runtime_initialized

            def _on_runtime_initialized() -> None:
                _LOG.info("runtime_initialized")
                if existing is not None:
                    existing()
                self.signal_ready()

            runtime.on_runtime_initialized = _on_runtime_initialized
            self._hook_installed = True
        # The host may have finished starting before the page did.
        if runtime.called_run:
            self.signal_ready()

    def signal_ready(self) -> None:
        if self._state is OrchestratorState.BOUND:
            return
        if self._state is OrchestratorState.WAITING_FOR_RUNTIME:
            self._transition(OrchestratorState.WAITING_FOR_CAPABILITIES)
        self._attempt()

    def _attempt(self) -> None:
        self._poll_attempts += 1
        if self._prober.is_ready():
            self._bind()
            return
        _LOG.debug(
            "host_not_ready runtime=%s missing=%s",
            self._prober.has_runtime(),
            ",".join(self._prober.missing()),
        )
        if self._poll_task is None:
            self._poll_task = self._scheduler.call_later(self._poll_interval_ms, self._poll)

    def _poll(self) -> None:
        self._poll_task = None
        if self._state is OrchestratorState.BOUND:
            return
        self._attempt()

    def _bind(self) -> None:
        previous = self._state
        # Terminal from here on, including for signals raised while binding.
        self._state = OrchestratorState.BOUND
        bound_count = self._controls.bind_all(self._bindings)
        self._resize.listen()
        self._resize.recompute()
        self._sampler.start()
        _LOG.info(
            "ui_initialized controls=%d/%d attempts=%d",
            bound_count,
            len(self._bindings),
            self._poll_attempts,
        )
        self._emit_transition(previous, OrchestratorState.BOUND)

    def _transition(self, state: OrchestratorState) -> None:
        previous = self._state
        self._state = state
        self._emit_transition(previous, state)

    def _emit_transition(self, previous: OrchestratorState, state: OrchestratorState) -> None:
        if self._diagnostics is not None:
            self._diagnostics.emit_fast(
                category="orchestrator",
                name=f"orchestrator.{state.value}",
                value={"from": previous.value, "to": state.value},
            )


__all__ = ["Orchestrator", "OrchestratorState"]
