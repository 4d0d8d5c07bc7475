"""Binding runtime services."""

from bindkit.runtime.bootstrap import BindingRuntime, create_binding_runtime
from bindkit.runtime.capabilities import CapabilityProber
from bindkit.runtime.config import UiRuntimeConfig, get_ui_runtime_config, load_ui_runtime_config
from bindkit.runtime.controls import ControlBinding, ControlKind, ControlRegistry
from bindkit.runtime.frame_rate import FrameRateSampler
from bindkit.runtime.frames import FrameCallbackQueue, ManualFrameSource, MonotonicClock
from bindkit.runtime.numeric import format_number, parse_float, round_half_up
from bindkit.runtime.orchestrator import Orchestrator, OrchestratorState
from bindkit.runtime.performance import PerformanceReporter, PerformanceSummary
from bindkit.runtime.resize import ResizeCoordinator, SurfaceDimensions
from bindkit.runtime.scheduler import Scheduler

__all__ = [
    "BindingRuntime",
    "CapabilityProber",
    "ControlBinding",
    "ControlKind",
    "ControlRegistry",
    "FrameCallbackQueue",
    "FrameRateSampler",
    "ManualFrameSource",
    "MonotonicClock",
    "Orchestrator",
    "OrchestratorState",
    "PerformanceReporter",
    "PerformanceSummary",
    "ResizeCoordinator",
    "Scheduler",
    "SurfaceDimensions",
    "UiRuntimeConfig",
    "create_binding_runtime",
    "format_number",
    "get_ui_runtime_config",
    "load_ui_runtime_config",
    "parse_float",
    "round_half_up",
]
