"""Public binding runtime contracts."""

from bindkit.api.document import (
    DocumentPort,
    ElementEvent,
    ElementPort,
    EventHandler,
    LayoutBox,
    ViewportPort,
)
from bindkit.api.frames import FrameCallback, FrameSourcePort
from bindkit.api.host import HostCapability, HostEntryPoint, HostRuntimePort, RuntimeInitializedHook
from bindkit.api.logging import JsonFormatter, UiLoggingConfig, configure_logging, get_logger

__all__ = [
    "DocumentPort",
    "ElementEvent",
    "ElementPort",
    "EventHandler",
    "FrameCallback",
    "FrameSourcePort",
    "HostCapability",
    "HostEntryPoint",
    "HostRuntimePort",
    "JsonFormatter",
    "LayoutBox",
    "RuntimeInitializedHook",
    "UiLoggingConfig",
    "ViewportPort",
    "configure_logging",
    "get_logger",
]
