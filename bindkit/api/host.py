"""Host module contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeAlias

HostCapability: TypeAlias = str
HostEntryPoint = Callable[..., object]
RuntimeInitializedHook = Callable[[], None]


class HostRuntimePort(Protocol):
    """Externally provided runtime that publishes named entry points.

    `container` stays None until the runtime has loaded. Entry points are
    resolved on it by attribute name, so absence is an expected transient
    state rather than an error.
    """

    container: object | None
    called_run: bool
    on_runtime_initialized: RuntimeInitializedHook | None


__all__ = [
    "HostCapability",
    "HostEntryPoint",
    "HostRuntimePort",
    "RuntimeInitializedHook",
]
