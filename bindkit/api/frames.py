"""Animation frame source contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

FrameCallback = Callable[[float], None]


class FrameSourcePort(Protocol):
    """Per-frame callback source, one invocation per rendered frame."""

    def now_ms(self) -> float:
        """Return the current frame-clock timestamp in milliseconds."""

    def request_frame(self, callback: FrameCallback) -> None:
        """Invoke `callback(timestamp_ms)` once on the next frame."""


__all__ = ["FrameCallback", "FrameSourcePort"]
