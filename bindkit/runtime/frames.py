"""Animation frame sources."""

from __future__ import annotations

from collections.abc import Callable
from time import monotonic

from bindkit.api.frames import FrameCallback, FrameSourcePort


class FrameCallbackQueue:
    """Pending one-shot frame callbacks, drained once per rendered frame.

    Callbacks requested while a frame is being dispatched run on the next
    frame, which is what lets a callback reschedule itself indefinitely.
    """

    def __init__(self) -> None:
        self._pending: list[FrameCallback] = []
        self._frame_index = 0

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    def dispatch(self, timestamp_ms: float) -> int:
        """Run callbacks queued before this frame; return how many ran."""
        callbacks, self._pending = self._pending, []
        self._frame_index += 1
        for callback in callbacks:
            callback(timestamp_ms)
        return len(callbacks)


class ManualFrameSource(FrameSourcePort):
    """Frame source advanced by explicit `tick` calls."""

    def __init__(self, *, start_ms: float = 0.0) -> None:
        self._now_ms = float(start_ms)
        self._queue = FrameCallbackQueue()

    @property
    def pending_count(self) -> int:
        return self._queue.pending_count

    def now_ms(self) -> float:
        return self._now_ms

    def request_frame(self, callback: FrameCallback) -> None:
        self._queue.request_frame(callback)

    def tick(self, now_ms: float) -> int:
        if now_ms < self._now_ms:
            raise ValueError("now_ms cannot move backwards")
        self._now_ms = float(now_ms)
        return self._queue.dispatch(self._now_ms)


class MonotonicClock:
    """Millisecond clock relative to construction time."""

    def __init__(self, *, time_source: Callable[[], float] | None = None) -> None:
        self._time_source = time_source or monotonic
        self._origin = self._time_source()

    def now_ms(self) -> float:
        return max(0.0, (self._time_source() - self._origin) * 1000.0)


__all__ = ["FrameCallbackQueue", "ManualFrameSource", "MonotonicClock"]
