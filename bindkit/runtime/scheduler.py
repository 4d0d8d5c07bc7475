"""Deferred task scheduler on a virtual millisecond clock."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from heapq import heappop, heappush

TaskCallback = Callable[[], None]
TimeSource = Callable[[], float]


@dataclass(slots=True)
class _Task:
    task_id: int
    due_ms: float
    callback: TaskCallback
    cancelled: bool = False


class Scheduler:
    """One-shot timer queue advanced explicitly by its owner.

    Nothing runs on its own: the environment (a window draw loop, or a test)
    moves time forward with `advance` or `run_due`, and due callbacks fire in
    due order, ties broken by scheduling order.

    With a `time_source`, delays count from the later of the last `run_due`
    and the source's current time, not from the last `run_due` alone.
    """

    def __init__(self, *, time_source: TimeSource | None = None) -> None:
        self._time_source = time_source
        self._now_ms = 0.0
        self._next_task_id = 1
        self._tasks: dict[int, _Task] = {}
        self._queue: list[tuple[float, int]] = []

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def queued_task_count(self) -> int:
        """Return count of active queued tasks."""
        return sum(1 for task in self._tasks.values() if not task.cancelled)

    def is_pending(self, task_id: int) -> bool:
        task = self._tasks.get(task_id)
        return task is not None and not task.cancelled

    def call_later(self, delay_ms: float, callback: TaskCallback) -> int:
        """Schedule a one-shot callback after `delay_ms`."""
        if delay_ms < 0.0:
            raise ValueError("delay_ms must be >= 0")
        task_id = self._next_task_id
        self._next_task_id += 1
        due_ms = self._current_ms() + float(delay_ms)
        self._tasks[task_id] = _Task(task_id=task_id, due_ms=due_ms, callback=callback)
        heappush(self._queue, (due_ms, task_id))
        return task_id

    def cancel(self, task_id: int) -> None:
        """Cancel a scheduled task if it exists."""
        task = self._tasks.get(task_id)
        if task is not None:
            task.cancelled = True

    def advance(self, delta_ms: float) -> int:
        """Advance the clock and run due callbacks."""
        if delta_ms < 0.0:
            raise ValueError("delta_ms must be >= 0")
        return self.run_due(self._now_ms + delta_ms)

    def run_due(self, now_ms: float) -> int:
        """Run callbacks due at or before `now_ms`; return how many ran."""
        if now_ms < self._now_ms:
            raise ValueError("now_ms cannot move backwards")
        self._now_ms = now_ms
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_ms:
            _, task_id = heappop(self._queue)
            task = self._tasks.pop(task_id, None)
            if task is None or task.cancelled:
                continue
            task.callback()
            executed += 1
        return executed

    def _current_ms(self) -> float:
        if self._time_source is None:
            return self._now_ms
        return max(self._now_ms, float(self._time_source()))
