"""Bounded event history for the diagnostics hub."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Keeps the most recent `capacity` items, oldest first."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._items: deque[T] = deque(maxlen=int(capacity))

    @property
    def capacity(self) -> int:
        maxlen = self._items.maxlen
        assert maxlen is not None
        return maxlen

    @property
    def size(self) -> int:
        return len(self._items)

    def append(self, value: T) -> None:
        self._items.append(value)

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self, *, limit: int | None = None) -> list[T]:
        """Copy out the retained items; `limit` keeps only the newest ones."""
        items = list(self._items)
        if limit is None:
            return items
        keep = max(0, int(limit))
        return items[len(items) - keep :] if keep else []
