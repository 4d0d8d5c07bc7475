"""Diagnostics hub for binding lifecycle, resize and frame-rate events."""

from __future__ import annotations

from collections.abc import Callable
from itertools import count
from typing import Any

from bindkit.diagnostics.event import DiagnosticEvent, utc_now_iso
from bindkit.diagnostics.ring_buffer import RingBuffer

Subscriber = Callable[[DiagnosticEvent], None]
EventValue = float | int | str | bool | dict[str, Any] | None


def _normalize(category: str) -> str:
    return str(category).strip().lower()


class DiagnosticHub:
    """Records structured runtime events and fans them out to subscribers.

    Events land in a bounded history that `snapshot` reads back. A disabled
    hub drops everything; an allowlist, when given, drops other categories.
    """

    def __init__(
        self,
        *,
        capacity: int = 2048,
        enabled: bool = True,
        category_allowlist: tuple[str, ...] = (),
    ) -> None:
        self._enabled = bool(enabled)
        self._history = RingBuffer[DiagnosticEvent](capacity=capacity)
        self._subscribers: dict[int, Subscriber] = {}
        self._tokens = count(1)
        self._ticks = count(0)
        self._allowed = frozenset(
            name for name in (_normalize(item) for item in category_allowlist) if name
        )

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def capacity(self) -> int:
        return self._history.capacity

    def accepts(self, category: str) -> bool:
        if not self._enabled:
            return False
        return not self._allowed or _normalize(category) in self._allowed

    def emit(self, event: DiagnosticEvent) -> None:
        if not self._enabled:
            return
        self._history.append(event)
        for subscriber in list(self._subscribers.values()):
            subscriber(event)

    def emit_fast(
        self,
        *,
        category: str,
        name: str,
        level: str = "info",
        value: EventValue = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Build, tick-stamp and record an event in one call."""
        if not self.accepts(category):
            return
        self.emit(
            DiagnosticEvent(
                ts_utc=utc_now_iso(),
                tick=next(self._ticks),
                category=_normalize(category),
                name=name,
                level=level,
                value=value,
                metadata=dict(metadata or {}),
            )
        )

    def subscribe(self, callback: Subscriber) -> int:
        token = next(self._tokens)
        self._subscribers[token] = callback
        return token

    def unsubscribe(self, token: int) -> None:
        self._subscribers.pop(token, None)

    def snapshot(
        self,
        *,
        limit: int | None = None,
        category: str | None = None,
        name: str | None = None,
    ) -> list[DiagnosticEvent]:
        return [
            event
            for event in self._history.snapshot(limit=limit)
            if (category is None or event.category == category)
            and (name is None or event.name == name)
        ]


def create_diagnostic_hub(
    *,
    enabled: bool = True,
    capacity: int = 2048,
    category_allowlist: tuple[str, ...] = (),
) -> DiagnosticHub:
    return DiagnosticHub(
        capacity=max(1, int(capacity)),
        enabled=enabled,
        category_allowlist=category_allowlist,
    )


__all__ = ["DiagnosticHub", "EventValue", "Subscriber", "create_diagnostic_hub"]
