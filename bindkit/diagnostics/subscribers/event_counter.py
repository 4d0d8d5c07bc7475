"""Per-name diagnostic event tally, reported when the app exits."""

from __future__ import annotations

import logging
from collections import Counter

from bindkit.diagnostics.event import DiagnosticEvent
from bindkit.diagnostics.hub import DiagnosticHub
from bindkit.diagnostics.json_codec import dumps_text


class EventCounter:
    """Counts hub events by name while attached."""

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()
        self._hub: DiagnosticHub | None = None
        self._token: int | None = None

    @property
    def attached(self) -> bool:
        return self._token is not None

    def attach(self, hub: DiagnosticHub) -> None:
        if self._token is not None:
            self.detach()
        self._hub = hub
        self._token = hub.subscribe(self._record)

    def detach(self) -> None:
        if self._hub is not None and self._token is not None:
            self._hub.unsubscribe(self._token)
        self._hub = None
        self._token = None

    def counts(self) -> dict[str, int]:
        return dict(sorted(self._counts.items()))

    def _record(self, event: DiagnosticEvent) -> None:
        self._counts[event.name] += 1


def log_diagnostics_summary(counter: EventCounter, logger: logging.Logger) -> dict[str, int]:
    """Detach `counter` and log its tallies as one JSON line."""
    counter.detach()
    counts = counter.counts()
    failures = counts.get("controls.callback_failed", 0)
    level = logging.WARNING if failures else logging.INFO
    logger.log(level, "diagnostics_summary counts=%s", dumps_text(counts))
    return counts


__all__ = ["EventCounter", "log_diagnostics_summary"]
