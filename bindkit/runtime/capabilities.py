"""Host capability probing."""

from __future__ import annotations

from collections.abc import Iterable

from bindkit.api.host import HostCapability, HostEntryPoint, HostRuntimePort


class CapabilityProber:
    """Side-effect-free presence checks over a host runtime's entry points.

    Every query reads the runtime container again, so capabilities that
    appear after construction are picked up without re-probing.
    """

    def __init__(
        self,
        runtime: HostRuntimePort,
        required: Iterable[HostCapability],
    ) -> None:
        self._runtime = runtime
        self._required: tuple[HostCapability, ...] = tuple(required)

    @property
    def required(self) -> tuple[HostCapability, ...]:
        return self._required

    @property
    def runtime(self) -> HostRuntimePort:
        return self._runtime

    def has_runtime(self) -> bool:
        return getattr(self._runtime, "container", None) is not None

    def lookup(self, name: HostCapability) -> HostEntryPoint | None:
        container = getattr(self._runtime, "container", None)
        if container is None:
            return None
        entry = getattr(container, name, None)
        return entry if callable(entry) else None

    def has(self, name: HostCapability) -> bool:
        return self.lookup(name) is not None

    def missing(self) -> tuple[HostCapability, ...]:
        return tuple(name for name in self._required if self.lookup(name) is None)

    def is_ready(self) -> bool:
        if not self.has_runtime():
            return False
        return all(self.lookup(name) is not None for name in self._required)
