"""Surface backing-resolution tracking with debounced host notification."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bindkit.api.document import DocumentPort, ViewportPort
from bindkit.api.host import HostCapability
from bindkit.diagnostics.hub import DiagnosticHub
from bindkit.runtime.capabilities import CapabilityProber
from bindkit.runtime.numeric import format_number, round_half_up
from bindkit.runtime.scheduler import Scheduler

_LOG = logging.getLogger("bindkit.resize")


@dataclass(frozen=True, slots=True)
class SurfaceDimensions:
    """Backing pixel size pushed to the host, with the CSS size it came from."""

    width: int
    height: int
    css_width: float
    css_height: float
    device_pixel_ratio: float


class ResizeCoordinator:
    """Owns the surface's pixel dimensions and the single pending resize task."""

    def __init__(
        self,
        document: DocumentPort,
        viewport: ViewportPort,
        prober: CapabilityProber,
        scheduler: Scheduler,
        *,
        resize_capability: HostCapability,
        canvas_id: str = "canvas",
        container_id: str = "canvas-container",
        debounce_ms: float = 100.0,
        diagnostics: DiagnosticHub | None = None,
    ) -> None:
        self._document = document
        self._viewport = viewport
        self._prober = prober
        self._scheduler = scheduler
        self._resize_capability = resize_capability
        self._canvas_id = canvas_id
        self._container_id = container_id
        self._debounce_ms = float(debounce_ms)
        self._diagnostics = diagnostics
        self._pending_task: int | None = None
        self._dimensions: SurfaceDimensions | None = None
        self._recompute_count = 0
        self._listening = False

    @property
    def dimensions(self) -> SurfaceDimensions | None:
        return self._dimensions

    @property
    def pending(self) -> bool:
        return self._pending_task is not None

    @property
    def recompute_count(self) -> int:
        return self._recompute_count

    def listen(self) -> None:
        """Subscribe to viewport resize events; repeated calls are ignored."""
        if self._listening:
            return
        self._viewport.add_event_listener("resize", self._on_viewport_resize)
        self._listening = True

    def schedule(self) -> None:
        """Replace any pending resize with one due after the quiescence delay."""
        if self._pending_task is not None:
            self._scheduler.cancel(self._pending_task)
        self._pending_task = self._scheduler.call_later(self._debounce_ms, self._fire_pending)

    def recompute(self) -> SurfaceDimensions | None:
        surface = self._document.get_element_by_id(self._canvas_id)
        container = self._document.get_element_by_id(self._container_id)
        if surface is None or container is None:
            return None

        rect = container.get_bounding_client_rect()
        ratio = float(self._viewport.device_pixel_ratio)
        dimensions = SurfaceDimensions(
            width=round_half_up(rect.width * ratio),
            height=round_half_up(rect.height * ratio),
            css_width=float(rect.width),
            css_height=float(rect.height),
            device_pixel_ratio=ratio,
        )
        surface.width = dimensions.width
        surface.height = dimensions.height
        surface.set_style("width", f"{format_number(rect.width)}px")
        surface.set_style("height", f"{format_number(rect.height)}px")
        self._dimensions = dimensions
        self._recompute_count += 1
        _LOG.info("canvas_resized width=%d height=%d", dimensions.width, dimensions.height)

        resize = self._prober.lookup(self._resize_capability)
        if resize is not None:
            resize(dimensions.width, dimensions.height)
        if self._diagnostics is not None:
            self._diagnostics.emit_fast(
                category="resize",
                name="surface.resize",
                value={
                    "width": dimensions.width,
                    "height": dimensions.height,
                    "css_width": dimensions.css_width,
                    "css_height": dimensions.css_height,
                    "device_pixel_ratio": ratio,
                    "host_notified": resize is not None,
                },
            )
        return dimensions

    def _on_viewport_resize(self, event: object) -> None:
        _ = event
        self.schedule()

    def _fire_pending(self) -> None:
        self._pending_task = None
        self.recompute()


__all__ = ["ResizeCoordinator", "SurfaceDimensions"]
