"""On-demand performance summary."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass

from bindkit.api.document import DocumentPort, ViewportPort
from bindkit.diagnostics.json_codec import dumps_text
from bindkit.runtime.frame_rate import FrameRateSampler
from bindkit.runtime.numeric import format_number

_LOG = logging.getLogger("bindkit.performance")


@dataclass(frozen=True, slots=True)
class PerformanceSummary:
    fps: int
    canvas_width: int
    canvas_height: int
    device_pixel_ratio: float
    render_backend: str

    def to_dict(self) -> dict[str, object]:
        payload = asdict(self)
        return {
            "fps": payload["fps"],
            "canvas": {"width": payload["canvas_width"], "height": payload["canvas_height"]},
            "device_pixel_ratio": payload["device_pixel_ratio"],
            "render_backend": payload["render_backend"],
        }

    def headline(self) -> str:
        """One-line form, e.g. `FPS 60 | 1600x1200 @2 | Available`."""
        return (
            f"FPS {self.fps} | {self.canvas_width}x{self.canvas_height}"
            f" @{format_number(self.device_pixel_ratio)} | {self.render_backend}"
        )


class PerformanceReporter:
    def __init__(
        self,
        document: DocumentPort,
        viewport: ViewportPort,
        sampler: FrameRateSampler,
        *,
        canvas_id: str = "canvas",
    ) -> None:
        self._document = document
        self._viewport = viewport
        self._sampler = sampler
        self._canvas_id = canvas_id

    def summary(self) -> PerformanceSummary:
        canvas = self._document.get_element_by_id(self._canvas_id)
        return PerformanceSummary(
            fps=self._sampler.fps,
            canvas_width=int(canvas.width) if canvas is not None else 0,
            canvas_height=int(canvas.height) if canvas is not None else 0,
            device_pixel_ratio=float(self._viewport.device_pixel_ratio),
            render_backend=self._viewport.render_backend,
        )

    def show_performance_info(self) -> PerformanceSummary:
        summary = self.summary()
        text = f"Performance Info:\n{dumps_text(summary.to_dict(), pretty=True)}"
        _LOG.info("performance_info", extra={"performance": summary.to_dict()})
        self._viewport.show_alert(text, title=f"Performance Info: {summary.headline()}")
        return summary


__all__ = ["PerformanceReporter", "PerformanceSummary"]
