"""Frame-rate sampling over an externally driven frame loop."""

from __future__ import annotations

import logging

from bindkit.api.document import DocumentPort, ElementPort
from bindkit.api.frames import FrameSourcePort
from bindkit.diagnostics.hub import DiagnosticHub
from bindkit.runtime.numeric import round_half_up

_LOG = logging.getLogger("bindkit.frame_rate")


class FrameRateSampler:
    """Counts frames and publishes a step-updated FPS figure once per window.

    The sampler re-requests itself from every frame callback and has no
    stop path; it runs for the lifetime of the frame source.
    """

    def __init__(
        self,
        frames: FrameSourcePort,
        document: DocumentPort,
        *,
        counter_id: str = "fps-counter",
        window_ms: float = 1000.0,
        diagnostics: DiagnosticHub | None = None,
    ) -> None:
        if window_ms <= 0.0:
            raise ValueError("window_ms must be > 0")
        self._frames = frames
        self._document = document
        self._counter_id = counter_id
        self._window_ms = float(window_ms)
        self._diagnostics = diagnostics
        self._counter: ElementPort | None = None
        self._frame_count = 0
        self._last_reset_ms = 0.0
        self._fps = 0
        self._started = False

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def last_reset_ms(self) -> float:
        return self._last_reset_ms

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self._counter = self._document.get_element_by_id(self._counter_id)
        self._last_reset_ms = self._frames.now_ms()
        self._frames.request_frame(self._on_frame)

    def _on_frame(self, timestamp_ms: float) -> None:
        self._frame_count += 1
        elapsed_ms = timestamp_ms - self._last_reset_ms
        if elapsed_ms >= self._window_ms:
            self._publish(round_half_up(self._frame_count * 1000.0 / elapsed_ms), elapsed_ms)
            self._frame_count = 0
            self._last_reset_ms = timestamp_ms
        self._frames.request_frame(self._on_frame)

    def _publish(self, fps: int, elapsed_ms: float) -> None:
        self._fps = fps
        if self._counter is not None:
            self._counter.text_content = f"FPS: {fps}"
        _LOG.debug("fps_sample fps=%d frames=%d elapsed_ms=%.1f", fps, self._frame_count, elapsed_ms)
        if self._diagnostics is not None:
            self._diagnostics.emit_fast(
                category="fps",
                name="fps.sample",
                value={"fps": fps, "frames": self._frame_count, "elapsed_ms": elapsed_ms},
            )


__all__ = ["FrameRateSampler"]
