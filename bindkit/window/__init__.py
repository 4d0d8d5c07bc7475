"""Window adapters for the binding runtime."""

from bindkit.window.rendercanvas_viewport import RenderCanvasViewport, create_rendercanvas_viewport

__all__ = ["RenderCanvasViewport", "create_rendercanvas_viewport"]
