"""Control panel markup."""

from __future__ import annotations

from bindkit.dom.headless import HeadlessDocument
from bindkit.runtime.config import UiRuntimeConfig
from bindkit.runtime.controls import SLIDER_VALUE_SELECTOR

BUTTON_IDS: tuple[str, ...] = (
    "add-test-geometry",
    "clear-scene",
    "reset-camera",
    "toggle-wireframe",
    "performance-info",
)
SLIDER_IDS: tuple[str, ...] = (
    "brightness-slider",
    "point-size-slider",
    "line-width-slider",
    "fov-slider",
)


def build_control_page(
    document: HeadlessDocument,
    *,
    config: UiRuntimeConfig | None = None,
) -> HeadlessDocument:
    """Populate `document` with the surface, fps counter and control panel."""
    cfg = config or UiRuntimeConfig()
    container = document.create_element("div", element_id=cfg.container_id)
    document.create_element("canvas", element_id=cfg.canvas_id, parent=container)
    document.create_element("div", element_id=cfg.fps_counter_id, text_content="FPS: --")

    panel = document.create_element("div", element_id="controls")
    for button_id in BUTTON_IDS:
        document.create_element("button", element_id=button_id, parent=panel)
    value_class = SLIDER_VALUE_SELECTOR.lstrip(".")
    for slider_id in SLIDER_IDS:
        group = document.create_element("div", classes=("slider-group",), parent=panel)
        document.create_element("input", element_id=slider_id, parent=group)
        document.create_element("span", classes=(value_class,), parent=group)
    return document
