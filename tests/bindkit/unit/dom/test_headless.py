from __future__ import annotations

import pytest

from bindkit.api.document import LayoutBox
from bindkit.dom.headless import HeadlessDocument, HeadlessElement, HeadlessViewport


def test_query_selector_matches_id_class_and_tag_in_document_order() -> None:
    document = HeadlessDocument()
    panel = document.create_element("div", element_id="controls")
    first = document.create_element("button", element_id="go", classes=("primary",), parent=panel)
    document.create_element("button", element_id="stop", parent=panel)

    assert document.query_selector("#go") is first
    assert document.query_selector(".primary") is first
    assert document.query_selector("button") is first
    assert document.get_element_by_id("stop").parent is panel
    assert document.get_element_by_id("") is None
    assert document.query_selector("#missing") is None


def test_append_reparents_element() -> None:
    first = HeadlessElement("a")
    second = HeadlessElement("b")
    child = HeadlessElement("c")
    first.append(child)
    second.append(child)
    assert first.children == ()
    assert child.parent is second


def test_input_sets_value_and_dispatches_with_target() -> None:
    document = HeadlessDocument()
    slider = document.create_element("input", element_id="fov")
    seen: list[tuple[str, str]] = []
    slider.add_event_listener("input", lambda event: seen.append((event.event_type, event.target.value)))

    assert slider.input(60) == 1
    assert seen == [("input", "60")]
    assert slider.listener_count("input") == 1
    assert slider.click() == 0


def test_load_event_fires_once() -> None:
    document = HeadlessDocument()
    calls: list[str] = []
    document.add_event_listener("load", lambda event: calls.append(event.event_type))

    assert document.dispatch_load() == 1
    assert document.dispatch_load() == 0
    assert document.loaded
    assert calls == ["load"]


def test_layout_prefers_bound_source() -> None:
    element = HeadlessElement("box")
    element.set_layout(300, 150, x=5)
    assert element.get_bounding_client_rect() == LayoutBox(5.0, 0.0, 300.0, 150.0)

    element.bind_layout(lambda: LayoutBox(0.0, 0.0, 10.0, 20.0))
    assert element.get_bounding_client_rect().width == 10.0
    element.bind_layout(None)
    assert element.get_bounding_client_rect().width == 300.0


def test_viewport_validates_ratio_and_records_alerts() -> None:
    viewport = HeadlessViewport()
    resized: list[str] = []
    viewport.add_event_listener("resize", lambda event: resized.append(event.event_type))
    viewport.device_pixel_ratio = 1.5

    assert viewport.dispatch_resize() == 1
    viewport.show_alert("hello")

    assert resized == ["resize"]
    assert viewport.device_pixel_ratio == 1.5
    assert viewport.alerts == ["hello"]
    with pytest.raises(ValueError):
        viewport.device_pixel_ratio = 0.0
