"""In-memory document, element and viewport implementations."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from bindkit.api.document import (
    DocumentPort,
    ElementEvent,
    ElementPort,
    EventHandler,
    LayoutBox,
    ViewportPort,
)

LayoutSource = Callable[[], LayoutBox]

_LOG = logging.getLogger("bindkit.dom")


class _Listeners:
    def __init__(self) -> None:
        self._by_type: dict[str, list[EventHandler]] = {}

    def add(self, event_type: str, handler: EventHandler) -> None:
        self._by_type.setdefault(event_type, []).append(handler)

    def count(self, event_type: str) -> int:
        return len(self._by_type.get(event_type, ()))

    def dispatch(self, event: ElementEvent) -> int:
        handlers = tuple(self._by_type.get(event.event_type, ()))
        for handler in handlers:
            handler(event)
        return len(handlers)


class HeadlessElement(ElementPort):
    """Element node with ids, classes, inline style and event listeners."""

    def __init__(
        self,
        element_id: str = "",
        *,
        tag: str = "div",
        classes: tuple[str, ...] = (),
        value: str = "",
        text_content: str = "",
        layout: LayoutBox | None = None,
    ) -> None:
        self.element_id = element_id
        self.tag = tag
        self.classes = frozenset(classes)
        self.value = value
        self.text_content = text_content
        self.width = 0
        self.height = 0
        self.style: dict[str, str] = {}
        self._layout = layout or LayoutBox(0.0, 0.0, 0.0, 0.0)
        self._layout_source: LayoutSource | None = None
        self._parent: HeadlessElement | None = None
        self._children: list[HeadlessElement] = []
        self._listeners = _Listeners()

    @property
    def parent(self) -> HeadlessElement | None:
        return self._parent

    @property
    def children(self) -> tuple[HeadlessElement, ...]:
        return tuple(self._children)

    def append(self, child: HeadlessElement) -> HeadlessElement:
        if child._parent is not None:
            child._parent._children.remove(child)
        child._parent = self
        self._children.append(child)
        return child

    def iter_descendants(self) -> Iterator[HeadlessElement]:
        for child in self._children:
            yield child
            yield from child.iter_descendants()

    def matches(self, selector: str) -> bool:
        token = selector.strip()
        if token.startswith("#"):
            return self.element_id == token[1:]
        if token.startswith("."):
            return token[1:] in self.classes
        return self.tag == token

    def query_selector(self, selector: str) -> HeadlessElement | None:
        for node in self.iter_descendants():
            if node.matches(selector):
                return node
        return None

    def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
        self._listeners.add(event_type, handler)

    def listener_count(self, event_type: str) -> int:
        return self._listeners.count(event_type)

    def dispatch_event(self, event_type: str) -> int:
        return self._listeners.dispatch(ElementEvent(event_type=event_type, target=self))

    def click(self) -> int:
        return self.dispatch_event("click")

    def input(self, value: object) -> int:
        """Set the widget value as a user edit would, then fire `input`."""
        self.value = str(value)
        return self.dispatch_event("input")

    def set_layout(self, width: float, height: float, *, x: float = 0.0, y: float = 0.0) -> None:
        self._layout = LayoutBox(x=float(x), y=float(y), width=float(width), height=float(height))

    def bind_layout(self, source: LayoutSource | None) -> None:
        """Read the layout box from `source` instead of the stored box."""
        self._layout_source = source

    def get_bounding_client_rect(self) -> LayoutBox:
        if self._layout_source is not None:
            return self._layout_source()
        return self._layout

    def set_style(self, name: str, value: str) -> None:
        self.style[name] = value

    def __repr__(self) -> str:
        return f"HeadlessElement(tag={self.tag!r}, id={self.element_id!r})"


class HeadlessDocument(DocumentPort):
    """Element tree rooted at a `body` node, with a one-shot `load` event."""

    def __init__(self) -> None:
        self.body = HeadlessElement("", tag="body")
        self._listeners = _Listeners()
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def create_element(
        self,
        tag: str,
        *,
        element_id: str = "",
        classes: tuple[str, ...] = (),
        parent: HeadlessElement | None = None,
        value: str = "",
        text_content: str = "",
    ) -> HeadlessElement:
        element = HeadlessElement(
            element_id,
            tag=tag,
            classes=classes,
            value=value,
            text_content=text_content,
        )
        (parent or self.body).append(element)
        return element

    def query_selector(self, selector: str) -> HeadlessElement | None:
        return self.body.query_selector(selector)

    def get_element_by_id(self, element_id: str) -> HeadlessElement | None:
        if not element_id:
            return None
        return self.body.query_selector(f"#{element_id}")

    def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
        self._listeners.add(event_type, handler)

    def dispatch_load(self) -> int:
        if self._loaded:
            _LOG.debug("load_already_dispatched")
            return 0
        self._loaded = True
        return self._listeners.dispatch(ElementEvent(event_type="load", target=self))


class HeadlessViewport(ViewportPort):
    """Viewport with settable pixel ratio and captured alerts."""

    def __init__(self, *, device_pixel_ratio: float = 1.0, render_backend: str = "Unavailable") -> None:
        self._device_pixel_ratio = float(device_pixel_ratio)
        self._render_backend = render_backend
        self._listeners = _Listeners()
        self.alerts: list[str] = []
        self.titles: list[str | None] = []

    @property
    def device_pixel_ratio(self) -> float:
        return self._device_pixel_ratio

    @device_pixel_ratio.setter
    def device_pixel_ratio(self, value: float) -> None:
        if value <= 0.0:
            raise ValueError("device_pixel_ratio must be > 0")
        self._device_pixel_ratio = float(value)

    @property
    def render_backend(self) -> str:
        return self._render_backend

    def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
        self._listeners.add(event_type, handler)

    def listener_count(self, event_type: str) -> int:
        return self._listeners.count(event_type)

    def dispatch_resize(self) -> int:
        return self._listeners.dispatch(ElementEvent(event_type="resize", target=self))

    def show_alert(self, text: str, *, title: str | None = None) -> None:
        self.alerts.append(text)
        self.titles.append(title)
        _LOG.info("alert %s", text)


__all__ = ["HeadlessDocument", "HeadlessElement", "HeadlessViewport", "LayoutSource"]
