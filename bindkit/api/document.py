"""Document, element and viewport contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

EventHandler = Callable[[object], None]


@dataclass(frozen=True, slots=True)
class LayoutBox:
    """Element layout box in CSS pixels."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class ElementEvent:
    """Event delivered to element and document listeners."""

    event_type: str
    target: object | None = None


class ElementPort(Protocol):
    """Minimal element surface consumed by the binding runtime."""

    element_id: str
    value: str
    text_content: str
    width: int
    height: int

    @property
    def parent(self) -> "ElementPort | None":
        """Return the parent element if attached."""

    def query_selector(self, selector: str) -> "ElementPort | None":
        """Return the first descendant matching `selector`."""

    def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
        """Attach an event listener."""

    def get_bounding_client_rect(self) -> LayoutBox:
        """Return the current layout box."""

    def set_style(self, name: str, value: str) -> None:
        """Set one inline style property."""


class DocumentPort(Protocol):
    """Element lookup and page lifecycle events."""

    def query_selector(self, selector: str) -> ElementPort | None:
        """Return the first element matching `selector`."""

    def get_element_by_id(self, element_id: str) -> ElementPort | None:
        """Return element by id."""

    def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
        """Attach a document-level listener (e.g. `load`)."""


class ViewportPort(Protocol):
    """Viewport state and window-level events."""

    @property
    def device_pixel_ratio(self) -> float:
        """Return physical pixels per CSS pixel."""

    @property
    def render_backend(self) -> str:
        """Return rendering backend availability label."""

    def add_event_listener(self, event_type: str, handler: EventHandler) -> None:
        """Attach a viewport listener (e.g. `resize`)."""

    def show_alert(self, text: str, *, title: str | None = None) -> None:
        """Present a user-facing message, with an optional one-line title."""


__all__ = [
    "DocumentPort",
    "ElementEvent",
    "ElementPort",
    "EventHandler",
    "LayoutBox",
    "ViewportPort",
]
