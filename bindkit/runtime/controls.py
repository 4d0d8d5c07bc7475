"""Widget-to-host binding registry."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from bindkit.api.document import DocumentPort, ElementPort
from bindkit.api.host import HostCapability
from bindkit.diagnostics.hub import DiagnosticHub
from bindkit.runtime.capabilities import CapabilityProber
from bindkit.runtime.numeric import format_number, parse_float

ValueFormatter = Callable[[float], str]
ButtonCallback = Callable[[], object]
SliderCallback = Callable[[float], object]

SLIDER_VALUE_SELECTOR = ".slider-value"

_LOG = logging.getLogger("bindkit.controls")


class ControlKind(Enum):
    BUTTON = "button"
    SLIDER = "slider"


@dataclass(frozen=True, slots=True)
class ControlBinding:
    """Declarative widget wiring.

    Exactly one of `capability` (a host entry point resolved on every
    interaction) or `action` (a local callback) drives the widget.
    """

    selector: str
    kind: ControlKind
    capability: HostCapability | None = None
    default_value: float = 0.5
    formatter: ValueFormatter | None = None
    action: Callable[..., object] | None = None

    def __post_init__(self) -> None:
        if (self.capability is None) == (self.action is None):
            raise ValueError(f"{self.selector}: exactly one of capability or action is required")


class ControlRegistry:
    """Attaches guarded listeners that forward widget interaction to the host."""

    def __init__(
        self,
        document: DocumentPort,
        prober: CapabilityProber,
        *,
        diagnostics: DiagnosticHub | None = None,
    ) -> None:
        self._document = document
        self._prober = prober
        self._diagnostics = diagnostics
        self._bound: list[str] = []

    @property
    def bound_selectors(self) -> tuple[str, ...]:
        return tuple(self._bound)

    def add_button(self, selector: str, callback: ButtonCallback) -> bool:
        button = self._document.query_selector(selector)
        if button is None or not callable(callback):
            _LOG.debug("button_skipped selector=%s", selector)
            return False

        def _on_click(event: object) -> None:
            _ = event
            self._guarded(selector, "button", callback)

        button.add_event_listener("click", _on_click)
        self._bound.append(selector)
        return True

    def add_slider(
        self,
        selector: str,
        callback: SliderCallback,
        default_value: float = 0.5,
        formatter: ValueFormatter | None = None,
    ) -> bool:
        slider = self._document.query_selector(selector)
        if slider is None or not callable(callback):
            _LOG.debug("slider_skipped selector=%s", selector)
            return False
        parent = slider.parent
        display = parent.query_selector(SLIDER_VALUE_SELECTOR) if parent is not None else None
        render = formatter or format_number

        slider.value = format_number(default_value)
        _update_display(display, render, default_value)

        def _on_input(event: object) -> None:
            target = getattr(event, "target", None) or slider
            value = parse_float(getattr(target, "value", ""))
            _update_display(display, render, value)
            self._guarded(selector, "slider", callback, value)

        slider.add_event_listener("input", _on_input)
        self._bound.append(selector)
        return True

    def bind(self, binding: ControlBinding) -> bool:
        if binding.kind is ControlKind.BUTTON:
            return self.add_button(binding.selector, self._forwarder(binding))
        return self.add_slider(
            binding.selector,
            self._forwarder(binding),
            binding.default_value,
            binding.formatter,
        )

    def bind_all(self, bindings: Iterable[ControlBinding]) -> int:
        return sum(1 for binding in bindings if self.bind(binding))

    def invoke(self, capability: HostCapability, *args: object) -> bool:
        """Call a host entry point if it is currently exported."""
        entry = self._prober.lookup(capability)
        if entry is None:
            _LOG.debug("capability_absent name=%s", capability)
            return False
        entry(*args)
        return True

    def _forwarder(self, binding: ControlBinding) -> Callable[..., object]:
        if binding.action is not None:
            return binding.action
        capability = binding.capability
        assert capability is not None

        def _forward(*args: object) -> None:
            self.invoke(capability, *args)

        return _forward

    def _guarded(self, selector: str, kind: str, callback: Callable[..., object], *args: object) -> None:
        try:
            callback(*args)
        except Exception:
            _LOG.exception("%s_callback_failed selector=%s", kind, selector)
            if self._diagnostics is not None:
                self._diagnostics.emit_fast(
                    category="controls",
                    name="controls.callback_failed",
                    level="error",
                    value={"selector": selector, "kind": kind},
                )


def _update_display(display: ElementPort | None, render: ValueFormatter, value: float) -> None:
    if display is not None:
        display.text_content = render(value)


__all__ = [
    "ButtonCallback",
    "ControlBinding",
    "ControlKind",
    "ControlRegistry",
    "SLIDER_VALUE_SELECTOR",
    "SliderCallback",
    "ValueFormatter",
]
