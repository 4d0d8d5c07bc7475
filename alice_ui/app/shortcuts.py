"""Keyboard shortcuts for control panel buttons."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from bindkit.dom.headless import HeadlessDocument

# W, A, S and D are left to the host's camera movement.
SHORTCUT_BUTTONS: Mapping[str, str] = {
    "g": "#add-test-geometry",
    "c": "#clear-scene",
    "r": "#reset-camera",
    "f": "#toggle-wireframe",
    "p": "#performance-info",
}

_LOG = logging.getLogger("alice_ui.shortcuts")


class ShortcutRouter:
    """Turns key presses into clicks on the matching bound button."""

    def __init__(
        self,
        document: HeadlessDocument,
        shortcuts: Mapping[str, str] = SHORTCUT_BUTTONS,
    ) -> None:
        self._document = document
        self._shortcuts = {key.lower(): selector for key, selector in shortcuts.items()}

    def on_key(self, key: str) -> bool:
        selector = self._shortcuts.get(key.lower())
        if selector is None:
            return False
        button = self._document.query_selector(selector)
        if button is None:
            return False
        _LOG.debug("shortcut key=%s selector=%s", key, selector)
        button.click()
        return True
