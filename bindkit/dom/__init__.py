"""Headless document model."""

from bindkit.dom.headless import HeadlessDocument, HeadlessElement, HeadlessViewport

__all__ = ["HeadlessDocument", "HeadlessElement", "HeadlessViewport"]
