"""Structured diagnostics for the binding runtime."""

from bindkit.diagnostics.event import DiagnosticEvent, utc_now_iso
from bindkit.diagnostics.hub import DiagnosticHub, create_diagnostic_hub
from bindkit.diagnostics.json_codec import dumps_bytes, dumps_text
from bindkit.diagnostics.ring_buffer import RingBuffer
from bindkit.diagnostics.subscribers.event_counter import EventCounter, log_diagnostics_summary

__all__ = [
    "DiagnosticEvent",
    "DiagnosticHub",
    "EventCounter",
    "RingBuffer",
    "create_diagnostic_hub",
    "dumps_bytes",
    "dumps_text",
    "log_diagnostics_summary",
    "utc_now_iso",
]
