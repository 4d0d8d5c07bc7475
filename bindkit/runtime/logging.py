"""Root logging pipeline: console output plus an optional queued run file."""

from __future__ import annotations

import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from bindkit.api.logging import JsonFormatter, UiLoggingConfig

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_file_listener: QueueListener | None = None


def resolve_log_level_name(default: str = "INFO") -> str:
    """Return `BINDKIT_LOG_LEVEL`, else `LOG_LEVEL`, else `default`, upper-cased."""
    for name in ("BINDKIT_LOG_LEVEL", "LOG_LEVEL"):
        value = os.getenv(name)
        if value is not None and value.strip():
            return value.strip().upper()
    return default.strip().upper()


def configure_ui_logging(config: UiLoggingConfig) -> None:
    """Replace root handlers according to `config`.

    Console records are written synchronously. When a file path is set, all
    records go through a queue so file writes stay off the frame loop.
    """
    global _file_listener

    stop_ui_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    console = _handler(logging.StreamHandler(), config.console_format)
    if not config.file_path:
        root.addHandler(console)
        return

    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    run_file = _handler(
        logging.FileHandler(path, mode="a", encoding="utf-8", delay=True),
        config.file_format,
    )
    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _file_listener = QueueListener(records, console, run_file, respect_handler_level=True)
    _file_listener.start()


def stop_ui_logging() -> None:
    """Drain and stop the queued file pipeline, if running."""
    global _file_listener

    listener, _file_listener = _file_listener, None
    if listener is not None:
        listener.stop()


def setup_ui_logging() -> None:
    """Install console logging unless the root logger is already configured."""
    if logging.getLogger().handlers:
        return
    configure_ui_logging(UiLoggingConfig(level_name=resolve_log_level_name()))


def _handler(handler: logging.Handler, kind: str) -> logging.Handler:
    if kind.strip().lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    return handler


__all__ = [
    "configure_ui_logging",
    "resolve_log_level_name",
    "setup_ui_logging",
    "stop_ui_logging",
]
