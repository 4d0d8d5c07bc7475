"""Centralized runtime configuration for the binding runtime."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class UiRuntimeConfig:
    poll_interval_ms: float = 100.0
    resize_debounce_ms: float = 100.0
    fps_window_ms: float = 1000.0
    diagnostics_enabled: bool = True
    diagnostics_capacity: int = 2048
    canvas_id: str = "canvas"
    container_id: str = "canvas-container"
    fps_counter_id: str = "fps-counter"


_UI_RUNTIME_CONFIG: ContextVar[UiRuntimeConfig | None] = ContextVar(
    "bindkit_ui_runtime_config", default=None
)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def load_ui_runtime_config(*, env: Mapping[str, str] | None = None) -> UiRuntimeConfig:
    defaults = UiRuntimeConfig()
    return UiRuntimeConfig(
        poll_interval_ms=_float(
            "BINDKIT_READINESS_POLL_MS", defaults.poll_interval_ms, minimum=1.0, env=env
        ),
        resize_debounce_ms=_float(
            "BINDKIT_RESIZE_DEBOUNCE_MS", defaults.resize_debounce_ms, minimum=0.0, env=env
        ),
        fps_window_ms=_float(
            "BINDKIT_FPS_WINDOW_MS", defaults.fps_window_ms, minimum=1.0, env=env
        ),
        diagnostics_enabled=_flag(
            "BINDKIT_DIAGNOSTICS_ENABLED", defaults.diagnostics_enabled, env=env
        ),
        diagnostics_capacity=_int(
            "BINDKIT_DIAGNOSTICS_CAPACITY", defaults.diagnostics_capacity, minimum=1, env=env
        ),
        canvas_id=_text("BINDKIT_CANVAS_ID", defaults.canvas_id, env=env),
        container_id=_text("BINDKIT_CANVAS_CONTAINER_ID", defaults.container_id, env=env),
        fps_counter_id=_text("BINDKIT_FPS_COUNTER_ID", defaults.fps_counter_id, env=env),
    )


def initialize_ui_runtime_config(*, env: Mapping[str, str] | None = None) -> UiRuntimeConfig:
    config = load_ui_runtime_config(env=env)
    _UI_RUNTIME_CONFIG.set(config)
    return config


def set_ui_runtime_config(config: UiRuntimeConfig) -> UiRuntimeConfig:
    _UI_RUNTIME_CONFIG.set(config)
    return config


def get_ui_runtime_config() -> UiRuntimeConfig:
    config = _UI_RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_ui_runtime_config()


__all__ = [
    "UiRuntimeConfig",
    "get_ui_runtime_config",
    "initialize_ui_runtime_config",
    "load_ui_runtime_config",
    "set_ui_runtime_config",
]
