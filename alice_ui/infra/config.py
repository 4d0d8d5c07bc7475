"""Application configuration and env loading."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (
    "appdata/config/.env.bindkit",
    "appdata/config/.env.bindkit.local",
    "appdata/config/.env.app",
    "appdata/config/.env.app.local",
)

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class AliceAppConfig:
    host_library: str | None
    window_width: int
    window_height: int
    window_title: str
    max_fps: float
    vsync: bool


def parse_env_line(line: str) -> tuple[str, str] | None:
    """Split one `KEY=VALUE` line; comments, blanks and keyless lines give None."""
    text = line.strip()
    if not text or text.startswith("#"):
        return None
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        value = value[1:-1]
    return key, value


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Copy the pairs from an env file into `os.environ`; a missing file is ignored."""
    env_path = _resolve_env_path(path)
    if not env_path.is_file():
        return
    for line in env_path.read_text(encoding="utf-8").splitlines():
        pair = parse_env_line(line)
        if pair is None:
            continue
        key, value = pair
        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load runtime then app env files, each followed by its `.local` override."""
    for path in DEFAULT_ENV_FILES if paths is None else paths:
        load_env_file(path, override_existing=override_existing)


def load_app_config(*, env: Mapping[str, str] | None = None) -> AliceAppConfig:
    source = os.environ if env is None else env
    library = source.get("ALICE_HOST_LIBRARY", "").strip()
    return AliceAppConfig(
        host_library=library or None,
        window_width=_positive_int(source.get("ALICE_WINDOW_WIDTH"), 1200),
        window_height=_positive_int(source.get("ALICE_WINDOW_HEIGHT"), 720),
        window_title=source.get("ALICE_WINDOW_TITLE", "").strip() or "Alice 2",
        max_fps=_positive_float(source.get("ALICE_MAX_FPS"), 60.0),
        vsync=source.get("ALICE_VSYNC", "1").strip().lower() not in _FALSE_VALUES,
    )


def _positive_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        return max(1, int(raw.strip()))
    except ValueError:
        return default


def _positive_float(raw: str | None, default: float) -> float:
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        return default
    return value if value > 0.0 else default


def _resolve_env_path(path: str) -> Path:
    """Look in the working directory, next to a frozen executable, then the project root."""
    candidates = [Path(path)]
    if getattr(sys, "frozen", False) and getattr(sys, "executable", ""):
        candidates.append(Path(sys.executable).resolve().parent / path)
    candidates.append(Path(__file__).resolve().parents[2] / path)
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return candidates[-1]
