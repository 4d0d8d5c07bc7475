"""Where the viewer keeps its config and run logs."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def resolve_app_root() -> Path:
    """Return the executable's directory when frozen, else the project root."""
    executable = getattr(sys, "executable", "")
    if getattr(sys, "frozen", False) and executable:
        return Path(executable).resolve().parent
    return Path(__file__).resolve().parents[2]


def resolve_app_data_root() -> Path:
    """`ALICE_APP_DATA_DIR` (relative paths resolve from the app root), else `appdata/`."""
    configured = Path(os.getenv("ALICE_APP_DATA_DIR", "").strip() or "appdata")
    return configured if configured.is_absolute() else resolve_app_root() / configured


def resolve_logs_dir() -> Path:
    return resolve_app_data_root() / "logs"
