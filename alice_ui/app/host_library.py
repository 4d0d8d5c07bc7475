"""Native alice2 host loaded through ctypes."""

from __future__ import annotations

import ctypes
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from bindkit.api.host import HostRuntimePort, RuntimeInitializedHook
from alice_ui.app.capabilities import ENTRY_POINT_PREFIX

LibraryLoader = Callable[[str], Any]

# C symbol name -> (argtypes, restype)
_SIGNATURES: dict[str, tuple[list[Any], Any]] = {
    "alice2_resize": ([ctypes.c_int, ctypes.c_int], None),
    "alice2_clear_scene": ([], None),
    "alice2_add_test_geometry": ([], None),
    "alice2_reset_camera": ([], None),
    "alice2_set_background_brightness": ([ctypes.c_float], None),
    "alice2_set_point_size": ([ctypes.c_float], None),
    "alice2_set_line_width": ([ctypes.c_float], None),
    "alice2_set_fov": ([ctypes.c_float], None),
    "alice2_toggle_wireframe": ([], None),
    "alice2_init": ([], None),
}

_LOG = logging.getLogger("alice_ui.host")


class NativeExports:
    """Prefixed entry-point view over a loaded shared library.

    `_alice2_resize` resolves to the C symbol `alice2_resize`; unknown or
    unexported names raise AttributeError, which presence checks treat as
    absent.
    """

    def __init__(self, library: Any) -> None:
        self._library = library

    def __getattr__(self, name: str) -> Any:
        if not name.startswith(ENTRY_POINT_PREFIX):
            raise AttributeError(name)
        symbol = name[1:]
        try:
            function = getattr(self._library, symbol)
        except AttributeError:
            raise AttributeError(name) from None
        signature = _SIGNATURES.get(symbol)
        if signature is not None:
            function.argtypes, function.restype = signature
        return function


class NativeHostRuntime(HostRuntimePort):
    """Host runtime whose container appears once the library is loaded."""

    def __init__(self, library_path: str | Path, *, loader: LibraryLoader | None = None) -> None:
        self.library_path = str(library_path)
        self.container: object | None = None
        self.called_run = False
        self.on_runtime_initialized: RuntimeInitializedHook | None = None
        self._loader = loader or ctypes.CDLL

    def run(self) -> None:
        """Load the library, publish its exports and fire the init hook once."""
        if self.called_run:
            return
        library = self._loader(self.library_path)
        init = getattr(library, "alice2_init", None)
        if init is not None:
            init.argtypes, init.restype = _SIGNATURES["alice2_init"]
            init()
        self.container = NativeExports(library)
        self.called_run = True
        _LOG.info("host_library_loaded path=%s", self.library_path)
        hook = self.on_runtime_initialized
        if hook is not None:
            hook()
