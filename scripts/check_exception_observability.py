#!/usr/bin/env python3
"""Fail when a broad exception handler swallows errors without logging them."""

from __future__ import annotations

import argparse
import ast
from collections.abc import Iterable
from pathlib import Path

DEFAULT_ROOTS: tuple[str, ...] = ("bindkit", "alice_ui")

# Helpers that log with exc_info on the caller's behalf.
_LOGGING_HELPERS = frozenset({"log_recoverable"})


def _is_broad_exception(handler: ast.ExceptHandler) -> bool:
    typ = handler.type
    if typ is None:
        return True
    names = typ.elts if isinstance(typ, ast.Tuple) else [typ]
    return any(isinstance(name, ast.Name) and name.id in {"Exception", "BaseException"} for name in names)


def _is_truthy(node: ast.AST) -> bool:
    return isinstance(node, ast.Constant) and bool(node.value) is True


def _is_observability_call(node: ast.Call) -> bool:
    fn = node.func
    if isinstance(fn, ast.Name):
        return fn.id in _LOGGING_HELPERS
    if not isinstance(fn, ast.Attribute):
        return False
    if fn.attr == "exception":
        return True
    if fn.attr in {"error", "warning", "critical", "log"}:
        return any(kw.arg == "exc_info" and _is_truthy(kw.value) for kw in node.keywords)
    return False


def _reraises(handler: ast.ExceptHandler) -> bool:
    return any(isinstance(stmt, ast.Raise) for stmt in handler.body)


def _handler_has_observability(handler: ast.ExceptHandler) -> bool:
    if _reraises(handler):
        return True
    for node in ast.walk(ast.Module(body=handler.body, type_ignores=[])):
        if isinstance(node, ast.Call) and _is_observability_call(node):
            return True
    return False


def check_file(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    violations: list[str] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.Try):
            continue
        for handler in node.handlers:
            if _is_broad_exception(handler) and not _handler_has_observability(handler):
                violations.append(
                    f"{path}:{handler.lineno} broad exception handler neither re-raises nor logs with a traceback"
                )
    return violations


def check_roots(roots: Iterable[str | Path]) -> list[str]:
    violations: list[str] = []
    for root in roots:
        for path in sorted(Path(root).rglob("*.py")):
            violations.extend(check_file(path))
    return violations


def main() -> int:
    parser = argparse.ArgumentParser(description="Check exception observability semantics.")
    parser.add_argument("--root", action="append", dest="roots")
    args = parser.parse_args()

    violations = check_roots(args.roots or DEFAULT_ROOTS)
    if violations:
        print("Exception observability violations:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
