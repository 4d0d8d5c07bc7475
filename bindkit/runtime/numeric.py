"""Numeric conversion helpers shared by widgets and surface sizing."""

from __future__ import annotations

import math
import re

_LEADING_FLOAT = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(float(value) + 0.5))


def parse_float(text: object) -> float:
    """Parse the leading numeric prefix of `text`; NaN when there is none."""
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)
    match = _LEADING_FLOAT.match(str(text).lstrip())
    if match is None:
        return math.nan
    token = match.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def format_number(value: float | int) -> str:
    """Render a number the way widget value displays show it.

    Shortest round-trip digits; plain notation for magnitudes in
    [1e-6, 1e21), otherwise exponent form such as `1e-7` or `1.5e+21`.
    Integral values drop the fractional part ("5", not "5.0").
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0.0:
        return "0"
    sign = "-" if number < 0 else ""
    digits, point = _shortest_digits(abs(number))
    count = len(digits)
    if count <= point <= 21:
        return sign + digits + "0" * (point - count)
    if 0 < point <= 21:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    exponent = point - 1
    mantissa = digits if count == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def _shortest_digits(number: float) -> tuple[str, int]:
    """Return significant digits and decimal-point position: 0.0012 -> ("12", -2)."""
    text = repr(number)
    mantissa, _, exponent = text.partition("e")
    whole, _, fraction = mantissa.partition(".")
    digits = whole + fraction
    point = len(whole) + (int(exponent) if exponent else 0)
    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    return stripped.rstrip("0"), point


__all__ = ["format_number", "parse_float", "round_half_up"]
