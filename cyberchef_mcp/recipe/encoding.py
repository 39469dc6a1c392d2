"""Argument literal encoding for the recipe string grammar."""

import json
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .models import ToggleValue


def _format_number(value: int | float) -> str:
    """Render a number the way JavaScript's ``String(n)`` does.

    Integral values drop the fraction (``2.0 -> 2``). Magnitudes of 1e21 and
    above or below 1e-6 use exponent form (``1e+21``, ``1e-7``).
    """
    if isinstance(value, int) and abs(value) < 10**21:
        return str(value)
    try:
        number = float(value)
    except OverflowError:
        return "-Infinity" if value < 0 else "Infinity"
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "-Infinity" if number < 0 else "Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    # repr() gives the shortest round-tripping digits, same as JS
    parsed = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(str(d) for d in parsed.digits)
    k = len(digits)
    n = k + parsed.exponent

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        exponent = n - 1
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        text = f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"
    return sign + text


def _to_single_quoted_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False).replace('"', "'")


def encode_argument(value: Any) -> str:
    """Encode one argument value as a recipe literal.

    Strings are single-quoted with embedded ``'`` escaped as ``\\'``; nothing
    else is escaped, so commas and parentheses inside a string pass through.
    Booleans and numbers are written bare. Toggle values and any other
    structured value become compact JSON with double quotes swapped for single
    quotes, e.g. ``{'string':'abc','option':'Hex'}``.
    """
    if isinstance(value, str):
        return "'" + value.replace("'", "\\'") + "'"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(value)
    if isinstance(value, ToggleValue):
        return _to_single_quoted_json(value.model_dump())
    if isinstance(value, Mapping):
        return _to_single_quoted_json(dict(value))
    return _to_single_quoted_json(value)


def encode_arguments(values: list[Any]) -> list[str]:
    return [encode_argument(v) for v in values]
