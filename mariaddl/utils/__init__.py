from __future__ import annotations

import math
import os
import re
import typing as t

Number = t.Union[int, float]

NUMERIC_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def str_to_bool(s: t.Optional[str]) -> bool:
    """
    Convert a string to a boolean.

    Unlike distutils' strtobool this never raises. Anything that isn't a known true value
    is false.
    """
    if not s:
        return False
    return s.lower() in ("true", "1", "t", "y", "yes", "on")


def debug_mode_enabled() -> bool:
    return str_to_bool(os.environ.get("MARIADDL_DEBUG"))


def to_number(value: t.Any) -> t.Optional[Number]:
    """Coerces a value into a finite number.

    Args:
        value: An int, float or numeric string. Booleans are never treated as numbers, and strings
            must be plain ASCII decimals with an optional exponent.

    Returns:
        The number, or None if the value isn't numeric or is NaN / infinite.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number: Number = value
    elif isinstance(value, str):
        text = value.strip()
        if not NUMERIC_RE.match(text):
            return None
        number = float(text) if any(c in text for c in ".eE") else int(text)
    else:
        return None

    if isinstance(number, float) and not math.isfinite(number):
        return None
    return number


def format_number(value: Number) -> str:
    """Renders a number the way it should appear in SQL text, dropping a zero fraction."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_text(value: t.Any) -> t.Optional[str]:
    """Converts a scalar host value into the text interpolated into SQL.

    Falsy values other than strings, eg. False or 0, are treated as absent.
    """
    if isinstance(value, str):
        return value
    if not value:
        return None
    if isinstance(value, bool):
        return "true"
    number = to_number(value)
    if number is not None:
        return format_number(number)
    return str(value)
