"""
Numeric parsing helpers shared by the classifier and the predicates.

Two flavours:

- ``is_number`` / ``to_number`` accept only strings that are a number in
  their entirety (after trimming). Filter keywords go through these.
- ``parse_number`` reads the longest numeric prefix, the way spreadsheet-ish
  grids read cell content such as ``"25 kg"`` or ``"3.5%"``.
"""

from __future__ import annotations

import math
import re
from typing import Any

_NUMBER_BODY = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"

FULL_NUMBER_RE = re.compile(rf"^{_NUMBER_BODY}$")
LEADING_NUMBER_RE = re.compile(rf"^\s*({_NUMBER_BODY})")


def is_number(value: Any) -> bool:
    """Return True if *value* trimmed is entirely a finite decimal number."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not FULL_NUMBER_RE.match(text):
        return False
    return math.isfinite(float(text))


def to_number(value: Any) -> float | None:
    """Convert a fully numeric value to float, or None if it is not one."""
    if not is_number(value):
        return None
    if isinstance(value, str):
        return float(value.strip())
    return float(value)


def parse_number(value: Any) -> float | None:
    """
    Parse the leading number of *value*.

    Returns None when the value has no numeric prefix or the prefix
    overflows to infinity.

    Examples:
        >>> parse_number("25")
        25.0
        >>> parse_number("  3.5% ")
        3.5
        >>> parse_number("Tom") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    match = LEADING_NUMBER_RE.match(str(value))
    if not match:
        return None
    number = float(match.group(1))
    if not math.isfinite(number):
        return None
    return number
