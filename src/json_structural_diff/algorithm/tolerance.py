"""Accuracy-window tolerance for timestamps.

Two unequal scalars at a path with a configured ``accuracy_error`` are
treated as equal when both denote instants that lie within the window:

- Strings are parsed under the format detected on the *expected* value.
  Two formats are recognised: ``2019-11-01 12:30:00`` and the packed
  14-digit form ``20191101123000``.  If either side fails to parse under that
  same format, the tolerance does not apply.
- Numbers are taken as millisecond quantities (epoch millis).
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from json_structural_diff.tree.kinds import is_number

__all__ = ["detect_time_format", "within_tolerance"]

_TIME_FORMATS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$"), "%Y-%m-%d %H:%M:%S"),
    (re.compile(r"^20\d{12}$"), "%Y%m%d%H%M%S"),
)


def detect_time_format(value: str) -> str | None:
    """Return the strptime format matching ``value``, or None."""
    for pattern, fmt in _TIME_FORMATS:
        if pattern.match(value):
            return fmt
    return None


def _parse(value: str, fmt: str) -> datetime | None:
    try:
        return datetime.strptime(value, fmt)
    except ValueError:
        return None


def within_tolerance(expected: Any, actual: Any, tolerance_ms: float) -> bool:
    """Return True when both values are instants at most ``tolerance_ms`` apart.

    Args:
        expected:     Expected scalar (string or number).
        actual:       Actual scalar (string or number).
        tolerance_ms: Window size in milliseconds (>= 0).

    Returns:
        False whenever the values cannot both be read as instants under the
        same format; the raw inequality then stands.
    """
    if is_number(expected) and is_number(actual):
        return abs(float(expected) - float(actual)) <= tolerance_ms

    if not (isinstance(expected, str) and isinstance(actual, str)):
        return False

    fmt = detect_time_format(expected)
    if fmt is None:
        return False
    expected_at = _parse(expected, fmt)
    actual_at = _parse(actual, fmt)
    if expected_at is None or actual_at is None:
        return False

    delta_ms = abs((expected_at - actual_at).total_seconds()) * 1000.0
    return delta_ms <= tolerance_ms
