"""JsonKind StrEnum and classify() for already-parsed JSON values.

The comparison engine never owns the JSON tree; it consumes plain Python
values produced by a JSON parser.  ``classify`` maps each value onto the
closed set of six JSON kinds so that every dispatch decision is made on a
``JsonKind`` rather than on ad-hoc ``isinstance`` checks scattered through
the comparators.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

__all__ = [
    "JsonKind",
    "JsonValue",
    "classify",
    "is_number",
    "is_simple_value",
    "numbers_equal",
    "scalars_equal",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class JsonKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    - OBJECT  -> "object"  : JSON object {}
    - ARRAY   -> "array"   : JSON array []
    - STRING  -> "string"  : JSON string
    - NUMBER  -> "number"  : JSON number (int or float, never bool)
    - BOOLEAN -> "boolean" : true / false
    - NULL    -> "null"    : null
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()

    @property
    def is_composite(self) -> bool:
        """True for OBJECT and ARRAY."""
        return self is JsonKind.OBJECT or self is JsonKind.ARRAY


def classify(value: Any) -> JsonKind:
    """Return the JsonKind of an already-parsed JSON value.

    Args:
        value: Any valid JSON value (dict, list, str, int, float, bool, None).

    Returns:
        The matching ``JsonKind``.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # CRITICAL: bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if value is None:
        return JsonKind.NULL
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_number(value: Any) -> bool:
    """True for int/float values, excluding bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_simple_value(value: Any) -> bool:
    """True when value is neither a JSON object nor a JSON array."""
    return not classify(value).is_composite


def numbers_equal(a: int | float, b: int | float) -> bool:
    """Double-precision equality, so ``1`` and ``1.0`` compare equal."""
    try:
        return float(a) == float(b)
    except OverflowError:
        # int too large for a double
        return a == b


def scalars_equal(a: Any, b: Any) -> bool:
    """Equality for simple values: numbers as doubles, otherwise same kind and ``==``."""
    if is_number(a) and is_number(b):
        return numbers_equal(a, b)
    return classify(a) is classify(b) and a == b
