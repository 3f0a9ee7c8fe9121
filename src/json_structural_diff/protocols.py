"""ValueMatcher Protocol for the per-path matcher extension point.

Defines the structural interface all custom value matchers must satisfy.
Users can plug in matchers without inheriting from any base class. Any
callable with a conformant signature passes ``isinstance`` checks, including
plain functions.

Example::

    from json_structural_diff.protocols import ValueMatcher

    def any_positive(expected, actual):
        return isinstance(actual, int) and actual > 0

    assert isinstance(any_positive, ValueMatcher)  # True (structural conformance)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["ValueMatcher"]


@runtime_checkable
class ValueMatcher(Protocol):
    """Structural protocol for custom value matchers.

    A matcher is called with the expected and actual values found at a path
    and must:
    - Return True when the values are considered equal.
    - Return False for a plain mismatch (recorded as a value diff).
    - Raise ``MatcherError`` to report a mismatch with its own message and
      its own expected/actual values.
    """

    def __call__(self, expected: Any, actual: Any) -> bool: ...
