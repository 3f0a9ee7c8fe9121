"""ComparisonResult accumulator and FieldFinding record.

A ``ComparisonResult`` is created at the start of every top-level compare
call and is exclusively owned by that call.  Comparators record three kinds
of finding on it:

- ``fail``: value mismatch (both sides present)
- ``missing``: present in expected, absent from actual
- ``unexpected``: present in actual, absent from expected

Findings whose path is listed in the configured ignore paths are dropped at
insertion time; everything else is appended in recording order and never
removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from json_structural_diff.tree.path import JsonPath

__all__ = ["ComparisonResult", "FieldFinding", "describe"]

MESSAGE_SEPARATOR = " ; "


def describe(value: Any) -> str:
    """Render a value for a diagnostic message.

    Composite values are described generically so that messages stay short.
    """
    if isinstance(value, list):
        return "a JSON array"
    if isinstance(value, dict):
        return "a JSON object"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True, slots=True)
class FieldFinding:
    """One recorded discrepancy.

    Attributes:
        path:     Rendered path of the node, e.g. ``"$.items[0].id"``.
        expected: Expected value; None for unexpected findings.
        actual:   Actual value; None for missing findings.
    """

    path: str
    expected: Any
    actual: Any


@dataclass(slots=True)
class ComparisonResult:
    """Mutable accumulator of comparison findings.

    Attributes:
        ignore_paths: Rendered paths whose findings are dropped on insertion.
    """

    ignore_paths: frozenset[str] = frozenset()
    _failures: list[FieldFinding] = field(default_factory=list, repr=False)
    _missing: list[FieldFinding] = field(default_factory=list, repr=False)
    _unexpected: list[FieldFinding] = field(default_factory=list, repr=False)
    _messages: list[str] = field(default_factory=list, repr=False)

    # ------------------------------------------------------------------
    # Outcome
    # ------------------------------------------------------------------

    def passed(self) -> bool:
        """True when no finding of any category was recorded."""
        return not (self._failures or self._missing or self._unexpected)

    def failed(self) -> bool:
        return not self.passed()

    @property
    def failures(self) -> tuple[FieldFinding, ...]:
        return tuple(self._failures)

    @property
    def missing(self) -> tuple[FieldFinding, ...]:
        return tuple(self._missing)

    @property
    def unexpected(self) -> tuple[FieldFinding, ...]:
        return tuple(self._unexpected)

    @property
    def findings(self) -> tuple[FieldFinding, ...]:
        """All findings: failures, then missing, then unexpected."""
        return (*self._failures, *self._missing, *self._unexpected)

    @property
    def message(self) -> str:
        """One formatted block per finding, in recording order."""
        return MESSAGE_SEPARATOR.join(self._messages)

    def __str__(self) -> str:
        return self.message

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def fail(self, path: JsonPath | str, expected: Any, actual: Any) -> ComparisonResult:
        """Record a value mismatch at ``path``."""
        rendered = str(path)
        if self._is_ignored(rendered):
            return self
        self._failures.append(FieldFinding(rendered, expected, actual))
        self._messages.append(
            f"{rendered}\nExpected: {describe(expected)}\n     got: {describe(actual)}\n"
        )
        return self

    def missing_field(self, path: JsonPath | str, expected: Any) -> ComparisonResult:
        """Record that ``expected`` has no counterpart in actual."""
        rendered = str(path)
        if self._is_ignored(rendered):
            return self
        self._missing.append(FieldFinding(rendered, expected, None))
        self._messages.append(
            f"{rendered}\nExpected: {describe(expected)}\n     but none found\n"
        )
        return self

    def unexpected_field(self, path: JsonPath | str, actual: Any) -> ComparisonResult:
        """Record that ``actual`` has no counterpart in expected."""
        rendered = str(path)
        if self._is_ignored(rendered):
            return self
        self._unexpected.append(FieldFinding(rendered, None, actual))
        self._messages.append(f"{rendered}\nUnexpected: {describe(actual)}\n")
        return self

    def _is_ignored(self, rendered: str) -> bool:
        return rendered in self.ignore_paths

