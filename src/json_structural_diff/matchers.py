"""Per-path custom matchers: Customization, MatcherError, RegexMatcher.

A ``Customization`` binds a path pattern to a ``ValueMatcher``.  The value
dispatcher consults the registered customizations before any built-in rule,
so a matcher can override equality for one field (or a family of fields)
without touching the rest of the comparison.

Path patterns are matched against the *rendered* path and support two
wildcards:

- ``*``  matches exactly one path segment (no ``.`` inside)
- ``**`` matches any run of characters, including ``.``

Every other character, including ``[``, ``]``, ``?`` and ``$``, is literal.

Example::

    from json_structural_diff import CompareConfig, Customization, RegexMatcher

    config = CompareConfig(
        customizations=(Customization("$.items[*].created", RegexMatcher(r"\\d{4}-.*")),)
    )
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from json_structural_diff.protocols import ValueMatcher

__all__ = ["Customization", "MatcherError", "RegexMatcher", "compile_path_pattern"]


class MatcherError(Exception):
    """Raised by a matcher to report a mismatch with its own diagnostics.

    The dispatcher records a value diff at ``<path>: <message>`` carrying
    ``expected`` and ``actual`` from the error.
    """

    def __init__(self, message: str, expected: Any = None, actual: Any = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


def compile_path_pattern(pattern: str) -> re.Pattern[str]:
    """Translate a path pattern with ``*`` / ``**`` wildcards into a regex."""
    parts: list[str] = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**", i):
            parts.append(".+")
            i += 2
        elif pattern[i] == "*":
            parts.append(r"[^.\[\]]+")
            i += 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return re.compile("".join(parts))


@dataclass(frozen=True, slots=True)
class Customization:
    """A ``(path pattern, matcher)`` pair registered on ``CompareConfig``.

    Attributes:
        path:    Path pattern (see module docstring for wildcard rules).
        matcher: Any ``ValueMatcher``-conformant callable.
    """

    path: str
    matcher: ValueMatcher
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not callable(self.matcher):
            msg = f"matcher for {self.path!r} must be callable, got {self.matcher!r}"
            raise ValueError(msg)
        object.__setattr__(self, "_regex", compile_path_pattern(self.path))

    def applies_to(self, path: str) -> bool:
        return self._regex.fullmatch(path) is not None

    def matches(self, expected: Any, actual: Any) -> bool:
        return bool(self.matcher(expected, actual))


class RegexMatcher:
    """Match the actual value's string form against a regular expression.

    When constructed without a pattern, the *expected* value is used as the
    pattern, so expected documents can carry their own regexes.
    """

    def __init__(self, pattern: str | None = None) -> None:
        self._pattern = re.compile(pattern) if pattern is not None else None

    def __call__(self, expected: Any, actual: Any) -> bool:
        if self._pattern is not None:
            regex = self._pattern
        else:
            try:
                regex = re.compile(str(expected))
            except re.error as exc:
                raise MatcherError(
                    f"Invalid regex in expected value: {exc}", expected, actual
                ) from exc
        if actual is None or regex.fullmatch(str(actual)) is None:
            raise MatcherError(
                f"Value does not match pattern {regex.pattern!r}", regex.pattern, actual
            )
        return True
