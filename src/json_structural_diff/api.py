"""Public API functions for json-structural-diff.

This module provides the user-facing functions: compare, compare_text,
is_equivalent, and assert_json_equals.  Each call creates a fresh
JSONComparator to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from json_structural_diff.algorithm.config import CompareConfig, CompareMode
from json_structural_diff.comparator import JSONComparator
from json_structural_diff.parsing import parse_or_sentinel
from json_structural_diff.result import ComparisonResult

__all__ = ["assert_json_equals", "compare", "compare_text", "is_equivalent"]

ConfigLike = CompareConfig | CompareMode | str | None

# Text pairs that are trivially equal without parsing.
_TRIVIAL_TEXTS = frozenset({"", "null"})


def compare(
    expected: Any,
    actual: Any,
    config: ConfigLike = None,
) -> ComparisonResult:
    """Compare two parsed JSON values and return their findings.

    Args:
        expected: Expected JSON value (dict, list, str, int, float, bool, None).
        actual:   Actual JSON value.
        config:   Comparison policy, or a ``CompareMode`` as shorthand.
                  Defaults to ``DEFAULT_CONFIG`` (STRICT) when None.

    Returns:
        A ``ComparisonResult``; ``passed()`` is True when no finding was made.

    Raises:
        ValueError: If the configured mode is invalid.
    """
    return JSONComparator(config).compare(expected, actual)


def compare_text(
    expected_text: str,
    actual_text: str,
    config: ConfigLike = None,
) -> ComparisonResult:
    """Parse two JSON documents and compare them.

    A document that fails to parse is replaced by
    ``{"message": "<side> could not be parsed"}`` for that side only, so the
    failure shows up as a content diff.  Two empty documents, or two literal
    ``null`` documents, pass immediately.

    Args:
        expected_text: Expected JSON text.
        actual_text:   Actual JSON text.
        config:        Comparison policy (see ``compare``).

    Returns:
        A ``ComparisonResult``.  Documents of incompatible top-level kinds
        (e.g. object vs array) produce a single diff at ``$``.
    """
    comparator = JSONComparator(config)
    if expected_text == actual_text and expected_text.strip() in _TRIVIAL_TEXTS:
        return comparator.new_result()

    expected = parse_or_sentinel(expected_text, "expected")
    actual = parse_or_sentinel(actual_text, "actual")
    return comparator.compare(expected, actual)


def is_equivalent(
    expected: Any,
    actual: Any,
    config: ConfigLike = None,
) -> bool:
    """Return True if the two JSON values compare without any finding."""
    return compare(expected, actual, config=config).passed()


def assert_json_equals(
    expected: Any,
    actual: Any,
    config: ConfigLike = None,
) -> None:
    """Assert that two JSON values (or two JSON texts) are equivalent.

    When both arguments are ``str`` they are treated as JSON text and go
    through ``compare_text``; otherwise they are compared as parsed values.

    Raises:
        AssertionError: With the consolidated findings message when the
            comparison fails.
    """
    if isinstance(expected, str) and isinstance(actual, str):
        result = compare_text(expected, actual, config=config)
    else:
        result = compare(expected, actual, config=config)
    if result.failed():
        raise AssertionError(
            f"JSON documents differ: {len(result.findings)} finding(s)\n{result.message}"
        )
