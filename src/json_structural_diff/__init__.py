"""JSON structural diff - path-addressed comparison of JSON documents."""

from __future__ import annotations

from json_structural_diff.algorithm.config import DEFAULT_CONFIG, CompareConfig, CompareMode
from json_structural_diff.api import (
    assert_json_equals,
    compare,
    compare_text,
    is_equivalent,
)
from json_structural_diff.comparator import JSONComparator
from json_structural_diff.matchers import Customization, MatcherError, RegexMatcher
from json_structural_diff.result import ComparisonResult, FieldFinding
from json_structural_diff.tree.path import JsonPath

__version__: str = "0.1.0"
__all__: list[str] = [
    "DEFAULT_CONFIG",
    "CompareConfig",
    "CompareMode",
    "ComparisonResult",
    "Customization",
    "FieldFinding",
    "JSONComparator",
    "JsonPath",
    "MatcherError",
    "RegexMatcher",
    "assert_json_equals",
    "compare",
    "compare_text",
    "is_equivalent",
]
