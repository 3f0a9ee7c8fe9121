"""Tests for ComparisonResult and FieldFinding.

Covers:
- Empty result passes
- Each recording method lands in its own category
- Message blocks and their " ; " separator
- Ignore paths filter findings at insertion
- Value descriptions for composites, null and booleans
"""

from __future__ import annotations

import dataclasses

import pytest

from json_structural_diff.result import ComparisonResult, FieldFinding, describe
from json_structural_diff.tree.path import ROOT_PATH

# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------


class TestOutcome:
    def test_empty_result_passes(self) -> None:
        result = ComparisonResult()
        assert result.passed()
        assert not result.failed()
        assert result.findings == ()
        assert result.message == ""

    def test_any_category_fails_the_result(self) -> None:
        assert ComparisonResult().fail("$.a", 1, 2).failed()
        assert ComparisonResult().missing_field("$.a", 1).failed()
        assert ComparisonResult().unexpected_field("$.a", 1).failed()

    def test_findings_order_is_failures_missing_unexpected(self) -> None:
        result = ComparisonResult()
        result.unexpected_field("$.u", 3)
        result.missing_field("$.m", 2)
        result.fail("$.f", 1, 0)
        assert [f.path for f in result.findings] == ["$.f", "$.m", "$.u"]


# ---------------------------------------------------------------------------
# Recording
# ---------------------------------------------------------------------------


class TestRecording:
    def test_fail_records_both_sides(self) -> None:
        result = ComparisonResult().fail(ROOT_PATH.append("a"), 1, 2)
        assert result.failures == (FieldFinding("$.a", 1, 2),)
        assert result.missing == ()
        assert result.unexpected == ()

    def test_missing_has_no_actual(self) -> None:
        result = ComparisonResult().missing_field("$.a", "x")
        assert result.missing == (FieldFinding("$.a", "x", None),)

    def test_unexpected_has_no_expected(self) -> None:
        result = ComparisonResult().unexpected_field("$.a", "x")
        assert result.unexpected == (FieldFinding("$.a", None, "x"),)

    def test_findings_are_immutable(self) -> None:
        finding = ComparisonResult().fail("$.a", 1, 2).failures[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            finding.path = "$.b"  # type: ignore[misc]

    def test_ignored_paths_are_dropped(self) -> None:
        result = ComparisonResult(ignore_paths=frozenset({"$.a"}))
        result.fail("$.a", 1, 2)
        result.missing_field("$.a", 1)
        result.unexpected_field("$.a", 1)
        assert result.passed()
        assert result.message == ""


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


class TestMessages:
    def test_fail_message(self) -> None:
        result = ComparisonResult().fail("$.a", 1, 2)
        assert result.message == "$.a\nExpected: 1\n     got: 2\n"

    def test_missing_message(self) -> None:
        result = ComparisonResult().missing_field("$.a", "x")
        assert result.message == "$.a\nExpected: x\n     but none found\n"

    def test_unexpected_message(self) -> None:
        result = ComparisonResult().unexpected_field("$.a", True)
        assert result.message == "$.a\nUnexpected: true\n"

    def test_blocks_are_joined_in_recording_order(self) -> None:
        result = ComparisonResult()
        result.unexpected_field("$.b", 2)
        result.fail("$.a", 1, 3)
        assert result.message == (
            "$.b\nUnexpected: 2\n ; $.a\nExpected: 1\n     got: 3\n"
        )
        assert str(result) == result.message


class TestDescribe:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ([1, 2], "a JSON array"),
            ({"a": 1}, "a JSON object"),
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (1.5, "1.5"),
            ("text", "text"),
        ],
    )
    def test_describe(self, value: object, expected: str) -> None:
        assert describe(value) == expected
