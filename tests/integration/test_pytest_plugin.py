"""Integration tests for the json-structural-diff pytest plugin.

These tests verify that the assert_json_equals fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-structural-diff to be installed (even in
editable mode via ``pip install -e .``).  The pytest11 entry point is only
registered at install time; a raw source checkout will not discover the
fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from json_structural_diff import CompareConfig, CompareMode


def test_fixture_passes_equal_docs(assert_json_equals: Any) -> None:
    assert_json_equals({"id": 1, "tags": ["a", "b"]}, {"tags": ["a", "b"], "id": 1})


def test_fixture_fails_on_extra_field(assert_json_equals: Any) -> None:
    """The default STRICT mode rejects fields that were not expected."""
    with pytest.raises(AssertionError, match=r"Unexpected: 2"):
        assert_json_equals({"a": 1}, {"a": 1, "b": 2})


def test_fixture_forwards_mode(assert_json_equals: Any) -> None:
    assert_json_equals({"a": 1}, {"a": 1, "b": 2}, config=CompareMode.LENIENT)


def test_fixture_forwards_config(assert_json_equals: Any) -> None:
    config = CompareConfig(ignore_paths={"$.updated_at"})
    assert_json_equals({"updated_at": 1}, {"updated_at": 2}, config=config)


def test_fixture_accepts_text(assert_json_equals: Any) -> None:
    assert_json_equals('{"a": [1, 2]}', '{"a": [1, 2]}')


def test_fixture_error_message_contents(assert_json_equals: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_json_equals({"user": {"name": "a"}}, {"user": {"name": "b"}})

    error_message = str(exc_info.value)
    assert "1 finding(s)" in error_message
    assert "$.user.name" in error_message
    assert "Expected: a" in error_message
    assert "got: b" in error_message


def test_fixture_returns_callable(assert_json_equals: Any) -> None:
    assert callable(assert_json_equals), (
        "assert_json_equals fixture must return a callable, not a direct value"
    )


def test_plugin_discovery() -> None:
    """Verify assert_json_equals appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_json_equals" in result.stdout, (
        f"assert_json_equals not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
