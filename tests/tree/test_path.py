"""Tests for the immutable JsonPath cursor."""

from __future__ import annotations

import dataclasses

import pytest

from json_structural_diff.tree.path import EMPTY_PATH, ROOT_PATH, JsonPath

# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRendering:
    def test_root(self) -> None:
        assert str(ROOT_PATH) == "$"

    def test_empty_cursor_takes_bare_key(self) -> None:
        assert EMPTY_PATH.append("a").render() == "a"
        assert EMPTY_PATH.append("a").append("b").render() == "a.b"

    def test_keys_and_indices(self) -> None:
        path = ROOT_PATH.append("items").append_array_index(0).append("id")
        assert str(path) == "$.items[0].id"

    def test_wildcard(self) -> None:
        assert str(ROOT_PATH.append("items").append_array_wildcard().append("id")) == (
            "$.items[].id"
        )

    def test_embedded_json_marker(self) -> None:
        path = ROOT_PATH.append("payload").append_embedded_json_marker().append("a")
        assert str(path) == "$.payload.$.a"

    @pytest.mark.parametrize(
        ("value", "rendered"),
        [
            (1, "$[?(@.id==1)]"),
            (1.5, "$[?(@.id==1.5)]"),
            ("x", "$[?(@.id=='x')]"),
            (True, "$[?(@.id==true)]"),
            (None, "$[?(@.id==null)]"),
            ("a'b", r"$[?(@.id=='a\'b')]"),
            ("a\\b", r"$[?(@.id=='a\\b')]"),
        ],
    )
    def test_unique_key_predicate(self, value: object, rendered: str) -> None:
        assert str(ROOT_PATH.append_unique_key("id", value)) == rendered

    def test_suffix_follows_later_appends(self) -> None:
        path = ROOT_PATH.append("a").with_suffix(": boom")
        assert str(path) == "$.a: boom"
        assert str(path.append("b")) == "$.a.b: boom"

    def test_prefix(self) -> None:
        assert JsonPath(prefix="doc:", current="$").append("a").render() == "doc:$.a"


# ---------------------------------------------------------------------------
# Immutability
# ---------------------------------------------------------------------------


class TestImmutability:
    def test_append_returns_new_cursor(self) -> None:
        parent = ROOT_PATH.append("a")
        left = parent.append("left")
        right = parent.append("right")
        assert str(parent) == "$.a"
        assert str(left) == "$.a.left"
        assert str(right) == "$.a.right"

    def test_fields_cannot_be_assigned(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            ROOT_PATH.current = "x"  # type: ignore[misc]

    def test_equal_paths_compare_equal(self) -> None:
        assert ROOT_PATH.append("a") == JsonPath.of("$.a")
