"""Tests for JsonKind classification and scalar equality."""

from __future__ import annotations

import pytest

from json_structural_diff.tree import JsonKind, classify
from json_structural_diff.tree.kinds import is_simple_value, numbers_equal, scalars_equal


class TestClassify:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ({}, JsonKind.OBJECT),
            ([], JsonKind.ARRAY),
            ("", JsonKind.STRING),
            (0, JsonKind.NUMBER),
            (0.5, JsonKind.NUMBER),
            (True, JsonKind.BOOLEAN),
            (False, JsonKind.BOOLEAN),
            (None, JsonKind.NULL),
        ],
    )
    def test_classify(self, value: object, kind: JsonKind) -> None:
        assert classify(value) is kind

    @pytest.mark.parametrize("value", [(1, 2), {1}, b"bytes", object()])
    def test_unsupported_type_raises(self, value: object) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            classify(value)

    def test_composite_kinds(self) -> None:
        assert {k for k in JsonKind if k.is_composite} == {JsonKind.OBJECT, JsonKind.ARRAY}
        assert is_simple_value("x")
        assert not is_simple_value([1])


class TestEquality:
    def test_numbers_compare_as_doubles(self) -> None:
        assert numbers_equal(1, 1.0)
        assert not numbers_equal(1, 1.0000001)

    def test_huge_integers(self) -> None:
        assert numbers_equal(10**400, 10**400)
        assert not numbers_equal(10**400, 10**400 + 1)

    def test_scalars_equal(self) -> None:
        assert scalars_equal("a", "a")
        assert scalars_equal(None, None)
        assert scalars_equal(2, 2.0)
        assert not scalars_equal(True, 1)
        assert not scalars_equal(0, False)
        assert not scalars_equal("1", 1)
