"""ArrayReconciler: the four array-comparison strategies.

Architecture:
- Elements listed in ``CompareConfig.ignore_values`` for the array path are
  dropped first.  Surviving elements keep their original index, so findings
  always point at the real position in the document.
- Both sides empty is a pass; one empty side reports every element of the
  other side, whatever the mode.
- Otherwise exactly one strategy runs, in priority order:

  1. STRICT_ORDER: positional pairing (mode is ordered at this path).
  2. SIMPLE_VALUES: multiset reconciliation of scalar elements.
  3. UNIQUE_KEY: identity matching of objects on a discovered key.
  4. FALLBACK: greedy O(n²) matching that stops at the first element it
     cannot place.

Child values are handed back to the comparator, so arrays and objects
recurse into each other down the whole tree.
"""

from __future__ import annotations

import json
import logging
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any, Protocol

from json_structural_diff.algorithm.unique_key import (
    find_unique_key,
    identity,
    is_usable_as_unique_key,
)
from json_structural_diff.tree.kinds import JsonKind, classify, is_simple_value, scalars_equal

if TYPE_CHECKING:
    from json_structural_diff.algorithm.config import CompareConfig
    from json_structural_diff.result import ComparisonResult
    from json_structural_diff.tree.path import JsonPath

__all__ = ["ArrayReconciler", "ArrayStrategy"]

logger = logging.getLogger(__name__)

# (original index, element)
IndexedElement = tuple[int, Any]


class ArrayStrategy(StrEnum):
    """Which reconciliation strategy handled an array."""

    STRICT_ORDER = auto()
    SIMPLE_VALUES = auto()
    UNIQUE_KEY = auto()
    FALLBACK = auto()


class ValueComparator(Protocol):
    """The callbacks the reconciler needs from the value dispatcher."""

    def compare_values(
        self, path: JsonPath, expected: Any, actual: Any, result: ComparisonResult
    ) -> None: ...

    def passes(self, path: JsonPath, expected: Any, actual: Any) -> bool: ...


def _group_key(value: Any) -> tuple[JsonKind, Any]:
    kind = classify(value)
    if kind.is_composite:
        # Mixed arrays: composites group by canonical text.
        return kind, json.dumps(value, sort_keys=True)
    return identity(value)


def _index_groups(items: list[IndexedElement]) -> dict[tuple[JsonKind, Any], tuple[Any, list[int]]]:
    """Map each distinct value to (first occurrence, indices), in first-seen order."""
    groups: dict[tuple[JsonKind, Any], tuple[Any, list[int]]] = {}
    for index, value in items:
        key = _group_key(value)
        if key in groups:
            groups[key][1].append(index)
        else:
            groups[key] = (value, [index])
    return groups


def _all_simple(items: list[IndexedElement]) -> bool:
    return all(is_simple_value(value) for _, value in items)


def _all_objects(items: list[IndexedElement]) -> bool:
    return all(classify(value) is JsonKind.OBJECT for _, value in items)


class ArrayReconciler:
    """Compare two JSON arrays and record findings on a ComparisonResult.

    Args:
        comparator: Value dispatcher used for element comparison and for
            throwaway sub-comparisons in the fallback strategy.
        config: Active comparison policy.
    """

    def __init__(self, comparator: ValueComparator, config: CompareConfig) -> None:
        self._comparator = comparator
        self._config = config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(
        self,
        path: JsonPath,
        expected: list[Any],
        actual: list[Any],
        result: ComparisonResult,
    ) -> ArrayStrategy | None:
        """Reconcile ``expected`` against ``actual`` at ``path``.

        Returns:
            The strategy that ran, or None when a shortcut decided the outcome.
        """
        rendered = path.render()
        expected_items = self._without_ignored_values(rendered, expected)
        actual_items = self._without_ignored_values(rendered, actual)

        if not expected_items and not actual_items:
            return None
        if not expected_items:
            for index, value in actual_items:
                result.unexpected_field(path.append_array_index(index), value)
            return None
        if not actual_items:
            for index, value in expected_items:
                result.missing_field(path.append_array_index(index), value)
            return None

        strategy = self._choose_strategy(rendered, expected_items, actual_items)
        logger.debug("comparing array at %s with %s strategy", rendered, strategy)

        if strategy is ArrayStrategy.STRICT_ORDER:
            self._compare_strict_order(path, expected_items, actual_items, result)
        elif strategy is ArrayStrategy.SIMPLE_VALUES:
            self._compare_simple_values(path, expected_items, actual_items, result)
        elif strategy is ArrayStrategy.UNIQUE_KEY:
            strategy = self._compare_by_unique_key(path, expected_items, actual_items, result)
        else:
            strategy = self._compare_fallback(path, expected_items, actual_items, result)
        return strategy

    # ------------------------------------------------------------------
    # Preprocessing
    # ------------------------------------------------------------------

    def _without_ignored_values(self, path: str, array: list[Any]) -> list[IndexedElement]:
        ignored = self._config.ignored_values_at(path)
        return [
            (index, value)
            for index, value in enumerate(array)
            if not any(scalars_equal(value, skip) for skip in ignored)
        ]

    def _choose_strategy(
        self,
        path: str,
        expected: list[IndexedElement],
        actual: list[IndexedElement],
    ) -> ArrayStrategy:
        if self._config.has_strict_order_at(path):
            return ArrayStrategy.STRICT_ORDER
        if _all_simple(expected) or _all_simple(actual):
            return ArrayStrategy.SIMPLE_VALUES
        if _all_objects(expected) or _all_objects(actual):
            return ArrayStrategy.UNIQUE_KEY
        return ArrayStrategy.FALLBACK

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    def _compare_strict_order(
        self,
        path: JsonPath,
        expected: list[IndexedElement],
        actual: list[IndexedElement],
        result: ComparisonResult,
    ) -> None:
        """Pair elements by position; a missing position compares as null."""
        for position in range(max(len(expected), len(actual))):
            e_index, e_value = expected[position] if position < len(expected) else (None, None)
            a_index, a_value = actual[position] if position < len(actual) else (None, None)
            index = e_index if e_index is not None else a_index
            self._comparator.compare_values(
                path.append_array_index(index), e_value, a_value, result
            )

    def _compare_simple_values(
        self,
        path: JsonPath,
        expected: list[IndexedElement],
        actual: list[IndexedElement],
        result: ComparisonResult,
    ) -> None:
        """Reconcile occurrence counts per distinct value.

        A count mismatch is reported at the tail indices of whichever side
        has the surplus; positions of equal values are never paired up.
        """
        expected_groups = _index_groups(expected)
        actual_groups = _index_groups(actual)

        for key, (value, expected_indices) in expected_groups.items():
            actual_indices = actual_groups[key][1] if key in actual_groups else []
            surplus = len(expected_indices) - len(actual_indices)
            if surplus > 0:
                for index in expected_indices[-surplus:]:
                    result.missing_field(path.append_array_index(index), value)
            elif surplus < 0:
                for index in actual_indices[surplus:]:
                    result.missing_field(path.append_array_index(index), value)

        if self._config.mode.is_extensible:
            return
        for key, (value, actual_indices) in actual_groups.items():
            if key in expected_groups:
                continue
            for index in actual_indices:
                result.unexpected_field(path.append_array_index(index), value)

    def _compare_by_unique_key(
        self,
        path: JsonPath,
        expected: list[IndexedElement],
        actual: list[IndexedElement],
        result: ComparisonResult,
    ) -> ArrayStrategy:
        expected_values = [value for _, value in expected]
        actual_values = [value for _, value in actual]
        key = find_unique_key(expected_values, path, self._config)
        if key is None or not is_usable_as_unique_key(key, actual_values):
            return self._compare_fallback(path, expected, actual, result)

        expected_by_id = {identity(item[key]): item for item in expected_values}
        actual_by_id = {identity(item[key]): item for item in actual_values}

        for ident, item in expected_by_id.items():
            item_path = path.append_unique_key(key, item[key])
            if ident not in actual_by_id:
                result.missing_field(item_path, item)
                continue
            self._comparator.compare_values(item_path, item, actual_by_id[ident], result)

        if not self._config.mode.is_extensible:
            for ident, item in actual_by_id.items():
                if ident not in expected_by_id:
                    result.unexpected_field(path.append_unique_key(key, item[key]), item)
        return ArrayStrategy.UNIQUE_KEY

    def _compare_fallback(
        self,
        path: JsonPath,
        expected: list[IndexedElement],
        actual: list[IndexedElement],
        result: ComparisonResult,
    ) -> ArrayStrategy:
        """Greedy O(n²) matching; stops at the first unmatched expected element.

        This is expensive, but it is the only resort for loosely ordered
        arrays whose elements have no unique identity.
        """
        limit = self._config.max_fallback_size
        if limit is not None and max(len(expected), len(actual)) > limit:
            logger.warning(
                "array at %s exceeds max_fallback_size=%d (%d expected, %d actual); "
                "comparing positionally",
                path,
                limit,
                len(expected),
                len(actual),
            )
            self._compare_strict_order(path, expected, actual, result)
            return ArrayStrategy.STRICT_ORDER

        matched: set[int] = set()
        for e_index, e_value in expected:
            e_kind = classify(e_value)
            match_found = False
            for position, (_, a_value) in enumerate(actual):
                if position in matched or classify(a_value) is not e_kind:
                    continue
                if e_kind is JsonKind.ARRAY and len(e_value) < len(a_value):
                    continue
                if e_kind.is_composite:
                    is_match = self._comparator.passes(
                        path.append_array_index(e_index), e_value, a_value
                    )
                else:
                    is_match = scalars_equal(e_value, a_value)
                if is_match:
                    matched.add(position)
                    match_found = True
                    break
            if not match_found:
                result.fail(path.append_array_index(e_index), e_value, None)
                return ArrayStrategy.FALLBACK
        return ArrayStrategy.FALLBACK
