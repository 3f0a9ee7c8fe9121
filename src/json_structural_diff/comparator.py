"""JSONComparator: value dispatcher and object comparator.

This is the central wiring layer between the comparison policy and the
result accumulator.  ``compare()`` creates a fresh ``ComparisonResult``,
dispatches on the top-level kinds and returns the populated result.

Architecture:
- ``compare_values`` is the value dispatcher.  It decides, for two values
  at the same path, whether they are equal, numerically equal, recursable
  (object/array/embedded JSON string) or divergent.
- ``compare_objects`` compares key sets and values of two objects in two
  phases (expected→actual, then actual→expected when not extensible).
- Arrays are delegated to ``ArrayReconciler``, which calls back into
  ``compare_values`` for every element pair, so the recursion runs through
  the whole tree.
- Custom matchers registered on the config are consulted before any
  built-in rule.  A failing matcher becomes a finding, never an exception.
- Embedded JSON strings are parsed through a per-instance LRU cache.
"""

from __future__ import annotations

import logging
from typing import Any

from json_structural_diff.algorithm.arrays import ArrayReconciler
from json_structural_diff.algorithm.config import DEFAULT_CONFIG, CompareConfig, CompareMode
from json_structural_diff.algorithm.tolerance import within_tolerance
from json_structural_diff.cache import ParsedJsonCache
from json_structural_diff.matchers import Customization, MatcherError
from json_structural_diff.result import ComparisonResult
from json_structural_diff.tree.kinds import JsonKind, classify, numbers_equal, scalars_equal
from json_structural_diff.tree.path import ROOT_PATH, JsonPath

__all__ = ["JSONComparator"]

logger = logging.getLogger(__name__)


def _bracketed(text: str, opening: str, closing: str) -> bool:
    return text.startswith(opening) and text.endswith(closing)


class JSONComparator:
    """Structural comparator for parsed JSON values.

    Example::

        from json_structural_diff import CompareMode, JSONComparator

        cmp = JSONComparator(CompareMode.LENIENT)
        result = cmp.compare({"a": 1}, {"a": 1, "b": 2})
        result.passed()   # True, extra fields are allowed in LENIENT mode
    """

    def __init__(
        self,
        config: CompareConfig | CompareMode | str | None = None,
        max_cache_size: int = 256,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Comparison policy.  A ``CompareMode`` (or its string
                value) is shorthand for ``CompareConfig(mode=...)``.  Defaults
                to ``DEFAULT_CONFIG`` (STRICT) when None.
            max_cache_size: Maximum number of parsed embedded JSON strings held
                in the per-instance LRU cache.  This is an infrastructure
                parameter, not part of ``CompareConfig``.

        Raises:
            ValueError: If the mode is invalid.
            TypeError: If ``config`` is not a supported type.
        """
        self._config = self._resolve_config(config)
        self._cache = ParsedJsonCache(max_size=max_cache_size)
        self._arrays = ArrayReconciler(self, self._config)

    @staticmethod
    def _resolve_config(config: CompareConfig | CompareMode | str | None) -> CompareConfig:
        if config is None:
            return DEFAULT_CONFIG
        if isinstance(config, CompareConfig):
            return config
        if isinstance(config, str):
            return CompareConfig(mode=config)
        raise TypeError(f"config must be a CompareConfig or CompareMode, got {type(config)!r}")

    @property
    def config(self) -> CompareConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, expected: Any, actual: Any) -> ComparisonResult:
        """Compare two parsed JSON values and return their findings.

        Both objects go to the object comparator and both arrays to the
        array reconciler, rooted at ``$``.  Any other pair is compared as
        opaque scalars and produces at most one top-level diff.  Ignoring ``$``
        skips the whole comparison.

        Raises:
            TypeError: If either tree contains a non-JSON Python value.
        """
        result = self.new_result()
        if self._config.is_ignored(ROOT_PATH.render()):
            return result
        expected_kind = classify(expected)
        actual_kind = classify(actual)

        if expected_kind is JsonKind.OBJECT and actual_kind is JsonKind.OBJECT:
            self.compare_objects(ROOT_PATH, expected, actual, result)
        elif expected_kind is JsonKind.ARRAY and actual_kind is JsonKind.ARRAY:
            self.compare_arrays(ROOT_PATH, expected, actual, result)
        elif not scalars_equal(expected, actual):
            result.fail(ROOT_PATH, expected, actual)
        return result

    def new_result(self) -> ComparisonResult:
        """Return an empty result honouring the configured ignore paths."""
        return ComparisonResult(ignore_paths=self._config.ignore_paths)

    def passes(self, path: JsonPath, expected: Any, actual: Any) -> bool:
        """Run a throwaway sub-comparison and report whether it found nothing."""
        scratch = self.new_result()
        self.compare_values(path, expected, actual, scratch)
        return scratch.passed()

    # ------------------------------------------------------------------
    # Value dispatcher
    # ------------------------------------------------------------------

    def compare_values(
        self, path: JsonPath, expected: Any, actual: Any, result: ComparisonResult
    ) -> None:
        """Compare two values found at the same path."""
        rendered = path.render()
        if self._config.is_ignored(rendered):
            return

        customization = self._config.customization_for(rendered)
        if customization is not None:
            self._apply_customization(customization, path, expected, actual, result)
            return

        if expected is None and actual is None:
            return
        if expected is None:
            # Nothing was expected here: only a non-extensible mode objects.
            if not self._config.mode.is_extensible:
                result.unexpected_field(path, actual)
            return
        if actual is None:
            result.missing_field(path, expected)
            return

        expected_kind = classify(expected)
        actual_kind = classify(actual)

        if expected_kind is JsonKind.NUMBER and actual_kind is JsonKind.NUMBER:
            if not numbers_equal(expected, actual) and not self._tolerated(
                rendered, expected, actual
            ):
                result.fail(path, expected, actual)
            return

        if expected_kind is not actual_kind:
            result.fail(path, expected, actual)
            return

        if expected_kind is JsonKind.OBJECT:
            self.compare_objects(path, expected, actual, result)
        elif expected_kind is JsonKind.ARRAY:
            self.compare_arrays(path, expected, actual, result)
        elif expected == actual:
            return
        elif expected_kind is JsonKind.STRING and self._config.is_json_string_path(rendered):
            self._compare_embedded_json(path, expected, actual, result)
        elif not self._tolerated(rendered, expected, actual):
            result.fail(path, expected, actual)

    def _apply_customization(
        self,
        customization: Customization,
        path: JsonPath,
        expected: Any,
        actual: Any,
        result: ComparisonResult,
    ) -> None:
        try:
            if not customization.matches(expected, actual):
                result.fail(path, expected, actual)
        except MatcherError as exc:
            result.fail(path.with_suffix(f": {exc}"), exc.expected, exc.actual)
        except Exception as exc:  # noqa: BLE001
            logger.warning("custom matcher for %s raised %r", path, exc, exc_info=True)
            result.fail(path.with_suffix(f": {exc}"), expected, actual)

    def _tolerated(self, path: str, expected: Any, actual: Any) -> bool:
        tolerance = self._config.tolerance_ms(path)
        return tolerance is not None and within_tolerance(expected, actual, tolerance)

    def _compare_embedded_json(
        self, path: JsonPath, expected: str, actual: str, result: ComparisonResult
    ) -> None:
        """Diff two strings that carry JSON documents as structured values."""
        both_objects = _bracketed(expected, "{", "}") and _bracketed(actual, "{", "}")
        both_arrays = _bracketed(expected, "[", "]") and _bracketed(actual, "[", "]")
        if not (both_objects or both_arrays):
            result.fail(path, expected, actual)
            return

        try:
            expected_doc = self._cache.parse(expected)
            actual_doc = self._cache.parse(actual)
        except ValueError as exc:
            logger.debug("embedded JSON at %s could not be parsed: %s", path, exc)
            result.fail(path, expected, actual)
            return

        nested = path.append_embedded_json_marker()
        expected_kind = classify(expected_doc)
        actual_kind = classify(actual_doc)
        if both_objects and expected_kind is JsonKind.OBJECT and actual_kind is JsonKind.OBJECT:
            self.compare_objects(nested, expected_doc, actual_doc, result)
        elif both_arrays and expected_kind is JsonKind.ARRAY and actual_kind is JsonKind.ARRAY:
            self.compare_arrays(nested, expected_doc, actual_doc, result)
        else:
            result.fail(path, expected, actual)

    # ------------------------------------------------------------------
    # Object comparator
    # ------------------------------------------------------------------

    def compare_objects(
        self,
        path: JsonPath,
        expected: dict[str, Any],
        actual: dict[str, Any],
        result: ComparisonResult,
    ) -> None:
        """Compare two objects key by key, in lexicographic key order."""
        parent = path.render()
        consumed: set[str] = set()

        # Expected -> actual: every expected key must be present and equal.
        for key in sorted(expected):
            renamed = self._config.rename(parent, key)
            child = path.append(renamed)
            if self._config.is_ignored(path.append(key).render()) or self._config.is_ignored(
                child.render()
            ):
                continue
            if renamed in actual:
                consumed.add(renamed)
                self.compare_values(child, expected[key], actual[renamed], result)
            else:
                result.missing_field(child, expected[key])

        if self._config.mode.is_extensible:
            return

        # Actual -> expected: leftover actual keys are unexpected.
        for key in sorted(actual):
            if key in consumed or key in expected or self._config.is_rename_target(parent, key):
                continue
            child = path.append(key)
            if self._config.is_ignored(child.render()):
                continue
            result.unexpected_field(child, actual[key])

    def compare_arrays(
        self,
        path: JsonPath,
        expected: list[Any],
        actual: list[Any],
        result: ComparisonResult,
    ) -> None:
        self._arrays.compare(path, expected, actual, result)
