"""CompareMode and CompareConfig for structural comparison.

CompareConfig is a frozen (immutable) dataclass holding the comparison
policy.  CompareMode is the product of two independent switches:

- extensible:   actual may carry fields/elements that expected does not
- strict order: arrays must match positionally rather than by content

Every path-keyed setting is matched by exact string equality against the
rendered path of the node being compared (``$.a.b``, ``$.items[0]``, ...).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from json_structural_diff.matchers import Customization

__all__ = ["DEFAULT_CONFIG", "CompareConfig", "CompareMode"]


class CompareMode(StrEnum):
    """How strictly two documents are compared.

    ====================  ==========  ============
    Mode                  Extensible  Strict order
    ====================  ==========  ============
    STRICT                no          yes
    LENIENT               yes         no
    NON_EXTENSIBLE        no          no
    STRICT_ORDER          yes         yes
    ====================  ==========  ============
    """

    STRICT = "strict"
    LENIENT = "lenient"
    NON_EXTENSIBLE = "non_extensible"
    STRICT_ORDER = "strict_order"

    @property
    def is_extensible(self) -> bool:
        return self in (CompareMode.LENIENT, CompareMode.STRICT_ORDER)

    @property
    def has_strict_order(self) -> bool:
        return self in (CompareMode.STRICT, CompareMode.STRICT_ORDER)

    @classmethod
    def of(cls, extensible: bool, strict_order: bool) -> CompareMode:
        """Return the mode combining the two switches."""
        if extensible:
            return cls.STRICT_ORDER if strict_order else cls.LENIENT
        return cls.STRICT if strict_order else cls.NON_EXTENSIBLE


def _to_millis(value: Any, path: str) -> float:
    # bool MUST be rejected explicitly: bool subclasses int in Python
    if isinstance(value, timedelta):
        millis = value.total_seconds() * 1000.0
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        millis = float(value)
    else:
        msg = f"accuracy_error[{path!r}] must be a timedelta or milliseconds, got {value!r}"
        raise ValueError(msg)
    if millis < 0:
        msg = f"accuracy_error[{path!r}] must be >= 0, got {value!r}"
        raise ValueError(msg)
    return millis


@dataclass(frozen=True, slots=True)
class CompareConfig:
    """Immutable comparison policy.

    Attributes:
        mode: Extensibility x ordering (see ``CompareMode``).  Strings are
            coerced by value (``"lenient"``); anything else raises ValueError.
        ignore_paths: Paths excluded from comparison and from findings.
        ignore_order_paths: Array paths compared without order even when the
            mode has strict order.
        rename_paths: ``{parent_path: {expected_key: actual_key}}``.  The
            expected key is looked up under its new name in actual.
        ignore_values: ``{array_path: values}``.  Array elements equal to one
            of the values are dropped from both sides before reconciliation.
        accuracy_error: ``{path: timedelta | milliseconds}`` tolerance window
            for timestamps (date strings or epoch-millisecond numbers).
        unique_keys: Configured identity fields for arrays of objects, written
            as ``<array path>.<key>`` or ``<array path>[].<key>``.
        json_string_paths: Paths whose string values carry JSON documents
            that should be diffed structurally instead of as text.
        customizations: Custom matchers consulted before the built-in rules.
        max_fallback_size: When set, arrays longer than this are compared
            positionally instead of through the quadratic unordered fallback.
    """

    mode: CompareMode = CompareMode.STRICT
    ignore_paths: frozenset[str] = frozenset()
    ignore_order_paths: frozenset[str] = frozenset()
    rename_paths: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    ignore_values: Mapping[str, tuple[Any, ...]] = field(default_factory=dict)
    accuracy_error: Mapping[str, timedelta | float] = field(default_factory=dict)
    unique_keys: frozenset[str] = frozenset()
    json_string_paths: frozenset[str] = frozenset()
    customizations: tuple[Customization, ...] = ()
    max_fallback_size: int | None = None
    _tolerances: dict[str, float] = field(init=False, repr=False, compare=False)

    # The mapping fields are plain dicts.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.mode is None:
            msg = "mode must not be None"
            raise ValueError(msg)
        if not isinstance(self.mode, CompareMode):
            try:
                object.__setattr__(self, "mode", CompareMode(self.mode))
            except ValueError:
                msg = f"mode must be a CompareMode, got {self.mode!r}"
                raise ValueError(msg) from None

        for name in ("ignore_paths", "ignore_order_paths", "unique_keys", "json_string_paths"):
            object.__setattr__(self, name, _frozen_paths(name, getattr(self, name)))

        object.__setattr__(
            self,
            "rename_paths",
            {parent: dict(renames) for parent, renames in self.rename_paths.items()},
        )
        object.__setattr__(
            self,
            "ignore_values",
            {path: tuple(values) for path, values in self.ignore_values.items()},
        )
        object.__setattr__(self, "customizations", tuple(self.customizations))
        object.__setattr__(
            self,
            "_tolerances",
            {path: _to_millis(v, path) for path, v in self.accuracy_error.items()},
        )

        if self.max_fallback_size is not None and (
            isinstance(self.max_fallback_size, bool)
            or not isinstance(self.max_fallback_size, int)
            or self.max_fallback_size <= 0
        ):
            msg = f"max_fallback_size must be a positive int, got {self.max_fallback_size!r}"
            raise ValueError(msg)

    # ------------------------------------------------------------------
    # Path lookups
    # ------------------------------------------------------------------

    def is_ignored(self, path: str) -> bool:
        return path in self.ignore_paths

    def ignores_order(self, path: str) -> bool:
        return path in self.ignore_order_paths

    def has_strict_order_at(self, path: str) -> bool:
        """True when arrays at ``path`` must match positionally."""
        return self.mode.has_strict_order and not self.ignores_order(path)

    def rename(self, parent: str, key: str) -> str:
        """Return the actual-side name of expected ``key`` under ``parent``."""
        renames = self.rename_paths.get(parent)
        if not renames:
            return key
        return renames.get(key, key)

    def is_rename_target(self, parent: str, key: str) -> bool:
        renames = self.rename_paths.get(parent)
        return bool(renames) and key in renames.values()

    def ignored_values_at(self, path: str) -> tuple[Any, ...]:
        return self.ignore_values.get(path, ())

    def tolerance_ms(self, path: str) -> float | None:
        return self._tolerances.get(path)

    def is_json_string_path(self, path: str) -> bool:
        return path in self.json_string_paths

    def customization_for(self, path: str) -> Customization | None:
        """Return the first registered customization that applies to ``path``."""
        for customization in self.customizations:
            if customization.applies_to(path):
                return customization
        return None


def _frozen_paths(name: str, paths: Iterable[str] | str) -> frozenset[str]:
    if isinstance(paths, str):
        msg = f"{name} must be a collection of paths, not a single string {paths!r}"
        raise ValueError(msg)
    return frozenset(paths)


# Shared default (STRICT, no rules), created once and never mutated.
DEFAULT_CONFIG = CompareConfig()
