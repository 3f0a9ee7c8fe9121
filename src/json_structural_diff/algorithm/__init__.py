"""algorithm subpackage: public API for the comparison policy and array strategies.

Provides the configuration model, the array reconciler, the unique-key
heuristic and the timestamp tolerance.  Import from this module (not from
sub-modules directly) to stay on the stable public interface.

Example::

    from json_structural_diff.algorithm import CompareConfig, CompareMode

    config = CompareConfig(mode=CompareMode.LENIENT, ignore_paths={"$.updated_at"})
"""

from __future__ import annotations

from json_structural_diff.algorithm.arrays import ArrayReconciler, ArrayStrategy
from json_structural_diff.algorithm.config import DEFAULT_CONFIG, CompareConfig, CompareMode
from json_structural_diff.algorithm.tolerance import within_tolerance
from json_structural_diff.algorithm.unique_key import find_unique_key, is_usable_as_unique_key

__all__ = [
    "DEFAULT_CONFIG",
    "ArrayReconciler",
    "ArrayStrategy",
    "CompareConfig",
    "CompareMode",
    "find_unique_key",
    "is_usable_as_unique_key",
    "within_tolerance",
]
