"""Tree subpackage for JSON value classification and path tracking.

Re-exports the public API for the tree module:
- JsonKind: StrEnum of the six JSON value kinds
- classify: maps a parsed JSON value onto its JsonKind
- JsonPath: immutable path cursor used for findings and config-path matching
- ROOT_PATH / EMPTY_PATH: shared cursor constants
"""

from json_structural_diff.tree.kinds import JsonKind, JsonValue, classify
from json_structural_diff.tree.path import EMPTY_PATH, ROOT_PATH, JsonPath

__all__ = ["EMPTY_PATH", "ROOT_PATH", "JsonKind", "JsonPath", "JsonValue", "classify"]
