"""JsonPath: immutable cursor tracking the location of the node being compared.

Every comparison step appends to a cursor and hands the *new* cursor to the
recursive call.  Sibling calls therefore never observe each other's appends,
and a finding can keep either the cursor or its rendered string safely.

Rendered paths are JsonPath-like::

    $                      root
    $.user.name            dotted object keys
    $.items[0]             array index
    $.items[]              array wildcard (used for configured unique keys)
    $.items[?(@.id==1)]    unique-key predicate
    $.payload.$.field      descent into a JSON document carried as a string
    $.price: <message>     synthetic suffix (matcher failures)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["EMBEDDED_JSON_MARKER", "EMPTY_PATH", "ROOT_PATH", "JsonPath"]

# Separator appended before descending into a string that holds JSON.  It
# cannot be produced by a plain ``append`` of an ordinary key.
EMBEDDED_JSON_MARKER = ".$"


def _format_predicate_value(value: Any) -> str:
    # bool MUST be checked before int/float: bool subclasses int in Python
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


@dataclass(frozen=True, slots=True)
class JsonPath:
    """Immutable, append-only path cursor.

    Attributes:
        prefix:  Rendered before ``current``; empty for ordinary paths.
        current: The growing segment built by ``append*`` calls.
        suffix:  Rendered after ``current``; used for synthetic sub-paths.

    Example::

        path = ROOT_PATH.append("items").append_array_index(0).append("id")
        str(path)   # "$.items[0].id"
    """

    prefix: str = ""
    current: str = ""
    suffix: str = ""

    @classmethod
    def of(cls, path: str) -> JsonPath:
        """Return a cursor whose current segment is ``path``."""
        return cls(current=path)

    # ------------------------------------------------------------------
    # Appends (each returns a new cursor)
    # ------------------------------------------------------------------

    def append(self, key: str) -> JsonPath:
        """Append an object key: ``.key``, or bare ``key`` on an empty cursor."""
        if not self.current:
            return self._with_current(key)
        return self._with_current(f"{self.current}.{key}")

    def append_array_index(self, index: int) -> JsonPath:
        return self._with_current(f"{self.current}[{index}]")

    def append_array_wildcard(self) -> JsonPath:
        return self._with_current(f"{self.current}[]")

    def append_embedded_json_marker(self) -> JsonPath:
        return self._with_current(f"{self.current}{EMBEDDED_JSON_MARKER}")

    def append_unique_key(self, key: str, value: Any) -> JsonPath:
        """Append a JsonPath filter predicate identifying one array element.

        Numbers render bare (``[?(@.id==1)]``), strings quoted
        (``[?(@.name=='x')]``, backslash and quote escaped as ``\\\\`` and
        ``\\'``), booleans and null as JSON literals.
        """
        predicate = f"[?(@.{key}=={_format_predicate_value(value)})]"
        return self._with_current(f"{self.current}{predicate}")

    def with_suffix(self, suffix: str) -> JsonPath:
        return JsonPath(prefix=self.prefix, current=self.current, suffix=suffix)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Return ``prefix + current + suffix``."""
        return f"{self.prefix}{self.current}{self.suffix}"

    def __str__(self) -> str:
        return self.render()

    def _with_current(self, current: str) -> JsonPath:
        return JsonPath(prefix=self.prefix, current=current, suffix=self.suffix)


# Module-level constants, created once and never mutated.
EMPTY_PATH = JsonPath()
ROOT_PATH = JsonPath.of("$")
