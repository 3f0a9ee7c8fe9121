"""Unique-key discovery for arrays of JSON objects.

Order-independent matching of object arrays needs a stable identity per
element.  ``find_unique_key`` looks for a field whose value is a scalar,
present on every element and distinct across the whole array:

1. A key declared in ``CompareConfig.unique_keys`` for this exact array path
   (``$.items.id`` or ``$.items[].id``) wins if it validates.
2. Otherwise keys of the first element are tried, names ending in ``id`` or
   ``key`` (case-insensitive) first, each group in lexicographic order.

When nothing validates the caller falls back to quadratic matching.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from json_structural_diff.tree.kinds import JsonKind, classify

if TYPE_CHECKING:
    from json_structural_diff.algorithm.config import CompareConfig
    from json_structural_diff.tree.path import JsonPath

__all__ = ["find_unique_key", "identity", "is_usable_as_unique_key"]

logger = logging.getLogger(__name__)

_LIKELY_KEY = re.compile(r"^.*(id|key)$", re.IGNORECASE)


def identity(value: Any) -> tuple[JsonKind, Any]:
    """Hashable identity of a scalar that keeps ``True`` and ``1`` apart.

    ``1`` and ``1.0`` share an identity, matching numeric equality.
    """
    return classify(value), value


def is_usable_as_unique_key(candidate: str, array: list[Any]) -> bool:
    """True iff ``candidate`` identifies every element of ``array``.

    Requires: every element is an object, holds ``candidate``, its value
    there is a scalar, and no two elements share that value.
    """
    seen: set[tuple[JsonKind, Any]] = set()
    for item in array:
        if classify(item) is not JsonKind.OBJECT or candidate not in item:
            return False
        value = item[candidate]
        if classify(value).is_composite:
            return False
        key = identity(value)
        if key in seen:
            return False
        seen.add(key)
    return True


def _configured_key(keys: list[str], path: JsonPath, config: CompareConfig) -> str | None:
    if not config.unique_keys:
        return None
    for key in keys:
        declared = (
            path.append(key).render(),
            path.append_array_wildcard().append(key).render(),
        )
        if any(d in config.unique_keys for d in declared):
            return key
    return None


def find_unique_key(array: list[Any], path: JsonPath, config: CompareConfig) -> str | None:
    """Return a field usable as per-element identity in ``array``, or None.

    Args:
        array:  Expected array (non-empty).
        path:   Path of the array itself.
        config: Active configuration (for declared unique keys).
    """
    if not array or classify(array[0]) is not JsonKind.OBJECT:
        return None
    keys = sorted(array[0])

    configured = _configured_key(keys, path, config)
    if configured is not None and is_usable_as_unique_key(configured, array):
        logger.debug("using configured unique key %r at %s", configured, path)
        return configured

    likely = [k for k in keys if _LIKELY_KEY.match(k)]
    others = [k for k in keys if not _LIKELY_KEY.match(k)]
    for candidate in likely + others:
        if is_usable_as_unique_key(candidate, array):
            logger.debug("inferred unique key %r at %s", candidate, path)
            return candidate

    logger.debug("no usable unique key at %s", path)
    return None
