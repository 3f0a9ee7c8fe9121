"""JSON text parsing for the text entry point.

Parsing is delegated to the standard ``json`` module.  A document that fails
to parse is replaced by a small sentinel object naming the failing side, so a
malformed document surfaces as a content diff instead of an exception.
"""

from __future__ import annotations

import json
import logging
from typing import Any

__all__ = ["parse_or_sentinel", "unparseable_sentinel"]

logger = logging.getLogger(__name__)


def unparseable_sentinel(side: str) -> dict[str, str]:
    """Return the stand-in document for a side that could not be parsed."""
    return {"message": f"{side} could not be parsed"}


def parse_or_sentinel(text: str, side: str) -> Any:
    """Parse ``text``; on failure return ``unparseable_sentinel(side)``.

    Args:
        text: Raw JSON text.
        side: ``"expected"`` or ``"actual"``, used in the sentinel message.
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError) as exc:
        logger.debug("%s document could not be parsed: %s", side, exc)
        return unparseable_sentinel(side)
