"""pytest plugin for json-structural-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_structural_diff import CompareConfig, CompareMode
from json_structural_diff.api import assert_json_equals as check_json_equals


@pytest.fixture(scope="session")
def assert_json_equals() -> Any:
    """Fixture that returns a callable JSON structural asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh JSONComparator per call).

    Usage in tests::

        def test_response(assert_json_equals):
            assert_json_equals({"id": 1}, response.json(), config=CompareMode.LENIENT)

        def test_extra_field(assert_json_equals):
            with pytest.raises(AssertionError, match=r"Unexpected: "):
                assert_json_equals({"a": 1}, {"a": 1, "b": 2})

    Returns:
        A callable ``_assert(expected, actual, config=None) -> None`` that
        raises ``AssertionError`` when the comparison records any finding.
    """

    def _assert(
        expected: Any,
        actual: Any,
        config: CompareConfig | CompareMode | str | None = None,
    ) -> None:
        """Assert that two JSON documents are structurally equivalent.

        Args:
            expected: The expected/reference JSON value, or JSON text.
            actual:   The actual JSON value produced by the code under test,
                      or JSON text.  Text is only parsed when both sides are
                      ``str``.
            config:   Optional CompareConfig or CompareMode (default STRICT).

        Raises:
            AssertionError: With the number of findings and the consolidated
                diagnostic message.
        """
        check_json_equals(expected, actual, config=config)

    return _assert
