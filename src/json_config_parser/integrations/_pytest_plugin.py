"""pytest plugin for json-config-parser.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from json_config_parser import ConfigParser, ParserOptions

if TYPE_CHECKING:
    from json_config_parser import ConfigElement


@pytest.fixture(scope="session")
def assert_valid_config() -> Any:
    """Fixture that returns a callable configuration asserter.

    The fixture is session-scoped because the returned callable is stateless
    (it builds a fresh ConfigParser per call).

    Usage in tests::

        def test_settings(assert_valid_config):
            assert_valid_config({"port": 8080}, settings_schema)

        def test_bad_settings(assert_valid_config):
            with pytest.raises(AssertionError, match=r"/port"):
                assert_valid_config({"port": "8080"}, settings_schema)

    Returns:
        A callable ``_assert(data, root, options=None) -> Any`` that returns the
        validated tree, or raises ``AssertionError`` listing every error.
    """

    def _assert(
        data: Any,
        root: ConfigElement,
        options: ParserOptions | None = None,
    ) -> Any:
        """Assert that a decoded document validates against ``root``.

        Args:
            data:    The decoded document produced by the code under test.
            root:    Root element describing the expected shape.
            options: Optional ParserOptions. ``stop_on_first_error`` is honoured
                     but the first error is still reported as AssertionError.

        Raises:
            AssertionError: When validation fails, with one line per error
                holding its JSON Pointer path, class and message.
        """
        result = ConfigParser(root, options=options).check(data)
        if not result.valid:
            lines = "\n".join(
                f"  {error.path or '<root>'}: {type(error).__name__}: {error.args[0]}"
                for error in result.errors
            )
            raise AssertionError(
                f"Configuration not valid: {len(result.errors)} error(s)\n"
                f"  data: {data}\n"
                f"{lines}"
            )
        return result.value

    return _assert
