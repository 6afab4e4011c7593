"""Public API functions for json-config-parser.

This module provides the four user-facing functions: parse, validate, check
and is_valid. Each call creates a fresh ConfigParser to guarantee zero global
state mutation between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from json_config_parser.parser import ConfigParser

if TYPE_CHECKING:
    from json_config_parser.elements.nodes import ConfigElement
    from json_config_parser.result import ValidationResult
    from json_config_parser.validation.config import ParserOptions

__all__ = ["check", "is_valid", "parse", "validate"]


def parse(
    text: str,
    root: ConfigElement,
    options: ParserOptions | None = None,
) -> Any:
    """Decode a JSON document and validate it against ``root``.

    Args:
        text:    JSON text.
        root:    Root element (object or array element).
        options: Run options. Defaults to ``ParserOptions()`` when None.

    Returns:
        The decoded, validated and pruned tree.

    Raises:
        json.JSONDecodeError: ``text`` is not valid JSON.
        ConfigParseFailureError: The document does not match ``root``.
    """
    return ConfigParser(root, options=options).parse(text)


def validate(
    data: Any,
    root: ConfigElement,
    options: ParserOptions | None = None,
) -> Any:
    """Validate an already decoded tree against ``root``.

    Pruning, when it happens, is applied to ``data`` in place; the same object
    is returned.
    """
    return ConfigParser(root, options=options).validate(data)


def check(
    data: Any,
    root: ConfigElement,
    options: ParserOptions | None = None,
) -> ValidationResult:
    """Validate a decoded tree and return a ``ValidationResult`` instead of raising."""
    return ConfigParser(root, options=options).check(data)


def is_valid(
    data: Any,
    root: ConfigElement,
    options: ParserOptions | None = None,
) -> bool:
    """Return True if ``data`` matches ``root``.

    Like ``check()``, this may prune ``data`` in place.
    """
    return check(data, root, options=options).valid
