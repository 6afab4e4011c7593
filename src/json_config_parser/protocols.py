"""Collaborator protocols for json-config-parser extension points.

Custom validators and decoders are plain callables. Nothing has to inherit
from a base class; any conformant callable passes ``isinstance`` checks.

Example::

    from json_config_parser.protocols import ElementValidator

    def is_even(element, value):
        return value % 2 == 0

    assert isinstance(is_even, ElementValidator)  # True, structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_config_parser.elements.nodes import ConfigElement


@runtime_checkable
class ElementValidator(Protocol):
    """Structural protocol for custom validators attached to an element.

    A validator is called as ``validator(element, value)`` only after every
    built-in check for ``value`` passed, and never with null. It must:
    - Return True to accept the value, False to reject it.
    - Not rely on any context besides its two arguments.

    Exceptions raised by a validator are not caught; they reach the caller
    of ``parse()``.
    """

    def __call__(self, element: ConfigElement, value: Any) -> bool: ...


@runtime_checkable
class Decoder(Protocol):
    """Structural protocol for text decoders such as ``json.loads``.

    A decoder turns text into a tree of dict, list, str, int, float, bool and
    None values, and raises its own error type on malformed input. That error
    is never caught by the parser.
    """

    def __call__(self, text: str) -> Any: ...
