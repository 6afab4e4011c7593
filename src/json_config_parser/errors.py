"""Exception hierarchy for json-config-parser.

Three families of errors share the ``ConfigParserError`` root:

- Validation errors (``ConfigValidationError`` and subclasses) describe a
  problem in the *data*. They are collected during a validation run, or raised
  immediately when ``ParserOptions.stop_on_first_error`` is set. Each one
  carries the JSON Pointer ``path`` of the offending value.
- ``ConfigParseFailureError`` is the wrapper raised at the end of a run that
  collected one or more validation errors.
- Construction errors (``InvalidConfigurationElementError`` and the
  ``ConfigElementBuilderError`` family) describe a problem in the *schema*.
  They are programming errors and are always raised immediately.

Decoder errors (``json.JSONDecodeError``) are not part of this hierarchy and
are never wrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "BuilderArrayElementTypeMismatchError",
    "BuilderElementTypeAlreadyDeterminedError",
    "BuilderElementTypeNotPrimitiveError",
    "BuilderElementTypeUndeterminedError",
    "BuilderMissingPrecedingTypeCallError",
    "ConfigElementBuilderError",
    "ConfigParseFailureError",
    "ConfigParserError",
    "ConfigValidationError",
    "InvalidArrayContentsError",
    "InvalidArrayElementTypeError",
    "InvalidConfigurationElementError",
    "InvalidRootTypeError",
    "InvalidTypeError",
    "InvalidValueError",
    "MissingRequiredFieldError",
    "NullArrayElementError",
    "NullValueError",
]


class ConfigParserError(Exception):
    """Base class for every error raised by json-config-parser."""


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class ConfigValidationError(ConfigParserError):
    """A value in the decoded tree does not match its element.

    Attributes:
        path: JSON Pointer (RFC 6901) of the offending value. ``""`` is the
              document root.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        return f"{message} (at {self.path or '<root>'})"


class InvalidRootTypeError(ConfigValidationError):
    """The decoded root is not the container the root element expects."""


class InvalidTypeError(ConfigValidationError):
    """A value's structural tag differs from its element's type."""

    def __init__(self, actual: str, expected: str, path: str = "") -> None:
        super().__init__(f"Invalid type {actual}, expected type {expected}", path)
        self.actual = actual
        self.expected = expected


class InvalidValueError(ConfigValidationError):
    """A value has the right type but is out of range, not allowed, or rejected."""


class NullValueError(InvalidValueError):
    """An explicit null was found where the element is not nullable."""

    def __init__(self, field: str | None, path: str = "") -> None:
        name = field if field is not None else "<unnamed>"
        super().__init__(f"Field {name} is null, null fields not allowed", path)
        self.field = field


class MissingRequiredFieldError(ConfigValidationError):
    """A required child of an object element is absent."""

    def __init__(self, field: str, path: str = "") -> None:
        super().__init__(f"Missing required field {field}", path)
        self.field = field


class InvalidArrayContentsError(ConfigValidationError):
    """An array's contents do not fit the element's array shape."""


class NullArrayElementError(InvalidArrayContentsError):
    """A null array entry was found where null entries are not allowed."""

    def __init__(self, path: str = "") -> None:
        super().__init__("Null array elements not allowed", path)


class InvalidArrayElementTypeError(ConfigValidationError):
    """An array entry's tag has no slot in a typed-set array element."""

    def __init__(self, actual: str, path: str = "") -> None:
        super().__init__(f"Invalid array element type {actual}", path)
        self.actual = actual


class ConfigParseFailureError(ConfigParserError):
    """Raised after a run that collected at least one validation error.

    Attributes:
        errors: Every error collected during the run, in traversal order.
    """

    def __init__(self, errors: Sequence[ConfigValidationError]) -> None:
        self.errors: list[ConfigValidationError] = list(errors)
        super().__init__(
            f"Failed to parse configuration: {len(self.errors)} error(s)"
        )


# ---------------------------------------------------------------------------
# Construction errors
# ---------------------------------------------------------------------------


class InvalidConfigurationElementError(ConfigParserError):
    """An element was assembled with contradicting settings."""


class ConfigElementBuilderError(ConfigParserError):
    """Base class for misuse of ``ConfigElementBuilder``."""


class BuilderMissingPrecedingTypeCallError(ConfigElementBuilderError):
    """A kind-specific builder method was called without its ``of_type_*`` call."""

    def __init__(self, of_type_method: str, actual_method: str) -> None:
        super().__init__(
            f"Call to {of_type_method}() needs to precede {actual_method}()"
        )
        self.of_type_method = of_type_method
        self.actual_method = actual_method


class BuilderElementTypeUndeterminedError(ConfigElementBuilderError):
    def __init__(self) -> None:
        super().__init__("Element type undetermined")


class BuilderElementTypeAlreadyDeterminedError(ConfigElementBuilderError):
    def __init__(self) -> None:
        super().__init__("Element type already determined")


class BuilderElementTypeNotPrimitiveError(ConfigElementBuilderError):
    def __init__(self) -> None:
        super().__init__("Element type not primitive")


class BuilderArrayElementTypeMismatchError(ConfigElementBuilderError):
    """The element supplied for a typed-set slot is of another variant."""

    def __init__(self, expected: str) -> None:
        super().__init__(f"Array element configuration must be a {expected}")
        self.expected = expected
