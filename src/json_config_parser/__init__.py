"""JSON config parser - schema-driven validation of decoded JSON documents."""

from __future__ import annotations

from json_config_parser.api import check, is_valid, parse, validate
from json_config_parser.elements import (
    ArrayElement,
    ArrayMode,
    BooleanElement,
    ConfigElement,
    ConfigElementBuilder,
    ElementType,
    NumberElement,
    ObjectElement,
    StringElement,
)
from json_config_parser.errors import (
    BuilderArrayElementTypeMismatchError,
    BuilderElementTypeAlreadyDeterminedError,
    BuilderElementTypeNotPrimitiveError,
    BuilderElementTypeUndeterminedError,
    BuilderMissingPrecedingTypeCallError,
    ConfigElementBuilderError,
    ConfigParseFailureError,
    ConfigParserError,
    ConfigValidationError,
    InvalidArrayContentsError,
    InvalidArrayElementTypeError,
    InvalidConfigurationElementError,
    InvalidRootTypeError,
    InvalidTypeError,
    InvalidValueError,
    MissingRequiredFieldError,
    NullArrayElementError,
    NullValueError,
)
from json_config_parser.parser import ConfigParser
from json_config_parser.protocols import Decoder, ElementValidator
from json_config_parser.result import ValidationResult
from json_config_parser.validation import ParserOptions

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayElement",
    "ArrayMode",
    "BooleanElement",
    "BuilderArrayElementTypeMismatchError",
    "BuilderElementTypeAlreadyDeterminedError",
    "BuilderElementTypeNotPrimitiveError",
    "BuilderElementTypeUndeterminedError",
    "BuilderMissingPrecedingTypeCallError",
    "ConfigElement",
    "ConfigElementBuilder",
    "ConfigElementBuilderError",
    "ConfigParseFailureError",
    "ConfigParser",
    "ConfigParserError",
    "ConfigValidationError",
    "Decoder",
    "ElementType",
    "ElementValidator",
    "InvalidArrayContentsError",
    "InvalidArrayElementTypeError",
    "InvalidConfigurationElementError",
    "InvalidRootTypeError",
    "InvalidTypeError",
    "InvalidValueError",
    "MissingRequiredFieldError",
    "NullArrayElementError",
    "NullValueError",
    "NumberElement",
    "ObjectElement",
    "ParserOptions",
    "StringElement",
    "ValidationResult",
    "check",
    "is_valid",
    "parse",
    "validate",
]
