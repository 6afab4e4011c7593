"""Elements subpackage: the schema model and its builder.

Re-exports the public API for the elements module:
- ConfigElement: abstract base of the five element variants
- ObjectElement, ArrayElement, StringElement, NumberElement, BooleanElement
- ElementType: StrEnum of the five variants / structural tags
- ArrayMode: StrEnum of the three array shapes (any, typed, ordered)
- ConfigElementBuilder: fluent, guarded construction of element trees
"""

from json_config_parser.elements.builder import ConfigElementBuilder
from json_config_parser.elements.nodes import (
    ArrayElement,
    ArrayMode,
    BooleanElement,
    ConfigElement,
    ElementType,
    NumberElement,
    ObjectElement,
    StringElement,
    structural_tag,
)

__all__ = [
    "ArrayElement",
    "ArrayMode",
    "BooleanElement",
    "ConfigElement",
    "ConfigElementBuilder",
    "ElementType",
    "NumberElement",
    "ObjectElement",
    "StringElement",
    "structural_tag",
]
