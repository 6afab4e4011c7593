"""Element dataclasses and the ElementType/ArrayMode StrEnums.

An element describes what a valid value looks like at one position of a
decoded JSON tree. There are exactly five variants, one per ``ElementType``:

- ObjectElement  -> "object"  : a mapping of named child elements
- ArrayElement   -> "array"   : any / typed-set / ordered-tuple contents
- StringElement  -> "string"  : length bounds and an optional enumeration
- NumberElement  -> "number"  : inclusive value bounds
- BooleanElement -> "boolean" : no extra constraints

Elements are frozen dataclasses. Container fields are copied into read-only
views at construction, so an element attached to a parent can no longer be
changed through a reference the caller kept.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from json_config_parser.errors import InvalidConfigurationElementError

if TYPE_CHECKING:
    from json_config_parser.protocols import ElementValidator

__all__ = [
    "ArrayElement",
    "ArrayMode",
    "BooleanElement",
    "ConfigElement",
    "ElementType",
    "NumberElement",
    "ObjectElement",
    "PrimitiveValue",
    "StringElement",
    "structural_tag",
    "tag_name",
]

PrimitiveValue = str | int | float | bool


class ElementType(StrEnum):
    """The five element variants, doubling as structural tags of decoded values.

    - OBJECT  -> "object"  : JSON object {}
    - ARRAY   -> "array"   : JSON array []
    - STRING  -> "string"
    - NUMBER  -> "number"  : int or float, never bool
    - BOOLEAN -> "boolean"
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()

    @property
    def is_primitive(self) -> bool:
        return self in (ElementType.STRING, ElementType.NUMBER, ElementType.BOOLEAN)


class ArrayMode(StrEnum):
    """How an ArrayElement constrains the entries of an array.

    - ANY:     No per-entry checks besides the null policy.
    - TYPED:   Each entry's tag must have a slot; the slot element validates it.
    - ORDERED: Exact length match, position i validated by ordered element i.
    """

    ANY = auto()
    TYPED = auto()
    ORDERED = auto()


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def structural_tag(value: Any) -> ElementType | None:
    """Return the structural tag of a decoded value, or None for null.

    The order of the checks matters: bool before number (bool subclasses int),
    and sequence before mapping so that a value which is both is tagged
    "array", never "object".

    Raises:
        TypeError: If the value is of a type no JSON decoder produces.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return ElementType.BOOLEAN
    if isinstance(value, str):
        return ElementType.STRING
    if isinstance(value, (int, float)):
        return ElementType.NUMBER
    if _is_sequence(value):
        return ElementType.ARRAY
    if isinstance(value, Mapping):
        return ElementType.OBJECT
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def tag_name(value: Any) -> str:
    """Like ``structural_tag`` but always returns a printable name."""
    try:
        tag = structural_tag(value)
    except TypeError:
        return type(value).__name__
    return "null" if tag is None else str(tag)


@dataclass(frozen=True, slots=True, kw_only=True)
class ConfigElement(ABC):
    """Attributes shared by every element variant.

    Attributes:
        name:       Key of this element inside its parent object. None for a
                    root element or an array entry element.
        required:   Absence from the parent object is an error when True.
        nullable:   An explicit null is accepted in place of a value when True.
        validators: Custom validators, called in order once all built-in
                    checks for the value passed.
    """

    element_type: ClassVar[ElementType]

    name: str | None = None
    required: bool = True
    nullable: bool = False
    validators: tuple[ElementValidator, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "validators", tuple(self.validators))

    @abstractmethod
    def is_correct_type(self, value: Any) -> bool:
        """Return True if the value has the structural kind of this element."""


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectElement(ConfigElement):
    """An object with named children.

    ``children`` maps field name to child element. Insertion order is kept so
    that diagnostics come out in declaration order.
    """

    element_type: ClassVar[ElementType] = ElementType.OBJECT

    children: Mapping[str, ConfigElement] = field(default_factory=dict)

    def __post_init__(self) -> None:
        ConfigElement.__post_init__(self)
        for key, child in self.children.items():
            if child.name is not None and child.name != key:
                raise InvalidConfigurationElementError(
                    f"Child element {child.name!r} registered under key {key!r}"
                )
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    @property
    def child_names(self) -> tuple[str, ...]:
        return tuple(self.children)

    @property
    def required_children(self) -> tuple[str, ...]:
        return tuple(name for name, child in self.children.items() if child.required)

    def get_child(self, name: str) -> ConfigElement | None:
        return self.children.get(name)

    def is_correct_type(self, value: Any) -> bool:
        # Sequences are excluded explicitly: a decoder may hand back values
        # that are both a mapping and a sequence.
        return isinstance(value, Mapping) and not _is_sequence(value)


@dataclass(frozen=True, slots=True, kw_only=True)
class ArrayElement(ConfigElement):
    """An array, in exactly one of the three ``ArrayMode`` shapes.

    Attributes:
        element_types:       Typed-set slots, keyed by the tag they accept.
        ordered_elements:    Per-position elements of an ordered tuple.
        allow_null_elements: Accept null entries (any and typed modes, and
                             per position in ordered mode).

    Populating both ``element_types`` and ``ordered_elements`` is an
    ``InvalidConfigurationElementError``; leaving both empty means ANY.
    """

    element_type: ClassVar[ElementType] = ElementType.ARRAY

    element_types: Mapping[ElementType, ConfigElement] = field(default_factory=dict)
    ordered_elements: tuple[ConfigElement, ...] = ()
    allow_null_elements: bool = False

    def __post_init__(self) -> None:
        ConfigElement.__post_init__(self)
        slots: dict[ElementType, ConfigElement] = {}
        for key, element in self.element_types.items():
            tag = ElementType(key)
            if element.element_type is not tag:
                raise InvalidConfigurationElementError(
                    f"Array slot {tag} cannot be validated by a "
                    f"{type(element).__name__}"
                )
            slots[tag] = element
        ordered = tuple(self.ordered_elements)
        if slots and ordered:
            raise InvalidConfigurationElementError(
                "ArrayElement cannot combine allowed element types with "
                "ordered elements"
            )
        object.__setattr__(self, "element_types", MappingProxyType(slots))
        object.__setattr__(self, "ordered_elements", ordered)

    @property
    def mode(self) -> ArrayMode:
        if self.ordered_elements:
            return ArrayMode.ORDERED
        if self.element_types:
            return ArrayMode.TYPED
        return ArrayMode.ANY

    @property
    def allows_any_element(self) -> bool:
        return self.mode is ArrayMode.ANY

    def is_valid_element_type(self, tag: str) -> bool:
        return self.get_element_config(tag) is not None

    def get_element_config(self, tag: str) -> ConfigElement | None:
        try:
            return self.element_types.get(ElementType(tag))
        except ValueError:
            return None

    def is_correct_type(self, value: Any) -> bool:
        # A value that is also a mapping still counts as an array.
        return _is_sequence(value)


@dataclass(frozen=True, slots=True, kw_only=True)
class StringElement(ConfigElement):
    """A string with optional inclusive length bounds and an enumeration.

    When ``valid_values`` is non-empty the value must be one of them and the
    length bounds are not checked. ``default_value`` is informational only;
    the validator never substitutes it.
    """

    element_type: ClassVar[ElementType] = ElementType.STRING

    min_length: int | None = None
    max_length: int | None = None
    valid_values: tuple[str, ...] = ()
    default_value: PrimitiveValue | None = None

    def __post_init__(self) -> None:
        ConfigElement.__post_init__(self)
        object.__setattr__(self, "valid_values", tuple(self.valid_values))

    def is_correct_type(self, value: Any) -> bool:
        return isinstance(value, str)


@dataclass(frozen=True, slots=True, kw_only=True)
class NumberElement(ConfigElement):
    """An int or float with optional inclusive bounds (bool is not a number)."""

    element_type: ClassVar[ElementType] = ElementType.NUMBER

    min_value: int | float | None = None
    max_value: int | float | None = None
    default_value: PrimitiveValue | None = None

    def is_correct_type(self, value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True, kw_only=True)
class BooleanElement(ConfigElement):
    element_type: ClassVar[ElementType] = ElementType.BOOLEAN

    default_value: PrimitiveValue | None = None

    def is_correct_type(self, value: Any) -> bool:
        return isinstance(value, bool)
