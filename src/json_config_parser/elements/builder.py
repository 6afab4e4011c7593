"""ConfigElementBuilder: fluent construction of element trees.

The first call on a builder must be one of the ``of_type_*`` methods. It puts a
fresh element of that variant into the builder's single
element-under-construction slot. Every later call replaces the slot with an
updated frozen copy (``dataclasses.replace``), after checking that the
current variant supports the call.

Example::

    root = (
        ConfigElementBuilder()
        .of_type_object()
        .with_child_elements(
            ConfigElementBuilder().of_type_number().with_name("x")
            .with_min_value(10).with_max_value(20).build(),
        )
        .build()
    )
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, cast

from json_config_parser.elements.nodes import (
    ArrayElement,
    BooleanElement,
    ConfigElement,
    ElementType,
    NumberElement,
    ObjectElement,
    PrimitiveValue,
    StringElement,
)
from json_config_parser.errors import (
    BuilderArrayElementTypeMismatchError,
    BuilderElementTypeAlreadyDeterminedError,
    BuilderElementTypeNotPrimitiveError,
    BuilderElementTypeUndeterminedError,
    BuilderMissingPrecedingTypeCallError,
    InvalidConfigurationElementError,
)

if TYPE_CHECKING:
    from typing import Self

    from json_config_parser.protocols import ElementValidator

__all__ = ["ConfigElementBuilder"]

_ELEMENT_CLASSES: dict[ElementType, type[ConfigElement]] = {
    ElementType.OBJECT: ObjectElement,
    ElementType.ARRAY: ArrayElement,
    ElementType.STRING: StringElement,
    ElementType.NUMBER: NumberElement,
    ElementType.BOOLEAN: BooleanElement,
}


class ConfigElementBuilder:
    """Builds one ConfigElement with chained calls.

    Methods that apply to a single variant raise
    ``BuilderMissingPrecedingTypeCallError`` unless the matching
    ``of_type_*`` call came first. Methods that apply to every variant raise
    ``BuilderElementTypeUndeterminedError`` when no variant was chosen yet.
    """

    def __init__(self) -> None:
        self._element: ConfigElement | None = None

    # ------------------------------------------------------------------
    # Slot access
    # ------------------------------------------------------------------

    def _current(self) -> ConfigElement:
        if self._element is None:
            raise BuilderElementTypeUndeterminedError()
        return self._element

    def _require(self, element_type: ElementType, method: str) -> ConfigElement:
        if self._element is None or self._element.element_type is not element_type:
            raise BuilderMissingPrecedingTypeCallError(
                f"of_type_{element_type}", method
            )
        return self._element

    def _of_type(self, element_type: ElementType) -> Self:
        if self._element is not None:
            raise BuilderElementTypeAlreadyDeterminedError()
        self._element = _ELEMENT_CLASSES[element_type]()
        return self

    def build(self) -> ConfigElement:
        """Return the element built so far.

        Raises:
            BuilderElementTypeUndeterminedError: No ``of_type_*`` call was made.
        """
        return self._current()

    # ------------------------------------------------------------------
    # Variant selection
    # ------------------------------------------------------------------

    def of_type_object(self) -> Self:
        return self._of_type(ElementType.OBJECT)

    def of_type_array(self) -> Self:
        return self._of_type(ElementType.ARRAY)

    def of_type_string(self) -> Self:
        return self._of_type(ElementType.STRING)

    def of_type_number(self) -> Self:
        return self._of_type(ElementType.NUMBER)

    def of_type_boolean(self) -> Self:
        return self._of_type(ElementType.BOOLEAN)

    # ------------------------------------------------------------------
    # Shared attributes
    # ------------------------------------------------------------------

    def with_name(self, name: str) -> Self:
        self._element = replace(self._current(), name=name)
        return self

    def can_be_null(self) -> Self:
        self._element = replace(self._current(), nullable=True)
        return self

    def is_optional(self) -> Self:
        self._element = replace(self._current(), required=False)
        return self

    def with_validators(self, *validators: ElementValidator) -> Self:
        """Append custom validators; they run in the order they were added."""
        current = self._current()
        self._element = replace(
            current, validators=(*current.validators, *validators)
        )
        return self

    def with_default_value(self, value: PrimitiveValue) -> Self:
        """Store a default value on a string, number or boolean element.

        The value is kept for consumers that read it; validation never
        substitutes it for an absent field.

        Raises:
            BuilderElementTypeNotPrimitiveError: Building an object or array.
        """
        current = self._current()
        if not current.element_type.is_primitive:
            raise BuilderElementTypeNotPrimitiveError()
        self._element = replace(current, default_value=value)
        return self

    # ------------------------------------------------------------------
    # String
    # ------------------------------------------------------------------

    def with_min_length(self, minimum: int) -> Self:
        current = self._require(ElementType.STRING, "with_min_length")
        self._element = replace(current, min_length=minimum)
        return self

    def with_max_length(self, maximum: int) -> Self:
        current = self._require(ElementType.STRING, "with_max_length")
        self._element = replace(current, max_length=maximum)
        return self

    def with_valid_string_values(self, *values: str) -> Self:
        current = cast(
            StringElement,
            self._require(ElementType.STRING, "with_valid_string_values"),
        )
        self._element = replace(current, valid_values=(*current.valid_values, *values))
        return self

    # ------------------------------------------------------------------
    # Number
    # ------------------------------------------------------------------

    def with_min_value(self, minimum: int | float) -> Self:
        current = self._require(ElementType.NUMBER, "with_min_value")
        self._element = replace(current, min_value=minimum)
        return self

    def with_max_value(self, maximum: int | float) -> Self:
        current = self._require(ElementType.NUMBER, "with_max_value")
        self._element = replace(current, max_value=maximum)
        return self

    # ------------------------------------------------------------------
    # Object
    # ------------------------------------------------------------------

    def with_child_elements(self, *children: ConfigElement) -> Self:
        """Add children keyed by their names; a repeated name replaces the child.

        Raises:
            InvalidConfigurationElementError: A child has no name.
        """
        current = cast(
            ObjectElement, self._require(ElementType.OBJECT, "with_child_elements")
        )
        merged = dict(current.children)
        for child in children:
            if child.name is None:
                raise InvalidConfigurationElementError(
                    f"Child {type(child).__name__} of an object needs a name"
                )
            merged[child.name] = child
        self._element = replace(current, children=merged)
        return self

    # ------------------------------------------------------------------
    # Array
    # ------------------------------------------------------------------

    def with_array_element_type(
        self, tag: ElementType | str, element: ConfigElement | None = None
    ) -> Self:
        """Allow array entries tagged ``tag``, validated by ``element``.

        Without ``element`` a bare element of the matching variant is used,
        so only the entry's type is checked. Calling this again for the same
        tag replaces the slot.

        Raises:
            BuilderMissingPrecedingTypeCallError: Not building an array.
            BuilderArrayElementTypeMismatchError: ``element`` is of another variant.
            InvalidConfigurationElementError: Ordered elements are already set.
        """
        tag = ElementType(tag)
        current = cast(
            ArrayElement,
            self._require(ElementType.ARRAY, f"with_{tag}_array_elements"),
        )
        element_class = _ELEMENT_CLASSES[tag]
        if element is None:
            element = element_class()
        elif not isinstance(element, element_class):
            raise BuilderArrayElementTypeMismatchError(element_class.__name__)
        if current.ordered_elements:
            raise InvalidConfigurationElementError(
                "ArrayElement already expects ordered element validation"
            )
        self._element = replace(
            current, element_types={**current.element_types, tag: element}
        )
        return self

    def with_number_array_elements(self, element: ConfigElement | None = None) -> Self:
        return self.with_array_element_type(ElementType.NUMBER, element)

    def with_string_array_elements(self, element: ConfigElement | None = None) -> Self:
        return self.with_array_element_type(ElementType.STRING, element)

    def with_boolean_array_elements(
        self, element: ConfigElement | None = None
    ) -> Self:
        return self.with_array_element_type(ElementType.BOOLEAN, element)

    def with_array_array_elements(self, element: ConfigElement | None = None) -> Self:
        return self.with_array_element_type(ElementType.ARRAY, element)

    def with_object_array_elements(self, element: ConfigElement | None = None) -> Self:
        return self.with_array_element_type(ElementType.OBJECT, element)

    def with_array_element_list(self, *elements: ConfigElement) -> Self:
        """Validate arrays as an ordered tuple of exactly these elements.

        Raises:
            BuilderMissingPrecedingTypeCallError: Not building an array.
            InvalidConfigurationElementError: Allowed element types are already set.
        """
        current = cast(
            ArrayElement, self._require(ElementType.ARRAY, "with_array_element_list")
        )
        if current.element_types:
            raise InvalidConfigurationElementError(
                "ArrayElement already expects allowed element validation"
            )
        self._element = replace(current, ordered_elements=elements)
        return self

    def with_allow_array_null_elements(self) -> Self:
        current = self._require(ElementType.ARRAY, "with_allow_array_null_elements")
        self._element = replace(current, allow_null_elements=True)
        return self
