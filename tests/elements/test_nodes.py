"""Tests for the element dataclasses and the ElementType/ArrayMode StrEnums.

Covers:
- ElementType / ArrayMode members and string values
- structural_tag dispatch order (bool before number, sequence before mapping)
- is_correct_type for every variant, including bool-vs-number and list-vs-object
- Defaults of the shared attributes
- Immutability (FrozenInstanceError, read-only children and slots)
- Construction invariants raising InvalidConfigurationElementError
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import FrozenInstanceError
from typing import Any

import pytest

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
    tag_name,
)
from json_config_parser.errors import InvalidConfigurationElementError


class _ListMapping(list[Any]):
    """A list that also claims to be a mapping."""


Mapping.register(_ListMapping)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TestElementType:
    def test_has_exactly_five_members(self) -> None:
        assert len(list(ElementType)) == 5

    def test_values(self) -> None:
        assert {str(t) for t in ElementType} == {
            "object",
            "array",
            "string",
            "number",
            "boolean",
        }

    def test_is_str_subclass(self) -> None:
        assert isinstance(ElementType.NUMBER, str)
        assert ElementType.NUMBER == "number"

    def test_primitive_flags(self) -> None:
        assert ElementType.STRING.is_primitive
        assert ElementType.NUMBER.is_primitive
        assert ElementType.BOOLEAN.is_primitive
        assert not ElementType.OBJECT.is_primitive
        assert not ElementType.ARRAY.is_primitive


class TestArrayMode:
    def test_has_exactly_three_members(self) -> None:
        assert {m.name for m in ArrayMode} == {"ANY", "TYPED", "ORDERED"}

    def test_values(self) -> None:
        assert ArrayMode.ANY == "any"
        assert ArrayMode.TYPED == "typed"
        assert ArrayMode.ORDERED == "ordered"


# ---------------------------------------------------------------------------
# structural_tag
# ---------------------------------------------------------------------------


class TestStructuralTag:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("text", ElementType.STRING),
            ("", ElementType.STRING),
            (0, ElementType.NUMBER),
            (3.5, ElementType.NUMBER),
            (True, ElementType.BOOLEAN),
            (False, ElementType.BOOLEAN),
            ([], ElementType.ARRAY),
            ({}, ElementType.OBJECT),
        ],
    )
    def test_tags(self, value: Any, expected: ElementType) -> None:
        assert structural_tag(value) is expected

    def test_null_has_no_tag(self) -> None:
        assert structural_tag(None) is None

    def test_sequence_mapping_is_tagged_array(self) -> None:
        assert structural_tag(_ListMapping([1, 2])) is ElementType.ARRAY

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            structural_tag(object())

    def test_tag_name_never_raises(self) -> None:
        assert tag_name(None) == "null"
        assert tag_name([1]) == "array"
        assert tag_name(object()) == "object"
        assert tag_name(b"raw") == "bytes"


# ---------------------------------------------------------------------------
# is_correct_type
# ---------------------------------------------------------------------------


class TestIsCorrectType:
    def test_object_accepts_dict(self) -> None:
        assert ObjectElement().is_correct_type({"a": 1})

    def test_object_rejects_list(self) -> None:
        assert not ObjectElement().is_correct_type([1, 2])

    def test_object_rejects_sequence_mapping(self) -> None:
        assert not ObjectElement().is_correct_type(_ListMapping([1]))

    def test_object_rejects_null_and_primitives(self) -> None:
        element = ObjectElement()
        for value in (None, "x", 1, True):
            assert not element.is_correct_type(value)

    def test_array_accepts_list(self) -> None:
        assert ArrayElement().is_correct_type([])

    def test_array_accepts_sequence_mapping(self) -> None:
        assert ArrayElement().is_correct_type(_ListMapping([1]))

    def test_array_rejects_object_and_string(self) -> None:
        element = ArrayElement()
        assert not element.is_correct_type({})
        assert not element.is_correct_type("abc")
        assert not element.is_correct_type(None)

    def test_string(self) -> None:
        element = StringElement()
        assert element.is_correct_type("abc")
        assert not element.is_correct_type(1)
        assert not element.is_correct_type(None)

    def test_number_accepts_int_and_float(self) -> None:
        element = NumberElement()
        assert element.is_correct_type(1)
        assert element.is_correct_type(1.5)

    def test_number_rejects_bool_and_numeric_string(self) -> None:
        element = NumberElement()
        assert not element.is_correct_type(True)
        assert not element.is_correct_type("1")

    def test_boolean_rejects_truthy_values(self) -> None:
        element = BooleanElement()
        assert element.is_correct_type(False)
        assert not element.is_correct_type(0)
        assert not element.is_correct_type("true")


# ---------------------------------------------------------------------------
# Shared attributes
# ---------------------------------------------------------------------------


class TestSharedDefaults:
    @pytest.mark.parametrize(
        "element_class",
        [ObjectElement, ArrayElement, StringElement, NumberElement, BooleanElement],
    )
    def test_defaults(self, element_class: type[ConfigElement]) -> None:
        element = element_class()
        assert element.name is None
        assert element.required is True
        assert element.nullable is False
        assert element.validators == ()

    def test_element_type_class_attribute(self) -> None:
        assert ObjectElement.element_type is ElementType.OBJECT
        assert ArrayElement().element_type is ElementType.ARRAY
        assert StringElement().element_type is ElementType.STRING
        assert NumberElement().element_type is ElementType.NUMBER
        assert BooleanElement().element_type is ElementType.BOOLEAN

    def test_base_class_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            ConfigElement()  # type: ignore[abstract]

    def test_validators_stored_as_tuple(self) -> None:
        def accept(element: ConfigElement, value: Any) -> bool:
            return True

        element = StringElement(validators=[accept])  # type: ignore[arg-type]
        assert element.validators == (accept,)

    def test_default_value_is_stored(self) -> None:
        assert StringElement(default_value="x").default_value == "x"
        assert NumberElement(default_value=0).default_value == 0
        assert BooleanElement(default_value=False).default_value is False


class TestImmutability:
    def test_assignment_raises(self) -> None:
        element = NumberElement(name="x")
        with pytest.raises(FrozenInstanceError):
            element.name = "y"  # type: ignore[misc]

    def test_children_are_read_only(self) -> None:
        element = ObjectElement(children={"x": NumberElement(name="x")})
        with pytest.raises(TypeError):
            element.children["y"] = StringElement()  # type: ignore[index]

    def test_children_copied_from_caller(self) -> None:
        children: dict[str, ConfigElement] = {"x": NumberElement(name="x")}
        element = ObjectElement(children=children)
        children["y"] = StringElement(name="y")
        assert element.child_names == ("x",)

    def test_array_slots_are_read_only(self) -> None:
        element = ArrayElement(element_types={ElementType.STRING: StringElement()})
        with pytest.raises(TypeError):
            element.element_types[ElementType.NUMBER] = NumberElement()  # type: ignore[index]

    def test_ordered_elements_stored_as_tuple(self) -> None:
        element = ArrayElement(ordered_elements=[StringElement()])  # type: ignore[arg-type]
        assert isinstance(element.ordered_elements, tuple)


# ---------------------------------------------------------------------------
# ObjectElement
# ---------------------------------------------------------------------------


class TestObjectElement:
    @pytest.fixture
    def element(self) -> ObjectElement:
        return ObjectElement(
            children={
                "a": NumberElement(name="a"),
                "b": StringElement(name="b", required=False),
                "c": BooleanElement(name="c"),
            }
        )

    def test_child_names_keep_order(self, element: ObjectElement) -> None:
        assert element.child_names == ("a", "b", "c")

    def test_required_children(self, element: ObjectElement) -> None:
        assert element.required_children == ("a", "c")

    def test_get_child(self, element: ObjectElement) -> None:
        child = element.get_child("b")
        assert isinstance(child, StringElement)
        assert element.get_child("missing") is None

    def test_unnamed_child_under_key_is_allowed(self) -> None:
        element = ObjectElement(children={"x": NumberElement()})
        assert element.child_names == ("x",)

    def test_name_key_mismatch_raises(self) -> None:
        with pytest.raises(InvalidConfigurationElementError):
            ObjectElement(children={"x": NumberElement(name="y")})


# ---------------------------------------------------------------------------
# ArrayElement
# ---------------------------------------------------------------------------


class TestArrayElement:
    def test_empty_array_allows_any_element(self) -> None:
        element = ArrayElement()
        assert element.mode is ArrayMode.ANY
        assert element.allows_any_element

    def test_typed_mode(self) -> None:
        element = ArrayElement(element_types={ElementType.STRING: StringElement()})
        assert element.mode is ArrayMode.TYPED
        assert not element.allows_any_element

    def test_ordered_mode(self) -> None:
        element = ArrayElement(ordered_elements=(StringElement(), NumberElement()))
        assert element.mode is ArrayMode.ORDERED
        assert not element.allows_any_element

    def test_string_keys_are_converted(self) -> None:
        element = ArrayElement(element_types={"number": NumberElement()})  # type: ignore[dict-item]
        assert element.is_valid_element_type("number")
        assert element.is_valid_element_type(ElementType.NUMBER)

    def test_get_element_config(self) -> None:
        slot = StringElement(min_length=2)
        element = ArrayElement(element_types={ElementType.STRING: slot})
        assert element.get_element_config("string") is slot
        assert element.get_element_config("number") is None
        assert element.get_element_config("not-a-tag") is None
        assert not element.is_valid_element_type("not-a-tag")

    def test_allow_null_elements_default(self) -> None:
        assert ArrayElement().allow_null_elements is False
        assert ArrayElement(allow_null_elements=True).allow_null_elements is True

    def test_both_modes_raise(self) -> None:
        with pytest.raises(InvalidConfigurationElementError):
            ArrayElement(
                element_types={ElementType.STRING: StringElement()},
                ordered_elements=(StringElement(),),
            )

    def test_slot_variant_mismatch_raises(self) -> None:
        with pytest.raises(InvalidConfigurationElementError):
            ArrayElement(element_types={ElementType.NUMBER: StringElement()})

    def test_unknown_slot_key_raises(self) -> None:
        with pytest.raises(ValueError):
            ArrayElement(element_types={"null": StringElement()})  # type: ignore[dict-item]


class TestStringAndNumberElements:
    def test_string_bounds_default_unset(self) -> None:
        element = StringElement()
        assert element.min_length is None
        assert element.max_length is None
        assert element.valid_values == ()

    def test_valid_values_stored_as_tuple(self) -> None:
        element = StringElement(valid_values=["a", "b"])  # type: ignore[arg-type]
        assert element.valid_values == ("a", "b")

    def test_number_bounds(self) -> None:
        element = NumberElement(min_value=0, max_value=10)
        assert element.min_value == 0
        assert element.max_value == 10

    def test_equal_elements_compare_equal(self) -> None:
        assert NumberElement(name="x", min_value=1) == NumberElement(
            name="x", min_value=1
        )
