"""ValidationEngine: recursive validation and pruning of a decoded tree.

One engine run walks the decoded tree depth-first alongside the element tree:

- The root must be an object or array element, and the decoded root must be
  the matching container. Otherwise a single ``InvalidRootTypeError`` is
  recorded and nothing else is inspected.
- Each value is routed by the *element's* ``ElementType`` (not the value's
  runtime type) through one ``match`` in ``_validate_element``. A declared
  string field holding a number is therefore reported by the string check.
- Errors are appended to the run's error list. With ``stop_on_first_error``
  the first one is raised straight away and the traversal ends.

Pruning:
- Unlisted (undeclared) object fields are only recorded during traversal. They
  are removed after the traversal, and only when the run found no error at
  all, so a late error also protects branches that were already validated.
- Meta fields (keys starting with ``meta_field_prefix``) are removed from an
  object once its keys are partitioned, before its children or custom validators
  are checked and regardless of errors. They are never treated as unlisted
  fields.

Paths are JSON Pointers (RFC 6901): "" for the root, "/a/0/b" below it.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping, Sequence
from typing import TYPE_CHECKING, Any, cast

from json_config_parser.elements.nodes import (
    ArrayElement,
    ArrayMode,
    BooleanElement,
    ConfigElement,
    ElementType,
    NumberElement,
    ObjectElement,
    StringElement,
    tag_name,
)
from json_config_parser.errors import (
    ConfigValidationError,
    InvalidArrayContentsError,
    InvalidArrayElementTypeError,
    InvalidRootTypeError,
    InvalidTypeError,
    InvalidValueError,
    MissingRequiredFieldError,
    NullArrayElementError,
    NullValueError,
)
from json_config_parser.validation.config import ParserOptions

if TYPE_CHECKING:
    from json_config_parser.protocols import ElementValidator

__all__ = ["ValidationEngine", "json_pointer"]

logger = logging.getLogger(__name__)


def json_pointer(path: str, token: str | int) -> str:
    """Append one reference token to a JSON Pointer, escaping ``~`` and ``/``."""
    escaped = str(token).replace("~", "~0").replace("/", "~1")
    return f"{path}/{escaped}"


def _validator_name(validator: ElementValidator) -> str:
    return getattr(validator, "__qualname__", None) or type(validator).__name__


class ValidationEngine:
    """Validates decoded trees against one root element.

    The element tree is only read. The engine owns the error list of the
    current run and the fields scheduled for pruning; both are reset by
    ``run()``. Use one engine per thread.

    Example::

        engine = ValidationEngine(root, ParserOptions(prune_unlisted_fields=True))
        errors = engine.run({"x": 15, "y": "extra"})
        # errors == [] and "y" has been removed
    """

    def __init__(
        self, root: ConfigElement, options: ParserOptions | None = None
    ) -> None:
        self._root = root
        self._options: ParserOptions = (
            options if options is not None else ParserOptions()
        )
        self.errors: list[ConfigValidationError] = []
        self._unlisted: list[tuple[MutableMapping[str, Any], list[str]]] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, data: Any) -> list[ConfigValidationError]:
        """Validate ``data`` in place and return the errors found.

        Args:
            data: A decoded tree. Object fields may be removed from it.

        Returns:
            A copy of the run's error list, empty when ``data`` is valid.

        Raises:
            ConfigValidationError: The first error, when ``stop_on_first_error``
                is set.
        """
        self.errors = []
        self._unlisted = []
        logger.debug(
            "Validating %s value against %s root element",
            tag_name(data),
            self._root.element_type,
        )

        self._validate_root(data)

        if not self.errors and self._unlisted:
            self._prune_unlisted()

        logger.debug("Validation finished with %d error(s)", len(self.errors))
        return list(self.errors)

    # ------------------------------------------------------------------
    # Error bookkeeping
    # ------------------------------------------------------------------

    def _add_error(self, error: ConfigValidationError) -> None:
        self.errors.append(error)
        logger.debug("Validation error: %s", error)
        if self._options.stop_on_first_error:
            raise error

    def _accepts_null(self, value: Any, element: ConfigElement, path: str) -> bool:
        """Return True when ``value`` is null, recording an error if not allowed."""
        if value is not None:
            return False
        if not element.nullable:
            self._add_error(NullValueError(element.name, path))
        return True

    def _has_type(self, value: Any, element: ConfigElement, path: str) -> bool:
        if element.is_correct_type(value):
            return True
        self._add_error(
            InvalidTypeError(tag_name(value), str(element.element_type), path)
        )
        return False

    def _run_validators(self, value: Any, element: ConfigElement, path: str) -> None:
        for validator in element.validators:
            if not validator(element, value):
                self._add_error(
                    InvalidValueError(
                        f"Value rejected by custom validator "
                        f"{_validator_name(validator)}",
                        path,
                    )
                )

    def _check_range(
        self,
        measured: int | float,
        minimum: int | float | None,
        maximum: int | float | None,
        label: str,
        path: str,
    ) -> None:
        # Bounds are unset only when None: a bound of 0 is still enforced.
        if maximum is not None and measured > maximum:
            self._add_error(
                InvalidValueError(
                    f"{label} {measured} is greater than maximum {maximum}", path
                )
            )
        if minimum is not None and measured < minimum:
            self._add_error(
                InvalidValueError(
                    f"{label} {measured} is less than minimum {minimum}", path
                )
            )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _validate_root(self, data: Any) -> None:
        root = self._root
        if root.element_type not in (ElementType.OBJECT, ElementType.ARRAY):
            self._add_error(
                InvalidRootTypeError(
                    f"Root element must be an object or array element, "
                    f"got {root.element_type}"
                )
            )
            return
        if not root.is_correct_type(data):
            self._add_error(
                InvalidRootTypeError(
                    f"Root element has incorrect type {tag_name(data)}, "
                    f"expected {root.element_type}"
                )
            )
            return
        self._validate_element(data, root, "")

    def _validate_element(self, value: Any, element: ConfigElement, path: str) -> None:
        match element.element_type:
            case ElementType.OBJECT:
                self._validate_object(value, cast(ObjectElement, element), path)
            case ElementType.ARRAY:
                self._validate_array(value, cast(ArrayElement, element), path)
            case ElementType.STRING:
                self._validate_string(value, cast(StringElement, element), path)
            case ElementType.NUMBER:
                self._validate_number(value, cast(NumberElement, element), path)
            case ElementType.BOOLEAN:
                self._validate_boolean(value, cast(BooleanElement, element), path)
            case unknown:
                raise TypeError(f"Unknown element type {unknown!r}")

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _validate_object(self, value: Any, element: ObjectElement, path: str) -> None:
        if self._accepts_null(value, element, path):
            return
        if not self._has_type(value, element, path):
            return

        mark = len(self.errors)
        children = element.children
        prefix = self._options.meta_field_prefix

        # One pass over the keys: declared, extra and meta buckets.
        declared: list[str] = []
        extra: list[str] = []
        meta: list[str] = []
        for key in value:
            is_meta = isinstance(key, str) and key.startswith(prefix)
            if is_meta:
                meta.append(key)
            if key in children:
                declared.append(key)
            elif not is_meta:
                extra.append(key)

        missing = [name for name in element.required_children if name not in value]
        fields = [(key, value[key]) for key in declared]

        # Meta keys go before any error can be raised below this object.
        if meta and self._options.prune_meta_fields:
            for key in meta:
                del value[key]
            logger.debug("Pruned %d meta field(s) at %s", len(meta), path or "<root>")

        for name in missing:
            self._add_error(MissingRequiredFieldError(name, json_pointer(path, name)))

        for key, field_value in fields:
            self._validate_element(field_value, children[key], json_pointer(path, key))

        if len(self.errors) == mark:
            self._run_validators(value, element, path)

        if extra and self._options.prune_unlisted_fields:
            self._unlisted.append((value, extra))

    def _validate_array(self, value: Any, element: ArrayElement, path: str) -> None:
        if self._accepts_null(value, element, path):
            return
        if not self._has_type(value, element, path):
            return

        mark = len(self.errors)
        entries = cast(Sequence[Any], value)
        allow_null = element.allow_null_elements

        match element.mode:
            case ArrayMode.ANY:
                # A single error for the whole array, however many nulls it holds.
                if not allow_null and any(entry is None for entry in entries):
                    self._add_error(NullArrayElementError(path))

            case ArrayMode.ORDERED:
                ordered = element.ordered_elements
                if len(ordered) != len(entries):
                    self._add_error(
                        InvalidArrayContentsError(
                            f"Array has {len(entries)} element(s), expected "
                            f"exactly {len(ordered)}",
                            path,
                        )
                    )
                    return
                for index, (entry, entry_element) in enumerate(
                    zip(entries, ordered, strict=True)
                ):
                    entry_path = json_pointer(path, index)
                    if entry is None:
                        if not allow_null:
                            self._add_error(NullArrayElementError(entry_path))
                        continue
                    self._validate_element(entry, entry_element, entry_path)

            case ArrayMode.TYPED:
                for index, entry in enumerate(entries):
                    entry_path = json_pointer(path, index)
                    if entry is None:
                        if not allow_null:
                            self._add_error(NullArrayElementError(entry_path))
                        continue
                    tag = tag_name(entry)
                    entry_element = element.get_element_config(tag)
                    if entry_element is None:
                        self._add_error(InvalidArrayElementTypeError(tag, entry_path))
                        continue
                    self._validate_element(entry, entry_element, entry_path)

        if len(self.errors) == mark:
            self._run_validators(value, element, path)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def _validate_string(self, value: Any, element: StringElement, path: str) -> None:
        if self._accepts_null(value, element, path):
            return
        if not self._has_type(value, element, path):
            return

        mark = len(self.errors)
        if element.valid_values:
            # An enumeration replaces the length checks for this element.
            if value not in element.valid_values:
                self._add_error(
                    InvalidValueError(
                        f"Value {value!r} is not one of "
                        f"{', '.join(map(repr, element.valid_values))}",
                        path,
                    )
                )
                return
        else:
            self._check_range(
                len(value), element.min_length, element.max_length, "Length", path
            )

        if len(self.errors) == mark:
            self._run_validators(value, element, path)

    def _validate_number(self, value: Any, element: NumberElement, path: str) -> None:
        if self._accepts_null(value, element, path):
            return
        if not self._has_type(value, element, path):
            return

        mark = len(self.errors)
        self._check_range(value, element.min_value, element.max_value, "Value", path)

        if len(self.errors) == mark:
            self._run_validators(value, element, path)

    def _validate_boolean(self, value: Any, element: BooleanElement, path: str) -> None:
        if self._accepts_null(value, element, path):
            return
        if not self._has_type(value, element, path):
            return
        self._run_validators(value, element, path)

    # ------------------------------------------------------------------
    # Pruning
    # ------------------------------------------------------------------

    def _prune_unlisted(self) -> None:
        count = 0
        for mapping, keys in self._unlisted:
            for key in keys:
                del mapping[key]
            count += len(keys)
        self._unlisted = []
        logger.debug("Pruned %d unlisted field(s)", count)
