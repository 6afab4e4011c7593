"""ConfigParser: orchestrator that wires a decoder and the ValidationEngine.

This is the layer between the engine and the public API. It decodes text,
runs one validation pass per call and turns the collected errors into either
a returned tree, a ``ConfigParseFailureError`` or a ``ValidationResult``.

Architecture:
- parse() decodes with the configured decoder (``json.loads`` by default).
  Decoder errors propagate unchanged; they are never collected.
- Every call builds a fresh ``ValidationEngine``, so the error list belongs
  to that call only. ``errors`` exposes a copy of the most recent call's list.
- The element tree is never modified and may be shared between parsers and
  threads. A decoded tree must not be validated by two calls at once, since
  pruning mutates it in place.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from json_config_parser.errors import ConfigParseFailureError, ConfigValidationError
from json_config_parser.result import ValidationResult
from json_config_parser.validation.config import ParserOptions
from json_config_parser.validation.engine import ValidationEngine

if TYPE_CHECKING:
    from json_config_parser.elements.nodes import ConfigElement
    from json_config_parser.protocols import Decoder

__all__ = ["ConfigParser"]

logger = logging.getLogger(__name__)


class ConfigParser:
    """Validates configuration documents against a root element.

    Example::

        from json_config_parser import ConfigElementBuilder, ConfigParser

        root = (
            ConfigElementBuilder()
            .of_type_object()
            .with_child_elements(
                ConfigElementBuilder().of_type_number().with_name("x").build()
            )
            .build()
        )
        ConfigParser(root).parse('{"x": 5}')   # {"x": 5}
        ConfigParser(root).parse('{"x": "5"}') # raises ConfigParseFailureError
    """

    def __init__(
        self,
        root: ConfigElement,
        options: ParserOptions | None = None,
        decoder: Decoder | None = None,
    ) -> None:
        """Initialise the parser.

        Args:
            root:    Root element; must be an object or array element for any
                     document to validate.
            options: Run options. Defaults to ``ParserOptions()``.
            decoder: Text decoder. Defaults to ``json.loads``.
        """
        self._root = root
        self._options: ParserOptions = (
            options if options is not None else ParserOptions()
        )
        self._decoder: Decoder = decoder if decoder is not None else json.loads
        self._errors: list[ConfigValidationError] = []

    @property
    def root(self) -> ConfigElement:
        return self._root

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def errors(self) -> list[ConfigValidationError]:
        """Errors of the most recent call (a copy)."""
        return list(self._errors)

    def get_errors(self) -> list[ConfigValidationError]:
        return self.errors

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str) -> Any:
        """Decode ``text`` and validate the resulting tree.

        Returns:
            The decoded tree, with meta fields and (if enabled) unlisted
            fields removed.

        Raises:
            ConfigValidationError: The first error, when
                ``stop_on_first_error`` is set.
            ConfigParseFailureError: One or more errors were collected.
            Exception: Whatever the decoder raises for malformed text
                (``json.JSONDecodeError`` for the default decoder).
        """
        self._errors = []
        data = self._decoder(text)
        return self.validate(data)

    def validate(self, data: Any) -> Any:
        """Validate an already decoded tree; same contract as ``parse()``."""
        engine = ValidationEngine(self._root, self._options)
        try:
            errors = engine.run(data)
        finally:
            self._errors = list(engine.errors)
        if errors:
            logger.debug("Configuration rejected with %d error(s)", len(errors))
            raise ConfigParseFailureError(errors)
        return data

    def check(self, data: Any) -> ValidationResult:
        """Validate a decoded tree without raising validation errors.

        With ``stop_on_first_error`` the run still ends at the first error,
        which is returned in the result instead of being raised.
        """
        engine = ValidationEngine(self._root, self._options)
        try:
            engine.run(data)
        except ConfigValidationError as error:
            # Only the engine's own recorded error is turned into a result;
            # one raised by a custom validator propagates.
            if not (engine.errors and engine.errors[-1] is error):
                raise
        self._errors = list(engine.errors)
        return ValidationResult(
            valid=not self._errors, errors=tuple(self._errors), value=data
        )
