"""ValidationResult dataclass for non-raising validation output.

This module provides the result type returned by ``check()`` calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from json_config_parser.errors import ConfigValidationError

__all__ = ["ValidationResult"]

_E = TypeVar("_E", bound=ConfigValidationError)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a ``check()`` call.

    Attributes:
        valid:  True when the run found no error.
        errors: Errors in traversal order. With ``stop_on_first_error`` it
                holds at most one error.
        value:  The decoded tree. Meta fields are removed whenever the run
                reached them; unlisted fields only when ``valid`` is True.
    """

    valid: bool
    errors: tuple[ConfigValidationError, ...]
    value: Any

    def errors_of_type(self, error_type: type[_E]) -> list[_E]:
        """Return the errors that are instances of ``error_type``."""
        return [error for error in self.errors if isinstance(error, error_type)]
