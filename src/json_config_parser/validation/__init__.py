"""validation subpackage: the validation engine and its options.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_config_parser.validation import ParserOptions, ValidationEngine

    engine = ValidationEngine(root, ParserOptions(stop_on_first_error=True))
    errors = engine.run({"x": 15})
"""

from __future__ import annotations

from json_config_parser.validation.config import ParserOptions
from json_config_parser.validation.engine import ValidationEngine, json_pointer

__all__ = ["ParserOptions", "ValidationEngine", "json_pointer"]
