"""Integrations subpackage for json-config-parser.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_valid_config`` fixture.

The plugin module imports pytest; it is loaded by pytest itself and is not
imported here, so the base install does not need pytest.
"""

from __future__ import annotations

__all__: list[str] = []
