"""Shared constants for snippetfixtures.

Single source of truth for the fixture wire vocabulary and the defaults
applied to omitted fields. Placing them here keeps the model and the
fixture decoders free of circular imports.

Constants are grouped by domain:
- Severity tags: Canonical spellings accepted in fixture documents
- Field defaults: Values applied when an optional key is absent
- Diagnostics: Limits used when rendering schema errors

Python 3.13+.
"""

from .enums import FixtureFormat

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Severity tags
    "SEVERITY_TAGS",
    # Field defaults
    "DEFAULT_LINE_START",
    "DEFAULT_FOLD",
    "DEFAULT_ANONYMIZED_LINE_NUMBERS",
    "DEFAULT_FIXTURE_FORMAT",
    # Diagnostics
    "ROOT_PATH",
    "MAX_RECEIVED_DISPLAY",
]

# ============================================================================
# SEVERITY TAGS
# ============================================================================

# Case-sensitive; order matches the renderer's Level declaration order.
SEVERITY_TAGS: tuple[str, ...] = ("Error", "Warning", "Info", "Note", "Help")

# ============================================================================
# FIELD DEFAULTS
# ============================================================================

# Line number a Snippet starts at when built without an explicit line_start.
# Fixture snippets always carry line_start; this only affects the builder API.
DEFAULT_LINE_START: int = 1

DEFAULT_FOLD: bool = False

DEFAULT_ANONYMIZED_LINE_NUMBERS: bool = False

# The fixture corpus is written in TOML.
DEFAULT_FIXTURE_FORMAT: FixtureFormat = FixtureFormat.TOML

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Path prefix msgspec uses for the document root in validation messages.
ROOT_PATH: str = "$"

# Received values longer than this are truncated in SchemaError messages.
MAX_RECEIVED_DISPLAY: int = 60
