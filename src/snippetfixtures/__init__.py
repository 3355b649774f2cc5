"""snippetfixtures - declarative fixtures for a diagnostic snippet renderer.

Decodes text fixtures describing a compiler-style diagnostic (title,
annotated source snippets, footer notes, renderer options) into the
immutable object model a snippet renderer consumes.

Public API:
    decode_fixture - Decode a TOML/JSON fixture document
    convert_fixture - Decode an already-parsed builtin tree
    Fixture - Decoded (renderer, message) pair
    FixtureFormat - Supported document formats

Exceptions:
    SnippetFixtureError - Base exception class
    SchemaError - Fixture does not match the schema

Submodules:
    snippetfixtures.model - Level, Label, Annotation, Snippet, Message, Margin, Renderer
    snippetfixtures.fixture - Decoders, encoders and the severity tag bridge
    snippetfixtures.diagnostics - Error codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import SchemaError, SnippetFixtureError
from .enums import FixtureFormat
from .fixture import Fixture, convert_fixture, decode_fixture

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("snippetfixtures")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Fixture",
    "FixtureFormat",
    "SchemaError",
    "SnippetFixtureError",
    "__version__",
    "convert_fixture",
    "decode_fixture",
]
