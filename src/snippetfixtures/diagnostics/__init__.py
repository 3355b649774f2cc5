"""Diagnostic system for fixture schema errors.

Provides structured error diagnostics with codes, field paths and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import SchemaError, SnippetFixtureError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "SchemaError",
    "SnippetFixtureError",
]
