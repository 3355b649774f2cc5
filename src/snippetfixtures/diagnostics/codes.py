"""Diagnostic codes and data structures.

Defines schema error codes and the structured diagnostic attached to
every SchemaError.
Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Structural errors (missing fields, wrong value types)
        2000-2999: Domain errors (severity tags, span ranges)
        3000-3999: Document errors (input is not valid JSON/TOML)
    """

    # Structural errors (1000-1999)
    MISSING_FIELD = 1001
    WRONG_TYPE = 1002
    INVALID_VALUE = 1003

    # Domain errors (2000-2999)
    UNKNOWN_SEVERITY = 2001
    MALFORMED_RANGE = 2002

    # Document errors (3000-3999)
    MALFORMED_INPUT = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Carries enough context to locate the offending value inside a fixture
    document without re-reading it.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        path: Location of the offending value, e.g. "$.message.title.level"
            (None when the whole document is at fault)
        expected: Expected shape or type
        received: Actual shape, type or value
        hint: Suggestion for fixing the fixture
        severity: Error severity level (every schema failure is an error)
    """

    code: DiagnosticCode
    message: str
    path: str | None = None
    expected: str | None = None
    received: str | None = None
    hint: str | None = None
    severity: Literal["error"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNKNOWN_SEVERITY]: unknown severity tag 'Critical'
              --> $.message.title.level
              = expected: one of Error, Warning, Info, Note, Help
              = received: 'Critical'
              = help: Severity tags are case-sensitive

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
