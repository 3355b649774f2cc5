"""snippetfixtures exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic for Rust-style error output.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode


class SnippetFixtureError(Exception):
    """Base exception for all snippetfixtures errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SnippetFixtureError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class SchemaError(SnippetFixtureError):
    """Fixture document does not match the fixture schema.

    Covers missing mandatory fields, wrong value shapes, unknown severity
    tags, malformed ranges and unparsable documents. Decoding is
    all-or-nothing: when this is raised no partial object is returned.

    Example:
        >>> try:
        ...     decode_fixture(b'[message]\\ntitle = 1', fmt=FixtureFormat.TOML)
        ... except SchemaError as e:
        ...     print(e.code.name, e.path)
        WRONG_TYPE $.message.title
    """

    @property
    def code(self) -> DiagnosticCode | None:
        return self.diagnostic.code if self.diagnostic else None

    @property
    def path(self) -> str | None:
        return self.diagnostic.path if self.diagnostic else None
