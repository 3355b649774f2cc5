"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+.
"""

from snippetfixtures.constants import MAX_RECEIVED_DISPLAY, SEVERITY_TAGS

from .codes import Diagnostic, DiagnosticCode


def _display(value: object) -> str:
    text = repr(value)
    if len(text) > MAX_RECEIVED_DISPLAY:
        return text[:MAX_RECEIVED_DISPLAY] + "..."
    return text


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every SchemaError raised by the fixture decoders is built from one of
    these factories, so the message text for each failure mode lives in
    exactly one place.
    """

    @staticmethod
    def missing_field(path: str, field: str) -> Diagnostic:
        """Mandatory key absent from an object.

        Args:
            path: Location of the object that lacks the key
            field: Name of the missing key

        Returns:
            Diagnostic for MISSING_FIELD
        """
        msg = f"missing required field '{field}'"
        return Diagnostic(
            code=DiagnosticCode.MISSING_FIELD,
            message=msg,
            path=f"{path}.{field}",
            hint=f"Add '{field}' to the object at {path}",
        )

    @staticmethod
    def wrong_type(path: str, expected: str, received: str) -> Diagnostic:
        """Value has the wrong shape or type.

        Args:
            path: Location of the offending value
            expected: Expected type name
            received: Actual type name

        Returns:
            Diagnostic for WRONG_TYPE
        """
        msg = f"expected {expected}, got {received}"
        return Diagnostic(
            code=DiagnosticCode.WRONG_TYPE,
            message=msg,
            path=path,
            expected=expected,
            received=received,
        )

    @staticmethod
    def invalid_value(path: str, detail: str) -> Diagnostic:
        """Value has the right type but violates a constraint.

        Args:
            path: Location of the offending value
            detail: Decoder's description of the violated constraint

        Returns:
            Diagnostic for INVALID_VALUE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message=detail,
            path=path,
        )

    @staticmethod
    def unknown_severity(path: str, tag: object) -> Diagnostic:
        """Severity tag outside Error/Warning/Info/Note/Help.

        Args:
            path: Location of the level field
            tag: The rejected tag (None when the decoder did not report it)

        Returns:
            Diagnostic for UNKNOWN_SEVERITY
        """
        received = None if tag is None else _display(tag)
        msg = "unknown severity tag" if received is None else f"unknown severity tag {received}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_SEVERITY,
            message=msg,
            path=path,
            expected="one of " + ", ".join(SEVERITY_TAGS),
            received=received,
            hint="Severity tags are case-sensitive",
        )

    @staticmethod
    def malformed_range(path: str, detail: str) -> Diagnostic:
        """Range is not a two-element array of unsigned integers.

        Args:
            path: Location of the range (or of its offending element)
            detail: Decoder's description of the problem

        Returns:
            Diagnostic for MALFORMED_RANGE
        """
        msg = f"malformed range: {detail}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_RANGE,
            message=msg,
            path=path,
            expected="[start, end] with unsigned integers",
            hint="Write ranges as a two-element array, e.g. range = [4, 5]",
        )

    @staticmethod
    def malformed_input(fmt: str, detail: str) -> Diagnostic:
        """Document could not be parsed at all.

        Args:
            fmt: Document format name ("toml", "json")
            detail: Parser error description

        Returns:
            Diagnostic for MALFORMED_INPUT
        """
        msg = f"invalid {fmt.upper()} document: {detail}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_INPUT,
            message=msg,
            path=None,
            hint=f"Check that the fixture is well-formed {fmt.upper()}",
        )
