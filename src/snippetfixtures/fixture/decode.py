"""Fixture decoding entry points.

Parses a fixture document (TOML or JSON) or an already-parsed builtin
tree into Def records, then converts them into model values. Decoding is
all-or-nothing: msgspec errors are translated into SchemaError with the
path of the offending value, and nothing partial is returned.

Example:
    >>> fixture = decode_fixture(
    ...     b'{"message": {"title": {"level": "Error", "label": "oops"}, "snippets": []}}',
    ...     fmt=FixtureFormat.JSON,
    ... )
    >>> fixture.message.title
    Label(level=<Level.ERROR: 'error'>, text='oops')

Thread Safety:
    Decoders are immutable module-level objects; concurrent calls share no
    mutable state.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, TypeVar

import msgspec
import msgspec.toml

from snippetfixtures.constants import DEFAULT_FIXTURE_FORMAT, ROOT_PATH
from snippetfixtures.diagnostics import Diagnostic, ErrorTemplate, SchemaError
from snippetfixtures.enums import FixtureFormat

from .convert import (
    Fixture,
    annotation_from_def,
    fixture_from_def,
    label_from_def,
    message_from_def,
    renderer_from_def,
    snippet_from_def,
)
from .defs import (
    AnnotationDef,
    FixtureDef,
    LabelDef,
    MessageDef,
    RendererDef,
    SnippetDef,
)

if TYPE_CHECKING:
    from snippetfixtures.model import Annotation, Label, Message, Renderer, Snippet

__all__ = [
    "convert_fixture",
    "decode_annotation",
    "decode_fixture",
    "decode_fixture_def",
    "decode_label",
    "decode_message",
    "decode_renderer",
    "decode_snippet",
    "schema_error_from",
]

logger = logging.getLogger(__name__)

_JSON_DECODER = msgspec.json.Decoder(FixtureDef)

# msgspec appends " - at `<path>`" to validation messages unless the error is at the root.
_VALIDATION_RE = re.compile(r"^(?P<summary>.*?)(?: - at `(?P<path>[^`]+)`)?$", re.DOTALL)
_MISSING_RE = re.compile(r"^Object missing required field `(?P<field>[^`]+)`$")
_EXPECTED_RE = re.compile(r"^Expected `(?P<expected>[^`]+)`, got `(?P<received>[^`]+)`$")
_ENUM_RE = re.compile(r"^Invalid enum value (?P<value>.+)$")
_RANGE_PATH_RE = re.compile(r"\.range(?:\[\d+\])?$")


def schema_error_from(exc: msgspec.ValidationError) -> SchemaError:
    """Translate a msgspec ValidationError into a SchemaError.

    Args:
        exc: Error raised while decoding into a Def struct

    Returns:
        SchemaError whose diagnostic names the offending path
    """
    match = _VALIDATION_RE.match(str(exc).strip())
    summary = match.group("summary") if match else str(exc)
    path = (match.group("path") if match else None) or ROOT_PATH
    return SchemaError(_classify(summary, path))


def _classify(summary: str, path: str) -> Diagnostic:
    if missing := _MISSING_RE.match(summary):
        return ErrorTemplate.missing_field(path, missing.group("field"))
    if _RANGE_PATH_RE.search(path):
        return ErrorTemplate.malformed_range(path, summary)
    if enum_value := _ENUM_RE.match(summary):
        return ErrorTemplate.unknown_severity(path, enum_value.group("value").strip("'\""))
    if expected := _EXPECTED_RE.match(summary):
        return ErrorTemplate.wrong_type(path, expected.group("expected"), expected.group("received"))
    return ErrorTemplate.invalid_value(path, summary)


def _malformed(fmt: FixtureFormat, exc: Exception) -> SchemaError:
    return SchemaError(ErrorTemplate.malformed_input(fmt.value, str(exc)))


def decode_fixture_def(
    buf: bytes | str, *, fmt: FixtureFormat | str = DEFAULT_FIXTURE_FORMAT
) -> FixtureDef:
    """Parse a fixture document into its Def tree without converting it.

    Args:
        buf: Document text or UTF-8 bytes
        fmt: Document format

    Returns:
        Decoded FixtureDef with all defaults applied

    Raises:
        SchemaError: If the document is unparsable or does not match the schema
        ValueError: If fmt is not a known FixtureFormat
    """
    fmt = FixtureFormat(fmt)
    try:
        match fmt:
            case FixtureFormat.JSON:
                fixture_def = _JSON_DECODER.decode(buf)
            case FixtureFormat.TOML:
                fixture_def = msgspec.toml.decode(buf, type=FixtureDef)
    except msgspec.ValidationError as e:
        error = schema_error_from(e)
        logger.debug("Fixture rejected (%s): %s", fmt, error.diagnostic)
        raise error from e
    except (msgspec.DecodeError, UnicodeDecodeError) as e:
        logger.debug("Fixture is not valid %s: %s", fmt, e)
        raise _malformed(fmt, e) from e
    return fixture_def


def decode_fixture(buf: bytes | str, *, fmt: FixtureFormat | str = DEFAULT_FIXTURE_FORMAT) -> Fixture:
    """Decode a fixture document into renderer configuration and message.

    Args:
        buf: Document text or UTF-8 bytes
        fmt: Document format (TOML by default)

    Returns:
        Fixture holding the Renderer and the Message

    Raises:
        SchemaError: If the document is unparsable or does not match the schema
    """
    fixture = fixture_from_def(decode_fixture_def(buf, fmt=fmt))
    logger.debug(
        "Decoded %s fixture: %d snippet(s), %d footer label(s)",
        FixtureFormat(fmt),
        len(fixture.message.snippets),
        len(fixture.message.footer),
    )
    return fixture


T = TypeVar("T")


def _convert(obj: object, target_type: type[T]) -> T:
    try:
        return msgspec.convert(obj, type=target_type, strict=True)
    except msgspec.ValidationError as e:
        raise schema_error_from(e) from e


def convert_fixture(obj: object) -> Fixture:
    """Decode an already-parsed builtin tree (dicts, lists, str, int, bool).

    For harnesses that parse the document themselves.

    Raises:
        SchemaError: If obj does not match the fixture schema
    """
    return fixture_from_def(_convert(obj, FixtureDef))


def decode_label(obj: object) -> Label:
    """Decode {level, label} into a Label."""
    return label_from_def(_convert(obj, LabelDef))


def decode_annotation(obj: object) -> Annotation:
    """Decode {range, label, level} into an Annotation."""
    return annotation_from_def(_convert(obj, AnnotationDef))


def decode_snippet(obj: object) -> Snippet:
    """Decode a Snippet object, annotations included."""
    return snippet_from_def(_convert(obj, SnippetDef))


def decode_message(obj: object) -> Message:
    """Decode a Message object, snippets and footer included."""
    return message_from_def(_convert(obj, MessageDef))


def decode_renderer(obj: object) -> Renderer:
    """Decode a RendererConfig object into a plain-mode Renderer."""
    return renderer_from_def(_convert(obj, RendererDef))
