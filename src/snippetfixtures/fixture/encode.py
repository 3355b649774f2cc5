"""Encoding of model values back into the fixture schema.

The inverse of snippetfixtures.fixture.convert: model values become Def
records, which msgspec turns into builtins or JSON. Decoding an encoded
value yields a value equal to the original. Fields holding their default
are omitted from the output.

Python 3.13+.
"""

from __future__ import annotations

from typing import Any

import msgspec

from snippetfixtures.enums import RenderStyle
from snippetfixtures.model import Annotation, Label, Margin, Message, Renderer, Snippet

from .convert import Fixture
from .defs import (
    AnnotationDef,
    DefBase,
    FixtureDef,
    LabelDef,
    MarginDef,
    MessageDef,
    RendererDef,
    SnippetDef,
)
from .levels import level_to_tag

__all__ = [
    "annotation_to_def",
    "dumps_json",
    "encode_annotation",
    "encode_fixture",
    "encode_label",
    "fixture_to_def",
    "label_to_def",
    "margin_to_def",
    "message_to_def",
    "renderer_to_def",
    "snippet_to_def",
]

_JSON_ENCODER = msgspec.json.Encoder(order="deterministic")


def label_to_def(label: Label) -> LabelDef:
    return LabelDef(level=level_to_tag(label.level), label=label.text)


def annotation_to_def(annotation: Annotation) -> AnnotationDef:
    return AnnotationDef(
        range=(annotation.span.start, annotation.span.end),
        label=annotation.text,
        level=level_to_tag(annotation.level),
    )


def snippet_to_def(snippet: Snippet) -> SnippetDef:
    return SnippetDef(
        source=snippet.source,
        line_start=snippet.line_start,
        origin=snippet.origin,
        annotations=tuple(annotation_to_def(a) for a in snippet.annotations),
        fold=snippet.fold,
    )


def margin_to_def(margin: Margin | None) -> MarginDef | None:
    if margin is None:
        return None
    return MarginDef(
        whitespace_left=margin.whitespace_left,
        span_left=margin.span_left,
        span_right=margin.span_right,
        label_right=margin.label_right,
        column_width=margin.column_width,
        max_line_len=margin.max_line_len,
    )


def renderer_to_def(renderer: Renderer) -> RendererDef:
    """Encode a plain-mode Renderer.

    Raises:
        ValueError: If the renderer is styled; fixtures only describe plain output
    """
    if renderer.style is not RenderStyle.PLAIN:
        msg = f"Fixtures can only describe plain renderers, got {renderer.style}"
        raise ValueError(msg)
    return RendererDef(
        anonymized_line_numbers=renderer.anonymized_line_numbers,
        margin=margin_to_def(renderer.margin),
    )


def message_to_def(message: Message) -> MessageDef:
    return MessageDef(
        title=label_to_def(message.title),
        id=message.id,
        footer=tuple(label_to_def(f) for f in message.footer),
        snippets=tuple(snippet_to_def(s) for s in message.snippets),
    )


def fixture_to_def(fixture: Fixture) -> FixtureDef:
    return FixtureDef(
        renderer=renderer_to_def(fixture.renderer),
        message=message_to_def(fixture.message),
    )


def _to_builtins(obj: DefBase) -> dict[str, Any]:
    # to_builtins keeps tuples; a JSON pass yields the schema's arrays.
    return msgspec.json.decode(_JSON_ENCODER.encode(obj))


def encode_label(label: Label) -> dict[str, Any]:
    """Encode a Label as a {level, label} mapping."""
    return _to_builtins(label_to_def(label))


def encode_annotation(annotation: Annotation) -> dict[str, Any]:
    """Encode an Annotation as a {range, label, level} mapping."""
    return _to_builtins(annotation_to_def(annotation))


def encode_fixture(fixture: Fixture) -> dict[str, Any]:
    """Encode a whole Fixture as a builtin tree; sequences become lists."""
    return _to_builtins(fixture_to_def(fixture))


def dumps_json(obj: DefBase | Fixture, *, pretty: bool = False) -> bytes:
    """Serialize a Def record (or a Fixture) to JSON bytes.

    Args:
        obj: Def struct or Fixture
        pretty: Whether to format with indentation

    Returns:
        JSON payload
    """
    if isinstance(obj, Fixture):
        obj = fixture_to_def(obj)
    raw = _JSON_ENCODER.encode(obj)
    if not pretty:
        return raw
    return msgspec.json.format(raw, indent=2)
