"""Conversion of decoded Def records into the renderer's object model.

Each converter drives the model's fluent construction protocol rather
than filling fields directly: a base value first, then one builder call
per optional setting and per sequence element, in input order. The
renderer observes annotation, snippet and footer order, so the folds
below must never reorder.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce

from snippetfixtures.constants import ROOT_PATH
from snippetfixtures.model import Annotation, Label, Margin, Message, Renderer, Snippet

from .defs import (
    AnnotationDef,
    FixtureDef,
    LabelDef,
    MarginDef,
    MessageDef,
    RendererDef,
    SnippetDef,
)
from .levels import level_from_tag

__all__ = [
    "Fixture",
    "annotation_from_def",
    "fixture_from_def",
    "label_from_def",
    "margin_from_def",
    "message_from_def",
    "renderer_from_def",
    "snippet_from_def",
]


@dataclass(frozen=True, slots=True)
class Fixture:
    """Decoded fixture: the inputs of one renderer invocation.

    Attributes:
        renderer: Renderer configuration (all defaults when omitted)
        message: Message to render
    """

    renderer: Renderer
    message: Message


def label_from_def(label_def: LabelDef, *, path: str = ROOT_PATH) -> Label:
    level = level_from_tag(label_def.level, path=f"{path}.level")
    return Label(level, label_def.label)


def annotation_from_def(annotation_def: AnnotationDef, *, path: str = ROOT_PATH) -> Annotation:
    level = level_from_tag(annotation_def.level, path=f"{path}.level")
    return Label(level, annotation_def.label).span(annotation_def.range)


def snippet_from_def(snippet_def: SnippetDef, *, path: str = ROOT_PATH) -> Snippet:
    """Build a Snippet from its decoded form.

    Order: base snippet from source, line start, fold flag, origin (only
    when present), then annotations one by one in input order.
    """
    snippet = (
        Snippet(snippet_def.source)
        .with_line_start(snippet_def.line_start)
        .with_fold(snippet_def.fold)
    )
    if snippet_def.origin is not None:
        snippet = snippet.with_origin(snippet_def.origin)
    annotations = (
        annotation_from_def(a, path=f"{path}.annotations[{i}]")
        for i, a in enumerate(snippet_def.annotations)
    )
    return reduce(Snippet.add_annotation, annotations, snippet)


def margin_from_def(margin_def: MarginDef | None) -> Margin | None:
    """Build a Margin, or None when the fixture gave no margin override."""
    if margin_def is None:
        return None
    return Margin(
        margin_def.whitespace_left,
        margin_def.span_left,
        margin_def.span_right,
        margin_def.label_right,
        margin_def.column_width,
        margin_def.max_line_len,
    )


def renderer_from_def(renderer_def: RendererDef) -> Renderer:
    """Build the plain-mode Renderer a fixture describes.

    Fixtures always render in plain mode; styled output is not expressible
    in the fixture schema.
    """
    return (
        Renderer.plain()
        .with_anonymized_line_numbers(renderer_def.anonymized_line_numbers)
        .with_margin(margin_from_def(renderer_def.margin))
    )


def message_from_def(message_def: MessageDef, *, path: str = ROOT_PATH) -> Message:
    """Build a Message from its decoded form.

    Order: title, id (only when present), snippets in input order, then
    footer labels in input order.
    """
    message = Message(label_from_def(message_def.title, path=f"{path}.title"))
    if message_def.id is not None:
        message = message.with_id(message_def.id)
    snippets = (
        snippet_from_def(s, path=f"{path}.snippets[{i}]")
        for i, s in enumerate(message_def.snippets)
    )
    message = reduce(Message.add_snippet, snippets, message)
    footer = (
        label_from_def(f, path=f"{path}.footer[{i}]")
        for i, f in enumerate(message_def.footer)
    )
    return reduce(Message.add_footer, footer, message)


def fixture_from_def(fixture_def: FixtureDef, *, path: str = ROOT_PATH) -> Fixture:
    renderer = renderer_from_def(fixture_def.renderer)
    message = message_from_def(fixture_def.message, path=f"{path}.message")
    return Fixture(renderer=renderer, message=message)
