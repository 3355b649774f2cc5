"""Decoder structs mirroring the fixture schema.

Each *Def struct is the decoded, not-yet-converted form of one schema
object. msgspec validates shapes, applies defaults for omitted keys and
reports the path of any offending value; snippetfixtures.fixture.convert
then turns a Def tree into model values.

Schema:
    Fixture        := { renderer?: RendererConfig, message: Message }
    RendererConfig := { anonymized_line_numbers?: bool = false, margin?: Margin }
    Margin         := { whitespace_left, span_left, span_right,
                        label_right, column_width, max_line_len: uint }
    Message        := { title: Label, id?: string, footer?: [Label] = [],
                        snippets: [Snippet] }
    Label          := { level: Severity, label: string }
    Snippet        := { source: string, line_start: uint, origin?: string,
                        annotations?: [Annotation] = [], fold?: bool = false }
    Annotation     := { range: [uint, uint], label: string, level: Severity }

Unknown keys are ignored.

Python 3.13+.
"""

from typing import Annotated

import msgspec

from snippetfixtures.constants import DEFAULT_ANONYMIZED_LINE_NUMBERS, DEFAULT_FOLD

from .levels import SeverityTag

__all__ = [
    "AnnotationDef",
    "FixtureDef",
    "LabelDef",
    "MarginDef",
    "MessageDef",
    "NonNegInt",
    "RendererDef",
    "SnippetDef",
    "SpanRange",
]

NonNegInt = Annotated[int, msgspec.Meta(ge=0)]

SpanRange = tuple[NonNegInt, NonNegInt]
"""Half-open [start, end) byte range; bounds are checked by the renderer."""


class DefBase(
    msgspec.Struct,
    frozen=True,
    kw_only=True,
    omit_defaults=True,
    forbid_unknown_fields=False,
):
    """Base struct for fixture decoder records.

    msgspec applies kw_only only to fields declared on the class itself, so
    every subclass restates it.
    """


class LabelDef(DefBase, kw_only=True):
    level: SeverityTag
    label: str


class AnnotationDef(DefBase, kw_only=True):
    range: SpanRange
    label: str
    level: SeverityTag


class SnippetDef(DefBase, kw_only=True):
    source: str
    line_start: NonNegInt
    origin: str | None = None
    annotations: tuple[AnnotationDef, ...] = ()
    fold: bool = DEFAULT_FOLD


class MarginDef(DefBase, kw_only=True):
    """Six layout limits; the declaration order is Margin's positional order."""

    whitespace_left: NonNegInt
    span_left: NonNegInt
    span_right: NonNegInt
    label_right: NonNegInt
    column_width: NonNegInt
    max_line_len: NonNegInt


class RendererDef(DefBase, kw_only=True):
    anonymized_line_numbers: bool = DEFAULT_ANONYMIZED_LINE_NUMBERS
    margin: MarginDef | None = None


class MessageDef(DefBase, kw_only=True):
    title: LabelDef
    id: str | None = None
    footer: tuple[LabelDef, ...] = ()
    snippets: tuple[SnippetDef, ...]


class FixtureDef(DefBase, kw_only=True):
    """One renderer invocation over one message."""

    renderer: RendererDef = msgspec.field(default_factory=RendererDef)
    message: MessageDef
