"""Message object model: labels, annotations, snippets and messages.

Every value is an immutable dataclass. Construction follows a fluent
protocol: start from a base value, then chain builder methods that each
return a new instance. Sequences (annotations, snippets, footers) grow one
element per call and keep insertion order, which the renderer observes.

Example:
    >>> snippet = (
    ...     Snippet("let x = 1;")
    ...     .with_line_start(5)
    ...     .add_annotation(Level.WARNING.label("unused").span((4, 5)))
    ... )
    >>> message = Message(Level.ERROR.label("oops")).add_snippet(snippet)
    >>> message.snippets[0].annotations[0].span
    Span(start=4, end=5)

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from snippetfixtures.constants import DEFAULT_FOLD, DEFAULT_LINE_START

from .level import Level

__all__ = [
    "Annotation",
    "Label",
    "Message",
    "Snippet",
    "Span",
]


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open byte range into a snippet's source text.

    Bounds against the source text, and end >= start, are the renderer's
    concern; only negative offsets are rejected here.

    Attributes:
        start: First byte offset (inclusive)
        end: Last byte offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate Span invariants.

        Raises:
            ValueError: If start or end is negative.
        """
        if self.start < 0:
            msg = f"Span.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < 0:
            msg = f"Span.end must be >= 0, got {self.end}"
            raise ValueError(msg)

    def __len__(self) -> int:
        return max(self.end - self.start, 0)

    def as_range(self) -> range:
        """Return the span as a Python range of byte offsets."""
        return range(self.start, self.end)

    @classmethod
    def coerce(cls, value: Span | range | tuple[int, int]) -> Span:
        """Build a Span from a Span, a step-1 range, or a (start, end) pair.

        Raises:
            ValueError: If a range has a step other than 1.
            TypeError: If value is none of the accepted shapes.
        """
        match value:
            case Span():
                return value
            case range():
                if value.step != 1:
                    msg = f"Span range must have step 1, got {value.step}"
                    raise ValueError(msg)
                return cls(value.start, value.stop)
            case (int() as start, int() as end):
                return cls(start, end)
            case _:
                msg = f"Cannot build Span from {type(value).__name__}"
                raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class Label:
    """Severity-tagged short text.

    Used for message titles, footers, and (once bound to a Span) for
    snippet annotations.
    """

    level: Level
    text: str

    def span(self, span: Span | range | tuple[int, int]) -> Annotation:
        """Attach this label to a byte range, producing an Annotation."""
        return Annotation(Span.coerce(span), self)


@dataclass(frozen=True, slots=True)
class Annotation:
    """A Label bound to exactly one Span of a snippet's source."""

    span: Span
    label: Label

    @property
    def level(self) -> Level:
        return self.label.level

    @property
    def text(self) -> str:
        return self.label.text


@dataclass(frozen=True, slots=True)
class Snippet:
    """Block of source text plus its annotations, rendered as one unit.

    Attributes:
        source: Source text the annotations index into
        line_start: Line number of the first line of source
        origin: File name or other origin shown in the header (optional)
        fold: Collapse unannotated lines when rendering
        annotations: Annotations in insertion order
    """

    source: str
    line_start: int = DEFAULT_LINE_START
    origin: str | None = None
    fold: bool = DEFAULT_FOLD
    annotations: tuple[Annotation, ...] = ()

    def with_line_start(self, line_start: int) -> Snippet:
        return replace(self, line_start=line_start)

    def with_origin(self, origin: str) -> Snippet:
        return replace(self, origin=origin)

    def with_fold(self, fold: bool) -> Snippet:
        return replace(self, fold=fold)

    def add_annotation(self, annotation: Annotation) -> Snippet:
        """Return a copy with annotation appended after existing ones."""
        return replace(self, annotations=(*self.annotations, annotation))


@dataclass(frozen=True, slots=True)
class Message:
    """Top-level diagnostic.

    Attributes:
        title: Headline label (mandatory)
        id: Diagnostic identifier such as "E0308" (optional)
        snippets: Source snippets in insertion order
        footer: Trailing labels in insertion order
    """

    title: Label
    id: str | None = None
    snippets: tuple[Snippet, ...] = ()
    footer: tuple[Label, ...] = ()

    def with_id(self, id: str) -> Message:  # noqa: A002 - mirrors the field name
        return replace(self, id=id)

    def add_snippet(self, snippet: Snippet) -> Message:
        """Return a copy with snippet appended after existing ones."""
        return replace(self, snippets=(*self.snippets, snippet))

    def add_footer(self, label: Label) -> Message:
        """Return a copy with label appended to the footer."""
        return replace(self, footer=(*self.footer, label))
