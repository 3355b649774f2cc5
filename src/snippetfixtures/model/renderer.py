"""Renderer configuration.

Renderer here is the configuration half of the rendering engine: base
style, line-number anonymization and an optional Margin override. The
text-layout algorithm consumes these values and is not part of this
package.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from snippetfixtures.constants import DEFAULT_ANONYMIZED_LINE_NUMBERS
from snippetfixtures.enums import RenderStyle

__all__ = ["Margin", "Renderer"]


@dataclass(frozen=True, slots=True)
class Margin:
    """Layout limits that bound how much of a long line is displayed.

    All six values are column counts measured on the source line. The
    positional order is part of the API and matches the fixture schema.

    Attributes:
        whitespace_left: Leading whitespace shared by the annotated lines
        span_left: Leftmost column covered by any annotation
        span_right: Rightmost column covered by any annotation
        label_right: Rightmost column reached by any annotation label
        column_width: Width available for source text
        max_line_len: Length of the longest annotated line
    """

    whitespace_left: int
    span_left: int
    span_right: int
    label_right: int
    column_width: int
    max_line_len: int

    def __post_init__(self) -> None:
        """Validate Margin invariants.

        Raises:
            ValueError: If any value is negative.
        """
        for field in fields(self):
            value = getattr(self, field.name)
            if value < 0:
                msg = f"Margin.{field.name} must be >= 0, got {value}"
                raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Renderer:
    """Immutable rendering options.

    Construct with Renderer.plain() or Renderer.styled(), then chain the
    with_* builders. A margin of None means "use the renderer's own
    defaults", which is not the same as a Margin of zeros.

    Example:
        >>> renderer = Renderer.plain().with_anonymized_line_numbers(True)
        >>> renderer.style, renderer.anonymized_line_numbers, renderer.margin
        (<RenderStyle.PLAIN: 'plain'>, True, None)
    """

    style: RenderStyle = RenderStyle.PLAIN
    anonymized_line_numbers: bool = DEFAULT_ANONYMIZED_LINE_NUMBERS
    margin: Margin | None = None

    @classmethod
    def plain(cls) -> Renderer:
        """Renderer without ANSI styling."""
        return cls(style=RenderStyle.PLAIN)

    @classmethod
    def styled(cls) -> Renderer:
        """Renderer with ANSI styling."""
        return cls(style=RenderStyle.STYLED)

    def with_anonymized_line_numbers(self, anonymized_line_numbers: bool) -> Renderer:
        return replace(self, anonymized_line_numbers=anonymized_line_numbers)

    def with_margin(self, margin: Margin | None) -> Renderer:
        return replace(self, margin=margin)
