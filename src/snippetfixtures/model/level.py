"""Diagnostic severity levels.

Level is owned by the renderer's object model. Its values are the words
the renderer prints ("error", "warning", ...), which deliberately differ
from the capitalized tags used in fixture documents; the fixture layer
bridges the two explicitly in snippetfixtures.fixture.levels.

Python 3.13+.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .message import Label

__all__ = ["Level"]


class Level(Enum):
    """Closed set of diagnostic severities.

    Plain Enum (not StrEnum) so that a Level never compares equal to a
    fixture tag string by accident.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    NOTE = "note"
    HELP = "help"

    def label(self, text: str) -> Label:
        """Create a Label with this severity.

        Example:
            >>> Level.ERROR.label("mismatched types").level
            <Level.ERROR: 'error'>
        """
        from .message import Label  # noqa: PLC0415 - circular

        return Label(self, text)
