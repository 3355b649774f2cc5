"""Bridge between fixture severity tags and the renderer's Level enum.

Level belongs to the renderer's object model and its values are not the
tags fixtures use, so decoding never matches tags to members structurally.
Every use site goes through level_from_tag / level_to_tag instead.

Python 3.13+.
"""

from typing import Literal

from snippetfixtures.constants import ROOT_PATH
from snippetfixtures.diagnostics import ErrorTemplate, SchemaError
from snippetfixtures.model import Level

__all__ = [
    "SeverityTag",
    "level_from_tag",
    "level_to_tag",
]

SeverityTag = Literal["Error", "Warning", "Info", "Note", "Help"]
"""Wire spelling of a severity; used as the field type in decoder structs."""


def level_from_tag(tag: str, *, path: str = ROOT_PATH) -> Level:
    """Map a fixture severity tag to its Level.

    Args:
        tag: One of "Error", "Warning", "Info", "Note", "Help" (case-sensitive)
        path: Location of the tag, reported in the error

    Returns:
        The matching Level member

    Raises:
        SchemaError: If tag is not a canonical severity name
    """
    match tag:
        case "Error":
            return Level.ERROR
        case "Warning":
            return Level.WARNING
        case "Info":
            return Level.INFO
        case "Note":
            return Level.NOTE
        case "Help":
            return Level.HELP
        case _:
            raise SchemaError(ErrorTemplate.unknown_severity(path, tag))


def level_to_tag(level: Level) -> SeverityTag:
    """Map a Level back to its fixture severity tag."""
    match level:
        case Level.ERROR:
            return "Error"
        case Level.WARNING:
            return "Warning"
        case Level.INFO:
            return "Info"
        case Level.NOTE:
            return "Note"
        case Level.HELP:
            return "Help"
