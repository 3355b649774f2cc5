"""Enumerations for snippetfixtures type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FixtureFormat(StrEnum):
    """Text format a fixture document is written in.

    StrEnum provides automatic string conversion: str(FixtureFormat.TOML) == "toml"
    """

    TOML = "toml"
    """TOML document (the format of the fixture corpus)"""

    JSON = "json"
    """JSON document"""


class RenderStyle(StrEnum):
    """Base output mode of a Renderer.

    StrEnum provides automatic string conversion: str(RenderStyle.PLAIN) == "plain"
    """

    PLAIN = "plain"
    """No ANSI styling; the only mode fixtures can request"""

    STYLED = "styled"
    """ANSI-colored output"""


__all__ = [
    "FixtureFormat",
    "RenderStyle",
]
