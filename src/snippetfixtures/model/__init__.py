"""Object model consumed by the snippet renderer.

Immutable values built through a fluent protocol:
    Level, Span, Label, Annotation - severities and span-bound labels
    Snippet, Message - source blocks and the top-level diagnostic
    Margin, Renderer - rendering configuration

Python 3.13+.
"""

from .level import Level
from .message import Annotation, Label, Message, Snippet, Span
from .renderer import Margin, Renderer

__all__ = [
    "Annotation",
    "Label",
    "Level",
    "Margin",
    "Message",
    "Renderer",
    "Snippet",
    "Span",
]
