"""Hypothesis strategies for snippetfixtures property-based testing.

Usage:
    from tests.strategies import fixture_docs, annotation_docs
    from tests.strategies.fixtures import margin_docs, labels
"""

from .fixtures import (
    annotation_docs,
    fixture_docs,
    label_docs,
    labels,
    level_tags,
    levels,
    margin_docs,
    message_docs,
    renderer_docs,
    snippet_docs,
)

__all__ = [
    "annotation_docs",
    "fixture_docs",
    "label_docs",
    "labels",
    "level_tags",
    "levels",
    "margin_docs",
    "message_docs",
    "renderer_docs",
    "snippet_docs",
]
