"""Hypothesis strategies for fixture documents and model values.

Document strategies generate builtin trees (dicts, lists, str, int, bool)
that satisfy the fixture schema, as a harness would get from parsing a
JSON or TOML file.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - fx_level: Severity tag drawn
    - fx_snippet_shape: Snippet optional-field population (bare|origin|fold|full)
    - fx_annotation_count: Annotation count bucket (none|one|many)
    - fx_renderer: Renderer block shape (absent|defaults|anonymized|margin)
    - fx_message_shape: Message optional-field population (bare|id|footer|full)
"""

from __future__ import annotations

from typing import Any

from hypothesis import event
from hypothesis import strategies as st

from snippetfixtures.constants import SEVERITY_TAGS
from snippetfixtures.model import Label, Level

uints = st.integers(min_value=0, max_value=2**32)
texts = st.text(max_size=40)
severity_tags = st.sampled_from(SEVERITY_TAGS)


@st.composite
def level_tags(draw: st.DrawFn) -> str:
    """Draw a canonical severity tag.

    Events emitted:
    - fx_level={tag}
    """
    tag = draw(severity_tags)
    event(f"fx_level={tag}")
    return tag


@st.composite
def label_docs(draw: st.DrawFn) -> dict[str, Any]:
    return {"level": draw(level_tags()), "label": draw(texts)}


@st.composite
def annotation_docs(draw: st.DrawFn) -> dict[str, Any]:
    start = draw(uints)
    end = draw(st.integers(min_value=start, max_value=start + 200))
    return {"range": [start, end], "label": draw(texts), "level": draw(level_tags())}


@st.composite
def snippet_docs(draw: st.DrawFn) -> dict[str, Any]:
    """Generate Snippet objects with and without optional keys.

    Events emitted:
    - fx_snippet_shape={bare|origin|fold|full}
    - fx_annotation_count={none|one|many}
    """
    annotations = draw(st.lists(annotation_docs(), max_size=5))
    doc: dict[str, Any] = {
        "source": draw(texts),
        "line_start": draw(uints),
        "annotations": annotations,
    }
    shape = draw(st.sampled_from(["bare", "origin", "fold", "full"]))
    if shape in ("origin", "full"):
        doc["origin"] = draw(texts)
    if shape in ("fold", "full"):
        doc["fold"] = draw(st.booleans())
    event(f"fx_snippet_shape={shape}")
    match len(annotations):
        case 0:
            event("fx_annotation_count=none")
        case 1:
            event("fx_annotation_count=one")
        case _:
            event("fx_annotation_count=many")
    return doc


@st.composite
def margin_docs(draw: st.DrawFn) -> dict[str, int]:
    names = (
        "whitespace_left",
        "span_left",
        "span_right",
        "label_right",
        "column_width",
        "max_line_len",
    )
    return {name: draw(st.integers(min_value=0, max_value=500)) for name in names}


@st.composite
def renderer_docs(draw: st.DrawFn) -> dict[str, Any] | None:
    """Generate a renderer block, or None for "omit the key".

    Events emitted:
    - fx_renderer={absent|defaults|anonymized|margin}
    """
    shape = draw(st.sampled_from(["absent", "defaults", "anonymized", "margin"]))
    event(f"fx_renderer={shape}")
    match shape:
        case "absent":
            return None
        case "defaults":
            return {}
        case "anonymized":
            return {"anonymized_line_numbers": draw(st.booleans())}
        case _:
            return {
                "anonymized_line_numbers": draw(st.booleans()),
                "margin": draw(margin_docs()),
            }


@st.composite
def message_docs(draw: st.DrawFn) -> dict[str, Any]:
    """Generate Message objects with and without optional keys.

    Events emitted:
    - fx_message_shape={bare|id|footer|full}
    """
    doc: dict[str, Any] = {
        "title": draw(label_docs()),
        "snippets": draw(st.lists(snippet_docs(), max_size=3)),
    }
    shape = draw(st.sampled_from(["bare", "id", "footer", "full"]))
    if shape in ("id", "full"):
        doc["id"] = draw(texts)
    if shape in ("footer", "full"):
        doc["footer"] = draw(st.lists(label_docs(), max_size=4))
    event(f"fx_message_shape={shape}")
    return doc


@st.composite
def fixture_docs(draw: st.DrawFn) -> dict[str, Any]:
    doc: dict[str, Any] = {"message": draw(message_docs())}
    renderer = draw(renderer_docs())
    if renderer is not None:
        doc["renderer"] = renderer
    return doc


levels = st.sampled_from(list(Level))


@st.composite
def labels(draw: st.DrawFn) -> Label:
    return Label(draw(levels), draw(texts))
