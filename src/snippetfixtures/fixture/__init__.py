"""Fixture decoding: declarative documents to renderer inputs.

Public API:
    decode_fixture - Parse a TOML/JSON document into a Fixture
    convert_fixture - Decode an already-parsed builtin tree
    decode_label, decode_annotation, decode_snippet, decode_message,
    decode_renderer - Decode one schema object
    encode_label, encode_annotation, encode_fixture, dumps_json - Encoders
    level_from_tag, level_to_tag - Severity tag bridge
    fixture_json_schema - JSON Schema for fixture documents

Python 3.13+.
"""

from .convert import Fixture
from .decode import (
    convert_fixture,
    decode_annotation,
    decode_fixture,
    decode_fixture_def,
    decode_label,
    decode_message,
    decode_renderer,
    decode_snippet,
)
from .defs import (
    AnnotationDef,
    FixtureDef,
    LabelDef,
    MarginDef,
    MessageDef,
    RendererDef,
    SnippetDef,
)
from .encode import dumps_json, encode_annotation, encode_fixture, encode_label
from .levels import SeverityTag, level_from_tag, level_to_tag
from .schema import fixture_json_schema

__all__ = [
    "AnnotationDef",
    "Fixture",
    "FixtureDef",
    "LabelDef",
    "MarginDef",
    "MessageDef",
    "RendererDef",
    "SeverityTag",
    "SnippetDef",
    "convert_fixture",
    "decode_annotation",
    "decode_fixture",
    "decode_fixture_def",
    "decode_label",
    "decode_message",
    "decode_renderer",
    "decode_snippet",
    "dumps_json",
    "encode_annotation",
    "encode_fixture",
    "encode_label",
    "fixture_json_schema",
    "level_from_tag",
    "level_to_tag",
]
