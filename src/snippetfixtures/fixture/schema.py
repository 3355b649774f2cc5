"""JSON Schema export for fixture documents.

Lets editors and linters validate fixture files without importing this
package.

Python 3.13+.
"""

from collections.abc import Mapping
from typing import cast

import msgspec

from .defs import FixtureDef

__all__ = ["fixture_json_schema"]


def fixture_json_schema() -> Mapping[str, object]:
    """Return a JSON Schema 2020-12 payload describing a fixture document."""
    return cast("Mapping[str, object]", msgspec.json.schema(FixtureDef))
