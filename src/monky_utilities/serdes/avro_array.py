"""Generic array of JSON values.

Encodes as a plain JSON array.  ``with_type`` builds the adjacent wrapper
directly, keeping ``None`` elements (no mapper filtering is applied).
"""

from __future__ import annotations

from typing import Any

from .mapper import TYPE_KEY, VALUE_KEY


class AvroGenericArray(list):
    """A list of JSON values carried as one array payload."""

    def with_type(self, type_name: str) -> dict[str, Any]:
        return {TYPE_KEY: type_name, VALUE_KEY: list(self)}

    def __repr__(self) -> str:
        return f"AvroGenericArray({list.__repr__(self)})"
