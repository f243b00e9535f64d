"""Render a palette collection to its JSON export payload.

Output is a list of entries in insertion order:

[
  {"id": 1700000000000, "colors": ["#3366CC", "#CC9933", "#7A5C1F", "#1F3D7A", "#4D6FB3"]}
]

Lock state never appears in the payload.
"""

import json
from typing import Any

from harmony_palette.library.collection import PaletteCollection


class JsonRenderer:
    """Serialize a collection for download or round-trip reconstruction."""

    def __init__(self, indent: int | None = 2, lowercase: bool = False):
        """
        Args:
            indent: JSON indentation (None for compact)
            lowercase: Emit '#rrggbb' instead of '#RRGGBB'
        """
        self.indent = indent
        self.lowercase = lowercase

    def render(self, collection: PaletteCollection) -> str:
        return json.dumps(self.to_list(collection), indent=self.indent)

    def to_list(self, collection: PaletteCollection) -> list[dict[str, Any]]:
        payload = collection.export_all()
        if self.lowercase:
            for entry in payload:
                entry["colors"] = [c.lower() for c in entry["colors"]]
        return payload
