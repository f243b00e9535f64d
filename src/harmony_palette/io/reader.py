"""Load exported palette collections."""

import json
from pathlib import Path

from harmony_palette.library.collection import PaletteCollection


def load_collection(path: str | Path) -> PaletteCollection:
    """
    Load a collection from an exported JSON file.

    Raises:
        InvalidColorFormat: if a stored color is malformed
        ValueError: if the file is not a palette export
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path} is not valid JSON: {e}") from e
    return PaletteCollection.from_export(payload)
