"""Write palette collections to disk."""

from pathlib import Path

from harmony_palette.library.collection import PaletteCollection


def save_collection(
    collection: PaletteCollection,
    path: str | Path,
    indent: int | None = 2,
) -> Path:
    """
    Write the collection's export payload as JSON.

    Returns the path written.
    """
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(collection.to_json(indent=indent))
        f.write("\n")
    return path
