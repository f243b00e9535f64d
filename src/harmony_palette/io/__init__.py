"""File I/O for exported palette collections."""

from harmony_palette.io.reader import load_collection
from harmony_palette.io.writer import save_collection

__all__ = ["load_collection", "save_collection"]
