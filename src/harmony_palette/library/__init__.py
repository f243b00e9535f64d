"""Saved palette collection."""

from harmony_palette.library.collection import PaletteCollection, SavedPalette

__all__ = ["PaletteCollection", "SavedPalette"]
