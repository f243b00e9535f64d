"""Core value types for palettes."""

from harmony_palette.core.color import HSL, Color
from harmony_palette.core.errors import (
    InvalidColorFormat,
    PaletteError,
    PaletteIndexOutOfRange,
    UnknownHarmonyMode,
)
from harmony_palette.core.palette import Slot, WorkingPalette, reorder

__all__ = [
    "HSL",
    "Color",
    "InvalidColorFormat",
    "PaletteError",
    "PaletteIndexOutOfRange",
    "UnknownHarmonyMode",
    "Slot",
    "WorkingPalette",
    "reorder",
]
