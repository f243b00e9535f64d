"""
harmony-palette: harmonious five-color palettes

Generate palettes under a harmony rule, lock slots so regeneration skips
them, reorder slots with their locks, and collect and export saved sets.

Quick Start:
    >>> import harmony_palette as hp
    >>> session = hp.PaletteSession(mode="triadic")
    >>> session.toggle_lock(0)
    >>> session.generate()
    >>> saved = session.save()
    >>> hp.save_collection(session.collection, "color-palettes.json")

Features:
    - Hex <-> HSL conversion with explicit domain clamping
    - Analogous, complementary and triadic rules (random fallback)
    - Lock-aware regeneration and lock-preserving reorder
    - Saved palette collection with unique ids and JSON export
    - Render palettes to terminal, HTML, JSON or PNG
"""

__version__ = "0.1.0"

# Core types
from harmony_palette.core.color import HSL, Color
from harmony_palette.core.errors import (
    InvalidColorFormat,
    PaletteError,
    PaletteIndexOutOfRange,
    UnknownHarmonyMode,
)
from harmony_palette.core.palette import Slot, WorkingPalette, reorder

# Conversion
from harmony_palette.codec.hsl import hex_to_hsl, hsl_to_color, hsl_to_hex

# Generation
from harmony_palette.harmony.rules import HarmonyMode, harmonize, random_color
from harmony_palette.harmony.generator import generate

# Collection
from harmony_palette.library.collection import PaletteCollection, SavedPalette
from harmony_palette.session import PaletteSession
from harmony_palette.config import Settings

# I/O
from harmony_palette.io.reader import load_collection
from harmony_palette.io.writer import save_collection

__all__ = [
    # Version
    "__version__",
    # Core types
    "HSL",
    "Color",
    "Slot",
    "WorkingPalette",
    "reorder",
    # Errors
    "InvalidColorFormat",
    "PaletteError",
    "PaletteIndexOutOfRange",
    "UnknownHarmonyMode",
    # Conversion
    "hex_to_hsl",
    "hsl_to_color",
    "hsl_to_hex",
    # Generation
    "HarmonyMode",
    "harmonize",
    "random_color",
    "generate",
    # Collection
    "PaletteCollection",
    "SavedPalette",
    "PaletteSession",
    "Settings",
    # I/O
    "load_collection",
    "save_collection",
]
