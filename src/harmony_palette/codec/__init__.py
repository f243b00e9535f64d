"""Color text parsing and HSL conversion."""

from harmony_palette.codec.hsl import hex_to_hsl, hsl_to_color, hsl_to_hex

__all__ = ["hex_to_hsl", "hsl_to_color", "hsl_to_hex"]
