"""
Conversion between 24-bit hex colors and HSL.

hex_to_hsl follows the classic max/min formulation; hsl_to_hex uses the
chroma function f(n) = l - a * clamp(min(k - 3, 9 - k, 1), -1, 1) with
k = (n + h/30) mod 12, sampled at n = 0, 8, 4 for red, green, blue.

Round trips are accurate to within one unit per channel.
"""

import math

from harmony_palette.core.color import HSL, Color


def hex_to_hsl(color: Color | str) -> HSL:
    """
    Convert a color to HSL.

    Args:
        color: A Color or '#RRGGBB' text (case-insensitive)

    Returns:
        HSL with hue in [0, 360), saturation and lightness in [0, 100]

    Raises:
        InvalidColorFormat: if text is not a six-digit hex color
    """
    color = Color.coerce(color)
    r, g, b = color.r / 255, color.g / 255, color.b / 255

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    if high == low:
        return HSL(0.0, 0.0, lightness * 100)

    delta = high - low
    if lightness > 0.5:
        saturation = delta / (2 - high - low)
    else:
        saturation = delta / (high + low)

    if high == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif high == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    degrees = hue * 60
    if degrees < 0:
        degrees += 360
    return HSL(degrees % 360, saturation * 100, lightness * 100)


def _channel(value: float) -> int:
    # Half-up rounding, then clamp to a byte
    return max(0, min(255, math.floor(value * 255 + 0.5)))


def hsl_to_color(hsl: HSL) -> Color:
    """Convert HSL to a Color, clamping out-of-domain components first."""
    hsl = hsl.clamped()
    h = hsl.h
    s = hsl.s / 100
    l = hsl.l / 100
    a = s * min(l, 1 - l)

    def f(n: int) -> float:
        k = (n + h / 30) % 12
        return l - a * max(-1.0, min(k - 3, 9 - k, 1.0))

    return Color(_channel(f(0)), _channel(f(8)), _channel(f(4)))


def hsl_to_hex(hsl: HSL) -> str:
    """Convert HSL to '#RRGGBB' text."""
    return hsl_to_color(hsl).hex
