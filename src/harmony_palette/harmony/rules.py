"""
Harmony rules: derive four related colors from a base color.

Each rule is a table of (hue offset, saturation delta, lightness delta)
applied to the base color's HSL. The base itself always occupies the
first slot, unchanged.
"""

import logging
import random
import warnings
from enum import Enum

from harmony_palette.codec.hsl import hex_to_hsl, hsl_to_color
from harmony_palette.core.color import Color
from harmony_palette.core.constants import PALETTE_SIZE, SHADE_STEP
from harmony_palette.core.errors import UnknownHarmonyMode

logger = logging.getLogger(__name__)


class HarmonyMode(str, Enum):
    """Named rules for deriving a palette from a base color."""
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    # Fallback for unrecognized names: five unrelated colors
    RANDOM = "random"

    @classmethod
    def parse(cls, value: "HarmonyMode | str") -> "HarmonyMode":
        """
        Resolve a mode name.

        Unknown names resolve to RANDOM and emit an UnknownHarmonyMode
        warning instead of raising.
        """
        if isinstance(value, HarmonyMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.warning("Unknown harmony mode %r, falling back to random colors", value)
            warnings.warn(
                f"Unknown harmony mode {value!r}; using random colors",
                UnknownHarmonyMode,
                stacklevel=2,
            )
            return cls.RANDOM


# (hue offset in degrees, saturation delta, lightness delta) for slots 2-5
RULES: dict[HarmonyMode, tuple[tuple[float, float, float], ...]] = {
    HarmonyMode.ANALOGOUS: (
        (30, 0, 0),
        (60, 0, 0),
        (-30, 0, 0),
        (-60, 0, 0),
    ),
    HarmonyMode.COMPLEMENTARY: (
        (180, 0, 0),
        (180, 0, -SHADE_STEP),
        (0, 0, -SHADE_STEP),
        (0, -SHADE_STEP, 0),
    ),
    HarmonyMode.TRIADIC: (
        (120, 0, 0),
        (240, 0, 0),
        (120, 0, -SHADE_STEP),
        (240, 0, -SHADE_STEP),
    ),
}


def random_color(rng: random.Random | None = None) -> Color:
    """Draw a color with each channel independently uniform in 0-255."""
    rng = rng or random.Random()
    return Color(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


def harmonize(
    base: Color | str,
    mode: HarmonyMode | str,
    rng: random.Random | None = None,
) -> list[Color]:
    """
    Build a five-color palette from a base color under a harmony rule.

    Args:
        base: Base color, returned unchanged in the first slot
        mode: Rule to apply; unknown names fall back to RANDOM
        rng: Random source used only by the RANDOM rule

    Returns:
        Exactly five colors
    """
    base = Color.coerce(base)
    mode = HarmonyMode.parse(mode)

    if mode is HarmonyMode.RANDOM:
        rng = rng or random.Random()
        return [random_color(rng) for _ in range(PALETTE_SIZE)]

    hsl = hex_to_hsl(base)
    colors = [base]
    for hue, saturation, lightness in RULES[mode]:
        colors.append(hsl_to_color(hsl.shifted(hue, saturation, lightness)))
    return colors
