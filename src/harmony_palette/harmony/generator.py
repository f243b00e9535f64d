"""Lock-aware palette generation."""

import logging
import random
from typing import Sequence

from harmony_palette.core.color import Color
from harmony_palette.core.constants import PALETTE_SIZE
from harmony_palette.harmony.rules import HarmonyMode, harmonize, random_color

logger = logging.getLogger(__name__)


def generate(
    previous: Sequence[Color | str],
    locked: Sequence[bool],
    mode: HarmonyMode | str = HarmonyMode.ANALOGOUS,
    rng: random.Random | None = None,
) -> list[Color]:
    """
    Generate a new palette, keeping locked slots from the previous one.

    A random base color is drawn, expanded by the harmony rule, and merged
    slot by slot: locked slots keep ``previous[i]``, the rest take the
    candidate. No state is kept between calls.

    Raises:
        ValueError: if previous or locked is not exactly five long
    """
    if len(previous) != PALETTE_SIZE or len(locked) != PALETTE_SIZE:
        raise ValueError(
            f"generate needs {PALETTE_SIZE} colors and {PALETTE_SIZE} lock flags, "
            f"got {len(previous)} and {len(locked)}"
        )
    previous = [Color.coerce(c) for c in previous]
    mode = HarmonyMode.parse(mode)
    rng = rng or random.Random()

    base = random_color(rng)
    candidates = harmonize(base, mode, rng)
    logger.debug("Generated %s palette from base %s", mode.value, base.hex)

    return [old if keep else new for old, new, keep in zip(previous, candidates, locked)]
