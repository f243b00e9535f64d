"""Render palettes as truecolor swatch strips for the terminal."""

from typing import Iterable, Sequence

from harmony_palette.core.color import Color
from harmony_palette.library.collection import SavedPalette

LOCK_MARK = "*"


class TerminalRenderer:
    """
    Render palettes to ANSI escape sequences.

    Each slot is a block of background-colored spaces with the hex code
    printed underneath.
    """

    def __init__(self, swatch_width: int = 9, height: int = 2, reset_at_end: bool = True):
        self.swatch_width = max(swatch_width, 8)
        self.height = max(height, 1)
        self.reset_at_end = reset_at_end

    def render(self, colors: Sequence[Color], locked: Sequence[bool] | None = None) -> str:
        """Render one palette; locked slots get a marker after the hex code."""
        locked = locked or [False] * len(colors)
        lines: list[str] = []

        block = " " * self.swatch_width
        row = " ".join(f"\x1b[{c.to_sgr_bg()}m{block}\x1b[0m" for c in colors)
        lines.extend([row] * self.height)

        labels = []
        for color, is_locked in zip(colors, locked):
            label = color.hex + (LOCK_MARK if is_locked else "")
            labels.append(label.ljust(self.swatch_width))
        lines.append(" ".join(labels).rstrip())

        result = "\n".join(lines)
        if self.reset_at_end:
            result += "\x1b[0m"
        return result

    def render_collection(self, palettes: Iterable[SavedPalette]) -> str:
        """Render saved palettes one after another, each headed by its id."""
        sections = [f"#{p.id}\n{self.render(p.colors)}" for p in palettes]
        return "\n\n".join(sections)
