"""Render saved palettes to a PNG swatch sheet (requires Pillow)."""

from pathlib import Path
from typing import Iterable

try:
    from PIL import Image, ImageDraw
    HAS_PIL = True
except ImportError:
    HAS_PIL = False

from harmony_palette.library.collection import SavedPalette


def _check_pil() -> None:
    """Raise ImportError if PIL is not available."""
    if not HAS_PIL:
        raise ImportError(
            "Pillow is required for image export. "
            "Install with: pip install harmony-palette[image]"
        )


class ImageRenderer:
    """Draw each palette as one row of solid swatches."""

    def __init__(self, swatch_size: int = 64, gap: int = 8, background: str = "#111827"):
        self.swatch_size = swatch_size
        self.gap = gap
        self.background = background

    def render(self, palettes: Iterable[SavedPalette]) -> "Image.Image":
        """Return an RGB image with one row per palette."""
        _check_pil()
        palettes = list(palettes)
        columns = max((len(p.colors) for p in palettes), default=0)
        step = self.swatch_size + self.gap
        width = max(self.gap + columns * step, 1)
        height = max(self.gap + len(palettes) * step, 1)

        img = Image.new("RGB", (width, height), self.background)
        draw = ImageDraw.Draw(img)
        for row, palette in enumerate(palettes):
            top = self.gap + row * step
            for col, color in enumerate(palette.colors):
                left = self.gap + col * step
                draw.rectangle(
                    (left, top, left + self.swatch_size - 1, top + self.swatch_size - 1),
                    fill=color.rgb,
                )
        return img

    def save(self, palettes: Iterable[SavedPalette], path: str | Path) -> Path:
        path = Path(path)
        self.render(palettes).save(path, format="PNG")
        return path
