"""Render saved palettes to an HTML page of swatches."""

from html import escape
from typing import Iterable

from harmony_palette.library.collection import SavedPalette


class HtmlRenderer:
    """Render palettes as rows of colored blocks with inline styles."""

    def __init__(
        self,
        css_class: str = "palettes",
        swatch_height: str = "4em",
        font_family: str = "monospace",
        title: str = "Saved Palettes",
    ):
        self.css_class = css_class
        self.swatch_height = swatch_height
        self.font_family = font_family
        self.title = title

    def render(self, palettes: Iterable[SavedPalette]) -> str:
        """Render palettes to a standalone HTML document."""
        rows = [self._render_palette(p) for p in palettes]
        body = "\n".join(rows)
        return f'''<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{escape(self.title)}</title></head>
<body style="background: #111827; color: #fff; font-family: {self.font_family};">
<h1>{escape(self.title)}</h1>
<div class="{self.css_class}">
{body}
</div>
</body>
</html>'''

    def _render_palette(self, palette: SavedPalette) -> str:
        swatches = "".join(
            f'<div title="{c.hex}" style="flex: 1; height: {self.swatch_height}; '
            f'background: {c.hex};"></div>'
            for c in palette.colors
        )
        labels = " ".join(c.hex for c in palette.colors)
        return (
            f'<div class="palette" data-id="{palette.id}" style="margin-bottom: 1em;">'
            f'<div style="display: flex; gap: 0.5em;">{swatches}</div>'
            f"<small>{labels}</small></div>"
        )
