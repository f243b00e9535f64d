"""Saved palettes and the session's collection of them."""

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Sequence

from harmony_palette.core.color import Color
from harmony_palette.core.constants import PALETTE_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedPalette:
    """An immutable snapshot of a working palette's colors (no lock state)."""
    id: int
    colors: tuple[Color, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "colors": [c.hex for c in self.colors]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SavedPalette":
        """
        Rebuild a snapshot from one export entry.

        Raises:
            InvalidColorFormat: if a color is not '#RRGGBB'
            ValueError: if the entry is missing fields or has the wrong size
        """
        if not isinstance(data, dict) or "id" not in data or "colors" not in data:
            raise ValueError(f"Palette entry needs 'id' and 'colors': {data!r}")
        palette_id = data["id"]
        if isinstance(palette_id, bool) or not isinstance(palette_id, int):
            raise ValueError(f"Palette id must be an integer, got {palette_id!r}")
        colors = data["colors"]
        if not isinstance(colors, list) or len(colors) != PALETTE_SIZE:
            raise ValueError(f"Palette {palette_id} must have {PALETTE_SIZE} colors")
        return cls(palette_id, tuple(Color.from_hex(c) for c in colors))


def _clock_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class PaletteCollection:
    """
    Ordered saved palettes with ids unique for the collection's lifetime.

    Ids are epoch milliseconds, bumped past the last issued id whenever
    the clock has not moved, so they strictly increase.
    """
    palettes: list[SavedPalette] = field(default_factory=list)
    clock: Callable[[], int] = _clock_ms
    _last_id: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.palettes:
            self._last_id = max(self._last_id, max(p.id for p in self.palettes))

    def __len__(self) -> int:
        return len(self.palettes)

    def __iter__(self) -> Iterator[SavedPalette]:
        return iter(self.palettes)

    def __contains__(self, palette_id: object) -> bool:
        return any(p.id == palette_id for p in self.palettes)

    def get(self, palette_id: int) -> SavedPalette | None:
        return next((p for p in self.palettes if p.id == palette_id), None)

    def _next_id(self) -> int:
        self._last_id = max(self.clock(), self._last_id + 1)
        return self._last_id

    def save(self, colors: Sequence[Color | str]) -> SavedPalette:
        """
        Snapshot colors into a new saved palette and append it.

        Raises:
            ValueError: if colors is not exactly five long
        """
        if len(colors) != PALETTE_SIZE:
            raise ValueError(f"A saved palette holds {PALETTE_SIZE} colors, got {len(colors)}")
        entry = SavedPalette(self._next_id(), tuple(Color.coerce(c) for c in colors))
        self.palettes.append(entry)
        logger.info("Saved palette %d (%s)", entry.id, " ".join(c.hex for c in entry.colors))
        return entry

    def delete(self, palette_id: int) -> bool:
        """Remove the palette with this id. Returns False if there was none."""
        for i, palette in enumerate(self.palettes):
            if palette.id == palette_id:
                del self.palettes[i]
                logger.info("Deleted palette %d", palette_id)
                return True
        return False

    def export_all(self) -> list[dict[str, Any]]:
        """JSON-serializable list of every palette, in insertion order."""
        return [p.to_dict() for p in self.palettes]

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.export_all(), indent=indent)

    @classmethod
    def from_export(
        cls,
        payload: list[dict[str, Any]],
        clock: Callable[[], int] = _clock_ms,
    ) -> "PaletteCollection":
        """
        Rebuild a collection from an ``export_all`` payload.

        Raises:
            InvalidColorFormat: if a color is malformed
            ValueError: if the payload is not a list of palette entries
                or repeats an id
        """
        if not isinstance(payload, list):
            raise ValueError("Palette export must be a list of entries")
        palettes = [SavedPalette.from_dict(entry) for entry in payload]
        ids = [p.id for p in palettes]
        if len(set(ids)) != len(ids):
            raise ValueError("Palette export contains duplicate ids")
        return cls(palettes=palettes, clock=clock)

    @classmethod
    def from_json(cls, text: str, clock: Callable[[], int] = _clock_ms) -> "PaletteCollection":
        return cls.from_export(json.loads(text), clock=clock)
