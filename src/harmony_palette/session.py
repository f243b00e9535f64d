"""PaletteSession - one user's working palette, mode and saved collection."""

import logging
import random
from dataclasses import dataclass, field
from typing import Any

from harmony_palette.config import Settings
from harmony_palette.core.color import Color
from harmony_palette.core.palette import WorkingPalette
from harmony_palette.harmony.generator import generate
from harmony_palette.harmony.rules import HarmonyMode
from harmony_palette.library.collection import PaletteCollection, SavedPalette

logger = logging.getLogger(__name__)


@dataclass
class PaletteSession:
    """
    Explicit per-user context for every palette operation.

    Sessions share nothing; two sessions can run side by side without
    coordination. A new session generates its first palette immediately
    unless ``autogenerate`` is False.
    """
    mode: HarmonyMode = HarmonyMode.ANALOGOUS
    palette: WorkingPalette = field(default_factory=WorkingPalette)
    collection: PaletteCollection = field(default_factory=PaletteCollection)
    rng: random.Random = field(default_factory=random.Random)
    autogenerate: bool = True

    def __post_init__(self) -> None:
        self.mode = HarmonyMode.parse(self.mode)
        if self.autogenerate:
            self.generate()

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "PaletteSession":
        """Create a session using configured mode and seed."""
        kwargs.setdefault("mode", settings.mode)
        kwargs.setdefault("rng", random.Random(settings.seed))
        return cls(**kwargs)

    @property
    def colors(self) -> list[Color]:
        return self.palette.colors

    @property
    def locked(self) -> list[bool]:
        return self.palette.locked

    def set_mode(self, mode: HarmonyMode | str) -> HarmonyMode:
        self.mode = HarmonyMode.parse(mode)
        return self.mode

    def generate(self) -> list[Color]:
        """Regenerate every unlocked slot under the current mode."""
        colors = generate(self.palette.colors, self.palette.locked, self.mode, self.rng)
        self.palette.set_colors(colors)
        return colors

    def toggle_lock(self, index: int) -> bool:
        return self.palette.toggle_lock(index)

    def reorder(self, from_index: int, to_index: int | None) -> None:
        """Move one slot; its lock moves with it."""
        self.palette.move(from_index, to_index)

    def save(self) -> SavedPalette:
        return self.collection.save(self.palette.colors)

    def delete(self, palette_id: int) -> bool:
        return self.collection.delete(palette_id)

    def export_all(self) -> list[dict[str, Any]]:
        return self.collection.export_all()
