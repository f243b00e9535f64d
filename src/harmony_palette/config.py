"""Settings with environment overrides."""

import os
from dataclasses import dataclass
from pathlib import Path

from harmony_palette.core.constants import DEFAULT_EXPORT_NAME
from harmony_palette.harmony.rules import HarmonyMode


@dataclass(frozen=True)
class Settings:
    """
    Defaults for sessions and the CLI.

    Environment variables:
        HARMONY_PALETTE_MODE: default harmony mode name
        HARMONY_PALETTE_EXPORT: default collection file
        HARMONY_PALETTE_SEED: integer seed for reproducible sessions
    """
    mode: HarmonyMode = HarmonyMode.ANALOGOUS
    export_path: Path = Path(DEFAULT_EXPORT_NAME)
    seed: int | None = None

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        mode = HarmonyMode.ANALOGOUS
        if mode_name := env.get("HARMONY_PALETTE_MODE"):
            mode = HarmonyMode.parse(mode_name)
        export_path = Path(DEFAULT_EXPORT_NAME)
        if export_name := env.get("HARMONY_PALETTE_EXPORT"):
            export_path = Path(export_name).expanduser()
        seed = None
        if seed_text := env.get("HARMONY_PALETTE_SEED"):
            try:
                seed = int(seed_text)
            except ValueError:
                raise ValueError(f"HARMONY_PALETTE_SEED must be an integer, got {seed_text!r}") from None
        return cls(mode=mode, export_path=export_path, seed=seed)
