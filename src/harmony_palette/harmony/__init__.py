"""Harmony rules and lock-aware palette generation."""

from harmony_palette.harmony.rules import RULES, HarmonyMode, harmonize, random_color
from harmony_palette.harmony.generator import generate

__all__ = ["RULES", "HarmonyMode", "harmonize", "random_color", "generate"]
