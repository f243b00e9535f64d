"""Shared fixtures: seeded randomness and a controllable clock."""

import random

import pytest

from harmony_palette.core.color import Color
from harmony_palette.library.collection import PaletteCollection


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def channel_distance(a: Color, b: Color) -> int:
    """Largest per-channel difference between two colors."""
    return max(abs(x - y) for x, y in zip(a.rgb, b.rgb))


def hue_distance(a: float, b: float) -> float:
    """Distance between two hues on the color wheel."""
    d = abs(a - b) % 360
    return min(d, 360 - d)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def collection(clock: FakeClock) -> PaletteCollection:
    return PaletteCollection(clock=clock)


@pytest.fixture
def blue_palette() -> list[Color]:
    return [Color.from_hex(c) for c in ("#3366CC", "#CC9933", "#7A5C1F", "#1F3D7A", "#4D6FB3")]
