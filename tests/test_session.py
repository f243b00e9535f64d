"""Tests for PaletteSession and Settings."""

import random
from pathlib import Path

import pytest

from harmony_palette.config import Settings
from harmony_palette.core.color import Color
from harmony_palette.core.errors import PaletteIndexOutOfRange, UnknownHarmonyMode
from harmony_palette.harmony import HarmonyMode, generate
from harmony_palette.library import PaletteCollection
from harmony_palette.session import PaletteSession

from conftest import FakeClock


@pytest.fixture
def session(clock: FakeClock) -> PaletteSession:
    return PaletteSession(rng=random.Random(21), collection=PaletteCollection(clock=clock))


class TestSession:
    """Tests for the session workflow."""

    def test_autogenerates_on_start(self) -> None:
        session = PaletteSession(mode="triadic", rng=random.Random(2))
        expected = generate([Color.WHITE] * 5, [False] * 5, HarmonyMode.TRIADIC, random.Random(2))
        assert session.colors == expected
        assert session.locked == [False] * 5

    def test_without_autogenerate(self) -> None:
        session = PaletteSession(autogenerate=False)
        assert session.colors == [Color.WHITE] * 5

    def test_default_mode(self, session: PaletteSession) -> None:
        assert session.mode is HarmonyMode.ANALOGOUS

    def test_locked_slots_survive_generate(self, session: PaletteSession) -> None:
        kept = session.colors[2]
        session.toggle_lock(2)
        for _ in range(10):
            session.generate()
            assert session.colors[2] == kept
        assert len(session.colors) == 5

    def test_fully_locked(self, session: PaletteSession) -> None:
        for i in range(5):
            session.toggle_lock(i)
        before = session.colors
        assert session.generate() == before

    def test_lock_follows_reorder(self, session: PaletteSession) -> None:
        kept = session.colors[0]
        session.toggle_lock(0)
        session.reorder(0, 4)
        assert session.locked == [False, False, False, False, True]
        session.generate()
        assert session.colors[4] == kept

    def test_reorder_out_of_range(self, session: PaletteSession) -> None:
        before = (session.colors, session.locked)
        with pytest.raises(PaletteIndexOutOfRange):
            session.reorder(0, 5)
        assert (session.colors, session.locked) == before

    def test_set_mode_unknown(self, session: PaletteSession) -> None:
        with pytest.warns(UnknownHarmonyMode):
            assert session.set_mode("neon") is HarmonyMode.RANDOM
        assert len(session.generate()) == 5

    def test_saved_snapshot_survives_regeneration(self, session: PaletteSession) -> None:
        saved = session.save()
        snapshot = [c.hex for c in saved.colors]
        session.generate()
        session.reorder(0, 3)
        assert session.export_all() == [{"id": saved.id, "colors": snapshot}]

    def test_delete(self, session: PaletteSession) -> None:
        saved = session.save()
        assert session.delete(saved.id) is True
        assert session.delete(saved.id) is False
        assert session.export_all() == []

    def test_sessions_are_isolated(self) -> None:
        a = PaletteSession(rng=random.Random(1))
        b = PaletteSession(rng=random.Random(1))
        a.toggle_lock(0)
        a.save()
        assert b.locked == [False] * 5
        assert len(b.collection) == 0
        assert a.palette is not b.palette


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        assert settings.mode is HarmonyMode.ANALOGOUS
        assert settings.export_path == Path("color-palettes.json")
        assert settings.seed is None

    def test_overrides(self) -> None:
        settings = Settings.from_env({
            "HARMONY_PALETTE_MODE": "complementary",
            "HARMONY_PALETTE_EXPORT": "/tmp/out.json",
            "HARMONY_PALETTE_SEED": "17",
        })
        assert settings.mode is HarmonyMode.COMPLEMENTARY
        assert settings.export_path == Path("/tmp/out.json")
        assert settings.seed == 17

    def test_bad_seed(self) -> None:
        with pytest.raises(ValueError):
            Settings.from_env({"HARMONY_PALETTE_SEED": "abc"})

    def test_seeded_sessions_repeat(self) -> None:
        settings = Settings(mode=HarmonyMode.TRIADIC, seed=99)
        a = PaletteSession.from_settings(settings)
        b = PaletteSession.from_settings(settings)
        assert a.mode is HarmonyMode.TRIADIC
        assert a.colors == b.colors
