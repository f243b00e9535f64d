"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from harmony_palette.cli.app import create_app
from harmony_palette.io import load_collection, save_collection
from harmony_palette.library import PaletteCollection

runner = CliRunner()


@pytest.fixture
def app(monkeypatch: pytest.MonkeyPatch):
    for name in ("HARMONY_PALETTE_MODE", "HARMONY_PALETTE_EXPORT", "HARMONY_PALETTE_SEED"):
        monkeypatch.delenv(name, raising=False)
    return create_app()


@pytest.fixture
def collection_file(tmp_path: Path) -> Path:
    collection = PaletteCollection()
    collection.save(["#3366CC", "#CC9933", "#7A5C1F", "#1F3D7A", "#4D6FB3"])
    return save_collection(collection, tmp_path / "color-palettes.json")


class TestGenerate:
    """Tests for the generate command."""

    def test_json_output(self, app) -> None:
        result = runner.invoke(app, ["generate", "--seed", "5", "--count", "3", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert len(data) == 3
        assert all(len(colors) == 5 for colors in data)

    def test_seed_is_reproducible(self, app) -> None:
        first = runner.invoke(app, ["generate", "--seed", "5", "--json", "-m", "triadic"])
        second = runner.invoke(app, ["generate", "--seed", "5", "--json", "-m", "triadic"])
        assert first.stdout == second.stdout

    def test_save_appends(self, app, collection_file: Path) -> None:
        result = runner.invoke(app, ["generate", "--count", "2", "--save", str(collection_file)])
        assert result.exit_code == 0, result.output
        assert len(load_collection(collection_file)) == 3

    def test_save_creates_file(self, app, tmp_path: Path) -> None:
        path = tmp_path / "new.json"
        result = runner.invoke(app, ["generate", "--save", str(path)])
        assert result.exit_code == 0, result.output
        assert len(load_collection(path)) == 1


class TestConvert:
    """Tests for the convert command."""

    def test_convert(self, app) -> None:
        result = runner.invoke(app, ["convert", "#3366cc"])
        assert result.exit_code == 0, result.output
        assert "220.0" in result.output
        assert "#3366CC" in result.output

    def test_convert_invalid(self, app) -> None:
        result = runner.invoke(app, ["convert", "blue"])
        assert result.exit_code == 1


class TestCollectionCommands:
    """Tests for show, delete and render."""

    def test_show(self, app, collection_file: Path) -> None:
        palette_id = load_collection(collection_file).palettes[0].id
        result = runner.invoke(app, ["show", str(collection_file)])
        assert result.exit_code == 0, result.output
        assert str(palette_id) in result.output

    def test_show_missing(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["show", str(tmp_path / "nope.json")])
        assert result.exit_code == 1

    def test_delete(self, app, collection_file: Path) -> None:
        palette_id = load_collection(collection_file).palettes[0].id
        result = runner.invoke(app, ["delete", str(collection_file), str(palette_id)])
        assert result.exit_code == 0, result.output
        assert len(load_collection(collection_file)) == 0

    def test_delete_unknown_id(self, app, collection_file: Path) -> None:
        result = runner.invoke(app, ["delete", str(collection_file), "1"])
        assert result.exit_code == 0
        assert len(load_collection(collection_file)) == 1

    def test_render_html(self, app, collection_file: Path, tmp_path: Path) -> None:
        dest = tmp_path / "palettes.html"
        result = runner.invoke(app, ["render", str(collection_file), str(dest)])
        assert result.exit_code == 0, result.output
        assert "#3366CC" in dest.read_text()

    def test_render_unknown_format(self, app, collection_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", str(collection_file), str(tmp_path / "out.bmp")])
        assert result.exit_code == 1


class TestSettingsErrors:
    """Bad environment settings are reported, not raised."""

    def test_bad_seed_reported(self, app, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HARMONY_PALETTE_SEED", "abc")
        result = runner.invoke(app, ["generate", "--json"])
        assert result.exit_code == 1
        assert "HARMONY_PALETTE_SEED must be an integer" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_bad_seed_on_show(self, app, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HARMONY_PALETTE_SEED", "abc")
        result = runner.invoke(app, ["show"])
        assert result.exit_code == 1
