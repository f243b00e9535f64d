"""Typer CLI application."""

import json
import logging
import random
from pathlib import Path
from typing import Annotated, NoReturn, Optional, Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from harmony_palette.config import Settings
from harmony_palette.core.color import Color
from harmony_palette.core.errors import PaletteError


def _swatches(colors: Sequence[Color], locked: Sequence[bool] | None = None) -> Text:
    """Build a rich Text line of colored blocks followed by hex codes."""
    locked = locked or [False] * len(colors)
    text = Text()
    for color in colors:
        text.append("      ", style=f"on {color.hex}")
        text.append(" ")
    text.append("\n")
    for color, is_locked in zip(colors, locked):
        text.append(f"{color.hex}{'*' if is_locked else ' '}")
    return text


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="harmony-palette",
        help="Generate, collect and export harmonious color palettes.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def _settings() -> Settings:
        try:
            return Settings.from_env()
        except ValueError as e:
            _fail(str(e))

    def _load_or_new(path: Path):
        from harmony_palette.io import load_collection
        from harmony_palette.library import PaletteCollection

        if path.exists():
            return load_collection(path)
        return PaletteCollection()

    def _fail(message: str) -> NoReturn:
        console.print(f"[red]{message}[/]")
        raise typer.Exit(1)

    @app.callback()
    def main_options(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Generate, collect and export harmonious color palettes."""
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=console, show_path=False)],
            )

    @app.command()
    def generate(
        mode: Annotated[Optional[str], typer.Option("--mode", "-m", help="analogous, complementary or triadic")] = None,
        count: Annotated[int, typer.Option("--count", "-n", min=1, help="Number of palettes")] = 1,
        seed: Annotated[Optional[int], typer.Option("--seed", help="Random seed")] = None,
        save: Annotated[Optional[Path], typer.Option("--save", "-s", help="Append palettes to this collection file")] = None,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Generate palettes under a harmony rule."""
        from harmony_palette.io import save_collection
        from harmony_palette.session import PaletteSession

        settings = _settings()
        session = PaletteSession(
            mode=mode or settings.mode,
            rng=random.Random(seed if seed is not None else settings.seed),
            autogenerate=False,
        )
        if save is not None:
            try:
                session.collection = _load_or_new(save)
            except (PaletteError, ValueError) as e:
                _fail(str(e))

        generated = []
        for _ in range(count):
            generated.append(session.generate())
            if save is not None:
                session.save()

        if json_output:
            print(json.dumps([[c.hex for c in colors] for colors in generated], indent=2))
        else:
            console.print(f"[bold]{session.mode.value}[/]")
            for colors in generated:
                console.print(_swatches(colors))

        if save is not None:
            save_collection(session.collection, save)
            console.print(f"[green]Saved {count} palette(s) to {save}[/]")

    @app.command()
    def convert(
        color: Annotated[str, typer.Argument(help="Color as #RRGGBB")],
    ) -> None:
        """Show a color's HSL values and its round-tripped hex."""
        from harmony_palette.codec import hex_to_hsl, hsl_to_hex

        try:
            hsl = hex_to_hsl(color)
        except PaletteError as e:
            _fail(str(e))
        console.print(Text("        ", style=f"on {Color.from_hex(color).hex}"))
        console.print(f"[bold]HSL:[/] {hsl.h:.1f}, {hsl.s:.1f}%, {hsl.l:.1f}%")
        console.print(f"[bold]Hex:[/] {hsl_to_hex(hsl)}")

    @app.command()
    def show(
        path: Annotated[Optional[Path], typer.Argument(help="Collection file")] = None,
    ) -> None:
        """List every palette in a collection file."""
        from harmony_palette.io import load_collection

        path = path or _settings().export_path
        try:
            collection = load_collection(path)
        except FileNotFoundError:
            _fail(f"No collection at {path}")
        except (PaletteError, ValueError) as e:
            _fail(str(e))

        if not len(collection):
            console.print(f"[yellow]{path} has no palettes[/]")
            return
        for palette in collection:
            console.print(f"[bold cyan]{palette.id}[/]")
            console.print(_swatches(palette.colors))

    @app.command()
    def delete(
        path: Annotated[Path, typer.Argument(help="Collection file")],
        palette_id: Annotated[int, typer.Argument(help="Id of the palette to remove")],
    ) -> None:
        """Remove one palette from a collection file."""
        from harmony_palette.io import load_collection, save_collection

        try:
            collection = load_collection(path)
        except FileNotFoundError:
            _fail(f"No collection at {path}")
        except (PaletteError, ValueError) as e:
            _fail(str(e))

        if collection.delete(palette_id):
            save_collection(collection, path)
            console.print(f"[green]Deleted palette {palette_id}[/]")
        else:
            console.print(f"[dim]No palette {palette_id} in {path}[/]")

    @app.command()
    def render(
        source: Annotated[Path, typer.Argument(help="Collection file")],
        dest: Annotated[Path, typer.Argument(help="Destination file")],
        format: Annotated[Optional[str], typer.Option("--format", "-F", help="Output format (auto-detected from extension)")] = None,
    ) -> None:
        """Render a collection file to HTML, PNG or JSON."""
        from harmony_palette.io import load_collection
        from harmony_palette.render import HtmlRenderer, ImageRenderer, JsonRenderer

        try:
            collection = load_collection(source)
        except FileNotFoundError:
            _fail(f"No collection at {source}")
        except (PaletteError, ValueError) as e:
            _fail(str(e))

        fmt = format or dest.suffix.lstrip('.').lower()
        if fmt == "html":
            dest.write_text(HtmlRenderer().render(collection), encoding="utf-8")
        elif fmt == "json":
            dest.write_text(JsonRenderer().render(collection), encoding="utf-8")
        elif fmt == "png":
            try:
                ImageRenderer().save(collection, dest)
            except ImportError as e:
                _fail(str(e))
        else:
            _fail(f"Unknown format: {fmt}")

        console.print(f"[green]Rendered {source} → {dest}[/]")

    return app
