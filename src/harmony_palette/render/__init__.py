"""Renderers for palettes and collections."""

from harmony_palette.render.terminal import TerminalRenderer
from harmony_palette.render.html import HtmlRenderer
from harmony_palette.render.json_format import JsonRenderer
from harmony_palette.render.image import ImageRenderer

__all__ = ["TerminalRenderer", "HtmlRenderer", "JsonRenderer", "ImageRenderer"]
