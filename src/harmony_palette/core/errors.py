"""Error types raised by the palette core."""


class PaletteError(Exception):
    """Base class for palette errors."""


class InvalidColorFormat(PaletteError, ValueError):
    """Color text is not a '#' followed by exactly six hex digits."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid color format: {value!r} (expected #RRGGBB)")


class PaletteIndexOutOfRange(PaletteError, IndexError):
    """A slot index fell outside the working palette."""

    def __init__(self, index: object, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Palette index must be 0-{size - 1}, got {index!r}")


class UnknownHarmonyMode(UserWarning):
    """
    Warning category for unrecognized harmony mode names.

    Never raised; an unknown mode falls back to random generation.
    """
