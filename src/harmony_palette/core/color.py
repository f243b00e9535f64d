"""Color and HSL value types."""

import re
from dataclasses import dataclass
from typing import ClassVar

from harmony_palette.core.errors import InvalidColorFormat

_HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


@dataclass(frozen=True)
class Color:
    """
    A 24-bit RGB color.

    Exchanged as '#RRGGBB' text. Input hex is case-insensitive;
    ``hex`` always renders uppercase.
    """
    r: int
    g: int
    b: int

    WHITE: ClassVar["Color"]
    BLACK: ClassVar["Color"]

    def __post_init__(self) -> None:
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in (self.r, self.g, self.b)):
            raise ValueError(f"RGB values must be 0-255, got ({self.r}, {self.g}, {self.b})")

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse '#RRGGBB' text. Raises InvalidColorFormat on anything else."""
        if not isinstance(text, str):
            raise InvalidColorFormat(text)
        match = _HEX_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidColorFormat(text)
        r, g, b = (int(part, 16) for part in match.groups())
        return cls(r, g, b)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        return cls(r, g, b)

    @classmethod
    def coerce(cls, value: "Color | str") -> "Color":
        """Accept either a Color or its hex text."""
        if isinstance(value, Color):
            return value
        return cls.from_hex(value)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_sgr_fg(self) -> str:
        """Return truecolor SGR parameters for foreground color."""
        return f"38;2;{self.r};{self.g};{self.b}"

    def to_sgr_bg(self) -> str:
        """Return truecolor SGR parameters for background color."""
        return f"48;2;{self.r};{self.g};{self.b}"

    def __str__(self) -> str:
        return self.hex


@dataclass(frozen=True)
class HSL:
    """
    Hue in degrees, saturation and lightness in percent.

    Values may drift outside their domains during rule arithmetic;
    ``clamped`` brings them back before conversion.
    """
    h: float
    s: float
    l: float

    def clamped(self) -> "HSL":
        """Hue reduced into [0, 360), saturation and lightness into [0, 100]."""
        return HSL(
            h=((self.h % 360) + 360) % 360,
            s=max(0.0, min(100.0, self.s)),
            l=max(0.0, min(100.0, self.l)),
        )

    def shifted(self, hue: float = 0, saturation: float = 0, lightness: float = 0) -> "HSL":
        """Offset each component. Hue wraps; s/l are left unclamped."""
        return HSL(
            h=(((self.h + hue) % 360) + 360) % 360,
            s=self.s + saturation,
            l=self.l + lightness,
        )


Color.WHITE = Color(255, 255, 255)
Color.BLACK = Color(0, 0, 0)
