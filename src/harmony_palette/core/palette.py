"""Working palette: five colors, each with a lock flag that travels with it."""

from dataclasses import dataclass, field, replace
from typing import Sequence, TypeVar

from harmony_palette.core.color import Color
from harmony_palette.core.constants import PALETTE_SIZE
from harmony_palette.core.errors import PaletteIndexOutOfRange

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Slot:
    """One palette position: a color and whether regeneration must skip it."""
    color: Color
    locked: bool = False


def _check_index(index: int, size: int) -> None:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < size:
        raise PaletteIndexOutOfRange(index, size)


def move(items: Sequence[T], from_index: int, to_index: int | None) -> list[T]:
    """
    Remove the item at from_index and reinsert it at to_index.

    A to_index of None (a drop with no target) returns an unchanged copy.
    """
    result = list(items)
    if to_index is None:
        return result
    _check_index(from_index, len(result))
    _check_index(to_index, len(result))
    item = result.pop(from_index)
    result.insert(to_index, item)
    return result


def reorder(
    colors: Sequence[Color],
    locked: Sequence[bool],
    from_index: int,
    to_index: int | None,
) -> tuple[list[Color], list[bool]]:
    """
    Apply one move to colors and lock flags together.

    The pair is moved as a unit so a lock always stays with its color.

    Raises:
        PaletteIndexOutOfRange: if either index is outside the palette
        ValueError: if the two sequences differ in length
    """
    if len(colors) != len(locked):
        raise ValueError(f"colors and locked differ in length: {len(colors)} != {len(locked)}")
    pairs = move(list(zip(colors, locked)), from_index, to_index)
    return [c for c, _ in pairs], [bool(flag) for _, flag in pairs]


@dataclass
class WorkingPalette:
    """
    The mutable palette a session displays.

    Holds exactly PALETTE_SIZE slots for its whole life. Every mutation
    either succeeds completely or leaves the slots untouched.
    """
    slots: list[Slot] = field(
        default_factory=lambda: [Slot(Color.WHITE) for _ in range(PALETTE_SIZE)]
    )

    def __post_init__(self) -> None:
        if len(self.slots) != PALETTE_SIZE:
            raise ValueError(f"A palette holds {PALETTE_SIZE} slots, got {len(self.slots)}")

    @classmethod
    def from_colors(cls, colors: Sequence[Color | str], locked: Sequence[bool] | None = None) -> "WorkingPalette":
        """Build a palette from colors and an optional lock mask."""
        mask = list(locked) if locked is not None else [False] * len(colors)
        if len(mask) != len(colors):
            raise ValueError(f"colors and locked differ in length: {len(colors)} != {len(mask)}")
        return cls([Slot(Color.coerce(c), bool(flag)) for c, flag in zip(colors, mask)])

    @property
    def colors(self) -> list[Color]:
        return [slot.color for slot in self.slots]

    @property
    def locked(self) -> list[bool]:
        return [slot.locked for slot in self.slots]

    def __len__(self) -> int:
        return len(self.slots)

    def __getitem__(self, index: int) -> Slot:
        _check_index(index, len(self.slots))
        return self.slots[index]

    def set_colors(self, colors: Sequence[Color]) -> None:
        """Replace every color, keeping the lock flags in place."""
        if len(colors) != len(self.slots):
            raise ValueError(f"Expected {len(self.slots)} colors, got {len(colors)}")
        self.slots = [replace(slot, color=color) for slot, color in zip(self.slots, colors)]

    def set_locked(self, index: int, locked: bool) -> None:
        _check_index(index, len(self.slots))
        self.slots[index] = replace(self.slots[index], locked=bool(locked))

    def toggle_lock(self, index: int) -> bool:
        """Flip one slot's lock and return the new state."""
        _check_index(index, len(self.slots))
        new_state = not self.slots[index].locked
        self.slots[index] = replace(self.slots[index], locked=new_state)
        return new_state

    def move(self, from_index: int, to_index: int | None) -> None:
        """Drag one slot (color and lock together) to a new position."""
        self.slots = move(self.slots, from_index, to_index)
