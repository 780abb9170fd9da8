"""Compass directions on a grid where north is towards smaller ``y``."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Dir(Enum):
    """The eight compass directions plus ``NONE``.

    ``NONE`` walks nowhere and is returned unchanged by every turn.
    """

    NONE = "No direction"
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"
    NORTH_EAST = "North-East"
    NORTH_WEST = "North-West"
    SOUTH_EAST = "South-East"
    SOUTH_WEST = "South-West"

    def __str__(self) -> str:
        return self.value

    @property
    def delta(self) -> Tuple[int, int]:
        """The ``(dx, dy)`` step taken when walking in this direction."""
        return _DELTAS[self]

    def turn_right(self) -> Dir:
        """Return the direction 45 degrees clockwise."""
        return _TURN_RIGHT[self]

    def turn_left(self) -> Dir:
        """Return the direction 45 degrees counter-clockwise."""
        return _TURN_LEFT[self]

    def turn_cardinal_right(self) -> Dir:
        """Return the direction 90 degrees clockwise.

        Raises:
            ValueError: If called on a diagonal direction.
        """
        if not (self is Dir.NONE or self.is_cardinal()):
            raise ValueError(f"Direction {self} is invalid for a cardinal turn.")
        return self.turn_right().turn_right()

    def turn_cardinal_left(self) -> Dir:
        """Return the direction 90 degrees counter-clockwise.

        Raises:
            ValueError: If called on a diagonal direction.
        """
        if not (self is Dir.NONE or self.is_cardinal()):
            raise ValueError(f"Direction {self} is invalid for a cardinal turn.")
        return self.turn_left().turn_left()

    def is_cardinal(self) -> bool:
        """True for north, south, east and west."""
        return self in CARDINALS


#: The four cardinal directions, clockwise from north.
CARDINALS: Tuple[Dir, ...] = (Dir.NORTH, Dir.EAST, Dir.SOUTH, Dir.WEST)

#: All eight directions, clockwise from north.
ALL_DIRECTIONS: Tuple[Dir, ...] = (
    Dir.NORTH,
    Dir.NORTH_EAST,
    Dir.EAST,
    Dir.SOUTH_EAST,
    Dir.SOUTH,
    Dir.SOUTH_WEST,
    Dir.WEST,
    Dir.NORTH_WEST,
)

_DELTAS = {
    Dir.NONE: (0, 0),
    Dir.NORTH: (0, -1),
    Dir.SOUTH: (0, 1),
    Dir.EAST: (1, 0),
    Dir.WEST: (-1, 0),
    Dir.NORTH_EAST: (1, -1),
    Dir.NORTH_WEST: (-1, -1),
    Dir.SOUTH_EAST: (1, 1),
    Dir.SOUTH_WEST: (-1, 1),
}

_TURN_RIGHT = {Dir.NONE: Dir.NONE}
_TURN_LEFT = {Dir.NONE: Dir.NONE}
for _i, _dir in enumerate(ALL_DIRECTIONS):
    _TURN_RIGHT[_dir] = ALL_DIRECTIONS[(_i + 1) % len(ALL_DIRECTIONS)]
    _TURN_LEFT[_dir] = ALL_DIRECTIONS[(_i - 1) % len(ALL_DIRECTIONS)]
