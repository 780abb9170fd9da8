"""Base enums and aliases shared by the graph engine."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Numeric cost attached to an edge (e.g. distance, steps, terrain weight).
Cost = Union[int, float]


class IndexWidth(IntEnum):
    """Bit width of the unsigned integer used to address vertices.

    The value of each member is its number of bits. A graph built with a
    given width can hold at most ``2 ** bits`` vertices.
    """

    U8 = 8
    U16 = 16
    U32 = 32
    U64 = 64

    @property
    def max_index(self) -> int:
        """Largest vertex index representable with this width."""
        return (1 << int(self)) - 1

    def fits(self, vertex_count: int) -> bool:
        """Return True if ``vertex_count`` vertices can all be indexed."""
        return vertex_count - 1 <= self.max_index

    @classmethod
    def from_string(cls, value: str) -> "IndexWidth":
        """Parse a string such as ``"u16"`` into an IndexWidth.

        Args:
            value: Case-insensitive member name.

        Returns:
            The corresponding IndexWidth member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid index_width '{value}'. Valid values are: {valid}"
            ) from None
