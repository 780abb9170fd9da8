"""2D integer points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gridgraph.world.dir import Dir


@dataclass(frozen=True, order=True)
class Point:
    """A 2D point; ``x`` grows east and ``y`` grows south."""

    x: int
    y: int

    def walk(self, direction: Dir) -> Point:
        """Return the point one step away in ``direction``."""
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    def manhattan_distance(self, other: Point) -> int:
        """Return ``|dx| + |dy|`` between this point and ``other``."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Point:
        return Point(self.x * factor, self.y * factor)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass(order=True)
class PointAndCost:
    """A point paired with a cost, ordered by cost only.

    Suitable as a ``heapq`` entry: the cheapest entry is popped first.
    """

    cost: Any
    point: Point = field(compare=False)
