"""Character grids with neighbor iteration, flood fill and best-first search.

A `Grid` stores one single-character tile per cell in row-major order. Points
outside ``0 <= x < width`` and ``0 <= y < height`` are outside the grid.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
)

from gridgraph.logging import get_logger
from gridgraph.types.base import Cost
from gridgraph.world.dir import ALL_DIRECTIONS, CARDINALS, Dir
from gridgraph.world.point import Point, PointAndCost

LOGGER = get_logger(__name__)

EMPTY_TILE = "."
BORDER_CORNER = "+"
BORDER_HORIZONTAL = "-"
BORDER_VERTICAL = "|"

#: ``step_cost(grid, point, direction, tile)`` -> cost of entering ``point``, or None.
StepCostFunc = Callable[["Grid", Point, Dir, str], Optional[Cost]]


def _check_tile(tile: str) -> None:
    if not isinstance(tile, str) or len(tile) != 1:
        raise ValueError(f"Tile must be a single character, got {tile!r}.")


class Grid:
    """A rectangular grid of single-character tiles.

    Attributes:
        has_border: True when the outermost ring of cells is a border that
            `transform` leaves untouched.
    """

    def __init__(self, width: int, height: int, fill: str = EMPTY_TILE) -> None:
        """Create a ``width`` x ``height`` grid filled with ``fill``.

        Raises:
            ValueError: If a dimension is negative or ``fill`` is not one character.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}.")
        _check_tile(fill)
        self._width = width
        self._height = height
        self._tiles: List[str] = [fill] * (width * height)
        self.has_border = False

    @classmethod
    def from_string(cls, text: str) -> Grid:
        """Parse a grid from lines of equal length.

        Raises:
            ValueError: If ``text`` has no lines or the lines differ in length.
        """
        lines = text.splitlines()
        if not lines:
            raise ValueError("Grid text must contain at least one line.")
        width = len(lines[0])
        for row, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(
                    f"Line {row} has length {len(line)}, expected {width}."
                )
        grid = cls(width, len(lines))
        grid._tiles = [tile for line in lines for tile in line]
        return grid

    @classmethod
    def from_string_with_border(cls, text: str) -> Grid:
        """Parse a grid and surround it with a ``+-|`` border.

        The returned grid is two cells wider and taller than the text and has
        ``has_border`` set.
        """
        inner = cls.from_string(text)
        grid = cls(inner.width + 2, inner.height + 2)
        for pos, tile in inner:
            grid.set_at(Point(pos.x + 1, pos.y + 1), tile)
        for x in range(grid.width):
            grid.set_at(Point(x, 0), BORDER_HORIZONTAL)
            grid.set_at(Point(x, grid.height - 1), BORDER_HORIZONTAL)
        for y in range(grid.height):
            grid.set_at(Point(0, y), BORDER_VERTICAL)
            grid.set_at(Point(grid.width - 1, y), BORDER_VERTICAL)
        for corner in (
            Point(0, 0),
            Point(grid.width - 1, 0),
            Point(0, grid.height - 1),
            Point(grid.width - 1, grid.height - 1),
        ):
            grid.set_at(corner, BORDER_CORNER)
        grid.has_border = True
        return grid

    def copy(self) -> Grid:
        """Return an independent copy of this grid."""
        grid = Grid(self._width, self._height)
        grid._tiles = list(self._tiles)
        grid.has_border = self.has_border
        return grid

    #
    # Cell access
    #
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def is_inside(self, pos: Point) -> bool:
        """True if ``pos`` addresses a cell of this grid."""
        return 0 <= pos.x < self._width and 0 <= pos.y < self._height

    def _offset(self, pos: Point) -> int:
        if not self.is_inside(pos):
            raise IndexError(
                f"Point {pos} is outside the {self._width}x{self._height} grid."
            )
        return pos.x + pos.y * self._width

    def at(self, pos: Point) -> str:
        """Return the tile at ``pos``.

        Raises:
            IndexError: If ``pos`` is outside the grid.
        """
        return self._tiles[self._offset(pos)]

    def get(self, pos: Point) -> Optional[str]:
        """Return the tile at ``pos``, or None outside the grid."""
        if not self.is_inside(pos):
            return None
        return self._tiles[pos.x + pos.y * self._width]

    def set_at(self, pos: Point, tile: str) -> None:
        """Store ``tile`` at ``pos``.

        Raises:
            IndexError: If ``pos`` is outside the grid.
            ValueError: If ``tile`` is not a single character.
        """
        _check_tile(tile)
        self._tiles[self._offset(pos)] = tile

    __getitem__ = at
    __setitem__ = set_at

    def __iter__(self) -> Iterator[Tuple[Point, str]]:
        """Yield ``(point, tile)`` for every cell, row by row."""
        for y in range(self._height):
            for x in range(self._width):
                yield Point(x, y), self._tiles[x + y * self._width]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._tiles == other._tiles
        )

    def neighbors(
        self, pos: Point, directions: Iterable[Dir] = ALL_DIRECTIONS
    ) -> Iterator[Tuple[Point, Dir, str]]:
        """Yield ``(point, direction, tile)`` for in-grid neighbors of ``pos``.

        Neighbors come in the order of ``directions``; by default all eight,
        clockwise from north.
        """
        for direction in directions:
            neighbor = pos.walk(direction)
            if self.is_inside(neighbor):
                yield neighbor, direction, self.at(neighbor)

    def find(self, tile: str) -> List[Point]:
        """Return every point holding ``tile``, row by row."""
        return [pos for pos, value in self if value == tile]

    #
    # Editing
    #
    def add_border(self, tile: str) -> None:
        """Overwrite the outermost ring of cells with ``tile``."""
        for y in range(self._height):
            self.set_at(Point(0, y), tile)
            self.set_at(Point(self._width - 1, y), tile)
        for x in range(self._width):
            self.set_at(Point(x, 0), tile)
            self.set_at(Point(x, self._height - 1), tile)
        self.has_border = True

    def transform_area(
        self,
        start: Point,
        end: Point,
        func: Callable[[Grid, Point, str], str],
    ) -> bool:
        """Rewrite every cell in ``[start, end)`` with ``func(grid, pos, tile)``.

        All new tiles are computed from the unmodified grid before any is
        written back.

        Returns:
            bool: True if at least one tile changed.
        """
        updates: List[Tuple[Point, str]] = []
        for y in range(max(start.y, 0), min(end.y, self._height)):
            for x in range(max(start.x, 0), min(end.x, self._width)):
                pos = Point(x, y)
                tile = self.at(pos)
                new_tile = func(self, pos, tile)
                if new_tile != tile:
                    updates.append((pos, new_tile))
        for pos, tile in updates:
            self.set_at(pos, tile)
        return bool(updates)

    def transform(self, func: Callable[[Grid, Point, str], str]) -> bool:
        """Apply `transform_area` to the whole grid, excluding any border."""
        if self.has_border:
            return self.transform_area(
                Point(1, 1), Point(self._width - 1, self._height - 1), func
            )
        return self.transform_area(Point(0, 0), Point(self._width, self._height), func)

    #
    # Walking and filling
    #
    def walk_until(
        self, pos: Point, direction: Dir, stop: Callable[[Point, str], bool]
    ) -> Point:
        """Walk from ``pos`` in ``direction`` and return the last point reached.

        Walking stops before leaving the grid or before entering a cell for
        which ``stop(point, tile)`` is True.
        """
        while True:
            new_pos = pos.walk(direction)
            if not self.is_inside(new_pos) or stop(new_pos, self.at(new_pos)):
                return pos
            pos = new_pos

    def flood_cardinal(self, pos: Point, empty: str, tile: str) -> None:
        """Fill the 4-connected region of ``empty`` tiles around ``pos`` with ``tile``."""
        self.flood_cardinal_with(
            pos,
            lambda _, current: current == empty,
            lambda _, current: tile,
        )

    def flood_cardinal_with(
        self,
        pos: Point,
        is_ok: Callable[[Point, str], bool],
        tile_func: Callable[[Point, str], str],
    ) -> None:
        """Scanline flood fill over 4-connected cells accepted by ``is_ok``.

        Every accepted cell connected to ``pos`` is visited once and replaced
        by ``tile_func(point, tile)``. Nothing happens when ``pos`` itself is
        not accepted.
        """
        filled: Set[Point] = set()

        def blocked(point: Point, current: str) -> bool:
            return point in filled or not is_ok(point, current)

        seeds = [pos]
        while seeds:
            seed = seeds.pop()
            if blocked(seed, self.at(seed)):
                continue
            west = self.walk_until(seed, Dir.WEST, blocked)
            east = self.walk_until(seed, Dir.EAST, blocked)
            for x in range(west.x, east.x + 1):
                point = Point(x, seed.y)
                filled.add(point)
                self.set_at(point, tile_func(point, self.at(point)))
            for x in range(west.x, east.x + 1):
                for y in (seed.y - 1, seed.y + 1):
                    if 0 <= y < self._height:
                        seeds.append(Point(x, y))

    #
    # Search
    #
    def best_first_search(
        self,
        start: Point,
        goal: Point,
        step_cost: StepCostFunc,
        directions: Iterable[Dir] = ALL_DIRECTIONS,
    ) -> Optional[Cost]:
        """Return the cheapest cost from ``start`` to ``goal``.

        Args:
            start: Point to search from; its cost is zero.
            goal: Point to reach.
            step_cost: Called as ``step_cost(grid, point, direction, tile)``
                for each neighbor; returns the cost of entering it, or None
                when it cannot be entered.
            directions: Directions to expand; all eight by default.

        Returns:
            The minimal accumulated cost, or None if ``goal`` is unreachable.
        """
        directions = tuple(directions)
        expanded: Dict[Point, Cost] = {}
        frontier: List[PointAndCost] = [PointAndCost(0, start)]
        while frontier:
            current = heappop(frontier)
            if current.point == goal:
                LOGGER.debug(
                    "Reached %s from %s at cost %s after expanding %d cells",
                    goal,
                    start,
                    current.cost,
                    len(expanded),
                )
                return current.cost
            best = expanded.get(current.point)
            if best is not None and best <= current.cost:
                continue
            expanded[current.point] = current.cost
            for point, direction, tile in self.neighbors(current.point, directions):
                step = step_cost(self, point, direction, tile)
                if step is not None:
                    heappush(frontier, PointAndCost(current.cost + step, point))
        return None

    #
    # Graph bridge
    #
    def to_edge_spec(
        self,
        passable: Callable[[Point, str], bool],
        edge_data: Optional[Callable[[Point, Dir, str], Any]] = None,
        directions: Iterable[Dir] = CARDINALS,
        name: Optional[Callable[[Point], str]] = None,
        vertex_data: Optional[Callable[[Point, str], Any]] = None,
    ) -> List[Tuple[str, Any, List[Tuple[str, Any]]]]:
        """Describe the passable cells as an edge list for graph construction.

        Each passable cell becomes one record with an edge to every passable
        neighbor in ``directions``.

        Args:
            passable: ``passable(point, tile)`` selects the cells to include.
            edge_data: ``edge_data(neighbor, direction, neighbor_tile)`` gives
                the edge payload; defaults to the neighbor's tile.
            directions: Neighbor directions to connect; cardinal by default.
            name: Vertex name for a point; defaults to ``"x,y"``.
            vertex_data: ``vertex_data(point, tile)``; defaults to the tile.

        Returns:
            Records ``(name, vertex_data, [(target_name, edge_data), ...])``
            in row-major order.
        """
        directions = tuple(directions)
        name_of = name if name is not None else str
        spec = []
        for pos, tile in self:
            if not passable(pos, tile):
                continue
            outgoing = []
            for neighbor, direction, neighbor_tile in self.neighbors(pos, directions):
                if not passable(neighbor, neighbor_tile):
                    continue
                payload = (
                    edge_data(neighbor, direction, neighbor_tile)
                    if edge_data is not None
                    else neighbor_tile
                )
                outgoing.append((name_of(neighbor), payload))
            data = vertex_data(pos, tile) if vertex_data is not None else tile
            spec.append((name_of(pos), data, outgoing))
        return spec

    #
    # Rendering
    #
    def render(self, overlay: Optional[Callable[[Point, str], str]] = None) -> str:
        """Return the grid as text, one line per row.

        Args:
            overlay: Optional ``overlay(point, tile)`` returning the character
                to show instead of the stored tile.
        """
        rows = []
        for y in range(self._height):
            row = []
            for x in range(self._width):
                tile = self._tiles[x + y * self._width]
                row.append(overlay(Point(x, y), tile) if overlay else tile)
            rows.append("".join(row))
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"
