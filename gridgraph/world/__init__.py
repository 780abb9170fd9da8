"""2D grid toolkit: directions, points and character grids.

A `Grid` can describe its passable cells as an edge list accepted by
`gridgraph.graph.DirectedGraph.build` through `Grid.to_edge_spec`.
"""

from gridgraph.world.dir import ALL_DIRECTIONS, CARDINALS, Dir
from gridgraph.world.grid import EMPTY_TILE, Grid
from gridgraph.world.point import Point, PointAndCost

__all__ = [
    "ALL_DIRECTIONS",
    "CARDINALS",
    "Dir",
    "EMPTY_TILE",
    "Grid",
    "Point",
    "PointAndCost",
]
