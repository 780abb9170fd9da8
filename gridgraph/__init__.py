"""gridgraph: building blocks for graph- and grid-based puzzles.

gridgraph builds directed weighted graphs from declarative edge lists,
symmetrizes them and contracts chains of pass-through vertices under a
caller-defined rule. A separate grid toolkit (points, directions, flood fill,
best-first search) can produce those edge lists from character maps.

Primary API:
    DirectedGraph.build() / build_graph() - Construct a directed graph
    compress() - Symmetrize and contract into a BidirectionalGraph
    symmetrize() - Symmetrize without contraction
    Grid, Point, Dir - Grid toolkit
    load_edge_spec_yaml() - Read an edge list from YAML
    to_networkx() - Export to a NetworkX DiGraph

Example:
    from gridgraph import build_graph, compress

    graph = build_graph(
        lambda vertex, edge: edge,
        [("A", None, [("B", 1)]), ("B", None, [("C", 2)]), ("C", None, [])],
    )
    compressed = compress(graph, lambda v1, v2, v3, a, ca, b, cb: (ca + cb, a + b))
    print(compressed)
"""

from __future__ import annotations

from gridgraph import logging
from gridgraph._version import __version__
from gridgraph.config import DEFAULT_GRAPH_CONFIG, GraphConfig
from gridgraph.dsl.loader import load_edge_spec_yaml
from gridgraph.graph import (
    BidirectionalGraph,
    ConsumedGraphError,
    DirectedGraph,
    DuplicateVertexError,
    Edge,
    GraphError,
    GraphInvariantError,
    IndexCapacityError,
    UnknownVertexError,
    Vertex,
    build_graph,
    compress,
    symmetrize,
    to_networkx,
)
from gridgraph.types.base import IndexWidth
from gridgraph.world import ALL_DIRECTIONS, CARDINALS, Dir, Grid, Point, PointAndCost

__all__ = [
    # Version
    "__version__",
    # Graph engine
    "DirectedGraph",
    "BidirectionalGraph",
    "Vertex",
    "Edge",
    "build_graph",
    "symmetrize",
    "compress",
    "to_networkx",
    # Configuration
    "GraphConfig",
    "DEFAULT_GRAPH_CONFIG",
    "IndexWidth",
    # Errors
    "GraphError",
    "IndexCapacityError",
    "UnknownVertexError",
    "DuplicateVertexError",
    "ConsumedGraphError",
    "GraphInvariantError",
    # Grid toolkit
    "Dir",
    "CARDINALS",
    "ALL_DIRECTIONS",
    "Point",
    "PointAndCost",
    "Grid",
    # Input
    "load_edge_spec_yaml",
    # Utilities
    "logging",
]
