"""Graph construction and compression.

This package provides the directed graph builder (`directed`), the
symmetrization and chain-contraction engine (`bidirectional`), the shared
vertex/edge types (`base`), the error hierarchy (`errors`) and NetworkX export
(`convert`).
"""

from gridgraph.graph.base import Edge, Vertex
from gridgraph.graph.bidirectional import BidirectionalGraph, compress, symmetrize
from gridgraph.graph.convert import to_networkx
from gridgraph.graph.directed import DirectedGraph, build_graph
from gridgraph.graph.errors import (
    ConsumedGraphError,
    DuplicateVertexError,
    GraphError,
    GraphInvariantError,
    IndexCapacityError,
    UnknownVertexError,
)

__all__ = [
    "BidirectionalGraph",
    "ConsumedGraphError",
    "DirectedGraph",
    "DuplicateVertexError",
    "Edge",
    "GraphError",
    "GraphInvariantError",
    "IndexCapacityError",
    "UnknownVertexError",
    "Vertex",
    "build_graph",
    "compress",
    "symmetrize",
    "to_networkx",
]
