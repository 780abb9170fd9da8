"""Directed graph construction from a declarative edge list.

`DirectedGraph.build` runs two passes over the edge specification. The first
assigns each record a dense index in encounter order and fills the vertex
table; the second resolves every target name and caches the edge cost
computed by the caller's cost function. Every vertex index ends up as an
adjacency key, possibly with an empty list.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from gridgraph.config import DEFAULT_GRAPH_CONFIG, GraphConfig
from gridgraph.graph.base import (
    CT,
    ET,
    VT,
    AdjacencyIndex,
    CostFunc,
    Edge,
    EdgeSpec,
    GraphBase,
    Vertex,
)
from gridgraph.graph.errors import (
    ConsumedGraphError,
    DuplicateVertexError,
    IndexCapacityError,
    UnknownVertexError,
)
from gridgraph.logging import get_logger

LOGGER = get_logger(__name__)


class DirectedGraph(GraphBase[VT, ET, CT]):
    """A graph with unidirectional weighted edges.

    Compression takes ownership of a directed graph. Once passed to
    `symmetrize` or `compress`, the instance is marked consumed and every
    accessor raises `ConsumedGraphError`.
    """

    _label = "DirectedGraph"

    def __init__(
        self,
        vertices: List[Vertex],
        adjacency: AdjacencyIndex,
        name_index: Dict[str, int],
        config: GraphConfig,
    ) -> None:
        super().__init__(vertices, adjacency, name_index, config)
        self._consumed = False

    @classmethod
    def build(
        cls,
        cost_func: CostFunc,
        edge_spec: EdgeSpec,
        config: Optional[GraphConfig] = None,
    ) -> DirectedGraph:
        """Create a directed graph from a list of vertices and their edges.

        Args:
            cost_func: Called as ``cost_func(vertex_data, edge_data)`` once per
                edge; the result is stored as the edge cost.
            edge_spec: Ordered records ``(name, vertex_data, outgoing)`` where
                ``outgoing`` is a sequence of ``(target_name, edge_data)``.
            config: Construction options; defaults to ``DEFAULT_GRAPH_CONFIG``.

        Returns:
            DirectedGraph: Graph whose adjacency keys are exactly ``0..n-1``.

        Raises:
            IndexCapacityError: If the vertex count exceeds the index width.
            DuplicateVertexError: If a name repeats and duplicates are not allowed.
            UnknownVertexError: If an edge targets a name that is not a vertex.
        """
        if config is None:
            config = DEFAULT_GRAPH_CONFIG
        records = list(edge_spec)

        if not config.index_width.fits(len(records)):
            raise IndexCapacityError(
                f"{len(records)} vertices do not fit index width "
                f"{config.index_width.name} (max index {config.index_width.max_index})."
            )

        vertices: List[Vertex] = []
        name_index: Dict[str, int] = {}
        for name, vertex_data, _ in records:
            if name in name_index and not config.allow_duplicate_names:
                raise DuplicateVertexError(
                    f"Vertex '{name}' is declared more than once."
                )
            # Later occurrences shadow earlier ones for name lookups
            name_index[name] = len(vertices)
            vertices.append(Vertex(name, vertex_data))

        adjacency: AdjacencyIndex = {index: [] for index in range(len(vertices))}
        edge_count = 0
        for name, _, outgoing in records:
            # Sources resolve by name, so shadowed records feed the last occurrence
            source = name_index[name]
            source_data = vertices[source].data
            edges = adjacency[source]
            for target_name, edge_data in outgoing:
                target = name_index.get(target_name)
                if target is None:
                    raise UnknownVertexError(
                        f"Edge from '{name}' targets unknown vertex '{target_name}'."
                    )
                edges.append(Edge(target, cost_func(source_data, edge_data), edge_data))
                edge_count += 1

        LOGGER.debug(
            "Built directed graph with %d vertices and %d edges",
            len(vertices),
            edge_count,
        )
        return cls(vertices, adjacency, name_index, config)

    @property
    def consumed(self) -> bool:
        """True once compression has taken ownership of this graph."""
        return self._consumed

    def _check_usable(self) -> None:
        if self._consumed:
            raise ConsumedGraphError(
                "This DirectedGraph was consumed by compression and can no longer be used."
            )

    def release(self) -> Tuple[List[Vertex], AdjacencyIndex, Dict[str, int], GraphConfig]:
        """Hand over the graph's internals and mark it consumed.

        Returns:
            Tuple of (vertex table, adjacency index, name index, config).

        Raises:
            ConsumedGraphError: If the graph was already released.
        """
        self._check_usable()
        self._consumed = True
        parts = (self._vertices, self._adjacency, self._name_index, self.config)
        self._vertices = []
        self._adjacency = {}
        self._name_index = {}
        return parts

    def __repr__(self) -> str:
        if self._consumed:
            return f"{self._label}(consumed)"
        return super().__repr__()


def build_graph(
    cost_func: CostFunc,
    edge_spec: EdgeSpec,
    config: Optional[GraphConfig] = None,
) -> DirectedGraph:
    """Build a `DirectedGraph`; see `DirectedGraph.build`."""
    return DirectedGraph.build(cost_func, edge_spec, config)
