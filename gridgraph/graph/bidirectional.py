"""Symmetrization and chain contraction of directed graphs.

`symmetrize` turns a `DirectedGraph` into a `BidirectionalGraph` by adding the
reverse of every edge. `compress` additionally contracts pass-through
vertices: a vertex with exactly two distinct neighbors is removed from the
adjacency index when the caller's combine function returns a replacement
edge, and its two neighbors are linked directly.

Notes:
    Candidates are scanned in ascending vertex index and at most one vertex
    is eliminated per pass; each elimination restarts the scan. The result is
    reproducible, but when the combine function is not order-independent the
    final edges depend on this order. Worst case is O(V^2) combine calls.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from gridgraph.graph.base import (
    CT,
    ET,
    VT,
    AdjacencyIndex,
    CombineFunc,
    Edge,
    GraphBase,
)
from gridgraph.graph.directed import DirectedGraph
from gridgraph.graph.errors import GraphInvariantError
from gridgraph.logging import get_logger

LOGGER = get_logger(__name__)

#: (vertex to remove, first neighbor, second neighbor, (cost, data))
_Contraction = Tuple[int, int, int, Tuple[object, object]]


def _append_unique(edges: List[Edge], edge: Edge) -> None:
    """Append ``edge`` unless ``edges`` already reaches its target."""
    for existing in edges:
        if existing.target == edge.target:
            return
    edges.append(edge)


class BidirectionalGraph(GraphBase[VT, ET, CT]):
    """A graph whose edges exist in both directions.

    Vertices removed by compression keep their slot in the vertex table but
    lose their adjacency key; `is_eliminated` reports this.
    """

    _label = "BidirectionalGraph"

    @classmethod
    def from_directed(cls, graph: DirectedGraph) -> BidirectionalGraph:
        """Symmetrize ``graph``, taking ownership of it.

        Every vertex index gets an adjacency key. For each edge ``u -> v`` in
        key order, ``v`` is appended to ``u`` and ``u`` to ``v`` unless the
        list already reaches that destination (first writer wins).

        Args:
            graph: Directed graph to consume.

        Returns:
            BidirectionalGraph: The symmetrized graph.

        Raises:
            ConsumedGraphError: If ``graph`` was already consumed.
        """
        vertices, directed, name_index, config = graph.release()

        adjacency: AdjacencyIndex = {index: [] for index in range(len(vertices))}
        for source, edges in directed.items():
            for target, cost, data in edges:
                _append_unique(adjacency[source], Edge(target, cost, data))
                _append_unique(adjacency[target], Edge(source, cost, data))

        return cls(vertices, adjacency, name_index, config)

    @classmethod
    def compress(
        cls, graph: DirectedGraph, combine_func: CombineFunc
    ) -> BidirectionalGraph:
        """Symmetrize ``graph`` and contract chains of degree-2 vertices.

        Args:
            graph: Directed graph to consume.
            combine_func: Called as ``combine_func(v1_data, v2_data, v3_data,
                data_a, cost_a, data_b, cost_b)`` for a candidate ``v1`` with
                edges ``(v2, cost_a, data_a)`` and ``(v3, cost_b, data_b)``.
                Returns ``(cost, data)`` for the edge replacing the chain, or
                None to keep ``v1``.

        Returns:
            BidirectionalGraph: The compressed graph.
        """
        bigraph = cls.from_directed(graph)
        bigraph._contract(combine_func)
        return bigraph

    #
    # Accessors
    #
    def is_eliminated(self, index: int) -> bool:
        """Return True if ``index`` was removed by compression.

        Raises:
            IndexError: If ``index`` is outside the vertex table.
        """
        self.vertex(index)
        return index not in self._adjacency

    def remaining(self) -> Tuple[int, ...]:
        """Indices that still have an adjacency entry, in ascending order."""
        return tuple(self._adjacency)

    #
    # Contraction
    #
    def _contract(self, combine_func: CombineFunc) -> int:
        """Eliminate candidates until a full pass finds none.

        Returns:
            int: Number of eliminated vertices.
        """
        eliminated = 0
        while True:
            contraction = self._find_contraction(combine_func)
            if contraction is None:
                break
            self._eliminate(*contraction)
            eliminated += 1

        LOGGER.debug(
            "Compression finished after %d passes: %d eliminated, %d of %d vertices remain",
            eliminated + 1,
            eliminated,
            len(self._adjacency),
            len(self._vertices),
        )
        return eliminated

    def _find_contraction(self, combine_func: CombineFunc) -> Optional[_Contraction]:
        """Return the first accepted contraction in ascending index order."""
        vertices = self._vertices
        for vertex, edges in self._adjacency.items():
            if len(edges) != 2:
                continue
            first, second = edges
            if first.target == second.target:
                continue
            if vertex in (first.target, second.target):
                continue
            # Both orientations are offered before giving up on the vertex
            for edge_a, edge_b in ((first, second), (second, first)):
                combined = combine_func(
                    vertices[vertex].data,
                    vertices[edge_a.target].data,
                    vertices[edge_b.target].data,
                    edge_a.data,
                    edge_a.cost,
                    edge_b.data,
                    edge_b.cost,
                )
                if combined is not None:
                    return vertex, edge_a.target, edge_b.target, combined
        return None

    def _eliminate(
        self,
        vertex: int,
        left: int,
        right: int,
        combined: Tuple[object, object],
    ) -> None:
        """Remove ``vertex`` and link ``left`` and ``right`` directly.

        Both neighbors are checked before anything is modified.
        """
        new_cost, new_data = combined
        for neighbor in (left, right):
            if neighbor not in self._adjacency:
                raise GraphInvariantError(
                    f"Neighbor '{self._vertices[neighbor].name}' of "
                    f"'{self._vertices[vertex].name}' has no adjacency entry."
                )
            if not any(edge.target == vertex for edge in self._adjacency[neighbor]):
                raise GraphInvariantError(
                    f"'{self._vertices[neighbor].name}' has no edge back to "
                    f"'{self._vertices[vertex].name}'."
                )

        del self._adjacency[vertex]
        self._redirect(left, vertex, Edge(right, new_cost, new_data))
        self._redirect(right, vertex, Edge(left, new_cost, new_data))
        LOGGER.debug(
            "Contracted '%s' into edge '%s' <-> '%s'",
            self._vertices[vertex].name,
            self._vertices[left].name,
            self._vertices[right].name,
        )

    def _redirect(self, owner: int, removed: int, replacement: Edge) -> None:
        """Replace every entry of ``owner`` that targets ``removed``."""
        edges = self._adjacency[owner]
        for position, edge in enumerate(edges):
            if edge.target == removed:
                edges[position] = replacement


def symmetrize(graph: DirectedGraph) -> BidirectionalGraph:
    """Make every edge of ``graph`` bidirectional; see `BidirectionalGraph.from_directed`."""
    return BidirectionalGraph.from_directed(graph)


def compress(graph: DirectedGraph, combine_func: CombineFunc) -> BidirectionalGraph:
    """Symmetrize and contract ``graph``; see `BidirectionalGraph.compress`."""
    return BidirectionalGraph.compress(graph, combine_func)
