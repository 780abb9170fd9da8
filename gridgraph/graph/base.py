"""Vertex table, adjacency index and accessors shared by both graph forms.

Vertices are addressed by their dense 0-based position in the vertex table.
The adjacency index maps a vertex index to the ordered list of its outgoing
edges. Neither structure is exposed mutably; accessors return tuples and a
read-only mapping.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
    TypeVar,
)

from gridgraph.config import GraphConfig
from gridgraph.graph.errors import UnknownVertexError

VT = TypeVar("VT")
ET = TypeVar("ET")
CT = TypeVar("CT")

#: One record of a declarative edge list: (name, vertex data, [(target, edge data)]).
EdgeSpecRecord = Tuple[str, Any, Iterable[Tuple[str, Any]]]
EdgeSpec = Iterable[EdgeSpecRecord]

#: ``cost_func(vertex_data, edge_data) -> cost``
CostFunc = Callable[[Any, Any], Any]

#: ``combine_func(v1_data, v2_data, v3_data, data_a, cost_a, data_b, cost_b)``
#: returns ``(cost, edge_data)`` to contract ``v1``, or None to keep it.
CombineFunc = Callable[[Any, Any, Any, Any, Any, Any, Any], Optional[Tuple[Any, Any]]]


class Vertex(NamedTuple):
    """A named vertex and its opaque payload."""

    name: str
    data: Any


class Edge(NamedTuple):
    """An outgoing adjacency entry; the source is the adjacency key."""

    target: int
    cost: Any
    data: Any


AdjacencyIndex = Dict[int, List[Edge]]


class GraphBase(Generic[VT, ET, CT]):
    """Vertex table plus adjacency index with read-only accessors.

    Attributes:
        config: Configuration the graph was built with.
    """

    _label = "Graph"

    def __init__(
        self,
        vertices: List[Vertex],
        adjacency: AdjacencyIndex,
        name_index: Dict[str, int],
        config: GraphConfig,
    ) -> None:
        self._vertices = vertices
        self._adjacency = adjacency
        self._name_index = name_index
        self.config = config

    def _check_usable(self) -> None:
        """Hook for subclasses that can be invalidated."""

    #
    # Vertex table
    #
    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        """All vertices in index order, including eliminated ones."""
        self._check_usable()
        return tuple(self._vertices)

    def vertex(self, index: int) -> Vertex:
        """Return the vertex stored at ``index``.

        Raises:
            IndexError: If ``index`` is outside the vertex table.
        """
        self._check_usable()
        if not 0 <= index < len(self._vertices):
            raise IndexError(
                f"Vertex index {index} out of range (0..{len(self._vertices) - 1})."
            )
        return self._vertices[index]

    def index_of(self, name: str) -> int:
        """Return the index a vertex name resolves to.

        Raises:
            UnknownVertexError: If no vertex has this name.
        """
        self._check_usable()
        try:
            return self._name_index[name]
        except KeyError:
            raise UnknownVertexError(f"Vertex '{name}' does not exist.") from None

    def __len__(self) -> int:
        self._check_usable()
        return len(self._vertices)

    def __iter__(self) -> Iterator[Tuple[int, Vertex]]:
        self._check_usable()
        return iter(enumerate(self._vertices))

    def __contains__(self, name: object) -> bool:
        self._check_usable()
        return name in self._name_index

    #
    # Adjacency index
    #
    def edges(self, index: int) -> Tuple[Edge, ...]:
        """Return the outgoing edges of ``index`` in insertion order.

        Raises:
            KeyError: If ``index`` has no adjacency entry.
        """
        self._check_usable()
        if index not in self._adjacency:
            raise KeyError(index)
        return tuple(self._adjacency[index])

    @property
    def adjacency(self) -> Mapping[int, Tuple[Edge, ...]]:
        """Read-only snapshot of the adjacency index."""
        self._check_usable()
        return MappingProxyType(
            {index: tuple(edges) for index, edges in self._adjacency.items()}
        )

    def edge_count(self) -> int:
        """Number of directed adjacency entries."""
        self._check_usable()
        return sum(len(edges) for edges in self._adjacency.values())

    #
    # Diagnostics
    #
    def render(self) -> List[str]:
        """Return one ``src -(cost, data)> dst`` line per adjacency entry.

        Lines follow adjacency-index order, then list order. Intended for
        debugging and tests, not as a stable format.
        """
        self._check_usable()
        lines = []
        for source, edges in self._adjacency.items():
            source_name = self._vertices[source].name
            for target, cost, data in edges:
                lines.append(
                    f"{source_name} -({cost!r}, {data!r})> "
                    f"{self._vertices[target].name}"
                )
        return lines

    def __str__(self) -> str:
        body = "".join(f"  {line}\n" for line in self.render())
        return f"{self._label} {{\n{body}}}"

    def __repr__(self) -> str:
        edge_count = sum(len(edges) for edges in self._adjacency.values())
        return (
            f"{self._label}(vertices={len(self._vertices)}, "
            f"keys={len(self._adjacency)}, edges={edge_count})"
        )
