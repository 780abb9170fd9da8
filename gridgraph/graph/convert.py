"""Conversion of gridgraph graphs to NetworkX graphs.

Vertices become nodes keyed by name. Vertices eliminated by compression are
left out. NetworkX keeps one edge per ordered node pair, so when an adjacency
list reaches the same destination twice only the first entry is exported.
"""

from __future__ import annotations

from typing import Callable, Optional

import networkx as nx

from gridgraph.graph.base import Edge, GraphBase, Vertex


def to_networkx(
    graph: GraphBase,
    edge_func: Optional[Callable[[Vertex, Vertex, Edge], dict]] = None,
) -> nx.DiGraph:
    """Convert a DirectedGraph or BidirectionalGraph to a NetworkX DiGraph.

    Args:
        graph: Graph to convert.
        edge_func: Optional function computing edge attributes. Receives
            ``(source_vertex, target_vertex, edge)`` and returns a dict. By
            default edges carry ``cost`` and ``data``.

    Returns:
        A NetworkX DiGraph with node attributes ``index`` and ``data``.
    """
    adjacency = graph.adjacency
    vertices = graph.vertices

    nx_graph = nx.DiGraph()
    for index in adjacency:
        vertex = vertices[index]
        nx_graph.add_node(vertex.name, index=index, data=vertex.data)

    for source, edges in adjacency.items():
        source_vertex = vertices[source]
        for edge in edges:
            target_vertex = vertices[edge.target]
            if nx_graph.has_edge(source_vertex.name, target_vertex.name):
                continue
            if edge_func:
                edge_data = edge_func(source_vertex, target_vertex, edge)
            else:
                edge_data = {"cost": edge.cost, "data": edge.data}
            nx_graph.add_edge(source_vertex.name, target_vertex.name, **edge_data)
    return nx_graph
