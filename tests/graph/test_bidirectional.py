import pytest

from gridgraph.config import DEFAULT_GRAPH_CONFIG
from gridgraph.graph.base import Edge, Vertex
from gridgraph.graph.bidirectional import BidirectionalGraph, compress, symmetrize
from gridgraph.graph.directed import DirectedGraph
from gridgraph.graph.errors import ConsumedGraphError, GraphInvariantError


def always_sum(v1, v2, v3, data_a, cost_a, data_b, cost_b):
    return cost_a + cost_b, f"{data_a}+{data_b}"


def never(v1, v2, v3, data_a, cost_a, data_b, cost_b):
    return None


def ring(size):
    spec = [
        (f"r{i}", i, [(f"r{(i + 1) % size}", f"r{i}r{(i + 1) % size}")])
        for i in range(size)
    ]
    return DirectedGraph.build(lambda v, e: 1, spec)


def assert_symmetric(graph):
    """Every remaining entry is mirrored by its target with equal cost and data."""
    for source, edges in graph.adjacency.items():
        for target, cost, data in edges:
            assert target in graph.adjacency
            back = [e for e in graph.edges(target) if e.target == source]
            assert Edge(source, cost, data) in back


#
# Symmetrization
#
def test_symmetrize_adds_reverse_edges(chain_spec, chain_costs):
    g = symmetrize(DirectedGraph.build(chain_costs, chain_spec))
    assert isinstance(g, BidirectionalGraph)
    assert g.edges(0) == (Edge(1, 1, "A-B"),)
    assert g.edges(1) == (Edge(0, 1, "A-B"), Edge(2, 2, "B-C"))
    assert g.edges(2) == (Edge(1, 2, "B-C"), Edge(3, 3, "C-D"))
    assert g.edges(3) == (Edge(2, 3, "C-D"),)
    assert_symmetric(g)


def test_symmetrize_keeps_first_writer_per_destination():
    """An existing entry to a neighbor blocks a second one, even with other data."""
    spec = [
        ("A", None, [("B", (1, "x"))]),
        ("B", None, [("A", (5, "y"))]),
    ]
    g = symmetrize(DirectedGraph.build(lambda v, e: e[0], spec))
    assert g.edges(0) == (Edge(1, 1, (1, "x")),)
    assert g.edges(1) == (Edge(0, 1, (1, "x")),)


def test_symmetrize_drops_parallel_directed_edges():
    spec = [("A", None, [("B", "p"), ("B", "q")]), ("B", None, [])]
    g = symmetrize(DirectedGraph.build(lambda v, e: 0, spec))
    assert g.edges(0) == (Edge(1, 0, "p"),)
    assert g.edges(1) == (Edge(0, 0, "p"),)


def test_symmetrize_keeps_isolated_vertices():
    spec = [("lonely", None, []), ("A", None, [("B", 1)]), ("B", None, [])]
    g = symmetrize(DirectedGraph.build(lambda v, e: e, spec))
    assert g.edges(0) == ()
    assert g.remaining() == (0, 1, 2)


#
# Compression
#
def test_chain_contracts_to_single_edge(chain_spec, chain_costs, combine_labels):
    """A->B->C->D contracts to one A<->D edge with summed cost and joined label."""
    g = compress(DirectedGraph.build(chain_costs, chain_spec), combine_labels)

    # Vertex table untouched
    assert g.vertices == (
        Vertex("A", "A"),
        Vertex("B", "B"),
        Vertex("C", "C"),
        Vertex("D", "D"),
    )
    assert g.remaining() == (0, 3)
    assert g.edges(0) == (Edge(3, 6, "A-B-C-D"),)
    assert g.edges(3) == (Edge(0, 6, "A-B-C-D"),)
    assert g.is_eliminated(1) and g.is_eliminated(2)
    assert not g.is_eliminated(0)
    with pytest.raises(KeyError):
        g.edges(1)


def test_compress_classmethod_matches_function(chain_spec, chain_costs, combine_labels):
    first = BidirectionalGraph.compress(
        DirectedGraph.build(chain_costs, chain_spec), combine_labels
    )
    second = compress(DirectedGraph.build(chain_costs, chain_spec), combine_labels)
    assert first.render() == second.render()


def test_rejecting_combine_keeps_symmetrized_graph(chain_spec, chain_costs):
    """Returning None for every candidate leaves the symmetrized graph unchanged."""
    calls = []

    def record(v1, v2, v3, data_a, cost_a, data_b, cost_b):
        calls.append((v1, v2, v3))
        return None

    expected = symmetrize(DirectedGraph.build(chain_costs, chain_spec)).render()
    g = compress(DirectedGraph.build(chain_costs, chain_spec), record)

    assert g.render() == expected
    assert g.remaining() == (0, 1, 2, 3)
    # Both orientations of both degree-2 vertices, in a single pass
    assert calls == [
        ("B", "A", "C"),
        ("B", "C", "A"),
        ("C", "B", "D"),
        ("C", "D", "B"),
    ]


def test_rejected_candidate_does_not_stop_the_pass(chain_spec, chain_costs):
    """A later candidate is contracted when an earlier one is refused."""

    def only_c(v1, v2, v3, data_a, cost_a, data_b, cost_b):
        if v1 != "C":
            return None
        return cost_a + cost_b, "merged"

    g = compress(DirectedGraph.build(chain_costs, chain_spec), only_c)
    assert g.remaining() == (0, 1, 3)
    assert g.edges(1) == (Edge(0, 1, "A-B"), Edge(3, 5, "merged"))
    assert g.edges(3) == (Edge(1, 5, "merged"),)


def test_swapped_orientation_is_tried():
    """When the first orientation is refused, the swapped pair is offered."""
    spec = [
        ("A", "A", [("B", "ab")]),
        ("B", "B", [("C", "bc")]),
        ("C", "C", []),
    ]

    def from_c(v1, v2, v3, data_a, cost_a, data_b, cost_b):
        if v2 != "C":
            return None
        return cost_a + cost_b, data_a + data_b

    g = compress(DirectedGraph.build(lambda v, e: 1, spec), from_c)
    assert g.remaining() == (0, 2)
    assert g.edges(0) == (Edge(2, 2, "bcab"),)
    assert g.edges(2) == (Edge(0, 2, "bcab"),)


def test_isolated_vertex_survives_compression():
    spec = [("A", None, [("B", 1)]), ("B", None, [("C", 1)]), ("C", None, []), ("Z", None, [])]
    g = compress(DirectedGraph.build(lambda v, e: e, spec), always_sum)
    assert g.edges(3) == ()
    assert not g.is_eliminated(3)
    assert g.remaining() == (0, 2, 3)


def test_leaf_and_branch_vertices_are_not_eligible():
    """Only vertices of degree exactly two are contracted."""
    # Star: hub has degree 3, leaves degree 1
    spec = [
        ("hub", None, [("x", 1), ("y", 1), ("z", 1)]),
        ("x", None, []),
        ("y", None, []),
        ("z", None, []),
    ]
    g = compress(DirectedGraph.build(lambda v, e: e, spec), always_sum)
    assert g.remaining() == (0, 1, 2, 3)
    assert g.edge_count() == 6


def test_triangle_leaves_parallel_pair():
    """Contracting a triangle corner yields two entries to the same neighbor.

    Those vertices are never eligible again and keep both entries.
    """
    spec = [
        ("A", None, [("B", 1)]),
        ("B", None, [("C", 2)]),
        ("C", None, [("A", 4)]),
    ]
    g = compress(DirectedGraph.build(lambda v, e: e, spec), always_sum)
    assert g.remaining() == (1, 2)
    assert g.edges(1) == (Edge(2, 5, "1+4"), Edge(2, 2, 2))
    assert g.edges(2) == (Edge(1, 2, 2), Edge(1, 5, "1+4"))
    assert_symmetric(g)


def test_ring_terminates_with_two_vertices():
    """Termination: a cycle collapses until only a parallel pair remains."""
    g = compress(ring(5), always_sum)
    assert g.remaining() == (3, 4)
    assert sorted(e.cost for e in g.edges(3)) == [1, 4]
    assert all(e.target == 4 for e in g.edges(3))
    assert_symmetric(g)


def test_self_loop_is_never_contracted():
    spec = [("A", None, [("A", 1), ("B", 1)]), ("B", None, [])]
    g = compress(DirectedGraph.build(lambda v, e: e, spec), always_sum)
    assert g.remaining() == (0, 1)
    assert g.edges(0) == (Edge(0, 1, 1), Edge(1, 1, 1))


def test_ladder_stays_symmetric_after_compression():
    """Symmetry holds for every remaining entry after many contractions."""
    spec = []
    for i in range(6):
        outgoing = [(f"b{i}", 1)]
        if i < 5:
            outgoing.append((f"a{i + 1}", 1))
        spec.append((f"a{i}", None, outgoing))
    for i in range(6):
        spec.append((f"b{i}", None, [(f"b{i + 1}", 1)] if i < 5 else []))

    g = compress(DirectedGraph.build(lambda v, e: e, spec), always_sum)
    assert len(g) == 12
    assert len(g.remaining()) < 12
    assert_symmetric(g)
    for index in g.remaining():
        assert len(g.edges(index)) != 2 or len({e.target for e in g.edges(index)}) == 1


def test_compression_is_deterministic():
    first = compress(ring(7), always_sum)
    second = compress(ring(7), always_sum)
    assert first.render() == second.render()
    assert str(first).startswith("BidirectionalGraph {\n")


#
# Ownership transfer
#
def test_directed_graph_is_consumed(chain_spec, chain_costs, combine_labels):
    directed = DirectedGraph.build(chain_costs, chain_spec)
    compress(directed, combine_labels)

    assert directed.consumed
    assert repr(directed) == "DirectedGraph(consumed)"
    with pytest.raises(ConsumedGraphError, match="consumed by compression"):
        directed.edges(0)
    with pytest.raises(ConsumedGraphError):
        len(directed)
    with pytest.raises(ConsumedGraphError):
        compress(directed, combine_labels)


def test_is_eliminated_rejects_unknown_index(chain_spec, chain_costs):
    g = symmetrize(DirectedGraph.build(chain_costs, chain_spec))
    with pytest.raises(IndexError):
        g.is_eliminated(10)


def test_missing_back_edge_fails_before_any_change():
    # B -> A and B -> C, but C has no entry back to B
    vertices = [Vertex("A", None), Vertex("B", None), Vertex("C", None)]
    adjacency = {
        0: [Edge(1, 1, "ab")],
        1: [Edge(0, 1, "ab"), Edge(2, 1, "bc")],
        2: [],
    }
    g = BidirectionalGraph(
        vertices, adjacency, {"A": 0, "B": 1, "C": 2}, DEFAULT_GRAPH_CONFIG
    )
    before = dict(g.adjacency)

    with pytest.raises(GraphInvariantError, match="'C' has no edge back to 'B'"):
        g._contract(always_sum)

    assert dict(g.adjacency) == before
    assert not g.is_eliminated(1)
