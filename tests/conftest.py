"""Shared fixtures for graph and grid tests."""

from __future__ import annotations

import pytest


def label_cost(vertex_data, edge_data):
    """Cost function for specs whose edge data is ``(cost, label)``."""
    return edge_data[0]


def join_labels(v1, v2, v3, data_a, cost_a, data_b, cost_b):
    """Combine two ``X-Y`` path labels through ``v1`` and add their costs.

    Vertex payloads are the vertex names, so each label can be oriented to
    meet at ``v1`` regardless of the direction it was declared in.
    """
    left = data_a.split("-")
    right = data_b.split("-")
    if left[-1] != v1:
        left.reverse()
    if right[0] != v1:
        right.reverse()
    return cost_a + cost_b, "-".join(left + right[1:])


@pytest.fixture
def chain_spec():
    # A --1--> B --2--> C --3--> D
    return [
        ("A", "A", [("B", "A-B")]),
        ("B", "B", [("C", "B-C")]),
        ("C", "C", [("D", "C-D")]),
        ("D", "D", []),
    ]


@pytest.fixture
def chain_costs():
    """Cost function giving the chain fixture costs 1, 2 and 3."""
    costs = {"A-B": 1, "B-C": 2, "C-D": 3}
    return lambda vertex_data, edge_data: costs[edge_data]


@pytest.fixture
def combine_labels():
    return join_labels
