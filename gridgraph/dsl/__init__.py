"""Declarative input formats for graph construction."""

from gridgraph.dsl.loader import load_edge_spec_yaml

__all__ = ["load_edge_spec_yaml"]
