"""Configuration classes for gridgraph components."""

from dataclasses import dataclass

from gridgraph.types.base import IndexWidth


@dataclass(frozen=True)
class GraphConfig:
    """Configuration for graph construction."""

    # Width of the vertex index; construction fails if the vertex count
    # does not fit.
    index_width: IndexWidth = IndexWidth.U32

    # When False, a repeated vertex name is a construction error. When True,
    # every occurrence gets its own index, while name lookups and the edges
    # of every occurrence resolve to the last one.
    allow_duplicate_names: bool = False


# Global configuration instance
DEFAULT_GRAPH_CONFIG = GraphConfig()
