"""Exception types raised by the graph engine.

Every error derives from :class:`GraphError` and from the builtin exception
that best describes it, so callers can catch either. None of them are caught
inside the library: construction or compression stops at the first one and
no partial graph is returned.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base error for graph construction and compression."""


class IndexCapacityError(GraphError, OverflowError):
    """The vertex count does not fit the configured index width."""


class UnknownVertexError(GraphError, KeyError):
    """An edge names a destination that is not a vertex of the graph."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class DuplicateVertexError(GraphError, ValueError):
    """A vertex name occurs more than once in the edge specification."""


class ConsumedGraphError(GraphError, RuntimeError):
    """A directed graph was used after compression took ownership of it."""


class GraphInvariantError(GraphError, RuntimeError):
    """The adjacency index is inconsistent; indicates a logic defect."""
