"""Shared enums and type aliases."""

from gridgraph.types.base import Cost, IndexWidth

__all__ = ["Cost", "IndexWidth"]
