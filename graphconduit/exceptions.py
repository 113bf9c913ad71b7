"""Exception hierarchy for Graph Conduit.

Only input-contract violations are exceptions. Expected algorithmic outcomes
(a negative cycle, a cyclic graph handed to a topological sort) are returned
as ``None`` by the functions that can produce them.
"""

from __future__ import annotations

from typing import Hashable


class GraphError(Exception):
    """Base class for all Graph Conduit errors."""


class UnknownVertexError(GraphError, KeyError):
    """Raised when a query names a vertex that was never registered."""

    def __init__(self, vertex: Hashable, context: str = "graph"):
        self.vertex = vertex
        self.context = context
        super().__init__(vertex)

    def __str__(self) -> str:
        return f"Vertex {self.vertex!r} not in {self.context}"


__all__ = ["GraphError", "UnknownVertexError"]
