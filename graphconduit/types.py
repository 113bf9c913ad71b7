"""Shared value types and aliases for graph algorithms."""

from dataclasses import dataclass
from typing import Hashable, Mapping, Optional, Sequence, Tuple, Union

from .core import Graph, WeightedGraph

Vertex = Hashable
WeightedEdge = Tuple[Hashable, Hashable, float]

# Anything the traversal, ordering and component algorithms can walk.
GraphLike = Union[Graph, WeightedGraph]

# Weighted adjacency in either of its accepted shapes.
WeightedInput = Union[WeightedGraph, Mapping[Hashable, Sequence[Tuple[Hashable, float]]]]

INF = float("inf")


@dataclass(frozen=True)
class DistanceRecord:
    """
    Best known distance to a vertex and the vertex it was reached from.

    Attributes:
        distance: Shortest distance from the source, ``inf`` if unreachable.
        predecessor: Previous vertex on the shortest path, None for the
            source and for unreachable vertices. Because of this None is
            never a vertex.
    """

    distance: float = INF
    predecessor: Optional[Hashable] = None

    @property
    def reachable(self) -> bool:
        return self.distance != INF


__all__ = [
    "Vertex",
    "WeightedEdge",
    "GraphLike",
    "WeightedInput",
    "INF",
    "DistanceRecord",
]
