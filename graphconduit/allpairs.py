"""
All-pairs shortest path algorithms: Floyd-Warshall.

Computes shortest distances between all pairs of vertices on a dense
numpy matrix.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import Dict, Hashable, Iterable, List, Mapping, Tuple

import numpy as np

from .logging import get_logger
from .types import WeightedEdge
from .utils import node_index_map, normalize_edges

logger = get_logger(__name__)


def distance_matrix(
    vertices: Iterable[Hashable], edges: Iterable[WeightedEdge]
) -> Tuple[np.ndarray, List[Hashable]]:
    """
    Build the initial Floyd-Warshall matrix.

    Entry [i, j] is the weight of the direct edge i -> j, ``inf`` where
    there is none, and 0 on the diagonal. When an edge is supplied more
    than once the last one wins. A negative self loop is kept on the
    diagonal, since it is a negative cycle on its own.

    Args:
        vertices: All vertices of the graph.
        edges: Directed (source, destination, weight) triples.

    Returns:
        Tuple of (n x n float64 matrix, vertex list giving row/column order).
        Integer weights are converted to float64.

    Raises:
        UnknownVertexError: If an edge endpoint is not in vertices.
    """
    vertex_list, edge_list = normalize_edges(vertices, edges)
    vertex_to_idx, _ = node_index_map(vertex_list)
    n = len(vertex_list)

    dist = np.full((n, n), np.inf, dtype=np.float64)
    for u, v, weight in edge_list:
        dist[vertex_to_idx[u], vertex_to_idx[v]] = weight

    diagonal = np.diagonal(dist)
    np.fill_diagonal(dist, np.minimum(diagonal, 0.0))
    return dist, vertex_list


def floyd_warshall(
    vertices: Iterable[Hashable], edges: Iterable[WeightedEdge]
) -> Dict[Hashable, Dict[Hashable, float]]:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    For each intermediate vertex k the whole matrix is relaxed at once:
    ``dist = min(dist, dist[:, k] + dist[k, :])``. Negative edge weights
    are fine. A negative cycle leaves a negative entry on the diagonal;
    it is logged as a warning and can be checked with has_negative_cycle
    or negative_cycle_vertices. Distances are meaningless in that case.

    Args:
        vertices: All vertices of the graph.
        edges: Directed (source, destination, weight) triples. Pass each
            undirected edge in both directions.

    Returns:
        Nested dictionary ``dist[u][v]`` of shortest distances
        (``inf`` if v is unreachable from u).
        Distances are Python floats computed in float64, so integer
        weights are converted and sums beyond 2**53 lose precision.

    Raises:
        UnknownVertexError: If an edge endpoint is not in vertices.

    Complexity: O(n^3) where n is number of vertices.

    Example:
        >>> dist = floyd_warshall(['A', 'B', 'C'], [('A', 'B', 1.0), ('B', 'C', 2.0)])
        >>> dist['A']['C']
        3.0
    """
    dist, vertex_list = distance_matrix(vertices, edges)
    n = len(vertex_list)

    for k in range(n):
        # inf + finite stays inf, so unreachable pairs never improve
        np.minimum(dist, dist[:, k : k + 1] + dist[k : k + 1, :], out=dist)

    negative = [vertex_list[i] for i in np.flatnonzero(np.diagonal(dist) < 0)]
    if negative:
        logger.warning(
            "floyd_warshall found negative cycle(s) through %d vertex(es), e.g. %r",
            len(negative),
            negative[0],
        )

    return {
        u: {v: float(dist[i, j]) for j, v in enumerate(vertex_list)}
        for i, u in enumerate(vertex_list)
    }


def negative_cycle_vertices(distances: Mapping[Hashable, Mapping[Hashable, float]]) -> List[Hashable]:
    """
    Return the vertices that lie on a negative cycle.

    Args:
        distances: Result of floyd_warshall.

    Returns:
        Vertices whose distance to themselves is negative, in row order.
    """
    return [vertex for vertex, row in distances.items() if row[vertex] < 0]


def has_negative_cycle(distances: Mapping[Hashable, Mapping[Hashable, float]]) -> bool:
    """Return True if a floyd_warshall result contains a negative cycle."""
    return bool(negative_cycle_vertices(distances))
