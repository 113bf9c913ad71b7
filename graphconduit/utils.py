"""
Utility functions for graph algorithms.

Provides helpers that normalise the accepted weighted-input shapes, iterate
edges, index vertices and reconstruct paths.
"""

from collections.abc import Mapping
from typing import Dict, Hashable, Iterable, List, Tuple

from .core import WeightedGraph, _check_vertex, _check_weight
from .exceptions import UnknownVertexError
from .types import DistanceRecord, GraphLike, WeightedEdge, WeightedInput


def require_vertex(graph: GraphLike, vertex: Hashable) -> None:
    """Raise UnknownVertexError unless vertex is registered in graph."""
    if vertex not in graph:
        raise UnknownVertexError(vertex)


def node_index_map(vertices: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create a mapping from vertices to indices 0..n-1.

    Indices follow first appearance in ``vertices``; duplicates are dropped.

    Args:
        vertices: Iterable of hashable vertices.

    Returns:
        Tuple of (vertex_to_index dict, index_to_vertex list).

    Example:
        >>> vertex_to_idx, idx_to_vertex = node_index_map(['c', 'a', 'c', 'b'])
        >>> vertex_to_idx
        {'c': 0, 'a': 1, 'b': 2}
        >>> idx_to_vertex
        ['c', 'a', 'b']
    """
    vertex_to_index: Dict[Hashable, int] = {}
    for vertex in vertices:
        if vertex not in vertex_to_index:
            vertex_to_index[vertex] = len(vertex_to_index)
    return vertex_to_index, list(vertex_to_index)


def as_weighted_adjacency(weighted: WeightedInput) -> Dict[Hashable, List[Tuple[Hashable, float]]]:
    """
    Return a weighted adjacency mapping from either accepted input shape.

    A WeightedGraph is read as is. A plain mapping of
    vertex -> [(destination, weight), ...] is validated and copied;
    destinations that never appear as keys are registered as vertices
    without outgoing edges, after all the keys.

    Args:
        weighted: WeightedGraph or adjacency mapping.

    Returns:
        Fresh dict mapping every vertex to its list of (neighbor, weight).

    Raises:
        ValueError: If an adjacency entry is not a (destination, weight)
            pair, a weight is not a real number or a vertex is None.
    """
    if isinstance(weighted, WeightedGraph):
        return {vertex: list(targets) for vertex, targets in weighted.adj.items()}

    if not isinstance(weighted, Mapping):
        raise TypeError(
            f"Expected WeightedGraph or mapping, got {type(weighted).__name__}"
        )

    adjacency: Dict[Hashable, List[Tuple[Hashable, float]]] = {}
    for vertex, targets in weighted.items():
        _check_vertex(vertex)
        entries = []
        for entry in targets:
            if len(entry) != 2:
                raise ValueError(
                    f"Adjacency entry for {vertex!r} must be (destination, weight), got {entry!r}"
                )
            neighbor, weight = entry
            entries.append((_check_vertex(neighbor), _check_weight(weight)))
        adjacency[vertex] = entries

    for targets in list(adjacency.values()):
        for neighbor, _ in targets:
            adjacency.setdefault(neighbor, [])

    return adjacency


def normalize_edges(
    vertices: Iterable[Hashable], edges: Iterable[WeightedEdge]
) -> Tuple[List[Hashable], List[WeightedEdge]]:
    """
    Validate a vertex list and a flat edge list against each other.

    Args:
        vertices: Iterable of vertices (duplicates are dropped).
        edges: Iterable of (source, destination, weight) triples.

    Returns:
        Tuple of (vertex list in first-appearance order, edge list).

    Raises:
        UnknownVertexError: If an edge names a vertex missing from vertices.
        ValueError: If an edge is not a triple, its weight is invalid or a
            vertex is None.
    """
    _, vertex_list = node_index_map(_check_vertex(vertex) for vertex in vertices)
    known = set(vertex_list)
    edge_list: List[WeightedEdge] = []

    for edge in edges:
        if len(edge) != 3:
            raise ValueError(f"Edge must be (source, destination, weight), got {edge!r}")
        u, v, weight = edge
        for endpoint in (u, v):
            if endpoint not in known:
                raise UnknownVertexError(endpoint, "vertex list")
        edge_list.append((u, v, _check_weight(weight)))

    return vertex_list, edge_list


def edges_from_weighted_graph(graph: WeightedGraph) -> Iterable[WeightedEdge]:
    """
    Yield every adjacency entry of graph as a (u, v, weight) triple.

    Unlike ``graph.edges()`` an undirected edge is yielded in both
    directions, which is what edge-list algorithms such as Bellman-Ford
    need to see. Order follows vertex and neighbor insertion order.

    Args:
        graph: WeightedGraph instance.

    Yields:
        (u, v, weight) tuples.
    """
    for u, targets in graph.adj.items():
        for v, weight in targets:
            yield (u, v, weight)


def reconstruct_path(distances: Mapping[Hashable, DistanceRecord], target: Hashable) -> List[Hashable]:
    """
    Reconstruct the path ending at target from a distance-record mapping.

    Walks predecessor links back from target and reverses the result.
    When target is the source or is unreachable the chain is empty and the
    result is ``[target]``; check ``distances[target].reachable`` to tell
    the two apart.

    Args:
        distances: Mapping produced by dijkstra or bellman_ford_records.
        target: Vertex to reconstruct the path to.

    Returns:
        List of vertices from source to target (inclusive).

    Raises:
        UnknownVertexError: If target is not in distances.
        ValueError: If the predecessor chain loops back on itself.

    Example:
        >>> dist = dijkstra(G, 'A')
        >>> reconstruct_path(dist, 'C')
        ['A', 'B', 'C']
    """
    if target not in distances:
        raise UnknownVertexError(target, "distance records")

    path = [target]
    seen = {target}
    current = distances[target].predecessor
    while current is not None:
        if current in seen:
            raise ValueError(f"Predecessor chain for {target!r} contains a cycle at {current!r}")
        seen.add(current)
        path.append(current)
        current = distances[current].predecessor

    path.reverse()
    return path
