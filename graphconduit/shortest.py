"""
Shortest path algorithms: Dijkstra and Bellman-Ford.

Dijkstra's algorithm for non-negative edge weights.
Bellman-Ford algorithm for arbitrary weights, with negative-cycle detection.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

import heapq
import itertools
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from .diagnostics import assert_acyclic_predecessors, is_debug_enabled, verify_result
from .exceptions import UnknownVertexError
from .logging import get_logger
from .types import INF, DistanceRecord, WeightedEdge, WeightedInput
from .utils import as_weighted_adjacency, normalize_edges

logger = get_logger(__name__)


def dijkstra(weighted: WeightedInput, start: Hashable) -> Dict[Hashable, DistanceRecord]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Uses a binary heap with lazy deletion: a vertex may sit in the heap
    several times and only its smallest entry is processed. Among equal
    tentative distances the entry pushed first wins.

    All weights must be non-negative. Negative weights are not rejected,
    the result is simply not guaranteed to be correct; use bellman_ford
    for such graphs.

    Args:
        weighted: WeightedGraph or mapping vertex -> [(neighbor, weight), ...].
        start: Source vertex.

    Returns:
        Dictionary mapping every vertex to its DistanceRecord. Unreachable
        vertices get ``DistanceRecord(inf, None)``.
        Distances are floats (the source starts at 0.0), so sums of
        integer weights beyond 2**53 lose precision.

    Raises:
        UnknownVertexError: If start is not a vertex.

    Complexity: O(E log V)

    Example:
        >>> G = WeightedGraph(directed=True)
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', 2.0)
        >>> dijkstra(G, 'A')['C'].distance
        3.0
    """
    adjacency = as_weighted_adjacency(weighted)
    if start not in adjacency:
        raise UnknownVertexError(start)

    if is_debug_enabled():
        negative = [
            (u, v, w) for u, targets in adjacency.items() for v, w in targets if w < 0
        ]
        if negative:
            logger.warning(
                "dijkstra called with %d negative-weight edge(s), first %r; "
                "distances may be wrong",
                len(negative),
                negative[0],
            )

    dist: Dict[Hashable, float] = {vertex: INF for vertex in adjacency}
    parent: Dict[Hashable, Optional[Hashable]] = {vertex: None for vertex in adjacency}
    dist[start] = 0.0

    # (distance, push sequence, vertex); the sequence keeps vertices out of comparisons
    counter = itertools.count()
    pq: List[Tuple[float, int, Hashable]] = [(0.0, next(counter), start)]
    visited: set = set()

    while pq:
        d, _, u = heapq.heappop(pq)

        if u in visited or d > dist[u]:
            continue

        visited.add(u)

        for v, weight in adjacency[u]:
            if v in visited:
                continue

            new_dist = d + weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                heapq.heappush(pq, (new_dist, next(counter), v))

    logger.debug("dijkstra from %r settled %d of %d vertices", start, len(visited), len(adjacency))

    records = {vertex: DistanceRecord(dist[vertex], parent[vertex]) for vertex in adjacency}
    verify_result("dijkstra", assert_acyclic_predecessors, records)
    return records


def _relax_all(
    vertices: List[Hashable], edges: List[WeightedEdge], start: Hashable
) -> Tuple[Dict[Hashable, float], Dict[Hashable, Optional[Hashable]], bool]:
    dist: Dict[Hashable, float] = {vertex: INF for vertex in vertices}
    parent: Dict[Hashable, Optional[Hashable]] = {vertex: None for vertex in vertices}
    dist[start] = 0.0

    passes = 0
    for _ in range(len(vertices) - 1):
        passes += 1
        changed = False
        for u, v, weight in edges:
            if dist[u] != INF and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parent[v] = u
                changed = True
        # Nothing moved, so later passes cannot move anything either
        if not changed:
            break

    has_negative_cycle = any(
        dist[u] != INF and dist[u] + weight < dist[v] for u, v, weight in edges
    )

    logger.debug(
        "bellman_ford from %r: %d relaxation pass(es) over %d edges, negative cycle=%s",
        start,
        passes,
        len(edges),
        has_negative_cycle,
    )
    return dist, parent, has_negative_cycle


def bellman_ford(
    vertices: Iterable[Hashable], edges: Iterable[WeightedEdge], start: Hashable
) -> Optional[Dict[Hashable, float]]:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Relaxes every edge |V|-1 times (stopping early once a pass changes
    nothing), then makes one more pass. If any edge still relaxes, a
    negative-weight cycle is reachable from start and there is no
    meaningful distance map to return.

    Args:
        vertices: All vertices of the graph.
        edges: Directed (source, destination, weight) triples. Pass each
            undirected edge in both directions, e.g. via
            edges_from_weighted_graph.
        start: Source vertex.

    Returns:
        Dictionary mapping vertex -> shortest distance (``inf`` if
        unreachable), or None if a negative cycle is reachable from start.
        Distances are floats, as for dijkstra.

    Raises:
        UnknownVertexError: If start, or an edge endpoint, is not in vertices.

    Complexity: O(VE)

    Example:
        >>> bellman_ford(['A', 'B', 'C'], [('A', 'B', 1.0), ('B', 'C', -2.0)], 'A')
        {'A': 0.0, 'B': 1.0, 'C': -1.0}
    """
    records = bellman_ford_records(vertices, edges, start)
    if records is None:
        return None
    return {vertex: record.distance for vertex, record in records.items()}


def bellman_ford_records(
    vertices: Iterable[Hashable], edges: Iterable[WeightedEdge], start: Hashable
) -> Optional[Dict[Hashable, DistanceRecord]]:
    """
    Bellman-Ford returning DistanceRecords for path reconstruction.

    Same contract as bellman_ford; feed the result to reconstruct_path.
    """
    vertex_list, edge_list = normalize_edges(vertices, edges)
    if start not in set(vertex_list):
        raise UnknownVertexError(start, "vertex list")

    dist, parent, has_negative_cycle = _relax_all(vertex_list, edge_list, start)
    if has_negative_cycle:
        return None

    records = {vertex: DistanceRecord(dist[vertex], parent[vertex]) for vertex in vertex_list}
    verify_result("bellman_ford", assert_acyclic_predecessors, records)
    return records
