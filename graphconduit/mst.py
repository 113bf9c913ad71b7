"""
Minimum spanning tree algorithms: Kruskal and Prim.

Kruskal uses the union-find structure. Prim uses a binary-heap
priority queue of candidate edges.

Tie-breaking is by insertion order in both: Kruskal sorts stably, so
equal-weight edges keep their input order, and Prim's heap orders equal
weights by push sequence.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
"""

import heapq
import itertools
from typing import Hashable, Iterable, List, Optional, Tuple

from .diagnostics import assert_spanning_forest, verify_result
from .exceptions import UnknownVertexError
from .logging import get_logger
from .types import WeightedEdge, WeightedInput
from .unionfind import UnionFind
from .utils import as_weighted_adjacency, normalize_edges

logger = get_logger(__name__)


def kruskal_mst(vertices: Iterable[Hashable], edges: Iterable[WeightedEdge]) -> List[WeightedEdge]:
    """
    Kruskal's algorithm for minimum spanning tree.

    Edges are sorted by weight (stable, so ties keep their input order)
    and accepted whenever they join two different union-find sets.
    Stops as soon as |V|-1 edges are accepted.

    Args:
        vertices: All vertices of the graph.
        edges: (u, v, weight) triples of an undirected graph. Listing an
            edge in both directions is harmless.

    Returns:
        Accepted (u, v, weight) edges in acceptance order, which is
        non-decreasing weight. On a disconnected graph this is a minimum
        spanning forest.

    Raises:
        UnknownVertexError: If an edge endpoint is not in vertices.

    Complexity: O(E log E)

    Example:
        >>> mst = kruskal_mst(['A', 'B', 'C'], [('A', 'B', 1.0), ('B', 'C', 2.0), ('A', 'C', 3.0)])
        >>> mst
        [('A', 'B', 1.0), ('B', 'C', 2.0)]
    """
    vertex_list, edge_list = normalize_edges(vertices, edges)
    edge_list.sort(key=lambda edge: edge[2])

    uf = UnionFind(vertex_list)
    needed = max(len(vertex_list) - 1, 0)
    mst_edges: List[WeightedEdge] = []

    for u, v, weight in edge_list:
        if len(mst_edges) == needed:
            break
        if uf.union(u, v):
            mst_edges.append((u, v, weight))

    if len(mst_edges) < needed:
        logger.info(
            "kruskal_mst: graph is disconnected, returning a spanning forest of %d tree(s)",
            uf.set_count,
        )
    verify_result("kruskal_mst", assert_spanning_forest, vertex_list, mst_edges)
    return mst_edges


def prim_mst(weighted: WeightedInput, start: Optional[Hashable] = None) -> List[WeightedEdge]:
    """
    Prim's algorithm for minimum spanning tree.

    Grows a tree from start by repeatedly taking the lightest candidate
    edge that leads out of the tree. Candidate edges into vertices that
    joined the tree after the edge was pushed are discarded when popped.

    The graph must be connected for the result to be a spanning tree.
    On a disconnected graph only the component containing start is
    spanned; the result is that component's tree, not a forest over the
    whole graph, and an INFO message reports how many vertices were left
    out. Use kruskal_mst for a spanning forest.

    Args:
        weighted: Undirected WeightedGraph or adjacency mapping.
        start: Starting vertex (defaults to the first registered vertex).

    Returns:
        Accepted (from, to, weight) edges in acceptance order, where
        ``from`` is already in the tree.

    Raises:
        UnknownVertexError: If start is not a vertex.

    Complexity: O(E log E)

    Example:
        >>> G = WeightedGraph()
        >>> G.add_edge('A', 'B', 1.0)
        >>> G.add_edge('B', 'C', 2.0)
        >>> prim_mst(G, 'A')
        [('A', 'B', 1.0), ('B', 'C', 2.0)]
    """
    adjacency = as_weighted_adjacency(weighted)
    if start is not None and start not in adjacency:
        raise UnknownVertexError(start)
    if not adjacency:
        return []
    if start is None:
        start = next(iter(adjacency))

    counter = itertools.count()
    mst_edges: List[WeightedEdge] = []
    in_mst = {start}
    # (weight, push sequence, from, to)
    pq: List[Tuple[float, int, Hashable, Hashable]] = [
        (weight, next(counter), start, v) for v, weight in adjacency[start]
    ]
    heapq.heapify(pq)

    while pq and len(in_mst) < len(adjacency):
        weight, _, u, v = heapq.heappop(pq)
        if v in in_mst:
            continue

        in_mst.add(v)
        mst_edges.append((u, v, weight))

        for neighbor, edge_weight in adjacency[v]:
            if neighbor not in in_mst:
                heapq.heappush(pq, (edge_weight, next(counter), v, neighbor))

    if len(in_mst) < len(adjacency):
        logger.info(
            "prim_mst: %d of %d vertices unreachable from %r; tree spans its component only",
            len(adjacency) - len(in_mst),
            len(adjacency),
            start,
        )
    verify_result("prim_mst", assert_spanning_forest, adjacency, mst_edges)
    return mst_edges
