"""
Topological ordering and cycle detection.

Both topological sorts return None for a cyclic graph instead of a
partial order. The two may return different, equally valid orders for
the same DAG. All DFS-based routines use explicit stacks.

References:
    - Kahn, A. B. "Topological sorting of large networks" (1962).
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.4 (Topological sort).
"""

from collections import deque
from typing import Dict, Hashable, Iterator, List, Optional, Set, Tuple

from .diagnostics import assert_topological_order, verify_result
from .logging import get_logger
from .types import GraphLike

logger = get_logger(__name__)

# DFS vertex states
_UNSEEN, _ON_STACK, _DONE = 0, 1, 2


def topo_sort_kahn(graph: GraphLike) -> Optional[List[Hashable]]:
    """
    Topological sort using Kahn's algorithm.

    The queue is seeded with all in-degree-0 vertices in registration
    order. Vertices are emitted as their in-degree drops to zero.

    Args:
        graph: Directed graph.

    Returns:
        List of all vertices such that every edge (u, v) has u before v,
        or None if the graph contains a cycle.

    Complexity: O(V + E)

    Example:
        >>> G = Graph(directed=True)
        >>> G.add_edge('A', 'B')
        >>> G.add_edge('A', 'C')
        >>> G.add_edge('B', 'D')
        >>> G.add_edge('C', 'D')
        >>> topo_sort_kahn(G)
        ['A', 'B', 'C', 'D']
    """
    vertices = graph.vertices()
    in_degree: Dict[Hashable, int] = {vertex: 0 for vertex in vertices}
    for u in vertices:
        for v in graph.neighbors(u):
            in_degree[v] += 1

    queue = deque(vertex for vertex in vertices if in_degree[vertex] == 0)
    order: List[Hashable] = []

    while queue:
        u = queue.popleft()
        order.append(u)
        for v in graph.neighbors(u):
            in_degree[v] -= 1
            if in_degree[v] == 0:
                queue.append(v)

    if len(order) < len(vertices):
        logger.debug(
            "topo_sort_kahn: %d of %d vertices lie on or behind a cycle",
            len(vertices) - len(order),
            len(vertices),
        )
        return None

    verify_result("topo_sort_kahn", assert_topological_order, graph, order)
    return order


def _finish_order(graph: GraphLike) -> Optional[List[Hashable]]:
    """DFS finish order over the whole graph, or None on a back edge."""
    state: Dict[Hashable, int] = {vertex: _UNSEEN for vertex in graph.vertices()}
    finished: List[Hashable] = []

    for root in graph.vertices():
        if state[root] != _UNSEEN:
            continue

        state[root] = _ON_STACK
        stack: List[Tuple[Hashable, Iterator[Hashable]]] = [(root, iter(graph.neighbors(root)))]

        while stack:
            u, pending = stack[-1]
            for v in pending:
                if state[v] == _ON_STACK:
                    logger.debug("back edge %r -> %r closes a cycle", u, v)
                    return None
                if state[v] == _UNSEEN:
                    state[v] = _ON_STACK
                    stack.append((v, iter(graph.neighbors(v))))
                    break
            else:
                stack.pop()
                state[u] = _DONE
                finished.append(u)

    return finished


def topo_sort_dfs(graph: GraphLike) -> Optional[List[Hashable]]:
    """
    Topological sort by reversed DFS finish order.

    Runs a DFS from every unvisited vertex in registration order. An edge
    to a vertex still on the active DFS path is a cycle.

    Args:
        graph: Directed graph.

    Returns:
        Topological order, or None if the graph contains a cycle.

    Complexity: O(V + E)
    """
    finished = _finish_order(graph)
    if finished is None:
        return None

    finished.reverse()
    verify_result("topo_sort_dfs", assert_topological_order, graph, finished)
    return finished


def has_cycle_directed(graph: GraphLike) -> bool:
    """
    Return True if a directed graph contains a cycle.

    Tracks the vertices on the current DFS path; an edge into that path is
    a cycle, an edge to a finished vertex is not. Self loops count.

    Complexity: O(V + E)
    """
    return _finish_order(graph) is None


def has_cycle_undirected(graph: GraphLike) -> bool:
    """
    Return True if an undirected graph contains a cycle.

    DFS that remembers each vertex's parent: reaching an already visited
    vertex by any edge other than the one back to the parent closes a
    cycle. Self loops count.

    Complexity: O(V + E)
    """
    visited: Set[Hashable] = set()

    for root in graph.vertices():
        if root in visited:
            continue

        visited.add(root)
        stack: List[Tuple[Hashable, Optional[Hashable], Iterator[Hashable]]] = [
            (root, None, iter(graph.neighbors(root)))
        ]

        while stack:
            u, parent, pending = stack[-1]
            for v in pending:
                if v == parent:
                    continue
                if v in visited:
                    return True
                visited.add(v)
                stack.append((v, u, iter(graph.neighbors(v))))
                break
            else:
                stack.pop()

    return False
