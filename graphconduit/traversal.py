"""
Graph traversal algorithms: BFS and DFS.

Neighbors are visited in adjacency insertion order, so results are
reproducible for a given construction sequence. Every DFS here except
dfs_recursive uses an explicit stack and is safe on arbitrarily deep graphs.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Hashable, Iterator, List, Optional, Set, Tuple

from .types import GraphLike
from .utils import require_vertex


def bfs(graph: GraphLike, start: Hashable) -> List[Hashable]:
    """
    Breadth-first search from a start vertex.

    Vertices are marked visited when enqueued and emitted when dequeued,
    so each reachable vertex appears exactly once, in non-decreasing hop
    distance from start. Unreachable vertices are absent.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.

    Returns:
        List of vertices in BFS visitation order.

    Raises:
        UnknownVertexError: If start is not in graph.

    Complexity: O(V + E)

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        >>> G.add_edge('A', 'C')
        >>> bfs(G, 'A')
        ['A', 'B', 'C']
    """
    require_vertex(graph, start)

    order: List[Hashable] = []
    visited = {start}
    queue = deque([start])

    while queue:
        u = queue.popleft()
        order.append(u)

        for v in graph.neighbors(u):
            if v not in visited:
                visited.add(v)
                queue.append(v)

    return order


def bfs_shortest_path(
    graph: GraphLike, start: Hashable, target: Hashable
) -> Optional[List[Hashable]]:
    """
    Shortest unweighted path from start to target.

    Each queued entry carries the path that reached it; the path of the
    first dequeued entry for target has the minimum vertex count.

    Args:
        graph: Graph to search.
        start: Source vertex.
        target: Destination vertex.

    Returns:
        List of vertices from start to target inclusive, or None if target
        is unreachable.

    Raises:
        UnknownVertexError: If start or target is not in graph.

    Complexity: O(V + E) steps, plus the path copies.
    """
    require_vertex(graph, start)
    require_vertex(graph, target)

    visited = {start}
    queue = deque([(start, (start,))])

    while queue:
        u, path = queue.popleft()
        if u == target:
            return list(path)

        for v in graph.neighbors(u):
            if v not in visited:
                visited.add(v)
                queue.append((v, path + (v,)))

    return None


def bfs_levels(graph: GraphLike, start: Hashable) -> List[List[Hashable]]:
    """
    Group the vertices reachable from start by hop distance.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.

    Returns:
        List of levels; level k holds, in BFS order, exactly the vertices
        at shortest hop distance k. Level 0 is ``[start]``.

    Raises:
        UnknownVertexError: If start is not in graph.

    Example:
        >>> bfs_levels(G, 'A')
        [['A'], ['B', 'C'], ['D', 'E']]
    """
    require_vertex(graph, start)

    levels: List[List[Hashable]] = []
    visited = {start}
    queue = deque([(start, 0)])

    while queue:
        u, depth = queue.popleft()
        # depth never skips ahead in FIFO order
        if depth == len(levels):
            levels.append([])
        levels[depth].append(u)

        for v in graph.neighbors(u):
            if v not in visited:
                visited.add(v)
                queue.append((v, depth + 1))

    return levels


def preorder_from(graph: GraphLike, start: Hashable, visited: Set[Hashable]) -> List[Hashable]:
    """DFS preorder from start, skipping and updating ``visited`` in place."""
    order: List[Hashable] = []
    stack = [start]

    while stack:
        u = stack.pop()
        # A vertex can be pushed several times before its first pop
        if u in visited:
            continue
        visited.add(u)
        order.append(u)

        # Push in reverse so the first neighbor is popped first
        for v in reversed(graph.neighbors(u)):
            if v not in visited:
                stack.append(v)

    return order


def dfs(graph: GraphLike, start: Hashable) -> List[Hashable]:
    """
    Depth-first search (iterative, explicit stack).

    A vertex is marked visited when it is popped, not when it is pushed,
    and stale stack entries for visited vertices are skipped. The result
    is the same preorder a recursive DFS would produce.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.

    Returns:
        List of vertices in DFS preorder.

    Raises:
        UnknownVertexError: If start is not in graph.

    Complexity: O(V + E)

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        >>> G.add_edge('B', 'D')
        >>> G.add_edge('A', 'C')
        >>> dfs(G, 'A')
        ['A', 'B', 'D', 'C']
    """
    require_vertex(graph, start)
    return preorder_from(graph, start, set())


def dfs_recursive(graph: GraphLike, start: Hashable) -> List[Hashable]:
    """
    Depth-first search (recursive implementation).

    Produces the same order as dfs. Recursion depth grows with the
    longest path explored, so use this only on graphs of bounded depth.

    Raises:
        UnknownVertexError: If start is not in graph.
    """
    require_vertex(graph, start)

    order: List[Hashable] = []
    visited: Set[Hashable] = set()

    def dfs_visit(u: Hashable) -> None:
        visited.add(u)
        order.append(u)
        for v in graph.neighbors(u):
            if v not in visited:
                dfs_visit(v)

    dfs_visit(start)
    return order


def dfs_all(graph: GraphLike) -> List[Hashable]:
    """
    Depth-first search over every component.

    Starts a fresh DFS from each vertex not yet visited, in registration
    order, and concatenates the results. Every vertex appears exactly once.

    Args:
        graph: Graph to traverse.

    Returns:
        List of all vertices in DFS preorder, component by component.
    """
    visited: Set[Hashable] = set()
    order: List[Hashable] = []

    for vertex in graph.vertices():
        if vertex not in visited:
            order.extend(preorder_from(graph, vertex, visited))

    return order


def postorder_from(
    graph: GraphLike, start: Hashable, visited: Set[Hashable]
) -> Iterator[Hashable]:
    """
    Yield vertices reachable from start in DFS finish order.

    Vertices already in ``visited`` are treated as explored; the set is
    updated in place, which lets callers chain runs over a whole graph.
    Each stack frame holds an iterator over the vertex's neighbors.
    """
    visited.add(start)
    stack: List[Tuple[Hashable, Iterator[Hashable]]] = [(start, iter(graph.neighbors(start)))]

    while stack:
        u, pending = stack[-1]
        for v in pending:
            if v not in visited:
                visited.add(v)
                stack.append((v, iter(graph.neighbors(v))))
                break
        else:
            stack.pop()
            yield u


def dfs_postorder(graph: GraphLike, start: Hashable) -> List[Hashable]:
    """
    DFS finish order from start (iterative).

    A vertex is emitted once all of its neighbors have been explored, so
    start is always last.

    Raises:
        UnknownVertexError: If start is not in graph.
    """
    require_vertex(graph, start)
    return list(postorder_from(graph, start, set()))


def find_path(graph: GraphLike, start: Hashable, target: Hashable) -> Optional[List[Hashable]]:
    """
    Find a path from start to target by depth-first search.

    Returns the first path completed in DFS order, which is not
    necessarily the shortest (use bfs_shortest_path for that). Every
    stack entry carries its own immutable path, so a branch that is
    abandoned never leaks vertices into its siblings.

    Args:
        graph: Graph to search.
        start: Source vertex.
        target: Destination vertex.

    Returns:
        List of vertices from start to target inclusive, or None.

    Raises:
        UnknownVertexError: If start or target is not in graph.
    """
    require_vertex(graph, start)
    require_vertex(graph, target)

    visited: Set[Hashable] = set()
    stack = [(start, (start,))]

    while stack:
        u, path = stack.pop()
        if u in visited:
            continue
        visited.add(u)

        if u == target:
            return list(path)

        for v in reversed(graph.neighbors(u)):
            if v not in visited:
                stack.append((v, path + (v,)))

    return None
