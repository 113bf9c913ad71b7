"""Invariant checkers for graph algorithm results.

The ``is_*`` functions return a bool; the ``assert_*`` functions raise
``ValueError`` describing the first violation found. Algorithms call the
``assert_*`` forms on their own output, through
``debug_mode.verify_result``, while debug mode is enabled.
"""

from __future__ import annotations

from typing import Hashable, Iterable, List, Mapping, Sequence, Tuple

from ..types import DistanceRecord, GraphLike
from ..unionfind import UnionFind


def is_valid_path(graph: GraphLike, path: Sequence[Hashable]) -> bool:
    """
    Check that consecutive vertices of path are joined by graph edges.

    An empty path is invalid; a single registered vertex is a valid path.
    """
    if not path or path[0] not in graph:
        return False
    for u, v in zip(path, path[1:]):
        if v not in graph.neighbors(u):
            return False
    return True


def assert_topological_order(graph: GraphLike, order: Sequence[Hashable]) -> None:
    """
    Assert that order lists every vertex once with each edge pointing forward.

    Raises
    ------
    ValueError
        If a vertex is missing or repeated, or some edge (u, v) has v
        placed before u.
    """
    position = {vertex: i for i, vertex in enumerate(order)}
    if len(position) != len(order):
        raise ValueError("Topological order repeats a vertex.")
    missing = [vertex for vertex in graph.vertices() if vertex not in position]
    if missing or len(order) != len(graph):
        raise ValueError(f"Topological order does not cover the graph; missing {missing!r}.")

    for u in graph.vertices():
        for v in graph.neighbors(u):
            if position[u] >= position[v]:
                raise ValueError(f"Edge ({u!r}, {v!r}) points backwards in topological order.")


def assert_partition(vertices: Iterable[Hashable], groups: Sequence[Sequence[Hashable]]) -> None:
    """
    Assert that groups partition vertices.

    Every vertex must appear in exactly one group and no group may be
    empty.

    Raises
    ------
    ValueError
        On an empty group, a vertex in two groups, an unknown vertex or a
        vertex left out.
    """
    expected = set(vertices)
    assigned = set()

    for index, group in enumerate(groups):
        if not group:
            raise ValueError(f"Group {index} is empty.")
        for vertex in group:
            if vertex in assigned:
                raise ValueError(f"Vertex {vertex!r} appears in more than one group.")
            if vertex not in expected:
                raise ValueError(f"Vertex {vertex!r} is not a graph vertex.")
            assigned.add(vertex)

    left_out = expected - assigned
    if left_out:
        raise ValueError(f"Vertices not assigned to any group: {sorted(map(repr, left_out))}.")


def assert_acyclic_predecessors(distances: Mapping[Hashable, DistanceRecord]) -> None:
    """
    Assert that following predecessor links never revisits a vertex.

    Raises
    ------
    ValueError
        If some predecessor chain loops or names a vertex with no record.
    """
    settled = set()
    for start in distances:
        chain = set()
        current = start
        while current is not None and current not in settled:
            if current in chain:
                raise ValueError(f"Predecessor chain from {start!r} loops at {current!r}.")
            if current not in distances:
                raise ValueError(f"Predecessor {current!r} has no distance record.")
            chain.add(current)
            current = distances[current].predecessor
        settled |= chain


def is_spanning_forest(
    vertices: Iterable[Hashable], edges: Iterable[Tuple[Hashable, Hashable, float]]
) -> bool:
    """
    Check that edges form a forest over vertices.

    Returns False if an edge names an unknown vertex or closes a cycle.
    """
    try:
        assert_spanning_forest(vertices, edges)
    except ValueError:
        return False
    return True


def assert_spanning_forest(
    vertices: Iterable[Hashable], edges: Iterable[Tuple[Hashable, Hashable, float]]
) -> None:
    """
    Assert that edges form a forest over vertices.

    Raises
    ------
    ValueError
        If an edge names an unknown vertex or closes a cycle.
    """
    uf = UnionFind(vertices)
    for u, v, _ in edges:
        for endpoint in (u, v):
            if endpoint not in uf:
                raise ValueError(f"Tree edge ({u!r}, {v!r}) names unknown vertex {endpoint!r}.")
        if not uf.union(u, v):
            raise ValueError(f"Tree edge ({u!r}, {v!r}) closes a cycle.")


def total_weight(edges: Iterable[Tuple[Hashable, Hashable, float]]) -> float:
    """Sum of the weights of (u, v, weight) edges."""
    return sum(weight for _, _, weight in edges)


__all__: List[str] = [
    "is_valid_path",
    "assert_topological_order",
    "assert_partition",
    "assert_acyclic_predecessors",
    "is_spanning_forest",
    "assert_spanning_forest",
    "total_weight",
]
