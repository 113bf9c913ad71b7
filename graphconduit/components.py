"""
Connected and strongly connected components.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.5 (Strongly connected components).
    - Sharir, M. "A strong-connectivity algorithm and its applications in
      data flow analysis" (1981).
"""

from typing import Hashable, List, Set

from .diagnostics import assert_partition, verify_result
from .logging import get_logger
from .traversal import preorder_from, postorder_from
from .types import GraphLike

logger = get_logger(__name__)


def connected_components(graph: GraphLike) -> List[List[Hashable]]:
    """
    Connected components of an undirected graph.

    Runs a DFS from each vertex not yet assigned, in registration order;
    everything it reaches forms one component, listed in DFS preorder.

    Args:
        graph: Undirected graph.

    Returns:
        List of components; every vertex is in exactly one and none is
        empty.

    Complexity: O(V + E)

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        >>> G.add_vertex('C')
        >>> connected_components(G)
        [['A', 'B'], ['C']]
    """
    visited: Set[Hashable] = set()
    components: List[List[Hashable]] = []

    for vertex in graph.vertices():
        if vertex not in visited:
            components.append(preorder_from(graph, vertex, visited))

    logger.debug("connected_components: %d component(s)", len(components))
    verify_result("connected_components", assert_partition, graph.vertices(), components)
    return components


def strongly_connected_components(graph: GraphLike) -> List[List[Hashable]]:
    """
    Strongly connected components using Kosaraju's algorithm.

    1. DFS over the whole graph, recording vertices in finish order.
    2. Build the transposed graph (a private copy; the input is untouched).
    3. Take vertices in reverse finish order; each one not yet assigned
       starts a DFS on the transpose that collects one component.

    Args:
        graph: Directed graph.

    Returns:
        List of components, each in DFS preorder on the transpose.
        Components come out in topological order of the condensation.

    Complexity: O(V + E)
    """
    visited: Set[Hashable] = set()
    finished: List[Hashable] = []
    for vertex in graph.vertices():
        if vertex not in visited:
            finished.extend(postorder_from(graph, vertex, visited))

    transposed = graph.transpose()

    assigned: Set[Hashable] = set()
    components: List[List[Hashable]] = []
    while finished:
        vertex = finished.pop()
        if vertex not in assigned:
            components.append(preorder_from(transposed, vertex, assigned))

    logger.debug("strongly_connected_components: %d component(s)", len(components))
    verify_result("strongly_connected_components", assert_partition, graph.vertices(), components)
    return components
