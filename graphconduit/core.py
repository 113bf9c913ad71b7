"""
Core graph data structures.

Provides Graph (unweighted) and WeightedGraph classes with adjacency-list
representations. Vertices and neighbors keep their insertion order, which is
the tie-break every algorithm in the package uses when it has a choice of
what to visit next.
Any hashable value except None can be a vertex; None is reserved for
"no predecessor" in shortest-path results.

A store is mutated only through add_vertex/add_edge. Algorithms read it and
never write to it, so concurrent read-only calls are safe as long as no
caller mutates the store at the same time; the store does no locking of its
own.
"""

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Dict, Hashable, List, Set, Tuple

from .exceptions import UnknownVertexError


def _check_weight(weight: float) -> float:
    # bool is a Real subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise ValueError(f"Edge weight must be a real number, got {weight!r}")
    if math.isnan(weight):
        raise ValueError("Edge weight must not be NaN")
    return weight


def _check_vertex(vertex: Hashable) -> Hashable:
    # None is the "no predecessor" marker in DistanceRecord
    if vertex is None:
        raise ValueError("None cannot be used as a vertex")
    return vertex


@dataclass
class Graph:
    """
    Unweighted graph with adjacency-list representation.

    Supports directed and undirected graphs. Adding an edge registers both
    endpoints; in an undirected graph the edge is mirrored. Adding an edge
    that is already present is a no-op.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.
        adj: Adjacency list mapping vertex -> ordered list of neighbors.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(deg(u) + deg(v))
        - neighbors: O(deg(v))
        - vertices: O(V)
        - edges: O(V + E)
    """

    directed: bool = False
    adj: Dict[Hashable, List[Hashable]] = field(default_factory=dict)

    def __init__(self, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self.directed = directed
        self.adj = {}

    def __contains__(self, vertex: Hashable) -> bool:
        """Return True if vertex is registered."""
        return vertex in self.adj

    def __len__(self) -> int:
        """Return the number of vertices."""
        return len(self.adj)

    def add_vertex(self, vertex: Hashable) -> None:
        """
        Add a vertex to the graph. Does nothing if it is already present.

        Args:
            vertex: Hashable vertex identifier (anything but None).

        Raises:
            ValueError: If vertex is None.
        """
        if vertex not in self.adj:
            self.adj[_check_vertex(vertex)] = []

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """
        Add an edge from u to v.

        For undirected graphs, also adds the edge from v to u.

        Args:
            u: Source vertex.
            v: Target vertex.

        Raises:
            ValueError: If u or v is None.
        """
        _check_vertex(u)
        _check_vertex(v)
        self.add_vertex(u)
        self.add_vertex(v)

        if v not in self.adj[u]:
            self.adj[u].append(v)

        if not self.directed and u not in self.adj[v]:
            self.adj[v].append(u)

    def has_vertex(self, vertex: Hashable) -> bool:
        """Return True if vertex is registered; same as ``vertex in graph``."""
        return vertex in self.adj

    def vertices(self) -> List[Hashable]:
        """
        Return all vertices in registration order.

        Returns:
            List of vertices.
        """
        return list(self.adj)

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        """
        Return the outgoing neighbors of a vertex in insertion order.

        Args:
            vertex: Vertex to get neighbors for.

        Returns:
            List of neighbors (empty if the vertex has no outgoing edges).

        Raises:
            UnknownVertexError: If vertex is not in graph.
        """
        if vertex not in self.adj:
            raise UnknownVertexError(vertex)
        return list(self.adj[vertex])

    def edges(self) -> List[Tuple[Hashable, Hashable]]:
        """
        Return list of all edges in insertion order.

        For undirected graphs, each edge appears once, oriented the way it
        was first seen.

        Returns:
            List of (u, v) tuples.
        """
        edges_list = []
        seen: Set[Tuple[Hashable, Hashable]] = set()

        for u, targets in self.adj.items():
            for v in targets:
                if self.directed:
                    edges_list.append((u, v))
                elif (u, v) not in seen:
                    seen.add((u, v))
                    seen.add((v, u))
                    edges_list.append((u, v))

        return edges_list

    def edge_count(self) -> int:
        """Return the number of edges, counting an undirected edge once."""
        return len(self.edges())

    def transpose(self) -> "Graph":
        """
        Return a new graph with every edge reversed.

        Vertex registration order is kept. For an undirected graph the
        result is an equal copy.

        Complexity: O(V + E)
        """
        if not self.directed:
            return self.copy()

        reversed_graph = Graph(directed=self.directed)
        for vertex in self.adj:
            reversed_graph.add_vertex(vertex)
        for u, v in self.edges():
            reversed_graph.add_edge(v, u)
        return reversed_graph

    def copy(self) -> "Graph":
        """Return an independent copy of the graph."""
        clone = Graph(directed=self.directed)
        clone.adj = {vertex: list(targets) for vertex, targets in self.adj.items()}
        return clone


@dataclass
class WeightedGraph:
    """
    Weighted graph with adjacency-list representation.

    Same contract as Graph, with a real-valued weight on every edge.
    Re-adding an existing edge replaces its weight and keeps its position.
    ``neighbors`` yields destination vertices only, so every unweighted
    algorithm accepts a WeightedGraph as well.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.
        adj: Adjacency list mapping vertex -> list of (neighbor, weight) tuples.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(deg(u) + deg(v))
        - neighbors: O(deg(v))
        - vertices: O(V)
        - edges: O(V + E)
    """

    directed: bool = False
    adj: Dict[Hashable, List[Tuple[Hashable, float]]] = field(default_factory=dict)

    def __init__(self, directed: bool = False):
        """
        Initialize an empty weighted graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self.directed = directed
        self.adj = {}

    def __contains__(self, vertex: Hashable) -> bool:
        """Return True if vertex is registered."""
        return vertex in self.adj

    def __len__(self) -> int:
        """Return the number of vertices."""
        return len(self.adj)

    def add_vertex(self, vertex: Hashable) -> None:
        """
        Add a vertex to the graph. Does nothing if it is already present.

        Args:
            vertex: Hashable vertex identifier (anything but None).

        Raises:
            ValueError: If vertex is None.
        """
        if vertex not in self.adj:
            self.adj[_check_vertex(vertex)] = []

    def _set_edge(self, u: Hashable, v: Hashable, weight: float) -> None:
        targets = self.adj[u]
        for i, (neighbor, _) in enumerate(targets):
            if neighbor == v:
                targets[i] = (v, weight)
                return
        targets.append((v, weight))

    def add_edge(self, u: Hashable, v: Hashable, weight: float = 1.0) -> None:
        """
        Add a weighted edge from u to v.

        For undirected graphs, also adds the edge from v to u with the same
        weight.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Edge weight (default 1.0).

        Raises:
            ValueError: If weight is not a real number or is NaN, or an
                endpoint is None.
        """
        weight = _check_weight(weight)
        _check_vertex(u)
        _check_vertex(v)
        self.add_vertex(u)
        self.add_vertex(v)

        self._set_edge(u, v, weight)
        if not self.directed:
            self._set_edge(v, u, weight)

    def has_vertex(self, vertex: Hashable) -> bool:
        """Return True if vertex is registered; same as ``vertex in graph``."""
        return vertex in self.adj

    def vertices(self) -> List[Hashable]:
        """
        Return all vertices in registration order.

        Returns:
            List of vertices.
        """
        return list(self.adj)

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        """
        Return the outgoing neighbors of a vertex in insertion order.

        Raises:
            UnknownVertexError: If vertex is not in graph.
        """
        if vertex not in self.adj:
            raise UnknownVertexError(vertex)
        return [neighbor for neighbor, _ in self.adj[vertex]]

    def weighted_neighbors(self, vertex: Hashable) -> List[Tuple[Hashable, float]]:
        """
        Return (neighbor, weight) pairs of a vertex in insertion order.

        Raises:
            UnknownVertexError: If vertex is not in graph.
        """
        if vertex not in self.adj:
            raise UnknownVertexError(vertex)
        return list(self.adj[vertex])

    def weight(self, u: Hashable, v: Hashable) -> float:
        """
        Return the weight of edge u -> v.

        Raises:
            UnknownVertexError: If u is not in graph.
            KeyError: If there is no edge from u to v.
        """
        for neighbor, weight in self.weighted_neighbors(u):
            if neighbor == v:
                return weight
        raise KeyError(f"No edge {u!r} -> {v!r}")

    def edges(self) -> List[Tuple[Hashable, Hashable, float]]:
        """
        Return list of all edges with weights, in insertion order.

        For undirected graphs, each edge appears once, oriented the way it
        was first seen.

        Returns:
            List of (u, v, weight) tuples.
        """
        edges_list = []
        seen: Set[Tuple[Hashable, Hashable]] = set()

        for u, targets in self.adj.items():
            for v, weight in targets:
                if self.directed:
                    edges_list.append((u, v, weight))
                elif (u, v) not in seen:
                    seen.add((u, v))
                    seen.add((v, u))
                    edges_list.append((u, v, weight))

        return edges_list

    def edge_count(self) -> int:
        """Return the number of edges, counting an undirected edge once."""
        return len(self.edges())

    def transpose(self) -> "WeightedGraph":
        """Return a new weighted graph with every edge reversed."""
        if not self.directed:
            return self.copy()

        reversed_graph = WeightedGraph(directed=self.directed)
        for vertex in self.adj:
            reversed_graph.add_vertex(vertex)
        for u, v, weight in self.edges():
            reversed_graph.add_edge(v, u, weight)
        return reversed_graph

    def copy(self) -> "WeightedGraph":
        """Return an independent copy of the graph."""
        clone = WeightedGraph(directed=self.directed)
        clone.adj = {vertex: list(targets) for vertex, targets in self.adj.items()}
        return clone
