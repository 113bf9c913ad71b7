"""Graph Conduit - generic graph algorithms over in-memory graphs.

The package provides textbook graph algorithms including:
- Graph stores (Graph, WeightedGraph)
- Traversal (BFS, DFS, path finding)
- Union-Find
- Shortest paths (Dijkstra, Bellman-Ford, Floyd-Warshall)
- Topological ordering and cycle detection
- Connected and strongly connected components
- Minimum spanning trees (Prim, Kruskal)

A caller builds a store, then calls one stateless function on it. No
algorithm mutates its input and every result is a fresh value. Whenever a
choice has to be made, insertion order decides.

Stores are not locked. Running several algorithms against the same store
from different threads is safe only while nobody mutates it.
"""

__version__ = "0.1.0"

from .allpairs import floyd_warshall, has_negative_cycle, negative_cycle_vertices
from .components import connected_components, strongly_connected_components
from .core import Graph, WeightedGraph
from .diagnostics import (
    assert_acyclic_predecessors,
    assert_partition,
    assert_spanning_forest,
    assert_topological_order,
    debug_context,
    is_debug_enabled,
    is_spanning_forest,
    is_valid_path,
    set_debug_enabled,
    total_weight,
    verify_result,
)
from .exceptions import GraphError, UnknownVertexError
from .logging import configure_logging, get_logger, set_log_level
from .mst import kruskal_mst, prim_mst
from .ordering import has_cycle_directed, has_cycle_undirected, topo_sort_dfs, topo_sort_kahn
from .shortest import bellman_ford, bellman_ford_records, dijkstra
from .traversal import (
    bfs,
    bfs_levels,
    bfs_shortest_path,
    dfs,
    dfs_all,
    dfs_postorder,
    dfs_recursive,
    find_path,
)
from .types import DistanceRecord
from .unionfind import UnionFind
from .utils import (
    as_weighted_adjacency,
    edges_from_weighted_graph,
    node_index_map,
    reconstruct_path,
)

__all__ = [
    "__version__",
    # Graph store
    "Graph",
    "WeightedGraph",
    "DistanceRecord",
    # Errors
    "GraphError",
    "UnknownVertexError",
    # Traversal
    "bfs",
    "bfs_shortest_path",
    "bfs_levels",
    "dfs",
    "dfs_recursive",
    "dfs_postorder",
    "dfs_all",
    "find_path",
    # Union-Find
    "UnionFind",
    # Shortest paths
    "dijkstra",
    "bellman_ford",
    "bellman_ford_records",
    "floyd_warshall",
    "negative_cycle_vertices",
    "has_negative_cycle",
    "reconstruct_path",
    # Ordering and cycles
    "topo_sort_kahn",
    "topo_sort_dfs",
    "has_cycle_undirected",
    "has_cycle_directed",
    # Components
    "connected_components",
    "strongly_connected_components",
    # MST
    "prim_mst",
    "kruskal_mst",
    # Utilities
    "as_weighted_adjacency",
    "edges_from_weighted_graph",
    "node_index_map",
    # Diagnostics
    "is_valid_path",
    "assert_topological_order",
    "assert_partition",
    "assert_acyclic_predecessors",
    "assert_spanning_forest",
    "is_spanning_forest",
    "total_weight",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "verify_result",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
