"""
Example: Dependency and Route Analysis with Graph Conduit

This example walks through the main algorithm families on two small
graphs: a build-dependency DAG (ordering, cycles, components) and a road
network (shortest paths, spanning trees).
"""

from graphconduit import (
    Graph,
    WeightedGraph,
    bellman_ford,
    bfs_levels,
    dijkstra,
    edges_from_weighted_graph,
    floyd_warshall,
    has_cycle_directed,
    kruskal_mst,
    prim_mst,
    reconstruct_path,
    strongly_connected_components,
    topo_sort_kahn,
    total_weight,
)


def example_build_order():
    """Example: Ordering build targets by their dependencies."""
    print("=" * 60)
    print("Example 1: Topological Sort - Build Order")
    print("=" * 60)

    deps = Graph(directed=True)
    for before, after in [
        ("config", "core"),
        ("core", "storage"),
        ("core", "network"),
        ("storage", "api"),
        ("network", "api"),
        ("api", "cli"),
    ]:
        deps.add_edge(before, after)

    order = topo_sort_kahn(deps)
    print(f"Build order: {order}")
    print(f"Stages by depth: {bfs_levels(deps, 'config')}")

    deps.add_edge("cli", "core")
    print(f"After adding cli -> core, cycle: {has_cycle_directed(deps)}")
    print(f"Topological sort now: {topo_sort_kahn(deps)}")
    print(f"Mutually dependent groups: {strongly_connected_components(deps)}")
    print()


def example_routes():
    """Example: Shortest routes and a minimum-cost cable layout."""
    print("=" * 60)
    print("Example 2: Shortest Paths and Spanning Trees - Road Network")
    print("=" * 60)

    roads = WeightedGraph()
    roads.add_edge("depot", "north", 4.0)
    roads.add_edge("depot", "east", 1.0)
    roads.add_edge("east", "north", 2.0)
    roads.add_edge("north", "harbor", 5.0)
    roads.add_edge("east", "harbor", 8.0)

    records = dijkstra(roads, "depot")
    print(f"Distance depot -> harbor: {records['harbor'].distance}")
    print(f"Route: {reconstruct_path(records, 'harbor')}")

    edges = list(edges_from_weighted_graph(roads))
    print(f"Bellman-Ford distances: {bellman_ford(roads.vertices(), edges, 'depot')}")
    print(f"All-pairs north -> east: {floyd_warshall(roads.vertices(), edges)['north']['east']}")

    cables = kruskal_mst(roads.vertices(), roads.edges())
    print(f"Kruskal layout: {cables} (cost {total_weight(cables)})")
    print(f"Prim layout cost: {total_weight(prim_mst(roads, 'depot'))}")
    print()


if __name__ == "__main__":
    example_build_order()
    example_routes()
    print("Dependency and route analysis complete")
