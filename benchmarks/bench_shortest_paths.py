"""Benchmark shortest path and spanning tree algorithms."""

import time
from typing import Dict

import numpy as np

from graphconduit import (
    WeightedGraph,
    dijkstra,
    edges_from_weighted_graph,
    floyd_warshall,
    kruskal_mst,
    prim_mst,
)


def random_weighted_graph(n_vertices: int, avg_degree: float, seed: int = 0) -> WeightedGraph:
    """Build a random connected undirected graph with uniform weights in [0, 1)."""
    rng = np.random.default_rng(seed)
    graph = WeightedGraph()

    # Random spanning path keeps the graph connected
    order = rng.permutation(n_vertices)
    for u, v in zip(order[:-1], order[1:]):
        graph.add_edge(int(u), int(v), float(rng.random()))

    n_extra = int(n_vertices * avg_degree / 2)
    sources = rng.integers(0, n_vertices, n_extra)
    targets = rng.integers(0, n_vertices, n_extra)
    for u, v in zip(sources, targets):
        if u != v:
            graph.add_edge(int(u), int(v), float(rng.random()))
    return graph


def benchmark_graph_algorithms(n_vertices: int, avg_degree: float = 8.0) -> Dict[str, float]:
    """Time each algorithm once on the same random graph.

    Args:
        n_vertices: Number of vertices.
        avg_degree: Average vertex degree.

    Returns:
        Dictionary with timing results in seconds.
    """
    graph = random_weighted_graph(n_vertices, avg_degree)
    vertices = graph.vertices()
    edges = list(edges_from_weighted_graph(graph))

    results: Dict[str, float] = {"n_vertices": n_vertices, "n_edges": graph.edge_count()}

    start = time.perf_counter()
    dijkstra(graph, vertices[0])
    results["dijkstra_sec"] = time.perf_counter() - start

    start = time.perf_counter()
    prim_mst(graph)
    results["prim_sec"] = time.perf_counter() - start

    start = time.perf_counter()
    kruskal_mst(vertices, graph.edges())
    results["kruskal_sec"] = time.perf_counter() - start

    # Dense O(n^3); keep n small
    if n_vertices <= 500:
        start = time.perf_counter()
        floyd_warshall(vertices, edges)
        results["floyd_warshall_sec"] = time.perf_counter() - start

    return results


if __name__ == "__main__":
    print("Benchmarking graph algorithms...")

    for n in (500, 5000, 50000):
        results = benchmark_graph_algorithms(n)
        print(f"{n} vertices, {results['n_edges']} edges:")
        for key, value in results.items():
            if key.endswith("_sec"):
                print(f"  {key[:-4]}: {value * 1e3:.1f} ms")
