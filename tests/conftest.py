"""Pytest configuration and shared fixtures for Graph Conduit tests.

This module provides:
- A deterministic numpy RNG fixture
- Factories for random graphs built from that RNG
- Debug-mode and logging isolation between tests
"""

import os
from typing import Callable

import numpy as np
import pytest

from graphconduit import Graph, WeightedGraph, set_debug_enabled
from graphconduit.diagnostics import is_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This keeps randomized tests reproducible while allowing override for
    debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture so a test that toggles debug mode cannot leak it."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for random unweighted graphs over vertices 0..n-1.

    Each possible edge (no self loops) is included with probability p.
    """

    def build(n: int, p: float, directed: bool = False) -> Graph:
        graph = Graph(directed=directed)
        for vertex in range(n):
            graph.add_vertex(vertex)
        for u in range(n):
            for v in range(n):
                if u == v or (not directed and v < u):
                    continue
                if rng.random() < p:
                    graph.add_edge(u, v)
        return graph

    return build


@pytest.fixture
def random_weighted_graph(rng: np.random.Generator) -> Callable[..., WeightedGraph]:
    """Factory for random weighted graphs with integer-valued weights.

    Integer weights keep every path sum exact, so results of different
    algorithms can be compared with ``==``. With ``connected=True`` a
    random spanning path is added first.
    """

    def build(
        n: int,
        p: float,
        directed: bool = False,
        low: int = 0,
        high: int = 10,
        connected: bool = False,
    ) -> WeightedGraph:
        graph = WeightedGraph(directed=directed)
        for vertex in range(n):
            graph.add_vertex(vertex)
        if connected:
            order = [int(v) for v in rng.permutation(n)]
            for u, v in zip(order, order[1:]):
                graph.add_edge(u, v, float(rng.integers(low, high)))
        for u in range(n):
            for v in range(n):
                if u == v or (not directed and v < u):
                    continue
                if rng.random() < p:
                    graph.add_edge(u, v, float(rng.integers(low, high)))
        return graph

    return build


@pytest.fixture
def random_dag(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for random DAGs whose vertex labels are shuffled.

    Edges always run forward along a hidden random permutation, so the
    registration order is not itself a topological order.
    """

    def build(n: int, p: float) -> Graph:
        rank = [int(v) for v in rng.permutation(n)]
        graph = Graph(directed=True)
        for vertex in range(n):
            graph.add_vertex(vertex)
        for i in range(n):
            for j in range(i + 1, n):
                if rng.random() < p:
                    graph.add_edge(rank[i], rank[j])
        return graph

    return build
