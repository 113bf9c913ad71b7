"""Tests for all-pairs shortest path algorithms."""

import logging
import math
from io import StringIO

import numpy as np
import pytest

from graphconduit import (
    UnknownVertexError,
    WeightedGraph,
    configure_logging,
    dijkstra,
    edges_from_weighted_graph,
    floyd_warshall,
    has_negative_cycle,
    negative_cycle_vertices,
)
from graphconduit.allpairs import distance_matrix


class TestFloydWarshall:
    """Tests for Floyd-Warshall algorithm."""

    def test_floyd_warshall_simple(self):
        """Test Floyd-Warshall on simple graph."""
        dist = floyd_warshall(["A", "B", "C"], [("A", "B", 1.0), ("B", "C", 2.0)])

        assert dist["A"]["A"] == 0.0
        assert dist["A"]["B"] == 1.0
        assert dist["A"]["C"] == 3.0
        assert dist["B"]["C"] == 2.0
        assert dist["C"]["A"] == math.inf

    def test_result_is_plain_floats(self):
        """Test that results are built from Python floats, not numpy scalars."""
        dist = floyd_warshall(["A", "B"], [("A", "B", 2)])
        assert type(dist["A"]["B"]) is float
        assert list(dist) == ["A", "B"]

    def test_large_integer_weights_round_to_float64(self):
        """Test that integer weights beyond 2**53 are rounded like any float64."""
        dist = floyd_warshall(["A", "B"], [("A", "B", 2**53 + 1)])
        assert dist["A"]["B"] == float(2**53)
        assert list(dist["A"]) == ["A", "B"]

    def test_floyd_warshall_indirect_shorter(self):
        """Test that a cheaper indirect route replaces a direct edge."""
        edges = [("A", "C", 10.0), ("A", "B", 1.0), ("B", "C", 2.0)]
        dist = floyd_warshall(["A", "B", "C"], edges)
        assert dist["A"]["C"] == 3.0

    def test_floyd_warshall_negative_weights(self):
        """Test Floyd-Warshall with negative weights (no cycle)."""
        edges = [("A", "B", 4.0), ("A", "C", 1.0), ("C", "B", -2.0)]
        dist = floyd_warshall(["A", "B", "C"], edges)

        assert dist["A"]["B"] == -1.0
        assert not has_negative_cycle(dist)
        assert negative_cycle_vertices(dist) == []

    def test_floyd_warshall_negative_cycle(self):
        """Test that a negative cycle shows up on the diagonal."""
        edges = [("A", "B", 1.0), ("B", "C", -3.0), ("C", "B", 1.0)]
        dist = floyd_warshall(["A", "B", "C"], edges)

        assert has_negative_cycle(dist)
        assert negative_cycle_vertices(dist) == ["B", "C"]

    def test_negative_cycle_logged(self):
        """Test that a negative cycle is reported as a warning."""
        stream = StringIO()
        configure_logging(level=logging.WARNING, stream=stream)
        try:
            floyd_warshall(["A", "B"], [("A", "B", -1.0), ("B", "A", -1.0)])
            assert "negative cycle" in stream.getvalue()
        finally:
            configure_logging(level=logging.WARNING)

    def test_negative_self_loop(self):
        """Test that a negative self loop alone is a negative cycle."""
        dist = floyd_warshall(["A", "B"], [("A", "A", -1.0), ("A", "B", 1.0)])
        assert negative_cycle_vertices(dist) == ["A"]

    def test_positive_self_loop_keeps_zero_diagonal(self):
        """Test that staying put costs nothing even with a positive self loop."""
        dist = floyd_warshall(["A"], [("A", "A", 5.0)])
        assert dist["A"]["A"] == 0.0

    @pytest.mark.parametrize(
        "edges, expected",
        [
            ([("A", "B", 5.0), ("A", "B", 2.0)], 2.0),
            ([("A", "B", 2.0), ("A", "B", 5.0)], 5.0),
        ],
    )
    def test_duplicate_edges_last_wins(self, edges, expected):
        """Test that the last of several parallel edges is used."""
        dist = floyd_warshall(["A", "B"], edges)
        assert dist["A"]["B"] == expected

    def test_floyd_warshall_empty(self):
        """Test Floyd-Warshall on empty graph."""
        assert floyd_warshall([], []) == {}

    def test_floyd_warshall_unknown_vertex(self):
        """Test that edges naming unlisted vertices raise."""
        with pytest.raises(UnknownVertexError):
            floyd_warshall(["A"], [("A", "B", 1.0)])

    def test_distance_matrix(self):
        """Test the initial matrix layout."""
        matrix, order = distance_matrix(["B", "A"], [("A", "B", 3.0)])

        assert order == ["B", "A"]
        np.testing.assert_array_equal(matrix, np.array([[0.0, np.inf], [3.0, 0.0]]))

    def test_agrees_with_dijkstra(self):
        """Test Floyd-Warshall against Dijkstra from every source."""
        G = WeightedGraph()
        G.add_edge("A", "B", 7.0)
        G.add_edge("A", "C", 9.0)
        G.add_edge("A", "F", 14.0)
        G.add_edge("B", "C", 10.0)
        G.add_edge("B", "D", 15.0)
        G.add_edge("C", "D", 11.0)
        G.add_edge("C", "F", 2.0)
        G.add_edge("D", "E", 6.0)
        G.add_edge("E", "F", 9.0)

        dist = floyd_warshall(G.vertices(), edges_from_weighted_graph(G))

        for source in G.vertices():
            records = dijkstra(G, source)
            for target in G.vertices():
                assert dist[source][target] == records[target].distance
        assert dist["A"]["E"] == 20.0
