"""Tests for minimum spanning tree algorithms."""

import logging
from io import StringIO

import pytest

from graphconduit import (
    UnknownVertexError,
    WeightedGraph,
    configure_logging,
    debug_context,
    is_spanning_forest,
    kruskal_mst,
    prim_mst,
    total_weight,
)


@pytest.fixture
def square_with_diagonal():
    """Undirected A-B(1), B-C(2), A-C(3), C-D(1), A-D(4)."""
    G = WeightedGraph()
    G.add_edge("A", "B", 1.0)
    G.add_edge("B", "C", 2.0)
    G.add_edge("A", "C", 3.0)
    G.add_edge("C", "D", 1.0)
    G.add_edge("A", "D", 4.0)
    return G


class TestKruskal:
    """Tests for Kruskal's algorithm."""

    def test_kruskal_simple(self):
        """Test Kruskal on a triangle."""
        edges = [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 3.0)]
        mst = kruskal_mst(["A", "B", "C"], edges)
        assert mst == [("A", "B", 1.0), ("B", "C", 2.0)]

    def test_kruskal_acceptance_order(self, square_with_diagonal):
        """Test that edges come back in acceptance (non-decreasing weight) order."""
        mst = kruskal_mst(square_with_diagonal.vertices(), square_with_diagonal.edges())

        assert mst == [("A", "B", 1.0), ("C", "D", 1.0), ("B", "C", 2.0)]
        assert total_weight(mst) == 4.0

    def test_kruskal_stable_tie_breaking(self):
        """Test that equal weights keep their input order."""
        edges = [("C", "D", 1.0), ("A", "B", 1.0), ("B", "C", 1.0), ("A", "D", 1.0)]
        mst = kruskal_mst(["A", "B", "C", "D"], edges)
        assert mst == [("C", "D", 1.0), ("A", "B", 1.0), ("B", "C", 1.0)]

    def test_kruskal_stops_at_v_minus_one(self):
        """Test that Kruskal accepts exactly |V|-1 edges on a connected graph."""
        edges = [("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 1.0), ("C", "A", 0.5)]
        mst = kruskal_mst(["A", "B", "C"], edges)
        assert len(mst) == 2
        assert mst == [("C", "A", 0.5), ("A", "B", 1.0)]

    def test_kruskal_disconnected_forest(self):
        """Test Kruskal on disconnected graph (returns forest)."""
        edges = [("A", "B", 1.0), ("C", "D", 2.0)]
        mst = kruskal_mst(["A", "B", "C", "D", "E"], edges)

        assert mst == [("A", "B", 1.0), ("C", "D", 2.0)]
        assert is_spanning_forest(["A", "B", "C", "D", "E"], mst)

    def test_kruskal_negative_weights(self):
        """Test that negative weights are fine for MSTs."""
        edges = [("A", "B", -2.0), ("B", "C", 3.0), ("A", "C", -1.0)]
        mst = kruskal_mst(["A", "B", "C"], edges)
        assert total_weight(mst) == -3.0

    def test_kruskal_single_and_empty(self):
        """Test degenerate inputs."""
        assert kruskal_mst(["A"], []) == []
        assert kruskal_mst([], []) == []

    def test_kruskal_unknown_vertex(self):
        """Test that edges must only name listed vertices."""
        with pytest.raises(UnknownVertexError):
            kruskal_mst(["A"], [("A", "B", 1.0)])

    def test_kruskal_debug_mode(self, square_with_diagonal):
        """Test that debug mode checks the forest property silently."""
        with debug_context(True):
            mst = kruskal_mst(square_with_diagonal.vertices(), square_with_diagonal.edges())
        assert total_weight(mst) == 4.0


class TestPrim:
    """Tests for Prim's algorithm."""

    def test_prim_simple(self):
        """Test Prim on a triangle."""
        G = WeightedGraph()
        G.add_edge("A", "B", 1.0)
        G.add_edge("B", "C", 2.0)
        G.add_edge("A", "C", 3.0)

        assert prim_mst(G, "A") == [("A", "B", 1.0), ("B", "C", 2.0)]

    def test_prim_default_start(self, square_with_diagonal):
        """Test that the first registered vertex is the default start."""
        assert prim_mst(square_with_diagonal) == prim_mst(square_with_diagonal, "A")

    def test_prim_acceptance_order(self, square_with_diagonal):
        """Test that edges are listed as they join the tree."""
        mst = prim_mst(square_with_diagonal, "D")
        assert mst == [("D", "C", 1.0), ("C", "B", 2.0), ("B", "A", 1.0)]

    def test_prim_tie_breaking(self):
        """Test that equal weights are taken in push order."""
        G = WeightedGraph()
        G.add_edge("A", "C", 1.0)
        G.add_edge("A", "B", 1.0)
        assert prim_mst(G, "A") == [("A", "C", 1.0), ("A", "B", 1.0)]

    def test_prim_vs_kruskal(self, square_with_diagonal):
        """Test that Prim and Kruskal produce the same MST weight."""
        prim_result = prim_mst(square_with_diagonal, "B")
        kruskal_result = kruskal_mst(
            square_with_diagonal.vertices(), square_with_diagonal.edges()
        )
        assert total_weight(prim_result) == total_weight(kruskal_result)

    def test_prim_disconnected_spans_start_component(self):
        """Test that only the start's component is spanned, and it is logged."""
        G = WeightedGraph()
        G.add_edge("A", "B", 1.0)
        G.add_edge("C", "D", 2.0)

        stream = StringIO()
        configure_logging(level=logging.INFO, stream=stream)
        try:
            mst = prim_mst(G, "A")
        finally:
            configure_logging(level=logging.WARNING)

        assert mst == [("A", "B", 1.0)]
        assert "2 of 4 vertices unreachable" in stream.getvalue()

    def test_prim_accepts_mapping(self):
        """Test the adjacency-mapping input shape."""
        adjacency = {
            "A": [("B", 2.0), ("C", 1.0)],
            "B": [("A", 2.0), ("C", 1.0)],
            "C": [("A", 1.0), ("B", 1.0)],
        }
        assert prim_mst(adjacency, "A") == [("A", "C", 1.0), ("C", "B", 1.0)]

    def test_prim_unknown_start(self):
        """Test Prim with unknown start vertex."""
        G = WeightedGraph()
        G.add_edge("A", "B", 1.0)
        with pytest.raises(UnknownVertexError):
            prim_mst(G, "C")

    def test_prim_unknown_start_on_empty_graph(self):
        """Test that an explicit start is validated before the empty-graph shortcut."""
        with pytest.raises(UnknownVertexError):
            prim_mst(WeightedGraph(), "X")
        with pytest.raises(UnknownVertexError):
            prim_mst({}, "X")

    def test_prim_single_and_empty(self):
        """Test degenerate inputs."""
        G = WeightedGraph()
        assert prim_mst(G) == []
        G.add_vertex("A")
        assert prim_mst(G, "A") == []

    def test_prim_debug_mode(self, square_with_diagonal):
        """Test that debug mode checks the tree property silently."""
        with debug_context(True):
            mst = prim_mst(square_with_diagonal, "A")
        assert total_weight(mst) == 4.0
