"""Tests for connected and strongly connected components."""

from graphconduit import (
    Graph,
    WeightedGraph,
    assert_partition,
    connected_components,
    debug_context,
    strongly_connected_components,
)


class TestConnectedComponents:
    """Tests for undirected connected components."""

    def test_components(self):
        """Test components with an isolated vertex."""
        G = Graph()
        G.add_edge("A", "B")
        G.add_edge("C", "D")
        G.add_edge("B", "E")
        G.add_vertex("F")

        components = connected_components(G)

        assert components == [["A", "B", "E"], ["C", "D"], ["F"]]
        assert_partition(G.vertices(), components)

    def test_single_component(self):
        """Test a connected graph."""
        G = Graph()
        G.add_edge("A", "B")
        G.add_edge("B", "C")
        assert connected_components(G) == [["A", "B", "C"]]

    def test_empty_graph(self):
        """Test that an empty graph has no components."""
        assert connected_components(Graph()) == []

    def test_debug_mode(self):
        """Test that debug mode verifies the partition and returns it unchanged."""
        G = Graph()
        G.add_edge(1, 2)
        G.add_vertex(3)
        with debug_context(True):
            assert connected_components(G) == [[1, 2], [3]]

    def test_weighted_store(self):
        """Test components of a weighted store."""
        G = WeightedGraph()
        G.add_edge("A", "B", 3.0)
        G.add_vertex("C")
        assert connected_components(G) == [["A", "B"], ["C"]]


class TestStronglyConnectedComponents:
    """Tests for Kosaraju's algorithm."""

    def test_kosaraju(self):
        """Test two nontrivial SCCs joined by one edge, plus an isolated vertex."""
        G = Graph(directed=True)
        for u, v in [
            ("A", "B"),
            ("B", "C"),
            ("C", "A"),
            ("B", "D"),
            ("D", "E"),
            ("E", "F"),
            ("F", "D"),
        ]:
            G.add_edge(u, v)
        G.add_vertex("G")

        components = strongly_connected_components(G)

        assert components == [["G"], ["A", "C", "B"], ["D", "F", "E"]]
        assert_partition(G.vertices(), components)

    def test_dag_gives_singletons(self):
        """Test that every vertex of a DAG is its own SCC."""
        G = Graph(directed=True)
        G.add_edge("A", "B")
        G.add_edge("B", "C")
        G.add_edge("A", "C")

        components = strongly_connected_components(G)

        assert sorted(components) == [["A"], ["B"], ["C"]]
        # Components come out in topological order of the condensation
        assert components == [["A"], ["B"], ["C"]]

    def test_single_cycle(self):
        """Test that one cycle is one SCC."""
        G = Graph(directed=True)
        G.add_edge(1, 2)
        G.add_edge(2, 3)
        G.add_edge(3, 1)

        components = strongly_connected_components(G)
        assert len(components) == 1
        assert set(components[0]) == {1, 2, 3}

    def test_does_not_mutate_input(self):
        """Test that the transpose is private."""
        G = Graph(directed=True)
        G.add_edge("A", "B")
        G.add_edge("B", "A")
        G.add_edge("B", "C")
        before = G.copy()

        strongly_connected_components(G)

        assert G == before

    def test_self_loop(self):
        """Test a self loop on a single vertex."""
        G = Graph(directed=True)
        G.add_edge("A", "A")
        assert strongly_connected_components(G) == [["A"]]

    def test_deep_chain(self):
        """Test a long cycle deeper than the recursion limit."""
        G = Graph(directed=True)
        n = 5000
        for i in range(n):
            G.add_edge(i, (i + 1) % n)

        components = strongly_connected_components(G)
        assert len(components) == 1
        assert len(components[0]) == n

    def test_debug_mode(self):
        """Test that debug mode verifies the partition."""
        G = Graph(directed=True)
        G.add_edge("A", "B")
        G.add_edge("B", "A")
        G.add_vertex("C")
        with debug_context(True):
            components = strongly_connected_components(G)
        assert sorted(map(sorted, components)) == [["A", "B"], ["C"]]
