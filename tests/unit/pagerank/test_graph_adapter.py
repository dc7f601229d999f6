"""
GraphAdapter tests: export to NetworkX, import from NetworkX.
"""

import networkx as nx
import pytest

from rankgraph.pagerank.engine import PageRankGraph
from rankgraph.pagerank.graph_adapter import GraphAdapter


@pytest.fixture
def adapter():
    return GraphAdapter()


class TestToNetworkx:
    def test_nodes_and_parallel_edges_preserved(self, adapter):
        graph = PageRankGraph()
        graph.add_edges([("a", "b"), ("a", "b"), ("b", "c"), ("c", "c")])

        G = adapter.to_networkx(graph)

        assert isinstance(G, nx.MultiDiGraph)
        assert list(G.nodes()) == ["a", "b", "c"]
        assert G.number_of_edges() == graph.edge_count == 4
        assert G.number_of_edges("a", "b") == 2
        for node in "abc":
            assert G.in_degree(node) == graph.in_degree_of(node)
            assert G.out_degree(node) == graph.out_degree_of(node)

    def test_scores_exported(self, adapter):
        graph = PageRankGraph()
        graph.add_edge("a", "b")
        graph.step()

        G = adapter.to_networkx(graph)

        assert G.nodes["a"]["score"] == graph.score_of("a")
        assert G.nodes["b"]["score"] == graph.score_of("b")

    def test_empty_graph(self, adapter):
        G = adapter.to_networkx(PageRankGraph())
        assert G.number_of_nodes() == 0


class TestFromNetworkx:
    def test_directed_graph(self, adapter):
        G = nx.DiGraph()
        G.add_edges_from([("a", "b"), ("b", "c")])
        G.add_node("isolated")

        graph = adapter.from_networkx(G, damping=0.2)

        assert graph.damping == 0.2
        assert graph.size() == 4
        assert graph.edge_count == 2
        assert graph.score_of("isolated") == 1 - 0.2
        graph.validate()

    def test_undirected_graph_adds_both_directions(self, adapter):
        G = nx.Graph()
        G.add_edges_from([("a", "b"), ("c", "c")])

        graph = adapter.from_networkx(G)

        assert graph.edge_count == 3
        assert graph.out_degree_of("a") == 1
        assert graph.out_degree_of("b") == 1
        assert graph.in_degree_of("c") == 1

    def test_round_trip_keeps_structure(self, adapter):
        graph = PageRankGraph()
        graph.add_edges([("x", "y"), ("y", "x"), ("x", "y"), ("z", "x")])

        rebuilt = adapter.from_networkx(adapter.to_networkx(graph))

        assert sorted(rebuilt.edges()) == sorted(graph.edges())
        assert rebuilt.degree_stats() == graph.degree_stats()


class TestAgreementWithNetworkx:
    def test_matches_networkx_pagerank_without_dangling_nodes(self, adapter):
        """Without dangling nodes our scores are N times networkx's probabilities."""
        graph = PageRankGraph()
        graph.add_edges([("a", "b"), ("b", "c"), ("c", "a"), ("a", "c"), ("d", "a")])
        graph.run_until(1e-12)

        expected = nx.pagerank(nx.DiGraph(graph.edges()), alpha=0.85, tol=1e-12, max_iter=1000)

        n = graph.size()
        for identifier, score in graph.scores().items():
            assert score / n == pytest.approx(expected[identifier], abs=1e-6)
