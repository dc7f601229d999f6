"""
Graph Adapter for NetworkX

Converts between PageRankGraph and NetworkX graphs.

Process:
1. to_networkx: export nodes (with current scores) and every edge
2. from_networkx: intern nodes in graph order, then replay edges
"""

from collections.abc import Hashable

import networkx as nx

from .engine import DEFAULT_DAMPING, PageRankGraph


class GraphAdapter:
    """
    Adapt PageRankGraph to and from NetworkX.

    A MultiDiGraph is used for export so parallel edges survive the trip.
    """

    def to_networkx(self, graph: PageRankGraph) -> "nx.MultiDiGraph":
        """
        Build a NetworkX MultiDiGraph from a PageRankGraph.

        Args:
            graph: Source graph

        Returns:
            MultiDiGraph whose nodes carry a "score" attribute
        """
        G = nx.MultiDiGraph()

        for identifier, score in graph.scores().items():
            G.add_node(identifier, score=score)

        G.add_edges_from(graph.edges())

        return G

    def from_networkx(self, G: "nx.Graph", damping: float = DEFAULT_DAMPING) -> PageRankGraph:
        """
        Build a PageRankGraph from any NetworkX graph.

        Undirected graphs contribute one edge per direction. Isolated nodes
        are interned so they still appear in the ranking.

        Args:
            G: NetworkX graph
            damping: Random-jump probability for the new graph
        """
        graph: PageRankGraph[Hashable] = PageRankGraph(damping=damping)

        for node in G.nodes():
            graph.intern(node)

        if G.is_directed():
            graph.add_edges(G.edges())
        else:
            for u, v in G.edges():
                graph.add_edge(u, v)
                if u != v:
                    graph.add_edge(v, u)

        return graph
