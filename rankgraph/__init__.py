"""
RankGraph

PageRank scores over directed graphs built incrementally from edges.
"""

from rankgraph.common.exceptions import ConfigurationError, GraphInvariantError, RankGraphError
from rankgraph.pagerank import GraphAdapter, NodeRegistry, PageRankGraph

__version__ = "0.1.0"

__all__ = [
    "PageRankGraph",
    "NodeRegistry",
    "GraphAdapter",
    "RankGraphError",
    "ConfigurationError",
    "GraphInvariantError",
]
