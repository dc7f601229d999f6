"""
PageRank Computation

Graph-based importance scoring using the PageRank algorithm.

Components:
- NodeRegistry: identifier → dense index interning
- PageRankGraph: edge accumulation, sweeps, ranking
- GraphAdapter: PageRankGraph ↔ NetworkX graph
"""

from .engine import DEFAULT_CONVERGENCE, DEFAULT_DAMPING, PageRankGraph
from .graph_adapter import GraphAdapter
from .models import Node, NodeIndex
from .registry import NodeRegistry

__all__ = [
    "PageRankGraph",
    "NodeRegistry",
    "Node",
    "NodeIndex",
    "GraphAdapter",
    "DEFAULT_DAMPING",
    "DEFAULT_CONVERGENCE",
]
