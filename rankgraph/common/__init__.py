"""
Common utilities shared by every layer.

Cross-cutting concerns (logging, errors) may be imported from anywhere,
including the engine itself.
"""

from rankgraph.common.exceptions import ConfigurationError, GraphInvariantError, RankGraphError
from rankgraph.common.observability import LogPerformance, get_logger, setup_logging

__all__ = [
    "RankGraphError",
    "ConfigurationError",
    "GraphInvariantError",
    "LogPerformance",
    "get_logger",
    "setup_logging",
]
