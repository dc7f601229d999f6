"""
RankGraph Exception Hierarchy

Errors raised by the ranking engine and its collaborators.

Usage:
    1. Invalid configuration → ConfigurationError, previous value kept
    2. Broken graph bookkeeping → GraphInvariantError (from validate())

Example:
    try:
        graph.set_damping(120)
    except ConfigurationError as e:
        logger.warning("damping_rejected", **e.details)
"""

from typing import Any


class RankGraphError(Exception):
    """Base exception for all RankGraph errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize RankGraph error.

        Args:
            message: Human-readable error message
            details: Optional additional details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigurationError(RankGraphError):
    """Configuration value out of its valid range."""

    pass


class GraphInvariantError(RankGraphError):
    """Graph bookkeeping no longer matches its invariants."""

    pass
