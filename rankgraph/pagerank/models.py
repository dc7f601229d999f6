"""
PageRank Data Models

Per-node state held by the registry. Nodes never reference each other
directly; every relationship is a dense integer index into the registry.
"""

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)

NodeIndex = int


@dataclass(slots=True)
class Node(Generic[T]):
    """A single graph vertex."""

    identifier: T
    """Caller-supplied key"""

    score: float
    """Current PageRank estimate"""

    out_degree: int = 0
    """Number of outgoing edges declared for this node"""

    incoming: list[NodeIndex] = field(default_factory=list)
    """Source indices of edges pointing here (insertion order, duplicates kept)"""

    @property
    def in_degree(self) -> int:
        return len(self.incoming)
