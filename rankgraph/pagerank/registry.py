"""
Node Registry

Interns caller identifiers into dense, permanent integer indices.

The sweep reads predecessors by index on every iteration, so adjacency is
stored as indices rather than identifiers to keep hash lookups out of the
inner sum.
"""

from collections.abc import Iterator
from typing import Generic

from .models import Node, NodeIndex, T


class NodeRegistry(Generic[T]):
    """
    Arena of nodes plus the identifier → index table.

    `index_of[id] == i` holds iff `nodes[i].identifier == id`.
    """

    def __init__(self) -> None:
        self.nodes: list[Node[T]] = []
        self._index_of: dict[T, NodeIndex] = {}

    def get_index(self, identifier: T) -> NodeIndex | None:
        """Look up an identifier without creating it (None for unknown or unhashable keys)."""
        try:
            return self._index_of.get(identifier)
        except TypeError:
            # unhashable keys can never have been interned
            return None

    def intern(self, identifier: T, score: float) -> tuple[NodeIndex, bool]:
        """
        Return the index for identifier, appending a new node if unknown.

        Args:
            identifier: Caller key
            score: Initial score for a newly created node

        Returns:
            (index, created) where created is True if a node was appended
        """
        index = self._index_of.get(identifier)
        if index is not None:
            return index, False

        index = len(self.nodes)
        self.nodes.append(Node(identifier=identifier, score=score))
        self._index_of[identifier] = index
        return index, True

    def get(self, identifier: T) -> Node[T] | None:
        index = self.get_index(identifier)
        if index is None:
            return None
        return self.nodes[index]

    def items(self) -> Iterator[tuple[T, NodeIndex]]:
        return iter(self._index_of.items())

    def __contains__(self, identifier: object) -> bool:
        return self.get_index(identifier) is not None

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node[T]]:
        return iter(self.nodes)
