"""
PageRank Engine

Incremental graph construction plus iterative PageRank scoring.

Score update (one synchronous sweep):
    new[j] = damping + (1 - damping) * sum(prev[s] / out_degree[s] for s in incoming[j])

Convergence metric after a sweep:
    sqrt(sum((prev - new) ** 2)) / (number of nodes with at least one incoming edge)

When no node has an incoming edge the divisor is zero; step() then returns
0.0 and run_until() returns 0 without sweeping.
"""

import math
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Generic

from pydantic import ValidationError

from rankgraph.common.exceptions import ConfigurationError, GraphInvariantError
from rankgraph.common.observability import get_logger
from rankgraph.config.groups import PageRankConfig

from .models import NodeIndex, T
from .registry import NodeRegistry

if TYPE_CHECKING:
    from rankgraph.config.settings import Settings

logger = get_logger(__name__)

DEFAULT_DAMPING = 0.15
DEFAULT_CONVERGENCE = 0.01

StepCallback = Callable[[int, float], None]


def _validated_damping(value: float) -> float:
    try:
        return PageRankConfig(damping=value).damping
    except ValidationError as e:
        raise ConfigurationError(
            f"Damping factor must lie in [0, 1), got {value!r}",
            details={"damping": value},
        ) from e


class PageRankGraph(Generic[T]):
    """
    Directed graph with PageRank scores.

    Nodes are created on demand by add_edge() (or intern()) and are never
    removed. Scores only change through step().

    Example:
        ```python
        graph = PageRankGraph[str]()
        graph.add_edge("foo", "bar")
        graph.add_edge("bar", "foo")
        graph.run_until(0.001)
        graph.ranked_nodes()  # [("bar", ...), ("foo", ...)]
        ```
    """

    def __init__(self, damping: float = DEFAULT_DAMPING):
        """
        Initialize an empty graph.

        Args:
            damping: Random-jump probability in [0, 1)

        Raises:
            ConfigurationError: If damping is out of range
        """
        self._damping = _validated_damping(damping)
        self._registry: NodeRegistry[T] = NodeRegistry()
        self._edge_count = 0
        # Count of nodes with a non-empty incoming list; None means stale
        self._nodes_with_incoming: int | None = None

    @classmethod
    def from_config(cls, config: PageRankConfig) -> "PageRankGraph[T]":
        return cls(damping=config.damping)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PageRankGraph[T]":
        """
        Build a graph from application settings.

        Raises:
            ConfigurationError: If the PageRank settings are out of range
        """
        try:
            config = settings.pagerank
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid PageRank settings",
                details={
                    "damping": settings.damping,
                    "convergence_threshold": settings.convergence_threshold,
                    "max_iterations": settings.max_iterations,
                },
            ) from e
        return cls.from_config(config)

    # ========================================================================
    # Configuration
    # ========================================================================

    @property
    def damping(self) -> float:
        """Random-jump probability used by subsequent sweeps."""
        return self._damping

    @damping.setter
    def damping(self, value: float) -> None:
        # Scores are left untouched; only later sweeps see the new value.
        self._damping = _validated_damping(value)

    def set_damping(self, percentage: int) -> None:
        """
        Set damping as an integer percentage.

        Args:
            percentage: Value in 0..99

        Raises:
            ConfigurationError: If percentage is not an integer below 100
        """
        if isinstance(percentage, bool) or not isinstance(percentage, int) or not 0 <= percentage < 100:
            raise ConfigurationError(
                f"{percentage!r} needs to be an integer percentage below 100",
                details={"percentage": percentage},
            )
        self._damping = percentage / 100

    # ========================================================================
    # Construction
    # ========================================================================

    def intern(self, identifier: T) -> NodeIndex:
        """
        Return the index of identifier, creating the node if unknown.

        New nodes start at score 1 - damping with no edges.
        """
        index, created = self._registry.intern(identifier, score=1.0 - self._damping)
        if created:
            self._nodes_with_incoming = None
        return index

    def index_of(self, identifier: T) -> NodeIndex | None:
        """Return the index of identifier, or None. Never creates nodes."""
        return self._registry.get_index(identifier)

    def add_edge(self, source: T, target: T) -> None:
        """
        Add a directed edge, creating either endpoint if needed.

        Parallel edges and self-loops are kept as-is.
        """
        source_index = self.intern(source)
        target_index = self.intern(target)
        nodes = self._registry.nodes

        nodes[source_index].out_degree += 1
        incoming = nodes[target_index].incoming
        if not incoming:
            self._nodes_with_incoming = None
        incoming.append(source_index)
        self._edge_count += 1

    def add_edges(self, edges: Iterable[tuple[T, T]]) -> int:
        """Add every (source, target) pair. Returns the number of edges added."""
        added = 0
        for source, target in edges:
            self.add_edge(source, target)
            added += 1
        return added

    # ========================================================================
    # Iteration
    # ========================================================================

    def step(self) -> float:
        """
        Run one synchronous sweep over every node.

        All new scores are computed from a snapshot of the previous scores
        and written back only once the whole sweep is done.

        Returns:
            Convergence metric of this sweep (0.0 if no node has incoming edges)
        """
        nodes = self._registry.nodes
        damping = self._damping
        follow = 1.0 - damping

        previous = [node.score for node in nodes]
        updated = [
            damping + follow * sum(previous[source] / nodes[source].out_degree for source in node.incoming)
            for node in nodes
        ]

        delta = math.sqrt(sum((old - new) ** 2 for old, new in zip(previous, updated)))

        for node, score in zip(nodes, updated):
            node.score = score

        divisor = self.nodes_with_incoming_count()
        if divisor == 0:
            logger.warning("pagerank_undefined_convergence", nodes=len(nodes), delta=delta)
            return 0.0

        return delta / divisor

    def run_until(
        self,
        threshold: float,
        *,
        max_iterations: int | None = None,
        on_step: StepCallback | None = None,
    ) -> int:
        """
        Sweep until the convergence metric drops below threshold.

        The sweep that crosses the threshold is included in the count.

        Args:
            threshold: Positive convergence threshold (strict less-than)
            max_iterations: Optional upper bound on sweeps
            on_step: Called with (iteration, convergence) after every sweep

        Returns:
            Number of sweeps performed (0 if no node has incoming edges)

        Raises:
            ConfigurationError: If threshold or max_iterations is invalid
        """
        if not (isinstance(threshold, (int, float)) and math.isfinite(threshold) and threshold > 0):
            raise ConfigurationError(
                f"Convergence threshold must be a positive number, got {threshold!r}",
                details={"threshold": threshold},
            )
        if max_iterations is not None and max_iterations < 1:
            raise ConfigurationError(
                f"max_iterations must be at least 1, got {max_iterations!r}",
                details={"max_iterations": max_iterations},
            )

        if self.nodes_with_incoming_count() == 0:
            logger.warning("pagerank_nothing_to_rank", nodes=len(self), edges=self._edge_count)
            return 0

        iterations = 0
        while True:
            convergence = self.step()
            iterations += 1
            if on_step is not None:
                on_step(iterations, convergence)

            if convergence < threshold:
                logger.info(
                    "pagerank_converged",
                    iterations=iterations,
                    convergence=convergence,
                    threshold=threshold,
                )
                break

            if max_iterations is not None and iterations >= max_iterations:
                logger.warning(
                    "pagerank_iteration_limit",
                    iterations=iterations,
                    convergence=convergence,
                    threshold=threshold,
                )
                break

        return iterations

    def calculate(self) -> int:
        """Sweep until convergence below the default threshold (0.01)."""
        return self.run_until(DEFAULT_CONVERGENCE)

    def nodes_with_incoming_count(self) -> int:
        """Number of nodes with at least one incoming edge (memoized)."""
        if self._nodes_with_incoming is None:
            self._nodes_with_incoming = sum(1 for node in self._registry if node.incoming)
        return self._nodes_with_incoming

    # ========================================================================
    # Accessors
    # ========================================================================

    def ranked_nodes(self) -> list[tuple[T, float]]:
        """
        All nodes sorted by score, highest first.

        Ties keep insertion order.
        """
        return sorted(
            ((node.identifier, node.score) for node in self._registry),
            key=lambda pair: pair[1],
            reverse=True,
        )

    def top_nodes(self, top_n: int = 20) -> list[tuple[T, float]]:
        """
        First top_n entries of ranked_nodes().

        Raises:
            ConfigurationError: If top_n is negative
        """
        if top_n < 0:
            raise ConfigurationError(f"top_n must not be negative, got {top_n!r}", details={"top_n": top_n})
        return self.ranked_nodes()[:top_n]

    def scores(self) -> dict[T, float]:
        return {node.identifier: node.score for node in self._registry}

    def score_of(self, identifier: T) -> float | None:
        node = self._registry.get(identifier)
        return None if node is None else node.score

    def in_degree_of(self, identifier: T) -> int | None:
        node = self._registry.get(identifier)
        return None if node is None else node.in_degree

    def out_degree_of(self, identifier: T) -> int | None:
        node = self._registry.get(identifier)
        return None if node is None else node.out_degree

    def degree_stats(self) -> dict[T, dict[str, int]]:
        """
        In-degree and out-degree for all nodes.

        Returns:
            Dict mapping identifier to {in_degree, out_degree, total_degree}
        """
        stats = {}
        for node in self._registry:
            stats[node.identifier] = {
                "in_degree": node.in_degree,
                "out_degree": node.out_degree,
                "total_degree": node.in_degree + node.out_degree,
            }
        return stats

    def edges(self) -> list[tuple[T, T]]:
        """Every edge as (source, target), grouped by target in index order."""
        nodes = self._registry.nodes
        return [(nodes[source].identifier, target.identifier) for target in nodes for source in target.incoming]

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def size(self) -> int:
        return len(self._registry)

    def is_empty(self) -> bool:
        return len(self._registry) == 0

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._registry

    # ========================================================================
    # Validation
    # ========================================================================

    def validate(self) -> None:
        """
        Check the registry and adjacency bookkeeping.

        Raises:
            GraphInvariantError: On the first violated invariant
        """
        nodes = self._registry.nodes

        for identifier, index in self._registry.items():
            if not 0 <= index < len(nodes) or nodes[index].identifier != identifier:
                raise GraphInvariantError(
                    "Registry does not map identifier to its node",
                    details={"identifier": identifier, "index": index},
                )
        if sum(1 for _ in self._registry.items()) != len(nodes):
            raise GraphInvariantError("Registry and node list differ in size", details={"nodes": len(nodes)})

        seen_as_source = [0] * len(nodes)
        for target_index, node in enumerate(nodes):
            for source in node.incoming:
                if not 0 <= source < len(nodes):
                    raise GraphInvariantError(
                        "Incoming edge refers to unknown node",
                        details={"target": target_index, "source": source},
                    )
                if nodes[source].out_degree < 1:
                    raise GraphInvariantError(
                        "Incoming edge source has no outgoing edges",
                        details={"target": target_index, "source": source},
                    )
                seen_as_source[source] += 1

        for index, node in enumerate(nodes):
            if node.out_degree != seen_as_source[index]:
                raise GraphInvariantError(
                    "Out-degree does not match incoming lists",
                    details={"index": index, "out_degree": node.out_degree, "observed": seen_as_source[index]},
                )

        total_out = sum(node.out_degree for node in nodes)
        if total_out != self._edge_count:
            raise GraphInvariantError(
                "Edge count does not match out-degrees",
                details={"edge_count": self._edge_count, "out_degree_sum": total_out},
            )
