"""
Tab-separated edge list reader.

Expected layout: a header line followed by rows of exactly four
tab-delimited fields; the second and fourth fields are the source and
target identifiers. Rows with any other field count are skipped.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from rankgraph.common.observability import get_logger
from rankgraph.pagerank.engine import PageRankGraph

logger = get_logger(__name__)

FIELD_COUNT = 4
SOURCE_FIELD = 1
TARGET_FIELD = 3


@dataclass
class EdgeListStats:
    lines_read: int = 0
    edges_added: int = 0
    lines_skipped: int = 0


def _split(line: str) -> list[str] | None:
    fields = line.strip().split("\t")
    if len(fields) != FIELD_COUNT:
        return None
    return fields


def parse_edge_lines(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield (source, target) for every usable data row."""
    for line_no, line in enumerate(lines):
        fields = _split(line)
        if fields is None or line_no == 0:
            continue
        yield fields[SOURCE_FIELD], fields[TARGET_FIELD]


def load_edge_list(graph: PageRankGraph[str], lines: Iterable[str]) -> EdgeListStats:
    """
    Feed an edge list into graph.

    Args:
        graph: Graph receiving the edges
        lines: Text lines (file object, stdin, list of strings)

    Returns:
        Counts of lines read, edges added and lines skipped
    """
    stats = EdgeListStats()

    def counted(raw: Iterable[str]) -> Iterator[str]:
        for line in raw:
            stats.lines_read += 1
            yield line

    for source, target in parse_edge_lines(counted(lines)):
        graph.add_edge(source, target)
        stats.edges_added += 1
    stats.lines_skipped = stats.lines_read - stats.edges_added

    logger.info(
        "edge_list_loaded",
        lines_read=stats.lines_read,
        edges_added=stats.edges_added,
        lines_skipped=stats.lines_skipped,
        nodes=len(graph),
    )
    return stats
