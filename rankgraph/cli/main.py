"""
RankGraph CLI

Reads a tab-separated edge list, runs PageRank to convergence and prints
every node with its score, highest first.
"""

import sys
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from rankgraph.common.exceptions import ConfigurationError
from rankgraph.common.observability import LogPerformance, get_logger, setup_logging
from rankgraph.config.settings import settings
from rankgraph.io.edge_list import load_edge_list
from rankgraph.pagerank.engine import PageRankGraph

app = typer.Typer(
    name="rankgraph",
    help="RankGraph - PageRank scores for tab-separated edge lists",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)


@app.command()
def rank(
    input_path: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Edge list file (reads stdin when omitted)",
    ),
    damping: int | None = typer.Option(
        None, "--damping", "-d", help="Random-jump probability as a percentage (0-99)"
    ),
    threshold: float | None = typer.Option(
        None, "--threshold", "-t", help="Stop once convergence drops below this value"
    ),
    max_iterations: int | None = typer.Option(None, "--max-iterations", help="Upper bound on sweeps"),
    top: int | None = typer.Option(None, "--top", "-n", min=1, help="Only print the N highest-ranked nodes"),
    table: bool = typer.Option(False, "--table", help="Render results as a table"),
    log_level: str | None = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    log_format: str | None = typer.Option(None, "--log-format", help="console or json"),
):
    """
    Rank the nodes of an edge list.

    The first line is treated as a header. Each following line must have four
    tab-separated fields; the second and fourth are source and target.
    """
    observability = settings.observability
    setup_logging(
        level=log_level or observability.log_level,
        format=log_format or observability.log_format,
        include_timestamp=observability.include_timestamp,
        include_caller=observability.include_caller,
    )

    try:
        graph: PageRankGraph[str] = PageRankGraph.from_settings(settings)
        if damping is not None:
            graph.set_damping(damping)

        with LogPerformance(logger, "load_edge_list", source=str(input_path or "stdin")):
            if input_path is None:
                load_edge_list(graph, sys.stdin)
            else:
                with input_path.open(encoding="utf-8") as handle:
                    load_edge_list(graph, handle)

        logger.info("graph_ready", nodes=len(graph), edges=graph.edge_count, damping=graph.damping)

        last_tick = time.perf_counter()

        def on_step(iteration: int, convergence: float) -> None:
            nonlocal last_tick
            now = time.perf_counter()
            logger.info(
                "iteration",
                iteration=iteration,
                convergence=convergence,
                duration_ms=round((now - last_tick) * 1000, 2),
            )
            last_tick = now

        iterations = graph.run_until(
            threshold if threshold is not None else settings.convergence_threshold,
            max_iterations=max_iterations if max_iterations is not None else settings.max_iterations,
            on_step=on_step,
        )
        logger.info("ranking_complete", iterations=iterations)

    except ConfigurationError as e:
        err_console.print(f"[bold red]Invalid configuration:[/bold red] {e}")
        raise typer.Exit(code=2)

    ranked = graph.top_nodes(top) if top is not None else graph.ranked_nodes()

    if table:
        _display_table(ranked)
    else:
        for identifier, score in ranked:
            typer.echo(f"{identifier} -> {score}")


def _display_table(ranked: list[tuple[str, float]]) -> None:
    result_table = Table(title="PageRank")
    result_table.add_column("#", justify="right", style="dim")
    result_table.add_column("Node", style="cyan")
    result_table.add_column("Score", justify="right", style="green")

    for position, (identifier, score) in enumerate(ranked, start=1):
        result_table.add_row(str(position), str(identifier), f"{score:.6f}")

    console.print(result_table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
