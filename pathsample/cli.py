"""CLI for pathsample."""

import logging
import time
from pathlib import Path

import click

from .analysis.config import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig, ConfigError, load_config
from .analysis.distance import distance_histogram
from .analysis.pipeline import run_analysis
from .analysis.ranker import rank_in_closeness, rank_out_closeness
from .analysis.renderer import render_histogram, render_ranking, render_report
from .graph.loader import EdgeListError, read_edge_list
from .graph.store import Graph


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """pathsample - Sampled shortest-path statistics for directed graphs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_path: Path | None) -> AnalysisConfig:
    if config_path is None:
        return DEFAULT_ANALYSIS_CONFIG
    try:
        return load_config(config_path)
    except (OSError, ConfigError) as exc:
        raise SystemExit(f"Could not load config: {exc}") from exc


def _load_graph(path: Path | str, config: AnalysisConfig) -> Graph:
    try:
        return read_edge_list(path, comment_prefix=config.comment_prefix)
    except OSError as exc:
        raise SystemExit(f"Could not open file: {exc}") from exc
    except EdgeListError as exc:
        raise SystemExit(f"Could not parse edge list: {exc}") from exc


def _parse_sample_size(raw: str) -> int:
    try:
        sample_size = int(raw.strip())
    except ValueError:
        raise SystemExit("Not a valid sample size") from None
    if sample_size < 0:
        raise SystemExit("Not a valid sample size")
    return sample_size


def _resolve_sample_size(sample_size: int | None, config: AnalysisConfig) -> int:
    if sample_size is not None:
        return sample_size
    if config.sample_size is not None:
        return config.sample_size
    raw = click.prompt(
        "What sample size would you like to use? "
        "Note: higher sample size increases runtime",
        type=str,
    )
    return _parse_sample_size(raw)


sample_size_option = click.option(
    "--sample-size",
    "-k",
    type=click.IntRange(min=0),
    default=None,
    help="Number of start nodes to sample",
)
seed_option = click.option("--seed", type=int, default=None, help="Seed for sampling")
workers_option = click.option(
    "--workers", "-w", type=int, default=None, help="Threads used for BFS runs"
)
config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with analysis settings",
)


@cli.command()
@click.argument("graph_path", type=click.Path(path_type=Path), required=False)
@sample_size_option
@click.option("--top", "-n", type=int, default=None, help="Entries shown per ranking")
@seed_option
@workers_option
@config_option
def analyze(
    graph_path: Path | None,
    sample_size: int | None,
    top: int | None,
    seed: int | None,
    workers: int | None,
    config_path: Path | None,
):
    """Run every sampled metric on an edge-list graph."""
    config = _load_config(config_path).with_overrides(
        top_n=top, seed=seed, workers=workers
    )
    sample_size = _resolve_sample_size(sample_size, config)
    click.echo(f"sample_size: {sample_size}")

    started = time.perf_counter()
    graph = _load_graph(graph_path or config.graph_path, config)
    report = run_analysis(graph, sample_size, config=config)

    click.echo(
        render_report(
            report, config, elapsed_seconds=time.perf_counter() - started
        )
    )


@cli.command()
@click.argument("graph_path", type=click.Path(path_type=Path))
@sample_size_option
@seed_option
@workers_option
@config_option
def histogram(
    graph_path: Path,
    sample_size: int | None,
    seed: int | None,
    workers: int | None,
    config_path: Path | None,
):
    """Print the sampled shortest-path distance histogram."""
    config = _load_config(config_path).with_overrides(seed=seed, workers=workers)
    sample_size = _resolve_sample_size(sample_size, config)

    graph = _load_graph(graph_path, config)
    counts = distance_histogram(
        graph,
        sample_size,
        rng=config.make_rng(),
        workers=config.clamp_workers(),
    )
    click.echo(render_histogram(counts, config.max_bar_width))


@cli.command()
@click.argument("graph_path", type=click.Path(path_type=Path))
@click.option(
    "--direction",
    "-d",
    type=click.Choice(["in", "out"]),
    default="out",
    help="Rank by incoming or outgoing shortest paths",
)
@sample_size_option
@click.option("--top", "-n", type=int, default=None, help="Entries shown")
@seed_option
@workers_option
@config_option
def closeness(
    graph_path: Path,
    direction: str,
    sample_size: int | None,
    top: int | None,
    seed: int | None,
    workers: int | None,
    config_path: Path | None,
):
    """Rank sampled nodes by in- or out-closeness."""
    config = _load_config(config_path).with_overrides(
        top_n=top, seed=seed, workers=workers
    )
    sample_size = _resolve_sample_size(sample_size, config)

    graph = _load_graph(graph_path, config)
    rank = rank_in_closeness if direction == "in" else rank_out_closeness
    ranking = rank(
        graph,
        sample_size,
        rng=config.make_rng(),
        workers=config.clamp_workers(),
    )
    title = f"Top {config.top_n} {direction.capitalize()} Closenesses:"
    click.echo(render_ranking(title, ranking, config.top_n))


@cli.command()
@click.argument("graph_path", type=click.Path(path_type=Path))
@config_option
def stats(graph_path: Path, config_path: Path | None):
    """Show node, edge and component counts of an edge-list graph."""
    config = _load_config(config_path)
    graph = _load_graph(graph_path, config)
    click.echo(str(graph.get_stats()))

    sizes = graph.weak_component_sizes()
    largest = sizes[0] if sizes else 0
    click.echo(f"  Weakly connected components: {len(sizes)} (largest: {largest})")


if __name__ == "__main__":
    cli()
