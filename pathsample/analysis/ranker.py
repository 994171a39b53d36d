"""Closeness ranking over sampled nodes."""

import logging
import math
import random
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Sequence

from ..graph.store import Graph, as_graph
from .closeness import in_closeness, out_closeness
from .sampler import sample_nodes
from .types import RankedNode

log = logging.getLogger(__name__)


def score_sort_key(entry: RankedNode) -> tuple[bool, float, int]:
    """Descending score, ``nan`` last, ties by ascending node."""
    if math.isnan(entry.score):
        return (True, 0.0, entry.node)
    return (False, -entry.score, entry.node)


def rank_scores(pairs: Iterable[tuple[int, float]]) -> list[RankedNode]:
    """Sort ``(node, score)`` pairs into a ranked list."""
    entries = [RankedNode(node=node, score=score) for node, score in pairs]
    return sorted(entries, key=score_sort_key)


def top_ranked(ranking: Sequence[RankedNode], limit: int) -> list[RankedNode]:
    """First ``limit`` entries of a ranked list."""
    if limit <= 0:
        return []
    return list(ranking[:limit])


def _score_all(
    nodes: list[int],
    score: Callable[[int], float],
    workers: int,
) -> list[tuple[int, float]]:
    if workers <= 1:
        return [(node, score(node)) for node in nodes]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(zip(nodes, pool.map(score, nodes)))


def rank_out_closeness(
    graph: Graph | Sequence[Sequence[int]],
    sample_size: int,
    *,
    rng: random.Random | None = None,
    workers: int = 1,
) -> list[RankedNode]:
    """Rank sampled nodes with outgoing edges by out-closeness."""
    graph = as_graph(graph)
    nodes = sorted(sample_nodes(graph, sample_size, rng))
    log.debug(f"Scoring out-closeness for {len(nodes)} sampled nodes")

    pairs = _score_all(nodes, lambda node: out_closeness(graph, node), workers)
    return rank_scores(pairs)


def rank_in_closeness(
    graph: Graph | Sequence[Sequence[int]],
    sample_size: int,
    *,
    rng: random.Random | None = None,
    workers: int = 1,
) -> list[RankedNode]:
    """Rank sampled nodes with incoming edges by in-closeness.

    The reversed graph is built once and shared by sampling and scoring.
    """
    graph = as_graph(graph)
    reverse = graph.reverse()
    nodes = sorted(sample_nodes(reverse, sample_size, rng))
    log.debug(f"Scoring in-closeness for {len(nodes)} sampled nodes")

    pairs = _score_all(
        nodes,
        lambda node: in_closeness(graph, node, reverse=reverse),
        workers,
    )
    return rank_scores(pairs)
