"""Average distance and distance histogram over sampled BFS runs."""

import logging
import math
import random
from collections import Counter
from typing import Sequence

from ..graph.store import Graph, as_graph
from .bfs import bfs_from_each, reachable_distances
from .sampler import sample_nodes
from .types import Histogram

log = logging.getLogger(__name__)


def average_distance(
    graph: Graph | Sequence[Sequence[int]],
    sample_size: int,
    *,
    rng: random.Random | None = None,
    workers: int = 1,
) -> float:
    """Mean shortest-path length from up to ``sample_size`` random starts.

    Every finite distance greater than zero from every sampled start counts
    once. When no such distance is observed (empty sample, or only isolated
    starts) the result is ``nan``; it is returned, not raised.
    """
    graph = as_graph(graph)
    starts = sorted(sample_nodes(graph, sample_size, rng))
    log.debug(f"Averaging distances from {len(starts)} sampled nodes")

    total_distance = 0
    count = 0
    for distances in bfs_from_each(graph, starts, workers=workers):
        for d in reachable_distances(distances):
            total_distance += d
            count += 1

    if count == 0:
        return math.nan
    return total_distance / count


def distance_histogram(
    graph: Graph | Sequence[Sequence[int]],
    sample_size: int,
    *,
    rng: random.Random | None = None,
    workers: int = 1,
) -> Histogram:
    """Count how often each positive distance occurs across sampled BFS runs.

    Distances that never occur are absent from the result.
    """
    graph = as_graph(graph)
    starts = sorted(sample_nodes(graph, sample_size, rng))
    log.debug(f"Building distance histogram from {len(starts)} sampled nodes")

    frequency: Counter[int] = Counter()
    for distances in bfs_from_each(graph, starts, workers=workers):
        frequency.update(reachable_distances(distances))

    return dict(frequency)
