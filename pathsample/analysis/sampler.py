"""Uniform start-node sampling."""

import random

from ..graph.store import Graph


def eligible_nodes(graph: Graph) -> list[int]:
    """Nodes with a non-empty adjacency list in ``graph``.

    For inbound metrics pass the reversed graph, which makes this the set of
    nodes with incoming edges in the original.
    """
    return graph.nodes_with_edges()


def sample_nodes(
    graph: Graph,
    sample_size: int,
    rng: random.Random | None = None,
) -> frozenset[int]:
    """Draw up to ``sample_size`` distinct eligible nodes uniformly.

    Every subset of size ``min(sample_size, len(eligible))`` is equally
    likely. Asking for more than are eligible returns all of them.
    """
    if sample_size <= 0:
        return frozenset()

    candidates = eligible_nodes(graph)
    if not candidates:
        return frozenset()

    rng = rng if rng is not None else random.Random()
    count = min(sample_size, len(candidates))
    return frozenset(rng.sample(candidates, count))
