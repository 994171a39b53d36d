"""Per-node closeness scores from a single BFS run.

The score is ``reachable / total``: the number of nodes reached at a
positive distance divided by the sum of those distances. This normalizes by
the reachable set rather than by ``N - 1`` as textbook closeness centrality
does, so a node reaching one neighbour at distance 1 scores 1.0.

The two directions treat a node that reaches nothing differently:
``out_closeness`` returns ``nan`` while ``in_closeness`` returns ``0.0``.
"""

import math
from typing import Sequence

from ..graph.store import Graph, as_graph, reverse_graph
from .bfs import bfs, reachable_distances
from .types import DistanceVector


def closeness_from_distances(distances: DistanceVector) -> tuple[int, int]:
    """Return ``(reachable_count, total_distance)`` over positive distances."""
    count = 0
    total_distance = 0
    for d in reachable_distances(distances):
        total_distance += d
        count += 1
    return count, total_distance


def out_closeness(graph: Graph | Sequence[Sequence[int]], node: int) -> float:
    """Closeness over outgoing shortest paths from ``node``.

    A node with no reachable nodes yields ``nan`` (zero over zero).
    """
    count, total_distance = closeness_from_distances(bfs(as_graph(graph), node))
    if total_distance == 0:
        return math.nan
    return count / total_distance


def in_closeness(
    graph: Graph | Sequence[Sequence[int]],
    node: int,
    *,
    reverse: Graph | None = None,
) -> float:
    """Closeness over incoming shortest paths to ``node``.

    Runs BFS on the reversed graph. ``reverse`` may be passed when the
    caller already built it. A node nothing reaches yields ``0.0``, unlike
    ``out_closeness``.
    """
    if reverse is None:
        reverse = reverse_graph(as_graph(graph))

    count, total_distance = closeness_from_distances(bfs(reverse, node))
    if total_distance == 0:
        return 0.0
    return count / total_distance
