"""Single-source breadth-first search over an unweighted directed graph."""

from collections import deque
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Iterable, Iterator

from ..graph.store import Graph
from .types import DistanceVector


def bfs(graph: Graph, start: int) -> DistanceVector:
    """Shortest hop counts from ``start`` following edge direction.

    Returns a list with one entry per node: the distance, or ``None`` when the
    node is unreachable. Pass a reversed graph to get inbound distances.
    ``start`` must be a valid node index.
    """
    adjacency = graph.adjacency
    node_count = len(adjacency)
    visited = [False] * node_count
    distance: DistanceVector = [None] * node_count

    visited[start] = True
    distance[start] = 0
    queue: deque[int] = deque([start])

    while queue:
        u = queue.popleft()
        next_distance = distance[u] + 1
        for v in adjacency[u]:
            if not visited[v]:
                visited[v] = True
                distance[v] = next_distance
                queue.append(v)

    return distance


def reachable_distances(distances: DistanceVector) -> Iterator[int]:
    """Yield every finite distance strictly greater than zero."""
    for d in distances:
        if d is not None and d > 0:
            yield d


def bfs_from_each(
    graph: Graph,
    starts: Iterable[int],
    *,
    workers: int = 1,
) -> Iterator[DistanceVector]:
    """Run ``bfs`` once per start node, in the order given.

    With ``workers > 1`` the runs share a thread pool; each run owns its
    own visited and distance storage and the graph is only read.
    """
    if workers <= 1:
        for start in starts:
            yield bfs(graph, start)
        return

    with ThreadPoolExecutor(max_workers=workers) as pool:
        yield from pool.map(partial(bfs, graph), starts)
