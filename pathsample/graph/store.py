"""Immutable adjacency-list graph store for sampled path analysis."""

from dataclasses import dataclass
from typing import Iterable, Sequence

import networkx as nx


@dataclass
class GraphStats:
    """Statistics about the graph."""

    nodes: int
    edges: int
    nodes_with_out_edges: int
    nodes_with_in_edges: int
    self_loops: int

    def __str__(self) -> str:
        return (
            f"Graph Stats:\n"
            f"  Nodes: {self.nodes}\n"
            f"  Edges: {self.edges} (self-loops: {self.self_loops})\n"
            f"  With outgoing edges: {self.nodes_with_out_edges}\n"
            f"  With incoming edges: {self.nodes_with_in_edges}"
        )


@dataclass(frozen=True)
class Graph:
    """Directed graph over node indices ``0..node_count - 1``.

    ``adjacency[i]`` holds the destinations of ``i``'s outgoing edges in
    insertion order. Parallel edges and self-loops are kept as given.
    """

    adjacency: tuple[tuple[int, ...], ...]

    @classmethod
    def from_adjacency(cls, lists: Iterable[Iterable[int]]) -> "Graph":
        """Build a graph from per-node lists of destinations."""
        adjacency = tuple(tuple(int(v) for v in neighbors) for neighbors in lists)
        node_count = len(adjacency)
        for u, neighbors in enumerate(adjacency):
            for v in neighbors:
                if not 0 <= v < node_count:
                    raise ValueError(
                        f"Edge {u}->{v} points outside node range 0..{node_count - 1}"
                    )
        return cls(adjacency)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[int, int]],
        node_count: int | None = None,
    ) -> "Graph":
        """Build a graph from ``(from, to)`` pairs.

        Without ``node_count`` the graph is sized ``max(node id) + 1``, with
        node 0 always present.
        """
        edge_list = list(edges)
        if node_count is None:
            max_node = 0
            for u, v in edge_list:
                max_node = max(max_node, u, v)
            node_count = max_node + 1

        lists: list[list[int]] = [[] for _ in range(node_count)]
        for u, v in edge_list:
            lists[u].append(v)
        return cls.from_adjacency(lists)

    @classmethod
    def from_networkx(cls, graph: nx.DiGraph) -> "Graph":
        """Convert an integer-labelled networkx graph.

        Multi-edges are preserved for ``MultiDiGraph`` input. Every node label
        must be a non-negative integer.
        """
        labels = list(graph.nodes)
        for label in labels:
            if not isinstance(label, int) or isinstance(label, bool) or label < 0:
                raise ValueError(f"Node label must be a non-negative integer: {label!r}")

        node_count = max(labels) + 1 if labels else 0
        return cls.from_edges(graph.edges(), node_count=node_count)

    @property
    def node_count(self) -> int:
        return len(self.adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self.adjacency)

    def neighbors(self, node: int) -> tuple[int, ...]:
        """Outgoing destinations of ``node``."""
        return self.adjacency[node]

    def out_degree(self, node: int) -> int:
        return len(self.adjacency[node])

    def nodes_with_edges(self) -> list[int]:
        """Indices whose outgoing adjacency is non-empty."""
        return [node for node, neighbors in enumerate(self.adjacency) if neighbors]

    def reverse(self) -> "Graph":
        """Return a new graph with every edge direction inverted."""
        return reverse_graph(self)

    def get_stats(self) -> GraphStats:
        """Get statistics about the graph."""
        has_incoming = [False] * self.node_count
        self_loops = 0
        for u, neighbors in enumerate(self.adjacency):
            for v in neighbors:
                has_incoming[v] = True
                if u == v:
                    self_loops += 1

        return GraphStats(
            nodes=self.node_count,
            edges=self.edge_count,
            nodes_with_out_edges=len(self.nodes_with_edges()),
            nodes_with_in_edges=sum(has_incoming),
            self_loops=self_loops,
        )

    def to_networkx(self) -> nx.MultiDiGraph:
        """Export as a ``MultiDiGraph`` so parallel edges survive."""
        graph = nx.MultiDiGraph()
        graph.add_nodes_from(range(self.node_count))
        for u, neighbors in enumerate(self.adjacency):
            graph.add_edges_from((u, v) for v in neighbors)
        return graph

    def weak_component_sizes(self) -> list[int]:
        """Sizes of weakly connected components, largest first."""
        components = nx.weakly_connected_components(self.to_networkx())
        return sorted((len(c) for c in components), reverse=True)


def reverse_graph(graph: Graph) -> Graph:
    """Invert every edge of ``graph``.

    An edge ``u->v`` appearing k times becomes ``v->u`` appearing k times.
    Runs in O(V+E) and leaves ``graph`` untouched.
    """
    reversed_lists: list[list[int]] = [[] for _ in range(graph.node_count)]
    for u, neighbors in enumerate(graph.adjacency):
        for v in neighbors:
            reversed_lists[v].append(u)
    return Graph(tuple(tuple(neighbors) for neighbors in reversed_lists))


def as_graph(adjacency: Graph | Sequence[Sequence[int]]) -> Graph:
    """Accept either a ``Graph`` or raw adjacency lists."""
    if isinstance(adjacency, Graph):
        return adjacency
    return Graph.from_adjacency(adjacency)
