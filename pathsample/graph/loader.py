"""Edge-list reader producing a forward adjacency graph."""

import logging
from pathlib import Path
from typing import Iterable

from .store import Graph

log = logging.getLogger(__name__)


class EdgeListError(ValueError):
    """A token in an edge list could not be read as a node index."""

    def __init__(self, line_number: int, token: str):
        self.line_number = line_number
        self.token = token
        super().__init__(f"Line {line_number}: invalid node index {token!r}")


def _parse_token(token: str, line_number: int) -> int:
    # unsigned decimal: ASCII digits with an optional leading "+"
    digits = token.removeprefix("+")
    if not (digits.isascii() and digits.isdigit()):
        raise EdgeListError(line_number, token)
    return int(digits)


def parse_edge_lines(
    lines: Iterable[str],
    *,
    comment_prefix: str | None = "#",
) -> Graph:
    """Build a graph from ``from to`` lines.

    Every token on a line is parsed before the line is checked, so a bad
    token aborts the load even on a line that would have been skipped.
    Lines with a token count other than two are skipped.

    Args:
        lines: Raw text lines (trailing newlines are fine)
        comment_prefix: Lines starting with this prefix are ignored before
            parsing. ``None`` disables comment handling.

    Returns:
        Graph sized ``max(node id) + 1``
    """
    edges: list[tuple[int, int]] = []
    skipped = 0

    for line_number, line in enumerate(lines, 1):
        if comment_prefix and line.lstrip().startswith(comment_prefix):
            continue

        parts = [_parse_token(token, line_number) for token in line.split()]
        if len(parts) != 2:
            skipped += 1
            continue
        edges.append((parts[0], parts[1]))

    if skipped:
        log.debug(f"Skipped {skipped} lines without exactly two tokens")

    return Graph.from_edges(edges)


def read_edge_list(path: str | Path, *, comment_prefix: str | None = "#") -> Graph:
    """Read an edge-list file into a graph.

    Raises:
        OSError: The file cannot be opened or read
        EdgeListError: A token is not a non-negative integer
    """
    path = Path(path)
    log.info(f"Loading edge list from {path}")

    with open(path, "r", encoding="utf-8") as f:
        graph = parse_edge_lines(f, comment_prefix=comment_prefix)

    log.info(f"Loaded graph: {graph.node_count} nodes, {graph.edge_count} edges")
    return graph
