import math

import pytest

from pathsample.analysis.closeness import (
    closeness_from_distances,
    in_closeness,
    out_closeness,
)
from pathsample.graph.store import Graph

DIAMOND = [[1, 2], [2], [3], []]


def test_out_closeness_hand_computed():
    # 3 reachable nodes, distances 1 + 1 + 2
    assert out_closeness(DIAMOND, 0) == pytest.approx(0.75)


def test_in_closeness_hand_computed():
    # node 3 is reached from 2 (1 hop), 1 and 0 (2 hops each)
    assert in_closeness(DIAMOND, 3) == pytest.approx(3 / 5)


def test_out_closeness_unreachable_is_nan():
    assert math.isnan(out_closeness(DIAMOND, 3))


def test_in_closeness_unreachable_is_zero():
    assert in_closeness(DIAMOND, 0) == 0.0


def test_in_closeness_accepts_prebuilt_reverse():
    graph = Graph.from_adjacency(DIAMOND)
    reverse = graph.reverse()

    assert in_closeness(graph, 2, reverse=reverse) == in_closeness(graph, 2)


def test_ratio_uses_reachable_count_not_node_count():
    graph = Graph.from_adjacency([[1], [], [], [], []])

    assert out_closeness(graph, 0) == pytest.approx(1.0)


def test_closeness_from_distances():
    assert closeness_from_distances([0, 1, None, 2, 2]) == (3, 5)
    assert closeness_from_distances([0, None]) == (0, 0)
