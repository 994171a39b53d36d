import random
from collections import Counter

import pytest

from pathsample.analysis.sampler import eligible_nodes, sample_nodes
from pathsample.graph.store import Graph


@pytest.fixture
def graph():
    return Graph.from_adjacency([[1, 2], [2], [3], [], [], [0]])


def test_eligible_nodes_out_and_in(graph):
    assert eligible_nodes(graph) == [0, 1, 2, 5]
    assert eligible_nodes(graph.reverse()) == [0, 1, 2, 3]


@pytest.mark.parametrize("sample_size", [4, 5, 100])
def test_oversized_request_returns_eligible_set(graph, sample_size):
    sample = sample_nodes(graph, sample_size, random.Random(0))

    assert sample == frozenset({0, 1, 2, 5})


def test_sample_is_distinct_and_eligible(graph):
    rng = random.Random(11)
    for _ in range(50):
        sample = sample_nodes(graph, 2, rng)
        assert len(sample) == 2
        assert sample <= {0, 1, 2, 5}


@pytest.mark.parametrize("sample_size", [0, -3])
def test_zero_or_negative_request_is_empty(graph, sample_size):
    assert sample_nodes(graph, sample_size, random.Random(0)) == frozenset()


def test_no_eligible_nodes():
    graph = Graph.from_adjacency([[], [], []])

    assert sample_nodes(graph, 5, random.Random(0)) == frozenset()


def test_seeded_sampling_is_reproducible(graph):
    first = sample_nodes(graph, 2, random.Random(42))
    second = sample_nodes(graph, 2, random.Random(42))

    assert first == second


def test_default_rng_still_samples(graph):
    assert len(sample_nodes(graph, 3)) == 3


def test_every_pair_is_drawn(graph):
    rng = random.Random(7)
    counts = Counter(sample_nodes(graph, 2, rng) for _ in range(3000))

    # 4 eligible nodes -> 6 possible pairs, 500 expected draws each
    assert len(counts) == 6
    assert min(counts.values()) > 350
