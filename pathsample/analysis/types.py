"""Typed contracts for sampled path analysis."""

from dataclasses import dataclass

DistanceVector = list[int | None]
Histogram = dict[int, int]


@dataclass(frozen=True)
class RankedNode:
    node: int
    score: float

    def as_tuple(self) -> tuple[int, float]:
        return (self.node, self.score)


@dataclass(frozen=True)
class AnalysisReport:
    sample_size: int
    average_distance: float
    histogram: Histogram
    in_closeness: tuple[RankedNode, ...]
    out_closeness: tuple[RankedNode, ...]
    elapsed_seconds: float
