import math

from pathsample.analysis.config import AnalysisConfig
from pathsample.analysis.renderer import (
    bar_length,
    render_histogram,
    render_ranking,
    render_report,
)
from pathsample.analysis.types import AnalysisReport, RankedNode


def test_histogram_bars_scale_to_max_width():
    output = render_histogram({2: 2, 1: 4}, max_width=80)

    lines = output.splitlines()
    assert lines[0] == "Distance:"
    assert lines[1] == "1: " + "*" * 80
    assert lines[2] == "2: " + "*" * 40
    assert lines[-1] == "Distances with very low counts are omitted"


def test_histogram_omits_zero_length_bars():
    output = render_histogram({1: 1000, 2: 5, 3: 13}, max_width=80)

    assert "2:" not in output
    assert "3: *" in output


def test_empty_histogram_renders_header_and_caption():
    assert render_histogram({}).splitlines() == [
        "Distance:",
        "Distances with very low counts are omitted",
    ]


def test_bar_length_uses_integer_division():
    assert bar_length(13, 1000, 80) == 1
    assert bar_length(12, 1000, 80) == 0


def test_render_ranking_limits_entries():
    ranking = [RankedNode(node=i, score=1.0 / (i + 1)) for i in range(5)]

    output = render_ranking("Top 2 Out Closenesses:", ranking, 2)

    assert output.splitlines() == ["Top 2 Out Closenesses:", "(0, 1.0)", "(1, 0.5)"]


def test_render_report_sections():
    report = AnalysisReport(
        sample_size=3,
        average_distance=4 / 3,
        histogram={1: 4, 2: 2},
        in_closeness=(RankedNode(1, 1.0),),
        out_closeness=(RankedNode(2, 1.0), RankedNode(0, 0.75)),
        elapsed_seconds=0.5,
    )

    output = render_report(report, AnalysisConfig(top_n=1))

    assert "Average shortest path for 3 samples: 1.33" in output
    assert "Top 1 In Closenesses:\n(1, 1.0)" in output
    assert "Top 1 Out Closenesses:\n(2, 1.0)\nElapsed" in output
    assert "(0, 0.75)" not in output
    assert output.endswith("Elapsed: 0.500s")


def test_render_report_nan_average():
    report = AnalysisReport(
        sample_size=0,
        average_distance=math.nan,
        histogram={},
        in_closeness=(),
        out_closeness=(),
        elapsed_seconds=0.0,
    )

    output = render_report(report, elapsed_seconds=2.0)

    assert "Average shortest path for 0 samples: nan" in output
    assert output.endswith("Elapsed: 2.000s")
