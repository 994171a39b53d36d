"""Plain-text rendering for analysis output."""

from typing import Sequence

from .config import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig
from .ranker import top_ranked
from .types import AnalysisReport, Histogram, RankedNode

_LOW_COUNT_CAPTION = "Distances with very low counts are omitted"


def bar_length(count: int, max_count: int, max_width: int) -> int:
    """Bar length scaled so the most frequent distance fills ``max_width``."""
    return (count * max_width) // max_count


def render_histogram(histogram: Histogram, max_width: int = 80) -> str:
    """Render a histogram as ``*`` bars, ascending by distance.

    Distances whose scaled bar would be empty are left out.
    """
    max_count = max(histogram.values(), default=1)

    lines = ["Distance:"]
    for distance, count in sorted(histogram.items()):
        length = bar_length(count, max_count, max_width)
        if length > 0:
            lines.append(f"{distance}: {'*' * length}")
    lines.append(_LOW_COUNT_CAPTION)
    return "\n".join(lines)


def _format_entry(entry: RankedNode) -> str:
    return f"({entry.node}, {entry.score})"


def render_ranking(title: str, ranking: Sequence[RankedNode], limit: int) -> str:
    """Render the top ``limit`` ranking entries under a title line."""
    lines = [title]
    lines.extend(_format_entry(entry) for entry in top_ranked(ranking, limit))
    return "\n".join(lines)


def render_report(
    report: AnalysisReport,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
    *,
    elapsed_seconds: float | None = None,
) -> str:
    """Render the full analysis run in the order it was computed.

    ``elapsed_seconds`` replaces the report's own timing, e.g. to include
    graph loading.
    """
    if elapsed_seconds is None:
        elapsed_seconds = report.elapsed_seconds
    sections = [
        f"Average shortest path for {report.sample_size} samples: "
        f"{report.average_distance:.2f}",
        render_histogram(report.histogram, config.max_bar_width),
        render_ranking(
            f"Top {config.top_n} In Closenesses:", report.in_closeness, config.top_n
        ),
        render_ranking(
            f"Top {config.top_n} Out Closenesses:", report.out_closeness, config.top_n
        ),
        f"Elapsed: {elapsed_seconds:.3f}s",
    ]
    return "\n".join(sections)
