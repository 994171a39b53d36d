"""Sampled shortest-path statistics over directed graphs."""

from typing import Any

__all__ = ["render_report", "run_analysis"]


def run_analysis(*args: Any, **kwargs: Any):
    from .pipeline import run_analysis as _run_analysis

    return _run_analysis(*args, **kwargs)


def render_report(*args: Any, **kwargs: Any) -> str:
    from .renderer import render_report as _render_report

    return _render_report(*args, **kwargs)
