"""Configuration for sampled path analysis."""

import random
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml


class ConfigError(ValueError):
    """Invalid analysis configuration."""


@dataclass(frozen=True)
class AnalysisConfig:
    """Constants controlling sampling, ranking and rendering."""

    graph_path: str = "amazon0302.txt"
    comment_prefix: str | None = "#"

    sample_size: int | None = None
    seed: int | None = None
    workers: int = 1

    top_n: int = 10
    max_bar_width: int = 80

    def clamp_workers(self) -> int:
        """Worker count is at least one."""
        return max(1, self.workers)

    def make_rng(self) -> random.Random:
        """Random source for sampling; seeded when ``seed`` is set."""
        return random.Random(self.seed)

    def with_overrides(self, **overrides: Any) -> "AnalysisConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


DEFAULT_ANALYSIS_CONFIG = AnalysisConfig()

_INT_FIELDS = {"sample_size", "seed", "workers", "top_n", "max_bar_width"}
_NULLABLE_FIELDS = {"sample_size", "seed", "comment_prefix"}


def load_config(path: str | Path) -> AnalysisConfig:
    """Load an ``AnalysisConfig`` from a YAML mapping.

    Missing keys keep their defaults. Unknown keys and wrongly typed values
    raise ``ConfigError``.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return DEFAULT_ANALYSIS_CONFIG
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(AnalysisConfig)}
    unknown = sorted(str(key) for key in set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    for key, value in data.items():
        if value is None:
            if key not in _NULLABLE_FIELDS:
                raise ConfigError(f"Config key {key!r} must not be null")
            continue
        if key in _INT_FIELDS:
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"Config key {key!r} must be an integer, got {value!r}")
        elif not isinstance(value, str):
            raise ConfigError(f"Config key {key!r} must be a string, got {value!r}")

    if data.get("sample_size") is not None and data["sample_size"] < 0:
        raise ConfigError("Config key 'sample_size' must not be negative")

    return replace(DEFAULT_ANALYSIS_CONFIG, **data)
