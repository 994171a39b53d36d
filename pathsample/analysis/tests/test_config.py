from pathlib import Path

import pytest

from pathsample.analysis.config import (
    DEFAULT_ANALYSIS_CONFIG,
    AnalysisConfig,
    ConfigError,
    load_config,
)


def test_defaults():
    assert DEFAULT_ANALYSIS_CONFIG.graph_path == "amazon0302.txt"
    assert DEFAULT_ANALYSIS_CONFIG.top_n == 10
    assert DEFAULT_ANALYSIS_CONFIG.max_bar_width == 80
    assert DEFAULT_ANALYSIS_CONFIG.sample_size is None


def test_clamp_workers():
    assert AnalysisConfig(workers=0).clamp_workers() == 1
    assert AnalysisConfig(workers=4).clamp_workers() == 4


def test_seeded_rng_is_reproducible():
    config = AnalysisConfig(seed=9)

    assert config.make_rng().random() == config.make_rng().random()


def test_with_overrides_ignores_none():
    config = AnalysisConfig(top_n=5).with_overrides(top_n=None, seed=3)

    assert config.top_n == 5
    assert config.seed == 3


def test_load_config(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "graph_path: data/web.txt\nsample_size: 200\nseed: 1\ntop_n: 5\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.graph_path == "data/web.txt"
    assert config.sample_size == 200
    assert config.seed == 1
    assert config.top_n == 5
    assert config.max_bar_width == 80


def test_load_empty_config_gives_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == DEFAULT_ANALYSIS_CONFIG


@pytest.mark.parametrize(
    "content, message",
    [
        ("- a\n- b\n", "must be a mapping"),
        ("samples: 3\n", "Unknown config keys: samples"),
        ("top_n: ten\n", "must be an integer"),
        ("sample_size: -2\n", "must not be negative"),
        ("comment_prefix: 5\n", "'comment_prefix' must be a string"),
        ("graph_path: null\n", "'graph_path' must not be null"),
        ("graph_path: [a.txt, b.txt]\n", "'graph_path' must be a string"),
        ("top_n: null\n", "'top_n' must not be null"),
        ("top_n: [1\n", "Invalid YAML"),
    ],
)
def test_load_config_errors(tmp_path: Path, content: str, message: str):
    path = tmp_path / "config.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(path)


def test_load_config_allows_null_comment_prefix(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("comment_prefix: null\nseed: null\n", encoding="utf-8")

    config = load_config(path)

    assert config.comment_prefix is None
    assert config.seed is None
