"""Unit tests for loading and normalizing the run configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import pytest

from refdoc_pages.config import (
    ConfigurationError,
    DocConfig,
    load_doc_config,
    normalize_config,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_main_index_is_rejected(doc_config: DocConfig) -> None:
    """The redirect page name cannot double as the landing page."""
    with pytest.raises(ConfigurationError, match="recursively link to itself"):
        normalize_config(dc.replace(doc_config, main="index"))


@pytest.mark.parametrize("main", [None, ""])
def test_main_defaults_to_overview(doc_config: DocConfig, main: str | None) -> None:
    """An absent landing page falls back to the overview."""
    normalized = normalize_config(dc.replace(doc_config, main=main))
    assert normalized.main == "overview"


def test_custom_main_is_kept(doc_config: DocConfig) -> None:
    normalized = normalize_config(dc.replace(doc_config, main="README"))
    assert normalized.main == "README"


def test_normalize_leaves_input_untouched(doc_config: DocConfig) -> None:
    """Normalization returns a new config instead of mutating its argument."""
    normalize_config(doc_config)
    assert doc_config.main is None


def test_non_positive_workers_rejected(doc_config: DocConfig) -> None:
    with pytest.raises(ConfigurationError, match="workers"):
        normalize_config(dc.replace(doc_config, workers=0))


def test_load_doc_config_resolves_relative_paths(tmp_path: Path) -> None:
    """Relative paths are anchored at the configuration file's directory."""
    config_path = tmp_path / "refdoc.yaml"
    config_path.write_text(
        "output: doc\n"
        "title: Demo\n"
        "version: 1.2.0\n"
        "readme: README.md\n"
        "logo: assets/logo.png\n"
        "workers: 3\n"
        "source_url: https://example.invalid/demo\n",
        encoding="utf-8",
    )

    config = load_doc_config(config_path)

    base = tmp_path.resolve()
    assert config.output == base / "doc"
    assert config.readme == base / "README.md"
    assert config.logo == base / "assets" / "logo.png"
    assert config.title == "Demo"
    assert config.version == "1.2.0"
    assert config.workers == 3
    assert config.main is None
    assert config.language == "elixir"


def test_load_doc_config_treats_blank_values_as_absent(tmp_path: Path) -> None:
    config_path = tmp_path / "refdoc.yaml"
    config_path.write_text(
        "output: doc\ntitle: Demo\nreadme: ''\nmain: '  '\n", encoding="utf-8"
    )

    config = load_doc_config(config_path)

    assert config.readme is None
    assert config.main is None


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("title: Demo\n", "missing 'output'"),
        ("output: doc\n", "missing 'title'"),
        ("output: doc\ntitle: Demo\nworkers: -2\n", "workers"),
    ],
)
def test_load_doc_config_rejects_invalid_files(
    tmp_path: Path, body: str, message: str
) -> None:
    config_path = tmp_path / "refdoc.yaml"
    config_path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigurationError, match=message):
        load_doc_config(config_path)


def test_load_doc_config_requires_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "refdoc.yaml"
    config_path.write_text("- output\n- title\n", encoding="utf-8")
    with pytest.raises(TypeError, match="mapping"):
        load_doc_config(config_path)


def test_load_doc_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_doc_config(tmp_path / "absent.yaml")
