"""Shared fixtures for the refdoc_pages test suite.

The fixtures describe a tiny documented project: two modules, one exception,
a README that references them and a PNG logo. Tests build on
``doc_config`` and ``sample_nodes`` and override individual fields with
``dataclasses.replace`` when a scenario needs something different.
"""

from __future__ import annotations

import typing as typ

import pytest

from refdoc_pages.config import DocConfig
from refdoc_pages.nodes import FunctionNode, ModuleNode, NodeType

if typ.TYPE_CHECKING:
    from pathlib import Path

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 32

SAMPLE_README = (
    "# Demo\n\n"
    "Start with `Demo` and handle `Demo.Error`.\n\n"
    "```\n"
    "iex> Demo.run(1)\n"
    ":ok\n"
    "```\n\n"
    "```\n"
    "mix deps.get\n"
    "```\n\n"
    "```ruby\n"
    "puts 1\n"
    "```\n"
)


@pytest.fixture
def sample_nodes() -> list[ModuleNode]:
    """Return two modules and one exception with cross references."""
    return [
        ModuleNode(
            id="Demo",
            moduledoc="Entry point.\n\nSee `Demo.Util.join/2` and `run/1`.",
            docs=(
                FunctionNode(
                    id="run/1",
                    name="run",
                    arity=1,
                    signature="run(opts)",
                    doc="Runs the demo. Raises `Demo.Error`.",
                ),
            ),
            source="https://example.invalid/demo/lib/demo.ex",
        ),
        ModuleNode(
            id="Demo.Util",
            moduledoc="Helpers.",
            docs=(
                FunctionNode(
                    id="join/2",
                    name="join",
                    arity=2,
                    signature="join(left, right)",
                    doc="Joins two values.",
                ),
            ),
        ),
        ModuleNode(
            id="Demo.Error",
            type=NodeType.EXCEPTION,
            moduledoc="Raised when the demo fails.",
        ),
    ]


@pytest.fixture
def readme_file(tmp_path: Path) -> Path:
    """Write the sample README and return its path."""
    path = tmp_path / "README.md"
    path.write_text(SAMPLE_README, encoding="utf-8")
    return path


@pytest.fixture
def png_logo(tmp_path: Path) -> Path:
    """Write a file carrying a PNG signature and return its path."""
    path = tmp_path / "logo-source.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def doc_config(tmp_path: Path) -> DocConfig:
    """Build a minimal configuration rooted in a temp output directory."""
    return DocConfig(
        output=tmp_path / "doc",
        title="Demo",
        version="1.0.0",
        source_url="https://example.invalid/demo",
    )
