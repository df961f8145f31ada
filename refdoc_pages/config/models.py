"""Typed dataclasses describing a refdoc generation run."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


class ConfigurationError(ValueError):
    """Raised when the run configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class DocConfig:
    """Options for a single documentation build.

    Attributes
    ----------
    output : Path
        Directory receiving the generated site. It is wiped on every run.
    title : str
        Project title shown in page headers and ``<title>`` tags.
    version : str, optional
        Project version rendered next to the title.
    main : str, optional
        Page id that ``index.html`` redirects to. ``None`` until normalized.
    readme : Path, optional
        README file rendered into ``README.html`` when readable.
    logo : Path, optional
        JPEG or PNG file copied into ``assets/``.
    source_url : str, optional
        Project repository link shown in the sidebar.
    homepage_url : str, optional
        Project homepage link shown in the sidebar.
    language : str
        Pygments lexer used for member signatures.
    pygments_style : str
        Pygments style used for highlighted signatures.
    workers : int, optional
        Maximum number of concurrent page renders.
    """

    output: Path
    title: str
    version: str | None = None
    main: str | None = None
    readme: Path | None = None
    logo: Path | None = None
    source_url: str | None = None
    homepage_url: str | None = None
    language: str = "elixir"
    pygments_style: str = "monokai"
    workers: int | None = None


__all__ = ["ConfigurationError", "DocConfig"]
