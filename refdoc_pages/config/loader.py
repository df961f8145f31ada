"""Load the refdoc run configuration YAML into a typed dataclass."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _optional_path, _optional_str, _optional_workers
from .models import ConfigurationError, DocConfig


def load_doc_config(path: Path) -> DocConfig:
    """Load the YAML file describing a documentation build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``refdoc.yaml``). Relative ``output``, ``readme`` and ``logo`` entries
        are resolved against the directory containing this file.

    Returns
    -------
    DocConfig
        Parsed configuration. ``main`` is left as written; call
        :func:`~refdoc_pages.config.normalize_config` to apply defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigurationError
        If ``output`` or ``title`` is missing, or ``workers`` is not a
        positive integer.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_doc_config(Path("refdoc.yaml"))  # doctest: +SKIP
    >>> config.main is None  # doctest: +SKIP
    True
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.resolve().parent

    output = _optional_path(raw.get("output"), base_dir)
    if output is None:
        msg = f"Configuration '{path}' is missing 'output'."
        raise ConfigurationError(msg)
    title = _optional_str(raw.get("title"))
    if title is None:
        msg = f"Configuration '{path}' is missing 'title'."
        raise ConfigurationError(msg)

    return DocConfig(
        output=output,
        title=title,
        version=_optional_str(raw.get("version")),
        main=_optional_str(raw.get("main")),
        readme=_optional_path(raw.get("readme"), base_dir),
        logo=_optional_path(raw.get("logo"), base_dir),
        source_url=_optional_str(raw.get("source_url")),
        homepage_url=_optional_str(raw.get("homepage_url")),
        language=_optional_str(raw.get("language")) or "elixir",
        pygments_style=_optional_str(raw.get("pygments_style")) or "monokai",
        workers=_optional_workers(raw.get("workers")),
    )


__all__ = ["load_doc_config"]
