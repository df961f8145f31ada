"""Cyclopts CLI entrypoint for generating refdoc documentation sites.

The ``refdoc`` console script defined here reads module descriptors produced by
a source parser, merges the ``refdoc.yaml`` configuration with command-line
overrides and renders the static HTML site. Every option can also be supplied
through a ``REFDOC_``-prefixed environment variable.

Examples
--------
Generate the site described by ``refdoc.yaml``:

>>> from refdoc_pages.cli import app
>>> app(["generate", "modules.yaml"])  # doctest: +SKIP

Render into a custom directory with a logo:

>>> app(
...     ["generate", "modules.yaml", "--output", "site", "--logo", "logo.png"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import ConfigurationError, DocConfig, load_doc_config
from .generator import HtmlDocGenerator
from .nodes import load_module_nodes

DEFAULT_CONFIG = Path("refdoc.yaml")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

app = App(name="refdoc", config=cyclopts.config.Env("REFDOC_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(
    config: Path, *, output: Path | None, title: str | None
) -> DocConfig:
    """Load ``config`` or, when it is absent, build one from the CLI flags."""
    if config.exists():
        return load_doc_config(config)
    if output is not None and title:
        return DocConfig(output=output, title=title)
    msg = (
        f"Configuration file '{config}' not found; pass --output and --title "
        "to generate without one."
    )
    raise ConfigurationError(msg)


@app.command(help="Generate the HTML documentation site from module descriptors.")
def generate(
    nodes: typ.Annotated[
        Path, Parameter(help="YAML or JSON file with the module descriptors")
    ],
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the refdoc config")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    title: typ.Annotated[
        str | None, Parameter(help="Override the project title")
    ] = None,
    version: typ.Annotated[
        str | None, Parameter(help="Override the project version")
    ] = None,
    main: typ.Annotated[
        str | None, Parameter(help="Page id that index.html redirects to")
    ] = None,
    readme: typ.Annotated[
        Path | None, Parameter(help="README rendered into README.html")
    ] = None,
    logo: typ.Annotated[
        Path | None, Parameter(help="JPEG or PNG logo copied into assets/")
    ] = None,
    workers: typ.Annotated[
        int | None, Parameter(help="Maximum number of concurrent page renders")
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log every file written")
    ] = False,
) -> None:
    """Generate the documentation site for the given module descriptors.

    Parameters
    ----------
    nodes : Path
        Descriptor file produced by the source parser.
    config : Path, optional
        Path to ``refdoc.yaml``; optional when ``--output`` and ``--title``
        are both given.
    output, title, version, main, readme, logo, workers : optional
        Overrides applied on top of the configuration file.
    verbose : bool, optional
        Enable DEBUG logging.

    Raises
    ------
    ConfigurationError
        If no configuration file exists and ``--output``/``--title`` are
        missing, or the resulting configuration is invalid.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT
    )
    doc_config = _resolve_config(config, output=output, title=title)
    overrides = {
        "output": output,
        "title": title,
        "version": version,
        "main": main,
        "readme": readme,
        "logo": logo,
        "workers": workers,
    }
    doc_config = dc.replace(
        doc_config, **{key: value for key, value in overrides.items() if value is not None}
    )
    module_nodes = load_module_nodes(nodes)
    index_path = HtmlDocGenerator(module_nodes, doc_config).run()
    print(f"wrote {_format_path(index_path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``refdoc`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
