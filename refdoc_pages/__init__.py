"""Render a static HTML documentation site from parsed module descriptors.

This package exposes the CLI entry points used by ``refdoc generate`` together
with the programmatic generator that the CLI wraps.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``generate_docs``: Build a site from nodes and a config, returning the
  path of ``index.html``.

Examples
--------
>>> from refdoc_pages import main
>>> main()  # doctest: +SKIP
>>> from refdoc_pages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main
from .generator import generate_docs

__all__ = ["app", "generate_docs", "main"]
