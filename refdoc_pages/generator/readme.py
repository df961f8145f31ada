"""Render the project README into ``README.html``.

A README is optional: when it cannot be read the site is generated without a
README page and templates hide the README link. Readable content is autolinked
against the documented nodes, rendered through the README template and its
code blocks are tagged for client-side highlighting.
"""

from __future__ import annotations

import logging
import typing as typ

from refdoc_pages._constants import README_FILENAME

from .autolink import project_doc
from .renderer import pretty_codeblocks

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from refdoc_pages.nodes import Categories, ModuleNode

    from .templates import DocTemplates

logger = logging.getLogger(__name__)


class MissingReadmeError(OSError):
    """Raised when the configured README cannot be read."""


def read_readme(path: Path) -> str:
    """Return the README text at ``path``.

    Raises
    ------
    MissingReadmeError
        If the file is missing, unreadable or not valid UTF-8.
    """
    try:
        return path.expanduser().read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"README '{path}' could not be read: {exc}"
        raise MissingReadmeError(msg) from exc


def generate_readme(
    output: Path,
    readme: Path,
    nodes: cabc.Sequence[ModuleNode],
    categories: Categories,
    templates: DocTemplates,
    *,
    has_logo: bool,
) -> bool:
    """Write ``README.html`` and report whether it was produced.

    Parameters
    ----------
    output : Path
        Root of the generated site.
    readme : Path
        README file supplied in the configuration.
    nodes : Sequence[ModuleNode]
        Every documented node; references to them are autolinked.
    categories : Categories
        Navigation categories rendered in the sidebar.
    templates : DocTemplates
        Template renderer bound to the run configuration.
    has_logo : bool
        Whether a logo was copied into the site.

    Returns
    -------
    bool
        ``True`` when ``README.html`` was written, ``False`` when the README
        could not be read.
    """
    try:
        content = read_readme(readme)
    except MissingReadmeError as exc:
        logger.warning("skipping README page: %s", exc)
        return False

    linked = project_doc(content, nodes)
    html = pretty_codeblocks(templates.readme(categories, linked, has_logo=has_logo))
    (output / README_FILENAME).write_text(html, encoding="utf-8")
    logger.debug("wrote %s", output / README_FILENAME)
    return True


__all__ = ["MissingReadmeError", "generate_readme", "read_readme"]
