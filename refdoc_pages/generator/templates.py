"""Jinja rendering for every page of the generated documentation site.

Each public method returns an HTML (or JavaScript) string and never touches
the filesystem, so the orchestrator can call :meth:`DocTemplates.module_page`
from worker threads. Output is deterministic for identical inputs: no
timestamps are rendered.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from refdoc_pages._constants import ASSETS_DIRNAME
from refdoc_pages.nodes import NodeType

from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from refdoc_pages.config import DocConfig
    from refdoc_pages.nodes import Categories, ModuleNode

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
MEMBER_SECTIONS: tuple[tuple[str, str], ...] = (
    ("type", "Types"),
    ("def", "Functions"),
    ("macro", "Macros"),
    ("callback", "Callbacks"),
)


class DocTemplates:
    """Render documentation pages from the bundled Jinja templates."""

    def __init__(
        self, config: DocConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the Jinja environment for ``config``.

        Parameters
        ----------
        config : DocConfig
            Normalized run configuration; supplies the project metadata and the
            highlighting options.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.config = config
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.renderer = HtmlContentRenderer(config.language, config.pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["markdown"] = self.renderer.markdown
        self.env.filters["summary"] = self.renderer.summary
        self.env.filters["signature"] = self.renderer.signature

    def redirect(self, redirect_to: str) -> str:
        """Render a page that forwards the browser to ``redirect_to``."""
        return self._render(
            "redirect.jinja", config=self.config, redirect_to=redirect_to
        )

    def overview(
        self, categories: Categories, *, has_readme: bool, has_logo: bool
    ) -> str:
        """Render the overview page listing every category."""
        return self._render(
            "overview.jinja",
            **self._layout_context(categories, has_readme, has_logo),
            page_title="Overview",
        )

    def not_found(
        self, categories: Categories, *, has_readme: bool, has_logo: bool
    ) -> str:
        """Render the 404 page with the same navigation as the overview."""
        return self._render(
            "not_found.jinja",
            **self._layout_context(categories, has_readme, has_logo),
            page_title="404",
        )

    def readme(self, categories: Categories, content: str, *, has_logo: bool) -> str:
        """Render the README page from autolinked markdown ``content``."""
        return self._render(
            "readme.jinja",
            **self._layout_context(categories, True, has_logo),
            page_title="README",
            content=content,
        )

    def module_page(
        self,
        node: ModuleNode,
        all_nodes: cabc.Sequence[ModuleNode],
        *,
        has_readme: bool,
        has_logo: bool,
    ) -> str:
        """Render the page documenting ``node``.

        ``all_nodes`` is the full node list, including protocol
        implementations, used to list the implementations of a protocol.
        """
        implementations = []
        if node.type is NodeType.PROTOCOL:
            prefix = f"{node.id}."
            implementations = [
                other
                for other in all_nodes
                if other.type is NodeType.IMPL and other.id.startswith(prefix)
            ]
        sections = [
            (label, [doc for doc in node.docs if doc.kind == kind])
            for kind, label in MEMBER_SECTIONS
        ]
        return self._render(
            "module_page.jinja",
            **self._layout_context(None, has_readme, has_logo),
            page_title=node.id,
            node=node,
            sections=[(label, docs) for label, docs in sections if docs],
            implementations=implementations,
        )

    @staticmethod
    def sidebar_items(entries: cabc.Sequence[dict[str, typ.Any]]) -> str:
        """Return the JavaScript assigning the sidebar navigation data."""
        payload = {
            entry["id"]: [
                {
                    "id": node.id,
                    "type": str(node.type),
                    "functions": [doc.id for doc in node.docs],
                }
                for node in entry["items"]
            ]
            for entry in entries
        }
        return f"sidebarNodes = {json.dumps(payload, sort_keys=False)};\n"

    def _layout_context(
        self, categories: Categories | None, has_readme: bool, has_logo: bool
    ) -> dict[str, typ.Any]:
        """Return the context shared by every page using the base layout."""
        logo_path = None
        if has_logo and self.config.logo is not None:
            logo_path = self._logo_href()
        return {
            "config": self.config,
            "categories": categories.items() if categories is not None else [],
            "has_readme": has_readme,
            "has_logo": has_logo,
            "logo_path": logo_path,
            "pygments_css": self.renderer.stylesheet,
        }

    def _logo_href(self) -> str:
        """Return the site-relative href of the copied logo."""
        assets = self.config.output / ASSETS_DIRNAME
        for candidate in ("logo.png", "logo.jpg"):
            if (assets / candidate).exists():
                return f"{ASSETS_DIRNAME}/{candidate}"
        return f"{ASSETS_DIRNAME}/logo.png"

    def _render(self, name: str, **context: typ.Any) -> str:
        html = self.env.get_template(name).render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = ["MEMBER_SECTIONS", "TEMPLATES_DIR", "DocTemplates"]
