"""High-level orchestration for documentation site generation.

This module drives one complete, non-incremental build. It exposes
:class:`HtmlDocGenerator`, which consumes the module descriptors and a
:class:`~refdoc_pages.config.DocConfig`, wipes the output directory, copies the
bundled assets, processes the optional logo and README, writes the redirect,
overview, 404 and sidebar data files and finally renders one page per node on
a thread pool.

Example
-------
>>> from pathlib import Path
>>> from refdoc_pages.config import load_doc_config
>>> from refdoc_pages.generator import HtmlDocGenerator
>>> from refdoc_pages.nodes import load_module_nodes
>>> config = load_doc_config(Path("refdoc.yaml"))  # doctest: +SKIP
>>> nodes = load_module_nodes(Path("modules.yaml"))  # doctest: +SKIP
>>> HtmlDocGenerator(nodes, config).run()  # doctest: +SKIP
PosixPath('/project/doc/index.html')
"""

from __future__ import annotations

import concurrent.futures
import dataclasses as dc
import logging
import shutil
import typing as typ
from pathlib import Path

from refdoc_pages._constants import (
    INDEX_FILENAME,
    NOT_FOUND_FILENAME,
    OVERVIEW_FILENAME,
    PAGE_FILENAME_TEMPLATE,
    SIDEBAR_ITEMS_PATH,
)
from refdoc_pages.config import normalize_config
from refdoc_pages.logo import process_logo
from refdoc_pages.nodes import categorize_modules

from .assets import DEFAULT_ASSETS, AssetSpec, copy_assets
from .autolink import link_all
from .models import (
    GenerationCancelledError,
    GenerationReport,
    PageFailure,
    PageGenerationError,
)
from .readme import generate_readme
from .renderer import pretty_codeblocks
from .templates import TEMPLATES_DIR, DocTemplates

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import threading

    from refdoc_pages.config import DocConfig
    from refdoc_pages.nodes import Categories, ModuleNode

logger = logging.getLogger(__name__)


class HtmlDocGenerator:
    """Render a static documentation site from module descriptors."""

    def __init__(
        self,
        nodes: cabc.Iterable[ModuleNode],
        config: DocConfig,
        *,
        templates_dir: Path | None = None,
        assets: cabc.Sequence[AssetSpec] = DEFAULT_ASSETS,
        cancel_event: threading.Event | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        nodes : Iterable[ModuleNode]
            Every documented node, including protocol implementations.
        config : DocConfig
            Run configuration; normalized when :meth:`run` starts.
        templates_dir : Path, optional
            Directory holding the Jinja templates and the static asset tree;
            defaults to the package templates.
        assets : Sequence[AssetSpec], optional
            Static asset groups copied into the output directory.
        cancel_event : threading.Event, optional
            When set, no further pages are submitted for rendering.
        """
        self.nodes = list(nodes)
        self.config = config
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.assets = tuple(assets)
        self.cancel_event = cancel_event
        self.report: GenerationReport | None = None

    def run(self) -> Path:
        """Generate the whole site and return the path of ``index.html``.

        Returns
        -------
        Path
            Absolute path to the generated redirect page.

        Raises
        ------
        ConfigurationError
            Raised before any output is written when ``main`` is ``"index"``.
        UnsupportedImageFormatError
            Raised when the logo is neither JPEG nor PNG. Output written up to
            that point is left on disk.
        AssetCopyError
            Raised when bundled assets are missing.
        PageGenerationError
            Raised when nodes were given but no entity page could be written.
        GenerationCancelledError
            Raised after in-flight pages finish when ``cancel_event`` was set.

        Notes
        -----
        The output directory is deleted and recreated on every run, so two
        runs with identical inputs leave identical trees behind.
        """
        config = normalize_config(self.config)
        output = config.output.expanduser().resolve()
        config = dc.replace(config, output=output)
        logger.info(
            "generating documentation for %d node(s) into %s", len(self.nodes), output
        )

        self._reset_output(output)
        copy_assets(output, self.assets, source_root=self.templates_dir)
        templates = DocTemplates(config, templates_dir=self.templates_dir)

        all_nodes = link_all(self.nodes)
        categories = categorize_modules(all_nodes)

        has_logo = False
        if config.logo is not None:
            process_logo(config.logo, output)
            has_logo = True

        has_readme = False
        if config.readme is not None:
            has_readme = generate_readme(
                output, config.readme, self.nodes, categories, templates,
                has_logo=has_logo,
            )

        self._write(output / INDEX_FILENAME, templates.redirect(f"{config.main}.html"))
        self._write(
            output / OVERVIEW_FILENAME,
            templates.overview(categories, has_readme=has_readme, has_logo=has_logo),
        )
        self._write(
            output / NOT_FOUND_FILENAME,
            templates.not_found(categories, has_readme=has_readme, has_logo=has_logo),
        )
        self._write_sidebar_items(output, categories, templates)
        self._generate_pages(
            all_nodes, templates, output, has_readme=has_readme, has_logo=has_logo
        )
        return output / INDEX_FILENAME

    @staticmethod
    def _reset_output(output: Path) -> None:
        """Delete ``output`` if present and recreate it empty."""
        if output.exists():
            shutil.rmtree(output)
        output.mkdir(parents=True)

    @staticmethod
    def _write(path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")
        logger.debug("wrote %s", path)

    def _write_sidebar_items(
        self, output: Path, categories: Categories, templates: DocTemplates
    ) -> None:
        """Persist the sidebar navigation data for the non-empty categories."""
        path = output / SIDEBAR_ITEMS_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        self._write(path, templates.sidebar_items(categories.sidebar_entries()))

    def _generate_pages(
        self,
        all_nodes: list[ModuleNode],
        templates: DocTemplates,
        output: Path,
        *,
        has_readme: bool,
        has_logo: bool,
    ) -> GenerationReport:
        """Render one page per node concurrently and aggregate the outcome.

        A failing page is logged and recorded; the run only fails when nodes
        were given and none of their pages could be written.
        """
        report = GenerationReport()
        submitted: list[tuple[ModuleNode, concurrent.futures.Future[Path]]] = []
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=self.config.workers
        ) as executor:
            for node in all_nodes:
                if self.cancel_event is not None and self.cancel_event.is_set():
                    report.skipped.append(node.id)
                    continue
                future = executor.submit(
                    _write_module_page,
                    node,
                    all_nodes,
                    templates,
                    output,
                    has_readme=has_readme,
                    has_logo=has_logo,
                )
                submitted.append((node, future))

        for node, future in submitted:
            exception = future.exception()
            if exception is None:
                report.written.append(future.result())
                continue
            if isinstance(exception, KeyboardInterrupt):  # pragma: no cover - propagate
                raise KeyboardInterrupt from exception
            logger.error("page for %s failed", node.id, exc_info=exception)
            report.failures.append(PageFailure(node_id=node.id, error=exception))

        self.report = report
        logger.info(
            "wrote %d page(s), %d failed, %d skipped",
            len(report.written),
            len(report.failures),
            len(report.skipped),
        )
        if report.skipped:
            raise GenerationCancelledError(report)
        if all_nodes and not report.written:
            raise PageGenerationError(report.failures)
        return report


def _write_module_page(
    node: ModuleNode,
    all_nodes: list[ModuleNode],
    templates: DocTemplates,
    output: Path,
    *,
    has_readme: bool,
    has_logo: bool,
) -> Path:
    """Render ``node`` and write it to ``<output>/<node.id>.html``."""
    html = templates.module_page(
        node, all_nodes, has_readme=has_readme, has_logo=has_logo
    )
    path = output / PAGE_FILENAME_TEMPLATE.format(id=node.id)
    path.write_text(pretty_codeblocks(html), encoding="utf-8")
    return path


def generate_docs(
    nodes: cabc.Iterable[ModuleNode], config: DocConfig, **kwargs: typ.Any
) -> Path:
    """Generate the documentation site; see :class:`HtmlDocGenerator`."""
    return HtmlDocGenerator(nodes, config, **kwargs).run()


__all__ = ["HtmlDocGenerator", "generate_docs"]
