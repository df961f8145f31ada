"""Utilities for rendering, linking and writing refdoc documentation pages."""

from .assets import DEFAULT_ASSETS, AssetCopyError, AssetSpec, copy_assets
from .autolink import link_all, project_doc
from .models import (
    GenerationCancelledError,
    GenerationReport,
    PageFailure,
    PageGenerationError,
)
from .page_generator import HtmlDocGenerator, generate_docs
from .readme import MissingReadmeError, generate_readme
from .renderer import HtmlContentRenderer, pretty_codeblocks
from .templates import DocTemplates

__all__ = [
    "DEFAULT_ASSETS",
    "AssetCopyError",
    "AssetSpec",
    "DocTemplates",
    "GenerationCancelledError",
    "GenerationReport",
    "HtmlContentRenderer",
    "HtmlDocGenerator",
    "MissingReadmeError",
    "PageFailure",
    "PageGenerationError",
    "copy_assets",
    "generate_docs",
    "generate_readme",
    "link_all",
    "pretty_codeblocks",
    "project_doc",
]
