"""Load and validate the configuration of a refdoc documentation build.

This subpackage parses the project's ``refdoc.yaml`` file into a frozen
:class:`DocConfig` and normalizes it before generation. The entry points are
:func:`load_doc_config`, which reads and validates the YAML, and
:func:`normalize_config`, which rejects a self-referential landing page and
fills in the default ``main`` page.

Examples
--------
>>> from pathlib import Path
>>> from refdoc_pages.config import load_doc_config, normalize_config
>>> config = normalize_config(load_doc_config(Path("refdoc.yaml")))  # doctest: +SKIP
>>> config.main  # doctest: +SKIP
'overview'
"""

from .loader import load_doc_config
from .models import ConfigurationError, DocConfig
from .normalizer import normalize_config

__all__ = [
    "ConfigurationError",
    "DocConfig",
    "load_doc_config",
    "normalize_config",
]
