"""Resolve defaults and reject invalid values on a run configuration."""

from __future__ import annotations

import dataclasses as dc

from refdoc_pages._constants import DEFAULT_MAIN, RESERVED_MAIN

from .models import ConfigurationError, DocConfig


def normalize_config(config: DocConfig) -> DocConfig:
    """Return ``config`` with the landing page resolved.

    Raises
    ------
    ConfigurationError
        If ``main`` is ``"index"``; the redirect page would link to itself.
        Also raised for a non-positive ``workers`` bound.

    Examples
    --------
    >>> from pathlib import Path
    >>> normalize_config(DocConfig(output=Path("doc"), title="Demo")).main
    'overview'
    """
    if config.main == RESERVED_MAIN:
        msg = (
            f'"main" cannot be set to "{RESERVED_MAIN}", otherwise it will '
            "recursively link to itself"
        )
        raise ConfigurationError(msg)
    if config.workers is not None and config.workers < 1:
        msg = f"'workers' must be a positive integer, got {config.workers}."
        raise ConfigurationError(msg)
    return dc.replace(config, main=config.main or DEFAULT_MAIN)


__all__ = ["normalize_config"]
