"""Utility helpers shared by the refdoc configuration loader."""

from __future__ import annotations

from pathlib import Path

from .models import ConfigurationError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_path(value: object | None, base_dir: Path) -> Path | None:
    """Return ``value`` as a path anchored at ``base_dir``, or None when blank."""
    text = _optional_str(value)
    if text is None:
        return None
    path = Path(text).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def _optional_workers(value: object | None) -> int | None:
    """Validate the worker count, returning None when unset."""
    match value:
        case None:
            return None
        case bool():
            msg = "'workers' must be a positive integer."
            raise ConfigurationError(msg)
        case int() as count if count > 0:
            return count
        case str() as text if text.strip().isdigit() and int(text) > 0:
            return int(text)
        case _:
            msg = f"'workers' must be a positive integer, got {value!r}."
            raise ConfigurationError(msg)


__all__ = ["_optional_path", "_optional_str", "_optional_workers"]
