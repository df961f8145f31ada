"""Copy the bundled stylesheets, scripts and fonts into the generated site."""

from __future__ import annotations

import dataclasses as dc
import logging
import shutil
import typing as typ

from .templates import TEMPLATES_DIR

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)


class AssetCopyError(RuntimeError):
    """Raised when a required static asset group matches no files."""


@dc.dataclass(slots=True, frozen=True)
class AssetSpec:
    """Glob patterns, relative to the asset root, copied into ``destination``."""

    patterns: tuple[str, ...]
    destination: str
    required: bool = True


DEFAULT_ASSETS: tuple[AssetSpec, ...] = (
    AssetSpec(patterns=("dist/*.css", "dist/*.js"), destination="dist"),
    AssetSpec(
        patterns=tuple(
            f"fonts/*.{ext}" for ext in ("eot", "svg", "ttf", "woff", "woff2")
        ),
        destination="fonts",
    ),
)


def copy_assets(
    output: Path,
    specs: cabc.Iterable[AssetSpec] = DEFAULT_ASSETS,
    *,
    source_root: Path = TEMPLATES_DIR,
) -> list[Path]:
    """Copy every file matched by ``specs`` into ``output``.

    Files land directly inside ``<output>/<spec.destination>`` under their
    basename; the source directory structure is not preserved.

    Parameters
    ----------
    output : Path
        Root of the generated site. Must already exist.
    specs : Iterable[AssetSpec], optional
        Asset groups to copy; defaults to the bundled CSS, JS and fonts.
    source_root : Path, optional
        Directory the glob patterns are evaluated against.

    Returns
    -------
    list[Path]
        Destination paths of the copied files.

    Raises
    ------
    AssetCopyError
        If a required spec matches no files.
    OSError
        If a file cannot be copied.
    """
    copied: list[Path] = []
    for spec in specs:
        target_dir = output / spec.destination
        target_dir.mkdir(parents=True, exist_ok=True)
        matches = sorted(
            {
                path
                for pattern in spec.patterns
                for path in source_root.glob(pattern)
                if path.is_file()
            }
        )
        if not matches and spec.required:
            patterns = ", ".join(spec.patterns)
            msg = f"No assets matched {patterns} under '{source_root}'."
            raise AssetCopyError(msg)
        for source in matches:
            destination = target_dir / source.name
            shutil.copyfile(source, destination)
            copied.append(destination)
        logger.debug("copied %d asset(s) into %s", len(matches), target_dir)
    return copied


__all__ = ["DEFAULT_ASSETS", "AssetCopyError", "AssetSpec", "copy_assets"]
