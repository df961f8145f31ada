"""Detect the logo image format and copy it into the generated site.

Only JPEG and PNG logos are accepted. The format is decided from the file
signature, never from the extension, and the copy is renamed to
``assets/logo.jpg`` or ``assets/logo.png`` so templates can reference a fixed
path.

Examples
--------
>>> sniff_image_format(bytes.fromhex("ffd8ffe000104a464946"))
<ImageFormat.JPG: 'jpg'>
>>> sniff_image_format(b"GIF89a")
<ImageFormat.UNKNOWN: 'unknown'>
"""

from __future__ import annotations

import enum
import logging
import shutil
from pathlib import Path

from ._constants import ASSETS_DIRNAME, LOGO_PREFIX_LENGTH

logger = logging.getLogger(__name__)

JPEG_SIGNATURE = b"\xff\xd8"
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class UnsupportedImageFormatError(ValueError):
    """Raised when the configured logo is neither a JPEG nor a PNG."""


class ImageFormat(enum.StrEnum):
    """Image formats recognised from a file signature."""

    JPG = "jpg"
    PNG = "png"
    UNKNOWN = "unknown"


def sniff_image_format(prefix: bytes) -> ImageFormat:
    """Classify an image from the leading bytes of its file."""
    if prefix.startswith(JPEG_SIGNATURE):
        return ImageFormat.JPG
    if prefix.startswith(PNG_SIGNATURE):
        return ImageFormat.PNG
    return ImageFormat.UNKNOWN


def process_logo(logo: Path, output: Path) -> Path:
    """Copy ``logo`` into ``<output>/assets`` under a format-specific name.

    Parameters
    ----------
    logo : Path
        Source image supplied by the user.
    output : Path
        Root of the generated site.

    Returns
    -------
    Path
        Destination of the copied logo.

    Raises
    ------
    FileNotFoundError
        If ``logo`` does not exist.
    UnsupportedImageFormatError
        If the file signature is not JPEG or PNG.
    """
    logo_path = logo.expanduser()
    with logo_path.open("rb") as handle:
        prefix = handle.read(LOGO_PREFIX_LENGTH)

    assets_dir = output / ASSETS_DIRNAME
    assets_dir.mkdir(parents=True, exist_ok=True)

    image_format = sniff_image_format(prefix)
    if image_format is ImageFormat.UNKNOWN:
        msg = (
            f"Image format of '{logo_path}' not recognized, "
            "allowed formats are: JPG, PNG"
        )
        raise UnsupportedImageFormatError(msg)

    destination = assets_dir / f"logo.{image_format}"
    shutil.copyfile(logo_path, destination)
    logger.debug("copied %s logo to %s", image_format, destination)
    return destination


__all__ = [
    "ImageFormat",
    "UnsupportedImageFormatError",
    "process_logo",
    "sniff_image_format",
]
