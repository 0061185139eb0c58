"""Decode picked files into Pillow images."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

LOGGER = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".jpg", ".jpeg", ".png", ".bmp", ".gif", ".tif", ".tiff", ".webp")


def load_image(path: Path) -> Optional[Image.Image]:
    """Return the image stored at *path*, upright and in ``RGB``/``RGBA``.

    Unreadable or unsupported files yield ``None`` so a failed pick behaves
    like a cancelled one.
    """

    try:
        with Image.open(path) as handle:
            image = ImageOps.exif_transpose(handle)
            image.load()
    except (OSError, UnidentifiedImageError) as exc:
        LOGGER.warning("Could not open %s: %s", path, exc)
        return None

    has_alpha = "A" in image.getbands() or "transparency" in image.info
    target_mode = "RGBA" if has_alpha else "RGB"
    if image.mode != target_mode:
        image = image.convert(target_mode)
    return image


def image_file_filter() -> str:
    """Return a ``QFileDialog`` name filter covering the supported formats."""

    patterns = " ".join(f"*{suffix}" for suffix in SUPPORTED_SUFFIXES)
    return f"Images ({patterns})"


__all__ = ["SUPPORTED_SUFFIXES", "image_file_filter", "load_image"]
