"""Conversions between Pillow images and Qt image types."""

from __future__ import annotations

from PIL import Image
from PIL.ImageQt import ImageQt
from PySide6.QtGui import QImage, QPixmap


def pil_to_qimage(image: Image.Image) -> QImage:
    """Return a detached ``QImage`` holding the pixels of *image*."""

    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA" if "A" in image.getbands() else "RGB")
    # ``ImageQt`` keeps a reference to Pillow's buffer; copying detaches the
    # Qt image so it stays valid after the Pillow image is released.
    return QImage(ImageQt(image)).copy()


def pil_to_pixmap(image: Image.Image) -> QPixmap:
    return QPixmap.fromImage(pil_to_qimage(image))


__all__ = ["pil_to_pixmap", "pil_to_qimage"]
