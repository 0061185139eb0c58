"""Worker that writes a processed image to the photo library off the GUI thread."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image
from PySide6.QtCore import QObject, QRunnable, Signal

from ....core.photo_library import PhotoLibrary
from ....errors import PhotoLibraryError

LOGGER = logging.getLogger(__name__)


class ImageSaveSignals(QObject):
    """Signals emitted by :class:`ImageSaveWorker`.

    Exactly one of the two signals fires, once, for every worker run.
    """

    succeeded = Signal(Path)
    """Emitted with the path of the written file."""

    failed = Signal(str)
    """Emitted with a human readable reason when the save fails."""


class ImageSaveWorker(QRunnable):
    """Persist one image via :meth:`PhotoLibrary.save`."""

    def __init__(self, library: PhotoLibrary, image: Image.Image) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._library = library
        # Detached copy; the GUI thread keeps using the original.
        self._image = image.copy()
        self.signals = ImageSaveSignals()

    def run(self) -> None:  # type: ignore[override]
        try:
            path = self._library.save(self._image)
        except PhotoLibraryError as exc:
            self.signals.failed.emit(str(exc))
            return
        except Exception as exc:
            LOGGER.exception("Unexpected error while saving to %s", self._library.root)
            self.signals.failed.emit(f"Could not save image: {exc}")
            return
        self.signals.succeeded.emit(path)


__all__ = ["ImageSaveSignals", "ImageSaveWorker"]
