"""Directory-backed photo library that saved edits are written into."""

from __future__ import annotations

import logging
import os
import re
import tempfile
import threading
from pathlib import Path

from PIL import Image

from ..errors import PhotoLibraryError
from ..utils.jsonio import atomic_replace

LOGGER = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"^IMG_(\d+)\.png$", re.IGNORECASE)

# Saves run on a thread pool; picking the next name and moving the file into
# place must happen as one step or two saves can claim the same name.
_SAVE_LOCK = threading.Lock()


class PhotoLibrary:
    """Persist images as ``IMG_0001.png``, ``IMG_0002.png`` and so on."""

    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def next_path(self) -> Path:
        """Return the first unused file name after the highest existing one."""

        highest = 0
        if self._root.is_dir():
            for entry in self._root.iterdir():
                match = _NAME_PATTERN.match(entry.name)
                if match:
                    highest = max(highest, int(match.group(1)))
        return self._root / f"IMG_{highest + 1:04d}.png"

    def save(self, image: Image.Image) -> Path:
        """Write *image* into the library and return its final path.

        Encoding happens into a private temporary file, so concurrent saves
        only serialise on the final rename and never share a scratch file.
        """

        mode = "RGBA" if "A" in image.getbands() else "RGB"
        if image.mode != mode:
            image = image.convert(mode)

        try:
            self._root.mkdir(parents=True, exist_ok=True)
            tmp_path = self._encode(image)
        except OSError as exc:
            raise PhotoLibraryError(f"Could not save image: {exc}") from exc

        try:
            with _SAVE_LOCK:
                target = self.next_path()
                atomic_replace(tmp_path, target)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise PhotoLibraryError(f"Could not save image: {exc}") from exc

        LOGGER.debug("Wrote %dx%d image to %s", image.width, image.height, target)
        return target

    def _encode(self, image: Image.Image) -> Path:
        handle = tempfile.NamedTemporaryFile(
            dir=self._root, prefix=".IMG_", suffix=".png.tmp", delete=False
        )
        tmp_path = Path(handle.name)
        try:
            with handle:
                image.save(handle, format="PNG")
                handle.flush()
                os.fsync(handle.fileno())
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
        return tmp_path


__all__ = ["PhotoLibrary"]
