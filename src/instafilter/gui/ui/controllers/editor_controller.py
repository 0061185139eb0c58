"""Controller that connects the main window widgets to the editor session."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image
from PySide6.QtCore import QObject, QThreadPool, Signal
from PySide6.QtWidgets import QMenu

from ....core.editor_state import (
    EditorSession,
    FilterSelected,
    ImagePicked,
    IntensityChanged,
    RadiusChanged,
)
from ....core.filters import FILTER_CHOICES, format_filter_name
from ....core.image_io import load_image
from ....core.photo_library import PhotoLibrary
from ....errors import NoImageSelectedError
from ....settings import Settings
from ..main_window import MainWindow
from ..qt_image import pil_to_pixmap
from ..tasks import ImageSaveWorker
from ..widgets import dialogs

LOGGER = logging.getLogger(__name__)

FILTER_MENU_TITLE = "Select a filter"
NO_IMAGE_ALERT_TITLE = "Please select an image"


class EditorController(QObject):
    """Translate widget events into editor actions and keep the view in sync."""

    saveStarted = Signal()
    """Emitted after a save has been handed to the thread pool."""

    def __init__(
        self,
        *,
        window: MainWindow,
        session: EditorSession,
        settings: Settings,
        library: PhotoLibrary,
        thread_pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._window = window
        self._session = session
        self._settings = settings
        self._library = library
        self._pool = thread_pool or QThreadPool.globalInstance()

        state = session.state
        window.radius_slider.setValue(state.radius, emit=False)
        window.intensity_slider.setValue(state.intensity, emit=False)
        self._refresh_filter_title()

        session.add_listener(self._show_processed)

        window.preview.clicked.connect(self._handle_pick_requested)
        window.radius_slider.valueChanged.connect(self._handle_radius_changed)
        window.intensity_slider.valueChanged.connect(self._handle_intensity_changed)
        window.radius_slider.valueCommitted.connect(self._handle_radius_committed)
        window.intensity_slider.valueCommitted.connect(self._handle_intensity_committed)
        window.filter_button.clicked.connect(self._handle_filter_menu_requested)
        window.save_button.clicked.connect(self.request_save)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def open_image(self, path: Path) -> bool:
        """Load *path* as the new source image; ``False`` if it is unreadable."""

        image = load_image(path)
        if image is None:
            return False
        self._session.dispatch(ImagePicked(image))
        self._settings.set("picker.last_directory", str(path.parent))
        return True

    def select_filter(self, identifier: str) -> None:
        self._session.dispatch(FilterSelected(identifier))
        self._refresh_filter_title()
        self._settings.set("editor.filter", identifier)

    def request_save(self) -> bool:
        """Start saving the processed image; alert the user if there is none."""

        try:
            image = self._session.image_for_saving()
        except NoImageSelectedError as exc:
            dialogs.show_information(self._window, NO_IMAGE_ALERT_TITLE, informative_text=str(exc))
            return False

        worker = ImageSaveWorker(self._library, image)
        worker.signals.succeeded.connect(self._handle_save_succeeded)
        worker.signals.failed.connect(self._handle_save_failed)
        self._pool.start(worker)
        self.saveStarted.emit()
        return True

    # ------------------------------------------------------------------
    # Signal handlers
    # ------------------------------------------------------------------
    def _handle_pick_requested(self) -> None:
        start = self._settings.get("picker.last_directory")
        path = dialogs.select_image(self._window, Path(start) if start else None)
        if path is None:
            return
        self.open_image(path)

    def _handle_radius_changed(self, value: float) -> None:
        self._session.dispatch(RadiusChanged(value))

    def _handle_intensity_changed(self, value: float) -> None:
        self._session.dispatch(IntensityChanged(value))

    def _handle_radius_committed(self, _value: float) -> None:
        self._settings.set("editor.radius", self._session.state.radius)

    def _handle_intensity_committed(self, _value: float) -> None:
        self._settings.set("editor.intensity", self._session.state.intensity)

    def _handle_filter_menu_requested(self) -> None:
        menu = QMenu(FILTER_MENU_TITLE, self._window)
        for choice in FILTER_CHOICES:
            action = menu.addAction(choice.title)
            action.setData(choice.identifier)
        button = self._window.filter_button
        chosen = menu.exec(button.mapToGlobal(button.rect().bottomLeft()))
        if chosen is not None:
            self.select_filter(chosen.data())

    def _handle_save_succeeded(self, path: Path) -> None:
        LOGGER.info("Saved image to %s", path)

    def _handle_save_failed(self, reason: str) -> None:
        LOGGER.warning("Could not save image: %s", reason)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _show_processed(self, image: Image.Image) -> None:
        self._window.preview.set_pixmap(pil_to_pixmap(image))

    def _refresh_filter_title(self) -> None:
        self._window.set_filter_title(format_filter_name(self._session.current_filter.name))


__all__ = ["EditorController", "FILTER_MENU_TITLE", "NO_IMAGE_ALERT_TITLE"]
