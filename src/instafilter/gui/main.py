"""Application entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from ..core.editor_state import EditorSession, EditorState
from ..core.filters import DEFAULT_FILTER, available_filters
from ..core.photo_library import PhotoLibrary
from ..settings import Settings
from ..utils.logging import get_logger
from .ui.controllers import EditorController
from .ui.main_window import WINDOW_TITLE, MainWindow


def initial_state(settings: Settings) -> EditorState:
    """Build the editor state from persisted preferences."""

    logger = get_logger()
    filter_name = settings.get("editor.filter", DEFAULT_FILTER)
    if filter_name not in available_filters():
        logger.warning("Unknown filter %r in settings; using %s", filter_name, DEFAULT_FILTER)
        filter_name = DEFAULT_FILTER

    def _unit(key: str) -> float:
        try:
            value = float(settings.get(key, 0.5))
        except (TypeError, ValueError):
            value = 0.5
        return max(0.0, min(1.0, value))

    return EditorState(
        filter_name=filter_name,
        intensity=_unit("editor.intensity"),
        radius=_unit("editor.radius"),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Launch the editor window and run the Qt event loop."""

    logger = get_logger()
    app = QApplication.instance() or QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationName(WINDOW_TITLE)

    settings = Settings()
    library = PhotoLibrary(settings.library_root())
    logger.info("Using photo library at %s", library.root)

    window = MainWindow()
    session = EditorSession(initial_state(settings))
    controller = EditorController(
        window=window,
        session=session,
        settings=settings,
        library=library,
        parent=window,
    )
    window.show()
    window.controller = controller
    return app.exec()


__all__ = ["initial_state", "main"]
