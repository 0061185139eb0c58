"""Clickable preview area that shows the filtered photo."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent, QPixmap, QResizeEvent
from PySide6.QtWidgets import QLabel, QSizePolicy, QVBoxLayout, QWidget

from ..palette import (
    PREVIEW_MIN_SIZE,
    PREVIEW_PLACEHOLDER_COLOR_HEX,
    PREVIEW_PLACEHOLDER_TEXT_COLOR_HEX,
)

PLACEHOLDER_TEXT = "Tap to select a picture"


class ImagePreview(QWidget):
    """Display a pixmap scaled to fit, or a prompt when nothing is loaded."""

    clicked = Signal()
    """Emitted when the user clicks anywhere on the preview."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._pixmap: Optional[QPixmap] = None

        self._label = QLabel(self)
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        # The pixmap is rescaled by hand in ``_render`` so the aspect ratio is
        # preserved; letting QLabel stretch it would distort the photo.
        self._label.setScaledContents(False)
        self._label.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Ignored)
        self._label.setStyleSheet(
            f"background-color: {PREVIEW_PLACEHOLDER_COLOR_HEX};"
            f"color: {PREVIEW_PLACEHOLDER_TEXT_COLOR_HEX};"
            "font-weight: bold; font-size: 16px;"
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._label)

        self.setMinimumSize(*PREVIEW_MIN_SIZE)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self._show_placeholder()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_pixmap(self, pixmap: Optional[QPixmap]) -> None:
        """Show *pixmap*, or the placeholder prompt when it is ``None``."""

        if pixmap is None or pixmap.isNull():
            self._pixmap = None
            self._show_placeholder()
            return
        self._pixmap = pixmap
        self._render()

    def pixmap(self) -> Optional[QPixmap]:
        return self._pixmap

    def has_image(self) -> bool:
        return self._pixmap is not None

    # ------------------------------------------------------------------
    # QWidget overrides
    # ------------------------------------------------------------------
    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
        super().mouseReleaseEvent(event)

    def resizeEvent(self, event: QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        if self._pixmap is not None:
            self._render()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _show_placeholder(self) -> None:
        self._label.clear()
        self._label.setText(PLACEHOLDER_TEXT)

    def _render(self) -> None:
        assert self._pixmap is not None
        target = self._label.size()
        if target.width() <= 0 or target.height() <= 0:
            target = self.size()
        scaled = self._pixmap.scaled(
            target,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self._label.setPixmap(scaled)


__all__ = ["ImagePreview", "PLACEHOLDER_TEXT"]
