"""Main window layout: preview, two sliders, filter and save buttons."""

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .palette import WINDOW_DEFAULT_SIZE, WINDOW_MARGINS, WINDOW_SPACING
from .widgets import ImagePreview, ParameterSlider

WINDOW_TITLE = "Instafilter"


class MainWindow(QMainWindow):
    """Pure view: exposes its widgets, the controller wires the behaviour."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_DEFAULT_SIZE)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(*WINDOW_MARGINS)
        layout.setSpacing(WINDOW_SPACING)

        self.preview = ImagePreview(central)
        layout.addWidget(self.preview, 1)

        self.radius_slider = ParameterSlider("Radius", central)
        self.intensity_slider = ParameterSlider("Intensity", central)
        layout.addWidget(self.radius_slider)
        layout.addWidget(self.intensity_slider)

        buttons = QHBoxLayout()
        self.filter_button = QPushButton(central)
        self.filter_button.setToolTip("Change filter")
        self.save_button = QPushButton("Save", central)
        self.save_button.setToolTip("Save the filtered picture to the photo library")
        buttons.addWidget(self.filter_button)
        buttons.addStretch(1)
        buttons.addWidget(self.save_button)
        layout.addLayout(buttons)

        self.setCentralWidget(central)

    def set_filter_title(self, title: str) -> None:
        self.filter_button.setText(title)


__all__ = ["MainWindow", "WINDOW_TITLE"]
