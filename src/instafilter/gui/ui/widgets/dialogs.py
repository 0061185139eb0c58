"""Reusable dialog helpers for the desktop UI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QApplication, QFileDialog, QMessageBox, QWidget

from ....core.image_io import image_file_filter


def select_image(parent: QWidget, start: Optional[Path] = None) -> Optional[Path]:
    """Return an image file chosen by the user or ``None`` when cancelled."""

    directory = str(start) if start is not None else ""
    path, _ = QFileDialog.getOpenFileName(parent, "Select a picture", directory, image_file_filter())
    if not path:
        return None
    return Path(path)


def _apply_theme(box: QMessageBox, parent: Optional[QWidget]) -> None:
    """Apply the active theme colors to the message box."""

    palette = parent.palette() if parent else QApplication.palette()
    bg_color = palette.color(QPalette.ColorRole.Window).name()
    text_color = palette.color(QPalette.ColorRole.WindowText).name()
    box.setStyleSheet(
        f"QMessageBox {{ background-color: {bg_color}; color: {text_color}; }}"
        f"QLabel {{ color: {text_color}; }}"
    )


def show_information(
    parent: QWidget,
    message: str,
    *,
    title: str = "Instafilter",
    informative_text: str = "",
) -> None:
    """Display a blocking, dismissible informational message box."""

    box = QMessageBox(QMessageBox.Icon.Information, title, message, QMessageBox.StandardButton.Ok, parent)
    if informative_text:
        box.setInformativeText(informative_text)
    _apply_theme(box, parent)
    box.exec()


__all__ = ["select_image", "show_information"]
