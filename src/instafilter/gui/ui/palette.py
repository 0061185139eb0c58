"""Shared colours and metrics for the editor window."""

from __future__ import annotations

from PySide6.QtGui import QColor

# --- Preview area -----------------------------------------------------------
# Neutral grey backdrop behind the photo, matching the placeholder rectangle.
PREVIEW_PLACEHOLDER_COLOR_HEX = "#8e8e93"
PREVIEW_PLACEHOLDER_TEXT_COLOR_HEX = "#ffffff"
PREVIEW_MIN_SIZE = (320, 240)

# --- Parameter sliders -------------------------------------------------------
SLIDER_FILL_COLOR = QColor(132, 132, 132)
SLIDER_TRACK_COLOR = QColor(54, 54, 54)
SLIDER_BACKGROUND_COLOR = QColor(42, 42, 42)
SLIDER_INDICATOR_COLOR = QColor(0, 122, 255)
SLIDER_TEXT_COLOR = QColor(235, 235, 235)

# --- Window chrome -----------------------------------------------------------
WINDOW_MARGINS = (16, 16, 16, 16)
WINDOW_SPACING = 12
WINDOW_DEFAULT_SIZE = (480, 720)


__all__ = [
    "PREVIEW_MIN_SIZE",
    "PREVIEW_PLACEHOLDER_COLOR_HEX",
    "PREVIEW_PLACEHOLDER_TEXT_COLOR_HEX",
    "SLIDER_BACKGROUND_COLOR",
    "SLIDER_FILL_COLOR",
    "SLIDER_INDICATOR_COLOR",
    "SLIDER_TEXT_COLOR",
    "SLIDER_TRACK_COLOR",
    "WINDOW_DEFAULT_SIZE",
    "WINDOW_MARGINS",
    "WINDOW_SPACING",
]
