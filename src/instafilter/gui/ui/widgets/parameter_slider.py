"""Painted slider used for the Radius and Intensity controls."""

from __future__ import annotations

import math
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QFont, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QWidget

from ..palette import (
    SLIDER_BACKGROUND_COLOR,
    SLIDER_FILL_COLOR,
    SLIDER_INDICATOR_COLOR,
    SLIDER_TEXT_COLOR,
    SLIDER_TRACK_COLOR,
)

STEP = 0.01
VALUE_TOLERANCE = 1e-6

_KEY_STEPS = {
    Qt.Key.Key_Left: -STEP,
    Qt.Key.Key_Down: -STEP,
    Qt.Key.Key_Right: STEP,
    Qt.Key.Key_Up: STEP,
    Qt.Key.Key_PageDown: -10 * STEP,
    Qt.Key.Key_PageUp: 10 * STEP,
}


class ParameterSlider(QWidget):
    """Continuous ``[0, 1]`` slider with its label drawn inside the track."""

    valueChanged = Signal(float)
    """Emitted on every change, including while the user drags."""

    valueCommitted = Signal(float)
    """Emitted when a drag ends, or after a key or wheel step, if the value moved."""

    def __init__(
        self,
        name: str,
        parent: QWidget | None = None,
        *,
        initial: Optional[float] = None,
    ) -> None:
        super().__init__(parent)
        self._name = name
        self._value = self._clamp(initial if initial is not None else 0.5)
        # Value at the start of the current drag, ``None`` when not dragging.
        self._press_value: Optional[float] = None
        self.setCursor(Qt.CursorShape.SizeHorCursor)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setAccessibleName(name)

        self.setMinimumHeight(35)
        self.setMinimumWidth(220)
        self.track_height = 30
        self.corner_radius = 10
        self.h_padding = 14
        self.line_width = 3

    # ------------------------------------------------------------------
    # Public API
    def name(self) -> str:
        return self._name

    def value(self) -> float:
        return self._value

    def setValue(self, value: float, emit: bool = True) -> bool:
        """Move the slider to *value*; return ``True`` if the position changed.

        :attr:`valueChanged` is emitted for real changes unless *emit* is false.
        """

        clamped = self._clamp(value)
        if math.isclose(clamped, self._value, abs_tol=VALUE_TOLERANCE):
            return False
        self._value = clamped
        self.update()
        if emit:
            self.valueChanged.emit(clamped)
        return True

    # ------------------------------------------------------------------
    # Event handlers
    def mousePressEvent(self, event):  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self._press_value = self._value
        self._track_to(event.position().x())

    def mouseMoveEvent(self, event):  # type: ignore[override]
        if self._press_value is not None:
            self._track_to(event.position().x())

    def mouseReleaseEvent(self, event):  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton or self._press_value is None:
            super().mouseReleaseEvent(event)
            return
        start, self._press_value = self._press_value, None
        if not math.isclose(start, self._value, abs_tol=VALUE_TOLERANCE):
            self.valueCommitted.emit(self._value)

    def wheelEvent(self, event):  # type: ignore[override]
        notches = event.angleDelta().y() / 120.0
        if not self._step_to(self._value + notches * STEP):
            event.ignore()

    def keyPressEvent(self, event):  # type: ignore[override]
        key = event.key()
        if key in (Qt.Key.Key_Home, Qt.Key.Key_End):
            self._step_to(0.0 if key == Qt.Key.Key_Home else 1.0)
            return
        delta = _KEY_STEPS.get(key)
        if delta is None:
            super().keyPressEvent(event)
            return
        self._step_to(self._value + delta)

    def paintEvent(self, _):  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        track_height = self.track_height
        track_rect = QRectF(
            self.h_padding,
            (self.height() - track_height) / 2,
            self.width() - 2 * self.h_padding,
            track_height,
        )
        x_line = track_rect.left() + self._value * track_rect.width()

        round_path = QPainterPath()
        round_path.addRoundedRect(track_rect, self.corner_radius, self.corner_radius)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(SLIDER_BACKGROUND_COLOR)
        painter.drawPath(round_path)

        # Filled part left of the indicator, empty track to the right.
        painter.save()
        painter.setClipPath(round_path)
        filled = QRectF(track_rect.left(), track_rect.top(), max(0.0, x_line - track_rect.left()), track_height)
        painter.fillRect(filled, SLIDER_FILL_COLOR)
        empty = QRectF(x_line, track_rect.top(), max(0.0, track_rect.right() - x_line), track_height)
        painter.fillRect(empty, SLIDER_TRACK_COLOR)

        pen = QPen(SLIDER_INDICATOR_COLOR)
        pen.setWidth(self.line_width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        painter.setPen(pen)
        painter.drawLine(QPointF(x_line, track_rect.top()), QPointF(x_line, track_rect.bottom()))
        painter.restore()

        font = QFont(self.font())
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(SLIDER_TEXT_COLOR)
        text_rect = track_rect.adjusted(10, 0, -10, 0)
        painter.drawText(text_rect, Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft, self._name)
        painter.drawText(text_rect, Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignRight, f"{self._value:.2f}")

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _clamp(value: float) -> float:
        return max(0.0, min(1.0, float(value)))

    def _step_to(self, value: float) -> bool:
        """Jump to *value* and commit it when the position moved."""

        if not self.setValue(value):
            return False
        self.valueCommitted.emit(self._value)
        return True

    def _track_to(self, x: float) -> None:
        left = self.h_padding
        span = self.width() - 2 * self.h_padding
        if span > 0:
            self.setValue((x - left) / span)


__all__ = ["ParameterSlider"]
