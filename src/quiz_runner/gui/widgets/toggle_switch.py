"""
Sketch on/off switch.

A pill-shaped switch with the state written inside the track ("ON"/"OFF"),
used for the sketch overlay. Clicking or pressing Space flips it; the
thumb slides with a short animation.
"""
from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, Signal, QPropertyAnimation, QEasingCurve, Property, QRectF
from PySide6.QtGui import QPainter, QColor, QFont, QPen

from quiz_runner.gui.styles.theme import Colors

TRACK_WIDTH = 60
TRACK_HEIGHT = 26
THUMB_MARGIN = 3


class ToggleSwitch(QWidget):
    """
    Two-state switch with a text label in the track.

    Signals:
        toggled(bool): Emitted when the state changes
    """

    toggled = Signal(bool)

    def __init__(self, checked: bool = False, parent=None):
        super().__init__(parent)
        self._checked = checked
        self._offset = 1.0 if checked else 0.0

        self.setFixedSize(TRACK_WIDTH, TRACK_HEIGHT)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self._update_tooltip()

        self._slide = QPropertyAnimation(self, b"offset", self)
        self._slide.setDuration(150)
        self._slide.setEasingCurve(QEasingCurve.Type.OutCubic)

    def _get_offset(self) -> float:
        return self._offset

    def _set_offset(self, value: float) -> None:
        self._offset = value
        self.update()

    # 0.0 = thumb at the left (off), 1.0 = right (on)
    offset = Property(float, _get_offset, _set_offset)

    def isChecked(self) -> bool:
        return self._checked

    def setChecked(self, checked: bool, animate: bool = True) -> None:
        if checked == self._checked:
            return
        self._checked = checked
        self._update_tooltip()
        target = 1.0 if checked else 0.0
        self._slide.stop()
        if animate:
            self._slide.setStartValue(self._offset)
            self._slide.setEndValue(target)
            self._slide.start()
        else:
            self._set_offset(target)
        self.toggled.emit(checked)

    def toggle(self) -> None:
        self.setChecked(not self._checked)

    def _update_tooltip(self) -> None:
        self.setToolTip("Sketching on" if self._checked else "Sketching off")

    # ─────────────────────────────────────────────────────────────────────────
    # Input
    # ─────────────────────────────────────────────────────────────────────────

    def mouseReleaseEvent(self, event):
        # Releasing outside the track cancels the click
        if (
            self.isEnabled()
            and event.button() == Qt.MouseButton.LeftButton
            and self.rect().contains(event.position().toPoint())
        ):
            self.toggle()
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event):
        if self.isEnabled() and event.key() in (Qt.Key.Key_Space, Qt.Key.Key_Return):
            self.toggle()
            return
        super().keyPressEvent(event)

    # ─────────────────────────────────────────────────────────────────────────
    # Painting
    # ─────────────────────────────────────────────────────────────────────────

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        track = QRectF(self.rect())
        radius = track.height() / 2

        if not self.isEnabled():
            track_color = QColor(Colors.DISABLED_BG)
        else:
            track_color = QColor(Colors.TOGGLE_BG if self._checked else Colors.BORDER)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(track_color)
        painter.drawRoundedRect(track, radius, radius)

        diameter = track.height() - 2 * THUMB_MARGIN
        travel = track.width() - diameter - 2 * THUMB_MARGIN
        thumb = QRectF(THUMB_MARGIN + travel * self._offset, THUMB_MARGIN, diameter, diameter)

        # State text sits on the side the thumb is not covering
        font = QFont(self.font())
        font.setPointSizeF(7.5)
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(QColor(Colors.TEXT_ON_PRIMARY if self._checked else Colors.TEXT_SECONDARY))
        if self._checked:
            text_rect = QRectF(THUMB_MARGIN, 0, travel, track.height())
        else:
            text_rect = QRectF(diameter + THUMB_MARGIN, 0, travel, track.height())
        painter.drawText(text_rect, Qt.AlignmentFlag.AlignCenter, "ON" if self._checked else "OFF")

        painter.setPen(QPen(QColor(0, 0, 0, 30), 1))
        painter.setBrush(QColor(Colors.SURFACE))
        painter.drawEllipse(thumb)
        painter.end()
