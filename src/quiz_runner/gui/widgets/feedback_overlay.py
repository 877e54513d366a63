"""
Correctness indicator overlay (large circle or cross).

Shown while the engine's feedback sequence is in its indicator phase.
Ignores the mouse so it never blocks the widgets beneath it.
"""
from typing import Optional

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QWidget

from quiz_runner.gui.styles.theme import Colors


class FeedbackOverlay(QWidget):
    """Full-size transparent overlay that paints the indicator."""
    
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground)
        self._is_correct: Optional[bool] = None
        self.hide()
    
    @property
    def is_correct(self) -> Optional[bool]:
        """Result currently shown (None when hidden)."""
        return self._is_correct
    
    def show_result(self, is_correct: bool) -> None:
        self._is_correct = is_correct
        if self.parentWidget() is not None:
            self.setGeometry(self.parentWidget().rect())
        self.raise_()
        self.show()
        self.update()
    
    def clear(self) -> None:
        self._is_correct = None
        self.hide()
    
    def paintEvent(self, event):
        if self._is_correct is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        
        size = min(self.width(), self.height()) * 0.4
        rect = QRectF((self.width() - size) / 2, (self.height() - size) / 2, size, size)
        color = QColor(Colors.SUCCESS if self._is_correct else Colors.ERROR)
        pen = QPen(color, max(6.0, size / 10))
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        
        if self._is_correct:
            painter.drawEllipse(rect)
        else:
            painter.drawLine(rect.topLeft(), rect.bottomRight())
            painter.drawLine(rect.topRight(), rect.bottomLeft())
