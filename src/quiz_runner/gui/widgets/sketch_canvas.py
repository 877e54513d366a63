"""
Freehand sketch overlay for working out answers.

Implements the engine's DrawingSurface: the engine clears it on every
question display; the toolbar drives tool, colour and the on/off toggle.
When disabled the canvas is transparent to the mouse so the content
beneath stays clickable.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QWidget

from quiz_runner.engine.listener import DrawingSurface
from quiz_runner.gui.styles.theme import Colors

PEN_WIDTH = 3.0
ERASER_WIDTH = 20.0
TOOLS = ("pen", "eraser")


@dataclass
class Stroke:
    """One continuous pen or eraser gesture."""
    tool: str
    color: str
    width: float
    points: List[QPointF] = field(default_factory=list)


class SketchCanvas(QWidget, DrawingSurface):
    """Transparent drawing layer holding a list of strokes."""
    
    def __init__(self, parent=None):
        QWidget.__init__(self, parent)
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground)
        self.setCursor(Qt.CursorShape.CrossCursor)
        self._strokes: List[Stroke] = []
        self._current: Optional[Stroke] = None
        self._tool = "pen"
        self._color = Colors.PEN_BLACK
        self._enabled = True
    
    # ─────────────────────────────────────────────────────────────────────────
    # DrawingSurface
    # ─────────────────────────────────────────────────────────────────────────
    
    def clear(self) -> None:
        self._strokes.clear()
        self._current = None
        self.update()
    
    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        if not enabled:
            self._current = None
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, not enabled)
    
    def set_tool(self, tool: str, color: Optional[str] = None) -> None:
        if tool not in TOOLS:
            raise ValueError(f"Unknown sketch tool: {tool!r}")
        self._tool = tool
        if color is not None:
            self._color = color
    
    # ─────────────────────────────────────────────────────────────────────────
    # Toolbar extras
    # ─────────────────────────────────────────────────────────────────────────
    
    @property
    def drawing_enabled(self) -> bool:
        return self._enabled
    
    @property
    def tool(self) -> str:
        return self._tool
    
    @property
    def color(self) -> str:
        return self._color
    
    @property
    def stroke_count(self) -> int:
        return len(self._strokes)
    
    def undo(self) -> bool:
        """Remove the most recent stroke. Returns False if there is none."""
        if not self._strokes:
            return False
        self._strokes.pop()
        self.update()
        return True
    
    # ─────────────────────────────────────────────────────────────────────────
    # Input
    # ─────────────────────────────────────────────────────────────────────────
    
    def mousePressEvent(self, event):
        if not self._enabled or event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        width = ERASER_WIDTH if self._tool == "eraser" else PEN_WIDTH
        self._current = Stroke(self._tool, self._color, width, [event.position()])
        self._strokes.append(self._current)
        self.update()
    
    def mouseMoveEvent(self, event):
        if self._current is None:
            super().mouseMoveEvent(event)
            return
        self._current.points.append(event.position())
        self.update()
    
    def mouseReleaseEvent(self, event):
        self._current = None
        super().mouseReleaseEvent(event)
    
    # ─────────────────────────────────────────────────────────────────────────
    # Painting
    # ─────────────────────────────────────────────────────────────────────────
    
    def paintEvent(self, event):
        if not self._strokes or self.width() <= 0 or self.height() <= 0:
            return
        
        # Strokes go onto a transparent layer so the eraser only removes ink
        layer = QImage(self.size(), QImage.Format.Format_ARGB32_Premultiplied)
        layer.fill(Qt.GlobalColor.transparent)
        layer_painter = QPainter(layer)
        layer_painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        for stroke in self._strokes:
            self._paint_stroke(layer_painter, stroke)
        layer_painter.end()
        
        painter = QPainter(self)
        painter.drawImage(0, 0, layer)
    
    def _paint_stroke(self, painter: QPainter, stroke: Stroke) -> None:
        if stroke.tool == "eraser":
            painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
            pen = QPen(Qt.GlobalColor.transparent, stroke.width)
        else:
            painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceOver)
            pen = QPen(QColor(stroke.color), stroke.width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        painter.setPen(pen)
        
        if len(stroke.points) == 1:
            painter.drawPoint(stroke.points[0])
            return
        path = QPainterPath(stroke.points[0])
        for point in stroke.points[1:]:
            path.lineTo(point)
        painter.drawPath(path)
