"""
Progress bar of numbered question cells.

Each cell reflects a QuestionStatus and is clickable; clicks are passed to
the engine as jump requests, which it may silently refuse.
"""
from typing import List, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from quiz_runner.core.models import QuestionStatus
from quiz_runner.gui.styles.theme import Colors, PROGRESS_COLORS


class ProgressBar(QWidget):
    """Row of numbered cells, one per question."""
    
    cellClicked = Signal(int)
    
    def __init__(self, parent=None):
        super().__init__(parent)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(4)
        self._layout.addStretch()
        self._cells: List[QPushButton] = []
        self._statuses: List[QuestionStatus] = []
    
    @property
    def cells(self) -> List[QPushButton]:
        return list(self._cells)
    
    @property
    def statuses(self) -> List[QuestionStatus]:
        return list(self._statuses)
    
    def set_count(self, count: int) -> None:
        """Rebuild the cells for a question set of the given size."""
        for cell in self._cells:
            self._layout.removeWidget(cell)
            cell.deleteLater()
        self._cells = []
        self._statuses = [QuestionStatus.UNVISITED] * count
        
        for i in range(count):
            cell = QPushButton(str(i + 1))
            cell.setFixedSize(32, 32)
            cell.setCursor(Qt.CursorShape.PointingHandCursor)
            cell.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            cell.clicked.connect(lambda _checked=False, index=i: self.cellClicked.emit(index))
            # Insert before the trailing stretch
            self._layout.insertWidget(self._layout.count() - 1, cell)
            self._cells.append(cell)
        self._restyle()
    
    def set_statuses(self, statuses: Sequence[QuestionStatus]) -> None:
        if len(statuses) != len(self._cells):
            self.set_count(len(statuses))
        self._statuses = list(statuses)
        self._restyle()
    
    def _restyle(self) -> None:
        for cell, status in zip(self._cells, self._statuses):
            bg, fg = PROGRESS_COLORS[status.value]
            border = Colors.PRIMARY_BLUE if status is QuestionStatus.CURRENT else Colors.BORDER
            cell.setStyleSheet(
                f"QPushButton {{ background-color: {bg}; color: {fg}; "
                f"border: 1px solid {border}; border-radius: 16px; font-weight: bold; }}"
            )
            cell.setProperty("status", status.value)
