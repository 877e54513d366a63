"""
Choice list with a two-step confirm gesture.

A single click only selects a choice (tentative). A double-click, or
confirm_selection() from the Confirm button, emits `confirmed` with the
choice's original index. Display order may be shuffled.
"""
from typing import List, Optional, Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QButtonGroup, QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_runner.core.models import Question
from quiz_runner.gui.styles.theme import Styles
from quiz_runner.gui.utils.markup import render_markup


class ChoiceButton(QPushButton):
    """Checkable choice button that also reports double-clicks."""

    doubleClicked = Signal()

    def __init__(self, original_index: int, html: str, parent=None):
        super().__init__(parent)
        self.original_index = original_index
        self.setCheckable(True)
        self.setStyleSheet(Styles.CHOICE_BUTTON)
        self.setMinimumHeight(44)

        # QPushButton has no rich text; host a label that ignores the mouse
        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 6, 14, 6)
        self.label = QLabel(html)
        self.label.setTextFormat(Qt.TextFormat.RichText)
        self.label.setWordWrap(True)
        self.label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        layout.addWidget(self.label)

    def mouseDoubleClickEvent(self, event):
        if self.isEnabled():
            self.setChecked(True)
            self.doubleClicked.emit()
        super().mouseDoubleClickEvent(event)


class ChoiceList(QWidget):
    """
    Vertical list of choices for one question.

    Signals:
        selectionChanged(int): Original index of the tentatively selected choice
        confirmed(int): Original index of a confirmed choice
    """

    selectionChanged = Signal(int)
    confirmed = Signal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(8)
        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._buttons: List[ChoiceButton] = []
        self._locked = False

    @property
    def buttons(self) -> List[ChoiceButton]:
        return list(self._buttons)

    @property
    def display_order(self) -> List[int]:
        """Original choice indices in the order they are shown."""
        return [b.original_index for b in self._buttons]

    def set_choices(self, question: Question, order: Sequence[int], selected: Optional[int] = None) -> None:
        """
        Show a question's choices.

        Args:
            question: Question whose choices to show
            order: Display order as original indices (see engine.choices)
            selected: Original index to pre-select, if any
        """
        for button in self._buttons:
            self._group.removeButton(button)
            self._layout.removeWidget(button)
            button.deleteLater()
        self._buttons = []

        for original_index in order:
            button = ChoiceButton(original_index, render_markup(question.choices[original_index]))
            button.clicked.connect(lambda _checked=False, b=button: self._on_clicked(b))
            button.doubleClicked.connect(lambda b=button: self._confirm(b))
            self._group.addButton(button)
            self._layout.addWidget(button)
            self._buttons.append(button)
            if selected is not None and original_index == selected:
                button.setChecked(True)

        self.set_locked(False)

    def selected_index(self) -> Optional[int]:
        """Original index of the checked choice, or None."""
        button = self._group.checkedButton()
        return button.original_index if button is not None else None

    def confirm_selection(self) -> bool:
        """Confirm the tentatively selected choice. Returns False if none."""
        button = self._group.checkedButton()
        if button is None or self._locked:
            return False
        self._confirm(button)
        return True

    def set_locked(self, locked: bool) -> None:
        """Lock the list while feedback is showing."""
        self._locked = locked
        for button in self._buttons:
            button.setEnabled(not locked)

    def _on_clicked(self, button: ChoiceButton) -> None:
        if not self._locked:
            self.selectionChanged.emit(button.original_index)

    def _confirm(self, button: ChoiceButton) -> None:
        if not self._locked:
            self.confirmed.emit(button.original_index)
