"""
Results review list.

One card per question in question-set order: correctness header, prompt,
reference answer, and error-cause tag buttons for incorrect answers.
Tag clicks are reported via `tagToggled`; the caller applies them to the
session and pushes the stored tag back with set_tag().
"""
from typing import Dict, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget
)

from quiz_runner.core.models import ErrorTag
from quiz_runner.engine.scoring import QuizResults, ReviewEntry
from quiz_runner.gui.styles.theme import Colors, Styles
from quiz_runner.gui.utils.icons import MaterialIcons
from quiz_runner.gui.utils.markup import render_formula, render_markup


class ReviewList(QScrollArea):
    """Scrollable list of review cards."""
    
    tagToggled = Signal(str, object)  # question_id, ErrorTag
    
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self._container = QWidget()
        self._layout = QVBoxLayout(self._container)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        self._layout.setSpacing(10)
        self.setWidget(self._container)
        self._tag_buttons: Dict[str, Dict[ErrorTag, QPushButton]] = {}
        self._headers: Dict[str, QLabel] = {}
    
    @property
    def entry_count(self) -> int:
        return len(self._headers)
    
    def tag_buttons(self, question_id: str) -> Dict[ErrorTag, QPushButton]:
        return dict(self._tag_buttons.get(question_id, {}))
    
    def header_text(self, question_id: str) -> str:
        label = self._headers.get(question_id)
        return label.text() if label is not None else ""
    
    def set_results(self, results: QuizResults) -> None:
        while self._layout.count():
            item = self._layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        self._tag_buttons = {}
        self._headers = {}
        
        for entry in results.review_entries:
            self._layout.addWidget(self._build_card(entry))
    
    def set_tag(self, question_id: str, tag: Optional[ErrorTag]) -> None:
        """Reflect the stored tag: at most one button checked."""
        for button_tag, button in self._tag_buttons.get(question_id, {}).items():
            button.setChecked(button_tag is tag)
    
    def _build_card(self, entry: ReviewEntry) -> QWidget:
        card = QFrame()
        card.setObjectName("reviewCard")
        card.setStyleSheet(
            f"QFrame#reviewCard {{ background-color: {Colors.SURFACE}; "
            f"border: 1px solid {Colors.BORDER}; border-radius: 6px; }}"
        )
        layout = QVBoxLayout(card)
        
        if entry.is_correct:
            verdict, color = "Correct", Colors.SUCCESS
        elif entry.is_answered:
            verdict, color = "Incorrect", Colors.ERROR
        else:
            verdict, color = "Unanswered", Colors.ERROR
        header_row = QHBoxLayout()
        icon = MaterialIcons.correct() if entry.is_correct else MaterialIcons.incorrect()
        icon_label = QLabel()
        icon_label.setPixmap(icon.pixmap(18, 18))
        header_row.addWidget(icon_label)
        header = QLabel(f"Q{entry.index + 1}. {verdict}")
        header.setStyleSheet(f"font-weight: bold; color: {color};")
        header_row.addWidget(header)
        header_row.addStretch()
        layout.addLayout(header_row)
        self._headers[entry.question.id] = header
        
        prompt = QLabel(render_markup(entry.question.prompt))
        prompt.setTextFormat(Qt.TextFormat.RichText)
        prompt.setWordWrap(True)
        layout.addWidget(prompt)
        
        if entry.question.answer_expression:
            answer = QLabel(f"Answer: {render_formula(entry.question.answer_expression)}")
            answer.setTextFormat(Qt.TextFormat.RichText)
            layout.addWidget(answer)
        
        if not entry.is_correct:
            layout.addLayout(self._build_tag_row(entry))
        return card
    
    def _build_tag_row(self, entry: ReviewEntry) -> QHBoxLayout:
        row = QHBoxLayout()
        caption = QLabel("Cause:")
        caption.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        row.addWidget(caption)
        
        buttons: Dict[ErrorTag, QPushButton] = {}
        for tag in ErrorTag:
            button = QPushButton(tag.label)
            button.setCheckable(True)
            button.setStyleSheet(Styles.TAG_BUTTON)
            button.setChecked(entry.error_tag is tag)
            # Unanswered questions have no record to tag
            button.setEnabled(entry.can_tag)
            qid = entry.question.id
            button.clicked.connect(lambda _checked=False, q=qid, t=tag: self.tagToggled.emit(q, t))
            row.addWidget(button)
            buttons[tag] = button
        row.addStretch()
        self._tag_buttons[entry.question.id] = buttons
        return row
