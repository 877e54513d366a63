"""
Main Window for the Quiz Runner GUI.

Presentation adapter for the quiz engine: renders what the QuizSession
tells it to and forwards user actions back as engine calls. It never
mutates session state directly.
"""
import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence

from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QButtonGroup, QFileDialog, QFrame, QHBoxLayout, QLabel, QMainWindow,
    QMessageBox, QPushButton, QStackedWidget, QToolButton, QVBoxLayout, QWidget
)

from quiz_runner import __version__
from quiz_runner.core.models import AnswerRecord, ErrorTag, Question, QuestionStatus, QuizMode
from quiz_runner.engine import (
    EngineConfig, QuestionSetError, QuizResults, QuizSession, Scheduler, SessionListener, choice_order
)
from quiz_runner.loading import DEFAULT_QUESTIONS_PATH, LoaderError, load_question_set
from quiz_runner.gui.models.settings import SettingsStore
from quiz_runner.gui.scheduler import QtScheduler
from quiz_runner.gui.styles.theme import Colors, Fonts, Styles
from quiz_runner.gui.utils.figures import FigureProvider, to_qpixmap
from quiz_runner.gui.utils.icons import MaterialIcons
from quiz_runner.gui.utils.logging_utils import StatusLogBridge
from quiz_runner.gui.utils.markup import render_formula, render_markup
from quiz_runner.gui.widgets.choice_list import ChoiceList
from quiz_runner.gui.widgets.feedback_overlay import FeedbackOverlay
from quiz_runner.gui.widgets.progress_bar import ProgressBar
from quiz_runner.gui.widgets.review_list import ReviewList
from quiz_runner.gui.widgets.sketch_canvas import SketchCanvas
from quiz_runner.gui.widgets.toggle_switch import ToggleSwitch

logger = logging.getLogger(__name__)

PAGE_START = 0
PAGE_QUIZ = 1
PAGE_RESULTS = 2


class MainWindow(QMainWindow, SessionListener):
    def __init__(
        self,
        settings: SettingsStore,
        questions_path: Optional[Path] = None,
        config: Optional[EngineConfig] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        QMainWindow.__init__(self)
        self.settings = settings
        self.config = config or EngineConfig(seed=settings.get_seed())
        self._rng = random.Random(self.config.seed)
        self.questions: List[Question] = []
        self.questions_path: Optional[Path] = None
        self.figures = FigureProvider()
        self.last_results: Optional[QuizResults] = None

        self.setWindowTitle("Quiz Runner")
        self.resize(1100, 800)
        self.setMinimumSize(800, 600)

        # --- Menu Bar ---
        file_menu = self.menuBar().addMenu("File")
        open_action = QAction("Open Questions...", self)
        open_action.setShortcut(QKeySequence.StandardKey.Open)
        open_action.triggered.connect(self._choose_questions_file)
        file_menu.addAction(open_action)
        exit_action = QAction("Quit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        help_menu = self.menuBar().addMenu("Help")
        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

        # --- Pages ---
        self.pages = QStackedWidget()
        self.pages.addWidget(self._build_start_screen())
        self.pages.addWidget(self._build_quiz_screen())
        self.pages.addWidget(self._build_results_screen())
        self.setCentralWidget(self.pages)

        self.session = QuizSession(
            self,
            scheduler or QtScheduler(self),
            self.config,
            drawing_surface=self.canvas,
        )

        # --- Logs -> status bar ---
        self.log_bridge = StatusLogBridge("quiz_runner", parent=self)
        self.log_bridge.messageReady.connect(self._show_log_message)

        self.canvas.set_enabled(self.settings.get_drawing_enabled())
        self.draw_toggle.setChecked(self.settings.get_drawing_enabled(), animate=False)
        self._update_draw_label()

        path = questions_path
        if path is None and self.settings.get_questions_path():
            path = Path(self.settings.get_questions_path())
        self.load_questions(path or DEFAULT_QUESTIONS_PATH)

    # ─────────────────────────────────────────────────────────────────────────
    # Screens
    # ─────────────────────────────────────────────────────────────────────────

    def _build_start_screen(self) -> QWidget:
        screen = QWidget()
        screen.setObjectName("screen")
        layout = QVBoxLayout(screen)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        title = QLabel("Quiz Runner")
        title.setStyleSheet(f"font-size: {Fonts.H1}; font-weight: bold;")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        self.source_label = QLabel("")
        self.source_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.source_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(self.source_label)

        self.last_round_label = QLabel("")
        self.last_round_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.last_round_label)

        buttons = QHBoxLayout()
        self.practice_button = QPushButton("Practice")
        self.practice_button.setStyleSheet(Styles.PRIMARY_BUTTON)
        self.practice_button.clicked.connect(lambda: self.start_session(QuizMode.PRACTICE))
        self.test_button = QPushButton("Test")
        self.test_button.setStyleSheet(Styles.PRIMARY_BUTTON)
        self.test_button.clicked.connect(lambda: self.start_session(QuizMode.TEST))
        buttons.addWidget(self.practice_button)
        buttons.addWidget(self.test_button)
        layout.addLayout(buttons)

        open_button = QPushButton("Open question file...")
        open_button.setIcon(MaterialIcons.open_file())
        open_button.setFlat(True)
        open_button.clicked.connect(self._choose_questions_file)
        layout.addWidget(open_button, alignment=Qt.AlignmentFlag.AlignCenter)
        return screen

    def _build_quiz_screen(self) -> QWidget:
        screen = QWidget()
        screen.setObjectName("screen")
        layout = QVBoxLayout(screen)

        # Header: mode + position
        header = QHBoxLayout()
        self.mode_label = QLabel("")
        self.mode_label.setStyleSheet("font-weight: bold;")
        self.position_label = QLabel("")
        header.addWidget(self.mode_label)
        header.addStretch()
        header.addWidget(self.position_label)
        layout.addLayout(header)

        self.progress_bar = ProgressBar()
        self.progress_bar.cellClicked.connect(self._on_progress_clicked)
        layout.addWidget(self.progress_bar)

        # Workspace: prompt + figure, with the sketch canvas on top
        self.workspace = QFrame()
        workspace_layout = QVBoxLayout(self.workspace)
        self.prompt_label = QLabel("")
        self.prompt_label.setTextFormat(Qt.TextFormat.RichText)
        self.prompt_label.setWordWrap(True)
        self.prompt_label.setStyleSheet(f"font-size: {Fonts.BODY};")
        workspace_layout.addWidget(self.prompt_label)
        self.figure_label = QLabel("")
        self.figure_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.figure_placeholder = QLabel("No figure")
        self.figure_placeholder.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.figure_placeholder.setStyleSheet(f"color: {Colors.TEXT_DISABLED};")
        workspace_layout.addWidget(self.figure_label, 1)
        workspace_layout.addWidget(self.figure_placeholder, 1)
        self.canvas = SketchCanvas(self.workspace)
        self.workspace.installEventFilter(self)
        layout.addWidget(self.workspace, 1)

        layout.addLayout(self._build_sketch_toolbar())

        self.choice_list = ChoiceList()
        self.choice_list.confirmed.connect(self._on_choice_confirmed)
        layout.addWidget(self.choice_list)

        self.confirm_button = QPushButton("Confirm")
        self.confirm_button.setIcon(MaterialIcons.confirm())
        self.confirm_button.setStyleSheet(Styles.PRIMARY_BUTTON)
        self.confirm_button.clicked.connect(self.choice_list.confirm_selection)
        layout.addWidget(self.confirm_button, alignment=Qt.AlignmentFlag.AlignRight)

        # Reference answer + explanation
        self.feedback_area = QFrame()
        self.feedback_area.setObjectName("feedbackArea")
        self.feedback_area.setStyleSheet(Styles.FEEDBACK_AREA)
        feedback_layout = QVBoxLayout(self.feedback_area)
        self.answer_label = QLabel("")
        self.answer_label.setTextFormat(Qt.TextFormat.RichText)
        self.explanation_label = QLabel("")
        self.explanation_label.setTextFormat(Qt.TextFormat.RichText)
        self.explanation_label.setWordWrap(True)
        feedback_layout.addWidget(self.answer_label)
        feedback_layout.addWidget(self.explanation_label)
        self.feedback_area.hide()
        layout.addWidget(self.feedback_area)

        self.overlay = FeedbackOverlay(screen)
        return screen

    def _build_sketch_toolbar(self) -> QHBoxLayout:
        bar = QHBoxLayout()
        self.tool_group = QButtonGroup(self)
        self.tool_group.setExclusive(True)

        self.pen_black_button = self._tool_button("Black pen", MaterialIcons.pen(Colors.PEN_BLACK))
        self.pen_black_button.setChecked(True)
        self.pen_black_button.clicked.connect(lambda: self.canvas.set_tool("pen", Colors.PEN_BLACK))
        self.pen_red_button = self._tool_button("Red pen", MaterialIcons.pen(Colors.PEN_RED))
        self.pen_red_button.clicked.connect(lambda: self.canvas.set_tool("pen", Colors.PEN_RED))
        self.eraser_button = self._tool_button("Eraser", MaterialIcons.eraser())
        self.eraser_button.clicked.connect(lambda: self.canvas.set_tool("eraser"))
        for button in (self.pen_black_button, self.pen_red_button, self.eraser_button):
            self.tool_group.addButton(button)
            bar.addWidget(button)

        undo_button = QToolButton()
        undo_button.setIcon(MaterialIcons.undo())
        undo_button.setToolTip("Undo stroke")
        undo_button.clicked.connect(self.canvas.undo)
        bar.addWidget(undo_button)

        clear_button = QToolButton()
        clear_button.setIcon(MaterialIcons.clear())
        clear_button.setToolTip("Clear sketch")
        clear_button.clicked.connect(self.canvas.clear)
        bar.addWidget(clear_button)

        bar.addStretch()
        self.draw_label = QLabel("")
        bar.addWidget(self.draw_label)
        self.draw_toggle = ToggleSwitch(checked=True)
        self.draw_toggle.toggled.connect(self._on_draw_toggled)
        bar.addWidget(self.draw_toggle)
        return bar

    def _tool_button(self, tooltip: str, icon) -> QToolButton:
        button = QToolButton()
        button.setIcon(icon)
        button.setToolTip(tooltip)
        button.setCheckable(True)
        return button

    def _build_results_screen(self) -> QWidget:
        screen = QWidget()
        screen.setObjectName("screen")
        layout = QVBoxLayout(screen)

        self.score_label = QLabel("")
        self.score_label.setStyleSheet(f"font-size: {Fonts.H1}; font-weight: bold;")
        layout.addWidget(self.score_label)

        self.review_list = ReviewList()
        self.review_list.tagToggled.connect(self._on_tag_toggled)
        layout.addWidget(self.review_list, 1)

        self.restart_button = QPushButton("Back to start")
        self.restart_button.setIcon(MaterialIcons.restart())
        self.restart_button.setStyleSheet(Styles.PRIMARY_BUTTON)
        self.restart_button.clicked.connect(self.restart)
        layout.addWidget(self.restart_button, alignment=Qt.AlignmentFlag.AlignRight)
        return screen

    # ─────────────────────────────────────────────────────────────────────────
    # Questions
    # ─────────────────────────────────────────────────────────────────────────

    def load_questions(self, path: Path) -> bool:
        """
        Load a question file; on failure keep the previous set.

        Returns True if the new set was loaded.
        """
        try:
            questions = load_question_set(path)
        except LoaderError as e:
            logger.error(str(e))
            QMessageBox.warning(self, "Could not load questions", str(e))
            self._update_start_buttons()
            return False

        self.questions = questions
        self.questions_path = Path(path)
        self.figures = FigureProvider(self.questions_path.parent)
        self.source_label.setText(f"{self.questions_path.name}: {len(questions)} questions")
        if self.questions_path != DEFAULT_QUESTIONS_PATH:
            self.settings.set_questions_path(str(self.questions_path))
        self._update_start_buttons()
        return True

    def _choose_questions_file(self) -> None:
        start_dir = str(self.questions_path.parent) if self.questions_path else ""
        filename, _ = QFileDialog.getOpenFileName(
            self, "Open question file", start_dir, "Question files (*.json)"
        )
        if filename:
            self.load_questions(Path(filename))

    def _update_start_buttons(self) -> None:
        has_questions = bool(self.questions)
        self.practice_button.setEnabled(has_questions)
        self.test_button.setEnabled(has_questions)

    # ─────────────────────────────────────────────────────────────────────────
    # User actions -> engine
    # ─────────────────────────────────────────────────────────────────────────

    def start_session(self, mode: QuizMode) -> bool:
        try:
            self.progress_bar.set_count(len(self.questions))
            self.mode_label.setText(mode.label)
            self.pages.setCurrentIndex(PAGE_QUIZ)
            self.session.start(mode, self.questions)
        except QuestionSetError as e:
            logger.error(f"Cannot start session: {e}")
            self.pages.setCurrentIndex(PAGE_START)
            QMessageBox.warning(self, "Cannot start", str(e))
            return False
        self.settings.set_last_mode(mode.value)
        return True

    def restart(self) -> None:
        self.session.restart()
        self.overlay.clear()
        self.pages.setCurrentIndex(PAGE_START)

    def _on_choice_confirmed(self, original_index: int) -> None:
        self.session.submit_answer(original_index)

    def _on_progress_clicked(self, index: int) -> None:
        # Denied jumps are silently ignored by the engine
        self.session.jump_to(index)

    def _on_tag_toggled(self, question_id: str, tag: ErrorTag) -> None:
        stored = self.session.set_error_tag(question_id, tag)
        self.review_list.set_tag(question_id, stored)

    def _on_draw_toggled(self, enabled: bool) -> None:
        self.canvas.set_enabled(enabled)
        self.settings.set_drawing_enabled(enabled)
        self._update_draw_label()

    def _update_draw_label(self) -> None:
        self.draw_label.setText("Draw: ON" if self.canvas.drawing_enabled else "Draw: OFF")

    # ─────────────────────────────────────────────────────────────────────────
    # SessionListener
    # ─────────────────────────────────────────────────────────────────────────

    def on_display_question(
        self, question: Question, answer: Optional[AnswerRecord], mode: QuizMode
    ) -> None:
        index = self.session.current_index or 0
        self.position_label.setText(f"Question {index + 1} / {len(self.session.questions)}")
        self.prompt_label.setText(render_markup(question.prompt))
        self._show_figure(question)

        order = choice_order(question, self._rng, shuffle=self.config.shuffle_choices)
        selected = answer.selected_choice_index if answer is not None else None
        self.choice_list.set_choices(question, order, selected=selected)
        self.confirm_button.setEnabled(True)

        self.overlay.clear()
        self.feedback_area.hide()

    def on_feedback(self, is_correct: bool) -> None:
        self.choice_list.set_locked(True)
        self.confirm_button.setEnabled(False)
        self.overlay.show_result(is_correct)

    def on_explanation(self, question: Question, answer: AnswerRecord) -> None:
        self.overlay.clear()
        self.answer_label.setText(f"<b>Answer:</b> {render_formula(question.answer_expression)}")
        self.explanation_label.setText(render_markup(question.explanation))
        self.feedback_area.show()

    def on_progress_update(self, statuses: Sequence[QuestionStatus]) -> None:
        self.progress_bar.set_statuses(statuses)

    def on_finished(self, results: QuizResults) -> None:
        self.last_results = results
        self.overlay.clear()
        if results.mode is QuizMode.TEST:
            self.score_label.setText(results.score_text)
            self.review_list.set_results(results)
            self.pages.setCurrentIndex(PAGE_RESULTS)
        else:
            self.last_round_label.setText(f"Practice round finished! {results.score_text}")
            self.statusBar().showMessage("Practice round finished!", 4000)
            self.restart()

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _show_figure(self, question: Question) -> None:
        image = self.figures.get(question.figure_ref)
        if image is None:
            self.figure_label.clear()
            self.figure_label.hide()
            self.figure_placeholder.show()
            return
        self.figure_label.setPixmap(to_qpixmap(image))
        self.figure_label.show()
        self.figure_placeholder.hide()

    def eventFilter(self, obj, event):
        # Keep the sketch canvas covering the workspace
        if obj is self.workspace and event.type() == QEvent.Type.Resize:
            self.canvas.setGeometry(self.workspace.rect())
            self.canvas.raise_()
        return super().eventFilter(obj, event)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self.overlay.isVisible():
            self.overlay.setGeometry(self.overlay.parentWidget().rect())

    def _show_log_message(self, message: str, level: str) -> None:
        # Warnings stay until replaced
        timeout = 0 if level in ("WARNING", "ERROR", "CRITICAL") else 4000
        self.statusBar().showMessage(message, timeout)

    def _show_about(self) -> None:
        QMessageBox.about(
            self,
            "About Quiz Runner",
            f"Quiz Runner {__version__}\n\n"
            "Practice mode: instant feedback, free navigation.\n"
            "Test mode: results at the end, one step back allowed.",
        )

    def closeEvent(self, event):
        self.session.restart()
        self.log_bridge.stop()
        super().closeEvent(event)
