"""
Module: engine.listener

Purpose:
    Narrow callback interfaces between the engine and its collaborators.
    The engine never shares mutable state with the presentation layer;
    it only calls these methods with immutable values.

Key Classes:
    - SessionListener: Render/feedback/progress/completion callbacks
    - DrawingSurface: Sketch overlay collaborator

Used By:
    - engine.session.QuizSession
    - gui.main_window.MainWindow (SessionListener)
    - gui.widgets.sketch_canvas.SketchCanvas (DrawingSurface)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from quiz_runner.core.models import AnswerRecord, Question, QuestionStatus, QuizMode

if TYPE_CHECKING:
    from .scoring import QuizResults


class SessionListener:
    """
    Receives render instructions from a QuizSession.
    
    Every method is a no-op by default so listeners only override what
    they display.
    """
    
    def on_display_question(
        self, question: Question, answer: Optional[AnswerRecord], mode: QuizMode
    ) -> None:
        """The active question changed. The drawing surface is cleared next."""
    
    def on_feedback(self, is_correct: bool) -> None:
        """PRACTICE only: show the correctness indicator."""
    
    def on_explanation(self, question: Question, answer: AnswerRecord) -> None:
        """PRACTICE only: show the reference answer and explanation."""
    
    def on_progress_update(self, statuses: Sequence[QuestionStatus]) -> None:
        """Per-question status, in question order."""
    
    def on_finished(self, results: QuizResults) -> None:
        """The last question was advanced past. Called once per session."""


class DrawingSurface:
    """
    Freehand sketch overlay.
    
    The engine only calls clear(); the rest is driven by the toolbar.
    A plain base class (not an ABC) so Qt widgets can implement it.
    """
    
    def clear(self) -> None:
        """Erase all strokes."""
        raise NotImplementedError
    
    def set_enabled(self, enabled: bool) -> None:
        """Accept or ignore pointer input."""
        raise NotImplementedError
    
    def set_tool(self, tool: str, color: Optional[str] = None) -> None:
        """Select "pen" (with a colour) or "eraser"."""
        raise NotImplementedError
