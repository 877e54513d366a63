"""
Module: engine.session

Purpose:
    The quiz session engine. Owns the mutable session state (mode, current
    index, answer map), sequences submit -> feedback -> advance, applies the
    navigation policy and hands results to the listener when the last
    question is passed.

    NOT_STARTED -> IN_PROGRESS -> FINISHED, back to NOT_STARTED on restart().

Key Classes:
    - QuizSession: The engine
    - SessionState: Explicit per-session state value
    - QuestionSetError: Rejected session start

Dependencies:
    - engine.feedback: Timed PRACTICE feedback
    - engine.navigation: Jump policy
    - engine.scoring: Results and error tags

Used By:
    - gui.main_window.MainWindow
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence

from quiz_runner.core.models import (
    AnswerRecord,
    ErrorTag,
    Question,
    QuestionStatus,
    QuizMode,
    SessionPhase,
)

from .config import EngineConfig
from .feedback import FeedbackSequence
from .listener import DrawingSurface, SessionListener
from .navigation import can_navigate
from .scheduler import Scheduler
from .scoring import QuizResults, compute_results, toggle_error_tag

logger = logging.getLogger(__name__)


class QuestionSetError(Exception):
    """Question set cannot be used to start a session."""
    pass


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SessionState:
    """
    State of one run through the question set.
    
    Created by QuizSession.start() and discarded on restart. Only the
    engine mutates it.
    
    Attributes:
        mode: PRACTICE or TEST
        questions: The question set (read-only)
        current_index: Index of the question on screen
        answers: At most one record per question id
        revisiting: The question on screen was displayed with an existing
            PRACTICE record; resubmitting it updates silently
    """
    mode: QuizMode
    questions: tuple[Question, ...]
    current_index: int = 0
    answers: Dict[str, AnswerRecord] = field(default_factory=dict)
    revisiting: bool = False
    
    @property
    def current_question(self) -> Question:
        return self.questions[self.current_index]
    
    @property
    def last_index(self) -> int:
        return len(self.questions) - 1


class QuizSession:
    """
    Quiz session engine.
    
    All operations are safe to call in any phase: calls that do not apply
    (submitting before start, jumping after finish, a denied jump) are
    ignored and return False. Only start() can raise.
    
    Example:
        >>> session = QuizSession(listener, VirtualScheduler())
        >>> session.start(QuizMode.TEST, questions)
        >>> session.submit_answer(1)
        True
        >>> session.current_index
        1
    """
    
    def __init__(
        self,
        listener: Optional[SessionListener],
        scheduler: Scheduler,
        config: Optional[EngineConfig] = None,
        drawing_surface: Optional[DrawingSurface] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self._listener = listener or SessionListener()
        self._drawing_surface = drawing_surface
        self._clock = clock or _utc_now
        self._feedback = FeedbackSequence(
            scheduler,
            indicator_ms=self.config.indicator_ms,
            explanation_hold_ms=self.config.explanation_hold_ms,
        )
        self._state: Optional[SessionState] = None
        self._phase = SessionPhase.NOT_STARTED
    
    # ─────────────────────────────────────────────────────────────────────────
    # Read-only views
    # ─────────────────────────────────────────────────────────────────────────
    
    @property
    def phase(self) -> SessionPhase:
        return self._phase
    
    @property
    def mode(self) -> Optional[QuizMode]:
        return self._state.mode if self._state else None
    
    @property
    def questions(self) -> tuple[Question, ...]:
        return self._state.questions if self._state else ()
    
    @property
    def current_index(self) -> Optional[int]:
        return self._state.current_index if self._state else None
    
    @property
    def current_question(self) -> Optional[Question]:
        return self._state.current_question if self._state else None
    
    @property
    def answers(self) -> Dict[str, AnswerRecord]:
        """Copy of the answer map (records are immutable)."""
        return dict(self._state.answers) if self._state else {}
    
    @property
    def feedback_pending(self) -> bool:
        return self._feedback.is_pending
    
    def set_drawing_surface(self, surface: Optional[DrawingSurface]) -> None:
        self._drawing_surface = surface
    
    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────
    
    def start(self, mode: QuizMode, questions: Sequence[Question]) -> None:
        """
        Start a fresh session and display question 0.
        
        Any previous session (including a pending feedback sequence) is
        discarded first.
        
        Args:
            mode: PRACTICE or TEST
            questions: Question set, at least one question, unique ids
            
        Raises:
            QuestionSetError: If the set is empty, holds a non-Question,
                or repeats an id
        """
        question_set = tuple(questions)
        _check_question_set(question_set)
        
        self._feedback.cancel()
        self._state = SessionState(mode=mode, questions=question_set)
        self._phase = SessionPhase.IN_PROGRESS
        logger.info(f"Started {mode.value} session with {len(question_set)} questions")
        self._display()
    
    def restart(self) -> None:
        """
        Discard the session and return to NOT_STARTED.
        
        A pending auto-advance is cancelled so it cannot fire against the
        next session.
        """
        if self._phase is SessionPhase.NOT_STARTED:
            return
        self._feedback.cancel()
        self._state = None
        self._phase = SessionPhase.NOT_STARTED
        logger.info("Session reset")
    
    # ─────────────────────────────────────────────────────────────────────────
    # User actions
    # ─────────────────────────────────────────────────────────────────────────
    
    def submit_answer(self, selected_choice_index: int) -> bool:
        """
        Record a confirmed answer for the current question.
        
        Overwrites any earlier record for the question (dropping its error
        tag). PRACTICE runs the feedback sequence and then advances; TEST
        advances immediately. A PRACTICE question that was displayed with
        an existing record is updated in place: the explanation is shown
        again with no indicator and no advance.
        
        Args:
            selected_choice_index: Chosen index in original choice order
            
        Returns:
            True if the submission was recorded, False if ignored
        """
        if self._phase is not SessionPhase.IN_PROGRESS or self._state is None:
            logger.debug(f"Ignoring submission in phase {self._phase.value}")
            return False
        if self._feedback.is_pending:
            logger.debug("Ignoring submission while feedback is showing")
            return False
        
        state = self._state
        question = state.current_question
        if (
            isinstance(selected_choice_index, bool)
            or not isinstance(selected_choice_index, int)
            or not question.is_valid_choice(selected_choice_index)
        ):
            logger.warning(
                f"Ignoring invalid choice {selected_choice_index!r} for question {question.id!r}"
            )
            return False
        
        record = AnswerRecord(
            question_id=question.id,
            selected_choice_index=selected_choice_index,
            is_correct=question.is_correct(selected_choice_index),
            timestamp=self._clock(),
        )
        replaced = question.id in state.answers
        state.answers[question.id] = record
        logger.info(
            f"Q{state.current_index + 1} ({question.id}) answered "
            f"{'correctly' if record.is_correct else 'incorrectly'}"
            f"{' (resubmitted)' if replaced else ''}"
        )
        
        if state.mode is QuizMode.PRACTICE and state.revisiting:
            self._listener.on_explanation(question, record)
            self._listener.on_progress_update(self.progress())
        elif state.mode is QuizMode.PRACTICE:
            self._listener.on_feedback(record.is_correct)
            self._feedback.start(
                on_explanation=lambda: self._show_explanation(question),
                on_advance=self._advance,
            )
        else:
            self._advance()
        return True
    
    def jump_to(self, target_index: int) -> bool:
        """
        User-initiated navigation to another question.
        
        Denied jumps (out of range, against the mode's policy, or while
        feedback is showing) change nothing.
        
        Args:
            target_index: Index to display
            
        Returns:
            True if the jump happened
        """
        if self._phase is not SessionPhase.IN_PROGRESS or self._state is None:
            return False
        if self._feedback.is_pending:
            logger.debug(f"Ignoring jump to {target_index} while feedback is showing")
            return False
        
        state = self._state
        if not (0 <= target_index < len(state.questions)):
            logger.debug(f"Ignoring jump to out-of-range index {target_index}")
            return False
        if not can_navigate(state.mode, state.current_index, target_index):
            logger.debug(
                f"Jump {state.current_index} -> {target_index} not allowed in {state.mode.value} mode"
            )
            return False
        
        state.current_index = target_index
        self._display()
        return True
    
    def set_error_tag(self, question_id: str, tag: ErrorTag) -> Optional[ErrorTag]:
        """
        Toggle an error-cause tag on an incorrect answer.
        
        Args:
            question_id: Question to tag
            tag: Tag to toggle
            
        Returns:
            The tag now stored, or None (cleared, or not taggable)
        """
        if self._state is None:
            return None
        return toggle_error_tag(self._state.answers, question_id, tag)
    
    # ─────────────────────────────────────────────────────────────────────────
    # Derived views
    # ─────────────────────────────────────────────────────────────────────────
    
    def results(self) -> Optional[QuizResults]:
        """Score the current answers (None before start / after restart)."""
        if self._state is None:
            return None
        return compute_results(self._state.questions, self._state.answers, self._state.mode)
    
    def progress(self) -> List[QuestionStatus]:
        """Status of each question in order (empty before start)."""
        if self._state is None:
            return []
        state = self._state
        statuses = []
        for i, q in enumerate(state.questions):
            record = state.answers.get(q.id)
            if i == state.current_index and self._phase is SessionPhase.IN_PROGRESS:
                statuses.append(QuestionStatus.CURRENT)
            elif record is None:
                statuses.append(QuestionStatus.UNVISITED)
            elif state.mode is QuizMode.TEST:
                statuses.append(QuestionStatus.ANSWERED)
            else:
                statuses.append(QuestionStatus.CORRECT if record.is_correct else QuestionStatus.INCORRECT)
        return statuses
    
    # ─────────────────────────────────────────────────────────────────────────
    # Internal sequencing
    # ─────────────────────────────────────────────────────────────────────────
    
    def _display(self) -> None:
        state = self._state
        question = state.current_question
        answer = state.answers.get(question.id)
        
        state.revisiting = state.mode is QuizMode.PRACTICE and answer is not None
        self._listener.on_display_question(question, answer, state.mode)
        if self._drawing_surface is not None:
            self._drawing_surface.clear()
        # Revisited PRACTICE questions show their explanation straight away
        if state.mode is QuizMode.PRACTICE and answer is not None:
            self._listener.on_explanation(question, answer)
        self._listener.on_progress_update(self.progress())
    
    def _show_explanation(self, question: Question) -> None:
        if self._state is None:
            return
        answer = self._state.answers.get(question.id)
        if answer is not None:
            self._listener.on_explanation(question, answer)
    
    def _advance(self) -> None:
        if self._phase is not SessionPhase.IN_PROGRESS or self._state is None:
            return
        state = self._state
        if state.current_index >= state.last_index:
            self._finish()
        else:
            state.current_index += 1
            self._display()
    
    def _finish(self) -> None:
        self._phase = SessionPhase.FINISHED
        results = self.results()
        logger.info(f"{self._state.mode.value.capitalize()} session finished: {results.score_text}")
        self._listener.on_progress_update(self.progress())
        self._listener.on_finished(results)


def _check_question_set(questions: tuple) -> None:
    if not questions:
        raise QuestionSetError("Question set is empty")
    
    seen: set[str] = set()
    for i, q in enumerate(questions):
        if not isinstance(q, Question):
            raise QuestionSetError(f"Entry {i} is not a Question: {type(q).__name__}")
        if q.id in seen:
            raise QuestionSetError(f"Duplicate question id: {q.id!r}")
        seen.add(q.id)
