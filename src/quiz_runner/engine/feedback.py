"""
Module: engine.feedback

Purpose:
    PRACTICE-mode feedback sequence as a small state machine:
    IDLE -> SHOWING_INDICATOR -> SHOWING_EXPLANATION -> ADVANCING -> IDLE

    Driven by a Scheduler so it can run on a Qt event loop or a virtual
    clock. At most one sequence is outstanding at a time.

Key Classes:
    - FeedbackPhase: States of the sequence
    - FeedbackSequence: Runs indicator -> explanation -> advance

Used By:
    - engine.session.QuizSession
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from .scheduler import ScheduledCall, Scheduler

logger = logging.getLogger(__name__)


class FeedbackPhase(Enum):
    IDLE = "idle"
    SHOWING_INDICATOR = "showing_indicator"
    SHOWING_EXPLANATION = "showing_explanation"
    ADVANCING = "advancing"


class FeedbackSequence:
    """
    Timed indicator/explanation/advance sequence.
    
    The caller shows the indicator itself, then calls start(). After
    indicator_ms the on_explanation callback runs; after a further
    explanation_hold_ms the on_advance callback runs and the sequence
    returns to IDLE.
    
    cancel() drops any pending step. Only session teardown should call it.
    
    Attributes:
        phase: Current FeedbackPhase
    """
    
    def __init__(self, scheduler: Scheduler, indicator_ms: int, explanation_hold_ms: int) -> None:
        self._scheduler = scheduler
        self._indicator_ms = indicator_ms
        self._explanation_hold_ms = explanation_hold_ms
        self._pending: Optional[ScheduledCall] = None
        self._on_explanation: Optional[Callable[[], None]] = None
        self._on_advance: Optional[Callable[[], None]] = None
        self.phase = FeedbackPhase.IDLE
    
    @property
    def is_pending(self) -> bool:
        """True from start() until the advance step has completed."""
        return self.phase is not FeedbackPhase.IDLE
    
    def start(self, on_explanation: Callable[[], None], on_advance: Callable[[], None]) -> None:
        """
        Begin a sequence.
        
        Args:
            on_explanation: Called when the indicator period ends
            on_advance: Called when the explanation hold ends
            
        Raises:
            RuntimeError: If a sequence is already outstanding
        """
        if self.is_pending:
            raise RuntimeError(f"feedback sequence already running ({self.phase.value})")
        self._on_explanation = on_explanation
        self._on_advance = on_advance
        self.phase = FeedbackPhase.SHOWING_INDICATOR
        self._pending = self._scheduler.call_later(self._indicator_ms, self._indicator_done)
    
    def cancel(self) -> None:
        """Drop any pending step and return to IDLE."""
        if self._pending is not None:
            self._pending.cancel()
        if self.is_pending:
            logger.debug(f"Feedback sequence cancelled during {self.phase.value}")
        self._reset()
    
    def _indicator_done(self) -> None:
        self.phase = FeedbackPhase.SHOWING_EXPLANATION
        self._pending = self._scheduler.call_later(self._explanation_hold_ms, self._hold_done)
        if self._on_explanation is not None:
            self._on_explanation()
    
    def _hold_done(self) -> None:
        self.phase = FeedbackPhase.ADVANCING
        self._pending = None
        on_advance = self._on_advance
        self._on_explanation = None
        self._on_advance = None
        try:
            if on_advance is not None:
                on_advance()
        finally:
            # on_advance may already have cancelled or restarted the sequence
            if self.phase is FeedbackPhase.ADVANCING:
                self.phase = FeedbackPhase.IDLE
    
    def _reset(self) -> None:
        self._pending = None
        self._on_explanation = None
        self._on_advance = None
        self.phase = FeedbackPhase.IDLE
