"""
Module: session

Purpose:
    Enums describing quiz mode, session lifecycle and per-question progress.

Used By:
    - engine.session.QuizSession
    - engine.navigation
    - gui.widgets.progress_bar
"""

from enum import Enum


class QuizMode(Enum):
    """
    How a session behaves.
    
    Attributes:
        PRACTICE: Immediate feedback, free navigation
        TEST: No feedback until the end, only one step back allowed
    """
    
    PRACTICE = "practice"
    TEST = "test"
    
    @property
    def label(self) -> str:
        return "Practice Mode" if self is QuizMode.PRACTICE else "Test Mode"


class SessionPhase(Enum):
    """Lifecycle of a QuizSession: NOT_STARTED -> IN_PROGRESS -> FINISHED."""
    
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class QuestionStatus(Enum):
    """
    Progress state of one question as shown in the progress bar.
    
    Attributes:
        UNVISITED: No answer recorded
        CURRENT: The question on screen
        CORRECT: Answered correctly (PRACTICE only)
        INCORRECT: Answered incorrectly (PRACTICE only)
        ANSWERED: Answered, correctness hidden (TEST only)
    """
    
    UNVISITED = "unvisited"
    CURRENT = "current"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    ANSWERED = "answered"
