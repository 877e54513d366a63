"""
Module: engine

Purpose:
    Quiz session engine: state machine, navigation policy, timed feedback
    and scoring. Has no Qt dependency; timers come through the Scheduler
    interface.

Key Functions:
    - can_navigate(): Jump policy
    - compute_results(): Score and review entries
    - toggle_error_tag(): Review tagging
    - choice_order(): Choice display order

Key Classes:
    - QuizSession: The engine
    - EngineConfig: Timings and shuffling
    - SessionListener / DrawingSurface: Collaborator interfaces
    - Scheduler / VirtualScheduler: Timer abstraction

Used By:
    - quiz_runner.gui.main_window: Presentation adapter
"""

from .config import EngineConfig
from .navigation import can_navigate
from .scoring import QuizResults, ReviewEntry, compute_results, toggle_error_tag
from .scheduler import Scheduler, ScheduledCall, VirtualScheduler
from .feedback import FeedbackPhase, FeedbackSequence
from .listener import SessionListener, DrawingSurface
from .choices import choice_order
from .session import QuizSession, SessionState, QuestionSetError

__all__ = [
    # Config
    "EngineConfig",
    # Policy / scoring
    "can_navigate",
    "compute_results",
    "toggle_error_tag",
    "QuizResults",
    "ReviewEntry",
    "choice_order",
    # Timing
    "Scheduler",
    "ScheduledCall",
    "VirtualScheduler",
    "FeedbackPhase",
    "FeedbackSequence",
    # Engine
    "SessionListener",
    "DrawingSurface",
    "QuizSession",
    "SessionState",
    "QuestionSetError",
]
