"""
Module: answers

Purpose:
    Answer records and error-cause tags.

Key Classes:
    - ErrorTag: Cause assigned to an incorrect answer during review
    - AnswerRecord: One recorded submission for a question (immutable)

Used By:
    - engine.session.QuizSession: records submissions
    - engine.scoring: counts and review entries
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional


class ErrorTag(Enum):
    """
    Cause of an incorrect answer, set post-hoc in review.
    
    Attributes:
        SETUP_ERROR: The equation/approach was set up wrongly
        CALCULATION_ERROR: Correct setup, arithmetic slip
        MISREAD: The question was misread
    """
    
    SETUP_ERROR = "setup_error"
    CALCULATION_ERROR = "calculation_error"
    MISREAD = "misread"
    
    @property
    def label(self) -> str:
        return _TAG_LABELS[self]


_TAG_LABELS = {
    ErrorTag.SETUP_ERROR: "Setup error",
    ErrorTag.CALCULATION_ERROR: "Calculation error",
    ErrorTag.MISREAD: "Misread",
}


@dataclass(frozen=True)
class AnswerRecord:
    """
    Recorded answer for one question (immutable).
    
    A resubmission replaces the whole record, which also drops any
    error tag set on the previous one.
    
    Attributes:
        question_id: Id of the answered question
        selected_choice_index: Chosen index in original choice order
        is_correct: Whether the selection matched the correct index
        timestamp: When the submission was recorded
        error_tag: Optional cause, only meaningful when is_correct is False
    """
    
    question_id: str
    selected_choice_index: int
    is_correct: bool
    timestamp: datetime
    error_tag: Optional[ErrorTag] = None
    
    def with_error_tag(self, tag: Optional[ErrorTag]) -> AnswerRecord:
        """Return a copy carrying the given tag (None clears it)."""
        return replace(self, error_tag=tag)
