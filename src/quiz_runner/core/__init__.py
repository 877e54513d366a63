"""
Quiz Runner Core Package

Shared data models for the engine, loader and GUI. These models are the
single source of truth for what a question and an answer look like.

**DESIGN NOTES:**

1. **Immutable Data Models**
   - Questions are frozen dataclasses validated on construction
   - Answer records are frozen; tagging produces a new record

2. **Validation at Load Time**
   - An out-of-range correct index is a construction error,
     never a runtime condition inside the engine
"""

from .models import Question, AnswerRecord, ErrorTag, QuizMode, SessionPhase, QuestionStatus

__all__ = [
    "Question",
    "AnswerRecord",
    "ErrorTag",
    "QuizMode",
    "SessionPhase",
    "QuestionStatus",
]
