"""
Core Models Package

Immutable, validated data models shared by every layer.

| Model | Mutability | Notes |
|-------|------------|-------|
| `Question` | frozen | validated on construction |
| `AnswerRecord` | frozen | replaced on resubmission or tagging |
| `QuizMode` / `SessionPhase` / `QuestionStatus` | enum | |
"""

from .questions import Question
from .answers import AnswerRecord, ErrorTag
from .session import QuizMode, SessionPhase, QuestionStatus

__all__ = [
    "Question",
    "AnswerRecord",
    "ErrorTag",
    "QuizMode",
    "SessionPhase",
    "QuestionStatus",
]
