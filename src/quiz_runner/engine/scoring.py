"""
Module: engine.scoring

Purpose:
    Derive scores and review entries from recorded answers, and toggle
    error-cause tags during review.

Key Functions:
    - compute_results(): Score and per-question review in question order
    - toggle_error_tag(): Set/clear an error tag on an incorrect answer

Key Classes:
    - ReviewEntry: One question paired with its (possibly absent) answer
    - QuizResults: Totals plus review entries

Used By:
    - engine.session.QuizSession
    - gui.widgets.review_list.ReviewList
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence

from quiz_runner.core.models import AnswerRecord, ErrorTag, Question, QuizMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewEntry:
    """
    Review line for one question.
    
    Attributes:
        index: Position in the question set
        question: The question
        answer: Recorded answer, or None if unanswered
    """
    index: int
    question: Question
    answer: Optional[AnswerRecord]
    
    @property
    def is_answered(self) -> bool:
        return self.answer is not None
    
    @property
    def is_correct(self) -> bool:
        return self.answer is not None and self.answer.is_correct
    
    @property
    def error_tag(self) -> Optional[ErrorTag]:
        return self.answer.error_tag if self.answer is not None else None
    
    @property
    def can_tag(self) -> bool:
        """Only answered, incorrect questions accept an error tag."""
        return self.answer is not None and not self.answer.is_correct


@dataclass(frozen=True)
class QuizResults:
    """
    Scored outcome of a session (immutable snapshot).
    
    Unanswered questions count toward total_count but never correct_count.
    
    Attributes:
        mode: Mode the session ran in
        total_count: Number of questions in the set
        correct_count: Number of answers with is_correct
        review_entries: One entry per question, in question-set order
    """
    mode: QuizMode
    total_count: int
    correct_count: int
    review_entries: tuple[ReviewEntry, ...]
    
    @property
    def answered_count(self) -> int:
        return sum(1 for e in self.review_entries if e.is_answered)
    
    @property
    def unanswered_count(self) -> int:
        return self.total_count - self.answered_count
    
    @property
    def incorrect_count(self) -> int:
        """Answered but wrong (unanswered not included)."""
        return self.answered_count - self.correct_count
    
    @property
    def percentage(self) -> float:
        if self.total_count == 0:
            return 0.0
        return 100.0 * self.correct_count / self.total_count
    
    @property
    def score_text(self) -> str:
        return f"Score: {self.correct_count} / {self.total_count}"
    
    def tag_counts(self) -> Dict[ErrorTag, int]:
        """Number of review entries carrying each error tag (zero-filled)."""
        counts = Counter(e.error_tag for e in self.review_entries if e.error_tag is not None)
        return {tag: counts.get(tag, 0) for tag in ErrorTag}


def compute_results(
    questions: Sequence[Question],
    answers: Mapping[str, AnswerRecord],
    mode: QuizMode,
) -> QuizResults:
    """
    Score a session.
    
    Args:
        questions: Question set in presentation order
        answers: Answer records keyed by question id
        mode: Session mode (carried through for display)
        
    Returns:
        QuizResults with review entries in question-set order
        
    Example:
        >>> results = compute_results(questions, answers, QuizMode.TEST)
        >>> results.score_text
        'Score: 2 / 3'
    """
    entries = tuple(
        ReviewEntry(index=i, question=q, answer=answers.get(q.id))
        for i, q in enumerate(questions)
    )
    correct = sum(1 for a in answers.values() if a.is_correct)
    return QuizResults(
        mode=mode,
        total_count=len(questions),
        correct_count=correct,
        review_entries=entries,
    )


def toggle_error_tag(
    answers: Dict[str, AnswerRecord],
    question_id: str,
    tag: ErrorTag,
) -> Optional[ErrorTag]:
    """
    Toggle an error tag on an incorrect answer, in place.
    
    If the stored tag already equals tag it is cleared, otherwise it is
    replaced by tag. Correct or missing answers are left untouched.
    
    Args:
        answers: Mutable answer map keyed by question id
        question_id: Question to tag
        tag: Tag to toggle
        
    Returns:
        The tag now stored (None when cleared or not taggable)
    """
    record = answers.get(question_id)
    if record is None:
        logger.debug(f"Ignoring error tag for unanswered question {question_id!r}")
        return None
    if record.is_correct:
        logger.debug(f"Ignoring error tag for correct question {question_id!r}")
        return None
    
    new_tag = None if record.error_tag is tag else tag
    answers[question_id] = record.with_error_tag(new_tag)
    return new_tag
