"""
Module: engine.navigation

Purpose:
    Navigation policy for user-initiated jumps between questions.

Key Functions:
    - can_navigate(): Decide whether a jump is permitted

Used By:
    - engine.session.QuizSession.jump_to
"""

from __future__ import annotations

from quiz_runner.core.models import QuizMode


def can_navigate(mode: QuizMode, current_index: int, target_index: int) -> bool:
    """
    Decide whether a user-initiated jump is allowed.
    
    PRACTICE allows any target. TEST allows only the immediately previous
    question; forward jumps, longer backward jumps and same-index jumps are
    denied. The engine's own forward advance does not go through this check.
    
    Checking the target against the question count is the caller's job.
    TEST never treats a negative index as the previous question, so the
    first question has nowhere to go back to.
    
    Args:
        mode: Session mode
        current_index: Index of the question on screen
        target_index: Requested index
        
    Returns:
        True if the jump is permitted
        
    Example:
        >>> can_navigate(QuizMode.TEST, 2, 1)
        True
        >>> can_navigate(QuizMode.TEST, 2, 0)
        False
    """
    if mode is QuizMode.PRACTICE:
        return True
    return target_index >= 0 and target_index == current_index - 1
