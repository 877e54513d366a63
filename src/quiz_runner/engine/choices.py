"""
Module: engine.choices

Purpose:
    Display order for a question's choices. Choices are shuffled on every
    display so answers cannot be memorised by position; submissions always
    use the original index.

Key Functions:
    - choice_order(): Permutation of choice indices for display
"""

from __future__ import annotations

import random
from typing import List, Optional

from quiz_runner.core.models import Question


def choice_order(question: Question, rng: Optional[random.Random] = None, *, shuffle: bool = True) -> List[int]:
    """
    Return the order in which to display a question's choices.
    
    Args:
        question: Question being displayed
        rng: Random source (seeded for reproducible order)
        shuffle: If False, return the original order
        
    Returns:
        List of original choice indices; position i holds the choice
        displayed in slot i
        
    Example:
        >>> order = choice_order(q, random.Random(42))
        >>> sorted(order) == list(range(q.choice_count))
        True
    """
    order = list(range(question.choice_count))
    if shuffle:
        (rng or random).shuffle(order)
    return order
