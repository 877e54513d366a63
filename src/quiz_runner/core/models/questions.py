"""
Module: questions

Purpose:
    Provides the Question dataclass - one multiple-choice question as
    presented by the quiz. Immutable and validated on construction so the
    engine never has to handle an impossible correct index.

Key Functions:
    - Question.choice_count: Number of choices
    - Question.correct_choice: Text of the correct choice
    - Question.is_correct(index): Check a selected choice
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - engine.session.QuizSession
    - engine.scoring
    - loading.loader
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Question:
    """
    Multiple-choice question (immutable).
    
    Attributes:
        id: Unique identifier like "q1"
        prompt: Question text, may embed inline `$formula$` markers
        choices: Ordered choice texts (at least two)
        correct_choice_index: Index into choices of the correct answer
        figure_ref: Optional figure asset reference (path or URL-like string)
        answer_expression: Optional reference answer shown after feedback
        explanation: Optional explanation shown after feedback
    
    Invariants:
        - 0 <= correct_choice_index < len(choices)
        - len(choices) >= 2
    
    Example:
        >>> q = Question(
        ...     id="q1",
        ...     prompt="What is $2 + 2$?",
        ...     choices=("3", "4", "5"),
        ...     correct_choice_index=1,
        ... )
        >>> q.is_correct(1)
        True
    """
    
    id: str
    prompt: str
    choices: tuple[str, ...]
    correct_choice_index: int
    figure_ref: Optional[str] = None
    answer_expression: Optional[str] = None
    explanation: Optional[str] = None
    
    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.id:
            raise ValueError("id must be a non-empty string")
        
        # Accept lists from callers but store a tuple (frozen dataclass)
        if not isinstance(self.choices, tuple):
            object.__setattr__(self, "choices", tuple(self.choices))
        
        if len(self.choices) < 2:
            raise ValueError(
                f"question {self.id!r} must have at least 2 choices: {len(self.choices)}"
            )
        if isinstance(self.correct_choice_index, bool) or not isinstance(self.correct_choice_index, int):
            raise ValueError(
                f"correct_choice_index must be an int: {self.correct_choice_index!r}"
            )
        if not (0 <= self.correct_choice_index < len(self.choices)):
            raise ValueError(
                f"correct_choice_index out of range for question {self.id!r}: "
                f"{self.correct_choice_index} (choices: {len(self.choices)})"
            )
    
    @property
    def choice_count(self) -> int:
        return len(self.choices)
    
    @property
    def correct_choice(self) -> str:
        """Text of the correct choice."""
        return self.choices[self.correct_choice_index]
    
    def is_valid_choice(self, index: int) -> bool:
        return 0 <= index < len(self.choices)
    
    def is_correct(self, index: int) -> bool:
        """
        Check whether a selected choice index is the correct one.
        
        Args:
            index: Selected choice index (original order, not display order)
            
        Returns:
            True only for correct_choice_index
        """
        return index == self.correct_choice_index
    
    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────
    
    def to_dict(self) -> dict:
        """
        Serialize to the question file format.
        
        Optional fields are omitted when unset.
        
        Returns:
            Dict representation
        """
        d = {
            "id": self.id,
            "prompt": self.prompt,
            "choices": list(self.choices),
            "correctIndex": self.correct_choice_index,
        }
        if self.figure_ref:
            d["figure"] = self.figure_ref
        if self.answer_expression:
            d["answerLatex"] = self.answer_expression
        if self.explanation:
            d["point"] = self.explanation
        return d
    
    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Deserialize from the question file format.
        
        Args:
            data: Dict representation (see to_dict)
            
        Returns:
            Question instance
            
        Raises:
            KeyError: If a required key is missing
            ValueError: If the record violates an invariant
        """
        return cls(
            id=str(data["id"]),
            prompt=data["prompt"],
            choices=tuple(data["choices"]),
            correct_choice_index=data["correctIndex"],
            figure_ref=data.get("figure") or None,
            answer_expression=data.get("answerLatex") or None,
            explanation=data.get("point") or None,
        )
    
    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Question({self.id!r}, choices={len(self.choices)}, "
            f"correct={self.correct_choice_index})"
        )
