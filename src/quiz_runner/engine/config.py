"""
Module: engine.config

Purpose:
    Configuration dataclass for the quiz session engine. Immutable
    configuration with validation on construction.

Key Classes:
    - EngineConfig: Feedback timings and choice shuffling

Used By:
    - engine.session.QuizSession
    - gui.main_window.MainWindow
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Minimum time the explanation stays on screen before auto-advance
MIN_EXPLANATION_HOLD_MS = 200


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for a quiz session (immutable).
    
    Attributes:
        indicator_ms: How long the correct/incorrect indicator is shown
        explanation_hold_ms: How long the explanation is held before advancing
        shuffle_choices: Whether the adapter shuffles choice display order
        seed: Seed for choice shuffling (None = nondeterministic)
    
    Example:
        >>> config = EngineConfig(indicator_ms=500, explanation_hold_ms=200)
        >>> config.feedback_total_ms
        700
    """
    
    indicator_ms: int = 500
    explanation_hold_ms: int = MIN_EXPLANATION_HOLD_MS
    shuffle_choices: bool = True
    seed: Optional[int] = None
    
    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.indicator_ms < 0:
            raise ValueError(f"indicator_ms must be non-negative: {self.indicator_ms}")
        if self.explanation_hold_ms < MIN_EXPLANATION_HOLD_MS:
            raise ValueError(
                f"explanation_hold_ms must be at least {MIN_EXPLANATION_HOLD_MS}: "
                f"{self.explanation_hold_ms}"
            )
    
    @property
    def feedback_total_ms(self) -> int:
        """Total time from submission to auto-advance in PRACTICE mode."""
        return self.indicator_ms + self.explanation_hold_ms
