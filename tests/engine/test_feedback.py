"""Unit tests for the PRACTICE feedback sequence."""

import pytest

from quiz_runner.engine.feedback import FeedbackPhase, FeedbackSequence
from quiz_runner.engine.scheduler import VirtualScheduler


class TestFeedbackSequence:
    
    @pytest.fixture
    def scheduler(self) -> VirtualScheduler:
        return VirtualScheduler()
    
    @pytest.fixture
    def sequence(self, scheduler) -> FeedbackSequence:
        return FeedbackSequence(scheduler, indicator_ms=500, explanation_hold_ms=200)
    
    def test_phases_follow_timeline(self, scheduler, sequence):
        calls = []
        sequence.start(lambda: calls.append("explanation"), lambda: calls.append("advance"))
        assert sequence.phase is FeedbackPhase.SHOWING_INDICATOR
        assert sequence.is_pending
        
        scheduler.advance(499)
        assert calls == []
        
        scheduler.advance(1)
        assert calls == ["explanation"]
        assert sequence.phase is FeedbackPhase.SHOWING_EXPLANATION
        
        scheduler.advance(199)
        assert calls == ["explanation"]
        
        scheduler.advance(1)
        assert calls == ["explanation", "advance"]
        assert sequence.phase is FeedbackPhase.IDLE
        assert not sequence.is_pending
    
    def test_pending_during_advance_callback(self, scheduler, sequence):
        seen = []
        sequence.start(lambda: None, lambda: seen.append(sequence.phase))
        scheduler.run_all()
        assert seen == [FeedbackPhase.ADVANCING]
    
    def test_start_when_pending_then_raises(self, sequence):
        sequence.start(lambda: None, lambda: None)
        with pytest.raises(RuntimeError, match="already running"):
            sequence.start(lambda: None, lambda: None)
    
    def test_cancel_drops_pending_steps(self, scheduler, sequence):
        calls = []
        sequence.start(lambda: calls.append("explanation"), lambda: calls.append("advance"))
        scheduler.advance(600)
        
        sequence.cancel()
        scheduler.run_all()
        
        assert calls == ["explanation"]
        assert sequence.phase is FeedbackPhase.IDLE
    
    def test_restart_from_advance_callback_keeps_new_sequence(self, scheduler, sequence):
        """A sequence started inside on_advance must survive the old one finishing."""
        def advance():
            sequence.cancel()
            sequence.start(lambda: None, lambda: None)
        
        sequence.start(lambda: None, advance)
        scheduler.advance(700)
        
        assert sequence.phase is FeedbackPhase.SHOWING_INDICATOR
