"""Unit tests for the virtual-clock scheduler."""

import pytest

from quiz_runner.engine.scheduler import VirtualScheduler


class TestVirtualScheduler:
    
    def test_callback_fires_only_when_due(self):
        scheduler = VirtualScheduler()
        fired = []
        scheduler.call_later(500, lambda: fired.append("a"))
        
        scheduler.advance(499)
        assert fired == []
        scheduler.advance(1)
        assert fired == ["a"]
        assert scheduler.now_ms == 500
    
    def test_ties_fire_in_scheduling_order(self):
        scheduler = VirtualScheduler()
        fired = []
        scheduler.call_later(100, lambda: fired.append("first"))
        scheduler.call_later(100, lambda: fired.append("second"))
        scheduler.call_later(50, lambda: fired.append("early"))
        
        scheduler.advance(100)
        
        assert fired == ["early", "first", "second"]
    
    def test_cancelled_call_never_fires(self):
        scheduler = VirtualScheduler()
        fired = []
        call = scheduler.call_later(10, lambda: fired.append("x"))
        assert call.active
        
        call.cancel()
        call.cancel()
        scheduler.advance(100)
        
        assert fired == []
        assert not call.active
        assert scheduler.pending_count == 0
    
    def test_chained_call_fires_within_same_advance(self):
        """A callback scheduled by a firing callback runs if due in the window."""
        scheduler = VirtualScheduler()
        fired = []
        
        def first():
            fired.append(("first", scheduler.now_ms))
            scheduler.call_later(200, lambda: fired.append(("second", scheduler.now_ms)))
        
        scheduler.call_later(500, first)
        scheduler.advance(700)
        
        assert fired == [("first", 500), ("second", 700)]
    
    def test_run_all_drains_queue(self):
        scheduler = VirtualScheduler()
        fired = []
        scheduler.call_later(1000, lambda: fired.append(1))
        scheduler.call_later(5, lambda: fired.append(2))
        
        scheduler.run_all()
        
        assert fired == [2, 1]
        assert scheduler.now_ms == 1000
        assert scheduler.pending_count == 0
    
    def test_negative_values_rejected(self):
        scheduler = VirtualScheduler()
        with pytest.raises(ValueError):
            scheduler.call_later(-1, lambda: None)
        with pytest.raises(ValueError):
            scheduler.advance(-5)
