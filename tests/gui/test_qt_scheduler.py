"""Tests for the QTimer-backed scheduler."""

import pytest

from quiz_runner.gui.scheduler import QtScheduler


class TestQtScheduler:
    
    def test_callback_runs_on_event_loop(self, qtbot):
        scheduler = QtScheduler()
        fired = []
        call = scheduler.call_later(10, lambda: fired.append(True))
        assert call.active
        
        qtbot.waitUntil(lambda: fired == [True], timeout=1000)
        assert not call.active
    
    def test_cancelled_call_does_not_run(self, qtbot):
        scheduler = QtScheduler()
        fired = []
        call = scheduler.call_later(10, lambda: fired.append(True))
        call.cancel()
        call.cancel()
        
        qtbot.wait(50)
        assert fired == []
    
    def test_negative_delay_rejected(self, qtbot):
        with pytest.raises(ValueError):
            QtScheduler().call_later(-1, lambda: None)
