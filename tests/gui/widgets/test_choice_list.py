"""Tests for the choice list select/confirm gesture."""

from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from quiz_runner.core.models import Question
from quiz_runner.gui.widgets.choice_list import ChoiceList

QUESTION = Question("q1", "Pick", ("alpha", "beta", "gamma"), 1)


def _make(qtbot, order=(2, 0, 1), selected=None) -> ChoiceList:
    widget = ChoiceList()
    qtbot.addWidget(widget)
    widget.set_choices(QUESTION, list(order), selected=selected)
    return widget


class TestChoiceList:
    
    def test_buttons_follow_display_order(self, qtbot):
        widget = _make(qtbot)
        assert widget.display_order == [2, 0, 1]
        assert "gamma" in widget.buttons[0].label.text()
    
    def test_single_click_only_selects(self, qtbot):
        widget = _make(qtbot)
        confirmed = []
        widget.confirmed.connect(confirmed.append)
        
        with qtbot.waitSignal(widget.selectionChanged, timeout=1000) as blocker:
            widget.buttons[0].click()
        
        assert blocker.args == [2]
        assert widget.selected_index() == 2
        assert confirmed == []
    
    def test_confirm_selection_emits_original_index(self, qtbot):
        widget = _make(qtbot)
        widget.buttons[1].click()
        
        with qtbot.waitSignal(widget.confirmed, timeout=1000) as blocker:
            assert widget.confirm_selection()
        
        assert blocker.args == [0]
    
    def test_confirm_without_selection_does_nothing(self, qtbot):
        widget = _make(qtbot)
        assert not widget.confirm_selection()
    
    def test_double_click_confirms(self, qtbot):
        widget = _make(qtbot)
        widget.show()
        
        with qtbot.waitSignal(widget.confirmed, timeout=1000) as blocker:
            QTest.mouseDClick(widget.buttons[2], Qt.MouseButton.LeftButton)
        
        assert blocker.args == [1]
    
    def test_locked_list_does_not_confirm(self, qtbot):
        widget = _make(qtbot, selected=0)
        widget.set_locked(True)
        
        assert not widget.confirm_selection()
        assert not any(b.isEnabled() for b in widget.buttons)
    
    def test_previous_answer_is_preselected(self, qtbot):
        widget = _make(qtbot, selected=1)
        assert widget.selected_index() == 1
    
    def test_set_choices_replaces_buttons_and_unlocks(self, qtbot):
        widget = _make(qtbot)
        widget.set_locked(True)
        
        widget.set_choices(QUESTION, [0, 1, 2])
        
        assert widget.display_order == [0, 1, 2]
        assert len(widget.buttons) == 3
        assert all(b.isEnabled() for b in widget.buttons)
        assert widget.selected_index() is None
