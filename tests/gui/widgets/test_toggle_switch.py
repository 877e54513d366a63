"""Tests for the drawing on/off switch."""

from PySide6.QtCore import QPoint, Qt
from PySide6.QtTest import QTest

from quiz_runner.gui.widgets.toggle_switch import ToggleSwitch


class TestToggleSwitchClick:
    
    def test_click_toggles_and_emits(self, qtbot):
        switch = ToggleSwitch()
        qtbot.addWidget(switch)
        switch.show()
        
        with qtbot.waitSignal(switch.toggled, timeout=1000) as blocker:
            QTest.mouseClick(switch, Qt.MouseButton.LeftButton)
        
        assert blocker.args == [True]
        assert switch.isChecked()
    
    def test_drag_off_does_not_toggle(self, qtbot):
        switch = ToggleSwitch(checked=True)
        qtbot.addWidget(switch)
        switch.show()
        
        outside = QPoint(switch.width() + 50, switch.height() // 2)
        QTest.mousePress(switch, Qt.MouseButton.LeftButton, pos=QPoint(5, 5))
        QTest.mouseRelease(switch, Qt.MouseButton.LeftButton, pos=outside)
        
        assert switch.isChecked()
    
    def test_set_checked_same_value_does_not_emit(self, qtbot):
        switch = ToggleSwitch(checked=False)
        qtbot.addWidget(switch)
        
        with qtbot.assertNotEmitted(switch.toggled):
            switch.setChecked(False)
    
    def test_space_key_toggles(self, qtbot):
        switch = ToggleSwitch()
        qtbot.addWidget(switch)
        switch.show()
        
        QTest.keyClick(switch, Qt.Key.Key_Space)
        
        assert switch.isChecked()
        assert switch.toolTip() == "Sketching on"
    
    def test_set_checked_without_animation_moves_thumb(self, qtbot):
        switch = ToggleSwitch()
        qtbot.addWidget(switch)
        
        switch.setChecked(True, animate=False)
        
        assert switch.offset == 1.0
