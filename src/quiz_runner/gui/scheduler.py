"""
Qt implementation of the engine's Scheduler interface.

Each scheduled call owns a single-shot QTimer parented to an owner
QObject, so callbacks run on the GUI thread's event loop and can be
cancelled until they fire.
"""
from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

from quiz_runner.engine.scheduler import ScheduledCall, Scheduler


class _QtCall(ScheduledCall):
    def __init__(self, timer: QTimer, callback: Callable[[], None]) -> None:
        self._timer: Optional[QTimer] = timer
        self._callback = callback
        timer.timeout.connect(self._fire)
    
    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._release()
    
    @property
    def active(self) -> bool:
        return self._timer is not None
    
    def _fire(self) -> None:
        if self._timer is None:
            return
        self._release()
        self._callback()
    
    def _release(self) -> None:
        timer, self._timer = self._timer, None
        # Parent keeps the C++ timer alive until the event loop deletes it
        timer.deleteLater()


class QtScheduler(Scheduler):
    """
    Scheduler backed by single-shot QTimers.
    
    Timers are parented to `owner` (a private QObject when none is given)
    so they are never destroyed from inside their own timeout signal.
    """
    
    def __init__(self, owner: Optional[QObject] = None) -> None:
        self._owner = owner if owner is not None else QObject()
    
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative: {delay_ms}")
        timer = QTimer(self._owner)
        timer.setSingleShot(True)
        call = _QtCall(timer, callback)
        timer.start(delay_ms)
        return call
