"""
Module: engine.scheduler

Purpose:
    Timer abstraction used by the feedback sequence, so the engine can be
    driven by a Qt event loop in the app and by a virtual clock in tests.

Key Classes:
    - ScheduledCall: Handle for a pending callback
    - Scheduler: Abstract "call later" interface
    - VirtualScheduler: Manually advanced clock (no wall-clock waits)

Used By:
    - engine.feedback.FeedbackSequence
    - gui.scheduler.QtScheduler (Qt implementation)
"""

from __future__ import annotations

import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Tuple

logger = logging.getLogger(__name__)


class ScheduledCall(ABC):
    """Handle for a callback scheduled with a Scheduler."""
    
    @abstractmethod
    def cancel(self) -> None:
        """
        Prevent the callback from running.
        
        Safe to call more than once and after the callback has fired.
        """
    
    @property
    @abstractmethod
    def active(self) -> bool:
        """True while the callback is still pending."""


class Scheduler(ABC):
    """
    Abstract interface for delayed callbacks.
    
    All callbacks run on the same logical thread as the caller
    (event loop or test driver), never concurrently.
    """
    
    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        """
        Schedule callback to run once after delay_ms milliseconds.
        
        Args:
            delay_ms: Delay in milliseconds (>= 0)
            callback: Zero-argument callable
            
        Returns:
            Handle that can cancel the call
        """


class _VirtualCall(ScheduledCall):
    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self._active = True
    
    def cancel(self) -> None:
        self._active = False
    
    @property
    def active(self) -> bool:
        return self._active
    
    def fire(self) -> None:
        self._active = False
        self.callback()


class VirtualScheduler(Scheduler):
    """
    Scheduler driven by an explicit virtual clock.
    
    Nothing runs until advance() or run_all() is called. Callbacks fire in
    due-time order; ties fire in scheduling order. Callbacks scheduled while
    advancing fire in the same advance() if they fall due within it.
    
    Example:
        >>> scheduler = VirtualScheduler()
        >>> fired = []
        >>> _ = scheduler.call_later(500, lambda: fired.append("a"))
        >>> scheduler.advance(499); fired
        []
        >>> scheduler.advance(1); fired
        ['a']
    """
    
    def __init__(self) -> None:
        self.now_ms = 0
        self._queue: List[Tuple[int, int, _VirtualCall]] = []
        self._counter = itertools.count()
    
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative: {delay_ms}")
        call = _VirtualCall(self.now_ms + delay_ms, callback)
        heapq.heappush(self._queue, (call.due_ms, next(self._counter), call))
        return call
    
    @property
    def pending_count(self) -> int:
        """Number of callbacks still waiting to fire."""
        return sum(1 for _, _, call in self._queue if call.active)
    
    def advance(self, ms: int) -> None:
        """
        Move the clock forward by ms, firing every callback that falls due.
        
        Args:
            ms: Milliseconds to advance (>= 0)
        """
        if ms < 0:
            raise ValueError(f"ms must be non-negative: {ms}")
        target = self.now_ms + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, call = heapq.heappop(self._queue)
            self.now_ms = due
            if call.active:
                call.fire()
        self.now_ms = target
    
    def run_all(self) -> None:
        """Fire callbacks until none are pending."""
        while self._queue:
            due, _, call = heapq.heappop(self._queue)
            self.now_ms = max(self.now_ms, due)
            if call.active:
                call.fire()
