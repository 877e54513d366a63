"""
Logging utilities for surfacing engine logs in the GUI status bar.

Records are pushed onto a plain queue by a logging handler and drained on
the GUI thread by a QTimer, so logging from anywhere never touches widgets
directly.
"""
from __future__ import annotations

import logging
from queue import Empty, Queue
from typing import List, Optional, Tuple

from PySide6.QtCore import QObject, QTimer, Signal


class QueueLogHandler(logging.Handler):
    """Logging handler that puts (message, levelname) tuples on a queue."""

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.log_queue.put((self.format(record), record.levelname))
        except Exception:
            self.handleError(record)


def drain_queue(log_queue: Queue, limit: int = 100) -> List[Tuple[str, str]]:
    """
    Pop up to limit pending (message, level) entries without blocking.

    Args:
        log_queue: Queue filled by QueueLogHandler
        limit: Maximum entries to return per call
    """
    entries = []
    while len(entries) < limit:
        try:
            entries.append(log_queue.get_nowait())
        except Empty:
            break
    return entries


class StatusLogBridge(QObject):
    """
    Forwards log records from a logger to the GUI thread.

    Attaches a QueueLogHandler to `logger_name` and polls the queue every
    `interval_ms`. Only the newest message of each poll is emitted, which
    is all a status bar can show.

    Signals:
        messageReady(str, str): message, level name
    """

    messageReady = Signal(str, str)

    def __init__(self, logger_name: Optional[str] = None, interval_ms: int = 200, parent=None):
        super().__init__(parent)
        self.logger_name = logger_name
        self.queue: Queue = Queue()
        self.handler = QueueLogHandler(self.queue)

        logger = logging.getLogger(logger_name)
        logger.addHandler(self.handler)
        if logger.level == logging.NOTSET or logger.level > logging.INFO:
            logger.setLevel(logging.INFO)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self.poll)
        self._timer.start(interval_ms)

    def poll(self) -> int:
        """Drain the queue now. Returns the number of records drained."""
        entries = drain_queue(self.queue)
        if entries:
            message, level = entries[-1]
            self.messageReady.emit(message, level)
        return len(entries)

    def stop(self) -> None:
        """Stop polling and detach the handler."""
        self._timer.stop()
        logging.getLogger(self.logger_name).removeHandler(self.handler)
