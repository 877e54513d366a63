"""Tests for forwarding logs to the status bar."""

import logging
from queue import Queue

from quiz_runner.gui.utils.logging_utils import QueueLogHandler, StatusLogBridge, drain_queue


def test_handler_queues_message_and_level():
    log_queue = Queue()
    handler = QueueLogHandler(log_queue)
    logger = logging.getLogger("quiz_runner.tests.handler")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        logger.info("loaded 3 questions")
        logger.debug("hidden")
    finally:
        logger.removeHandler(handler)
    
    assert drain_queue(log_queue) == [("loaded 3 questions", "INFO")]


def test_drain_queue_respects_limit():
    log_queue = Queue()
    for i in range(5):
        log_queue.put((str(i), "INFO"))
    assert len(drain_queue(log_queue, limit=3)) == 3
    assert len(drain_queue(log_queue)) == 2


class TestStatusLogBridge:
    
    def test_poll_emits_newest_message(self, qtbot):
        bridge = StatusLogBridge("quiz_runner.tests.bridge", interval_ms=10_000)
        logger = logging.getLogger("quiz_runner.tests.bridge")
        try:
            logger.info("first")
            logger.warning("second")
            with qtbot.waitSignal(bridge.messageReady, timeout=1000) as blocker:
                assert bridge.poll() == 2
        finally:
            bridge.stop()
        
        assert blocker.args == ["second", "WARNING"]
    
    def test_stop_detaches_handler(self, qtbot):
        bridge = StatusLogBridge("quiz_runner.tests.detach")
        bridge.stop()
        assert bridge.handler not in logging.getLogger("quiz_runner.tests.detach").handlers
