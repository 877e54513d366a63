import os
import pytest
import sys
from datetime import datetime, timezone
from pathlib import Path
from PIL import Image

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import quiz_runner
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from quiz_runner.core.models import Question
from quiz_runner.engine import SessionListener, VirtualScheduler


class RecordingListener(SessionListener):
    """Listener that records every notification as (name, payload)."""

    def __init__(self):
        self.events = []

    def on_display_question(self, question, answer, mode):
        self.events.append(("display", question.id, answer, mode))

    def on_feedback(self, is_correct):
        self.events.append(("feedback", is_correct))

    def on_explanation(self, question, answer):
        self.events.append(("explanation", question.id))

    def on_progress_update(self, statuses):
        self.events.append(("progress", list(statuses)))

    def on_finished(self, results):
        self.events.append(("finished", results))

    def names(self):
        return [e[0] for e in self.events]

    def of(self, name):
        return [e for e in self.events if e[0] == name]

    def clear(self):
        self.events.clear()


class RecordingSurface:
    """Drawing surface stand-in that counts calls."""

    def __init__(self):
        self.clear_count = 0
        self.enabled = True
        self.tool = ("pen", None)

    def clear(self):
        self.clear_count += 1

    def set_enabled(self, enabled):
        self.enabled = enabled

    def set_tool(self, tool, color=None):
        self.tool = (tool, color)


# Common test fixtures
@pytest.fixture
def questions():
    """Three questions; the correct choice is index 1, 0, 2."""
    return [
        Question("q1", "What is $2 + 2$?", ("3", "4", "5"), 1,
                 answer_expression="2 + 2 = 4", explanation="Count on from 2."),
        Question("q2", "Solve $x - 1 = 0$", ("$x = 1$", "$x = -1$"), 0),
        Question("q3", "What is $3^2$?", ("6", "8", "9", "12"), 2, explanation="$3 \\times 3$"),
    ]


@pytest.fixture
def scheduler():
    return VirtualScheduler()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def fixed_clock():
    moment = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    return lambda: moment


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path
