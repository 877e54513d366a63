"""
Unit Tests for Answer Records and Error Tags
"""

from datetime import datetime, timezone

import pytest

from quiz_runner.core.models import AnswerRecord, ErrorTag, QuizMode


class TestErrorTag:
    
    def test_labels_are_human_readable(self):
        assert ErrorTag.SETUP_ERROR.label == "Setup error"
        assert ErrorTag.CALCULATION_ERROR.label == "Calculation error"
        assert ErrorTag.MISREAD.label == "Misread"
    
    def test_exactly_three_tags(self):
        assert len(list(ErrorTag)) == 3


class TestAnswerRecord:
    
    @pytest.fixture
    def record(self) -> AnswerRecord:
        return AnswerRecord(
            question_id="q1",
            selected_choice_index=0,
            is_correct=False,
            timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
    
    def test_init_when_created_then_untagged(self, record):
        assert record.error_tag is None
    
    def test_with_error_tag_returns_tagged_copy(self, record):
        tagged = record.with_error_tag(ErrorTag.MISREAD)
        assert tagged.error_tag is ErrorTag.MISREAD
        assert record.error_tag is None
        assert tagged.question_id == record.question_id
        assert tagged.timestamp == record.timestamp
    
    def test_with_error_tag_none_clears_tag(self, record):
        tagged = record.with_error_tag(ErrorTag.SETUP_ERROR)
        assert tagged.with_error_tag(None).error_tag is None
    
    def test_record_is_immutable(self, record):
        with pytest.raises(AttributeError):
            record.is_correct = True


def test_quiz_mode_labels():
    assert QuizMode.PRACTICE.label == "Practice Mode"
    assert QuizMode.TEST.label == "Test Mode"
