"""
Unit Tests for Question Payload Validation
"""

import pytest

from quiz_runner.core.schemas.validator import (
    validate_question_payload,
    validate_question_set_payload,
    ValidationError,
)


class TestValidateQuestionPayload:
    """Tests for validate_question_payload function."""
    
    @pytest.fixture
    def valid_record(self) -> dict:
        return {
            "id": "q1",
            "prompt": "What is $2 + 2$?",
            "choices": ["3", "4", "5"],
            "correctIndex": 1,
            "answerLatex": "4",
        }
    
    def test_valid_record_passes(self, valid_record):
        validate_question_payload(valid_record)
    
    def test_rejects_non_object(self):
        with pytest.raises(ValidationError, match="must be an object"):
            validate_question_payload(["q1"])
    
    def test_rejects_missing_required_fields(self, valid_record):
        del valid_record["correctIndex"]
        with pytest.raises(ValidationError) as exc_info:
            validate_question_payload(valid_record)
        assert "Missing field: correctIndex" in exc_info.value.errors
    
    def test_rejects_single_choice(self, valid_record):
        valid_record["choices"] = ["only"]
        with pytest.raises(ValidationError) as exc_info:
            validate_question_payload(valid_record)
        assert exc_info.value.path == "choices"
    
    def test_rejects_non_string_choice(self, valid_record):
        valid_record["choices"] = ["a", 2]
        with pytest.raises(ValidationError, match="must be strings"):
            validate_question_payload(valid_record)
    
    @pytest.mark.parametrize("index", [3, -1, "1", 1.0, True])
    def test_rejects_bad_correct_index(self, valid_record, index):
        valid_record["correctIndex"] = index
        with pytest.raises(ValidationError) as exc_info:
            validate_question_payload(valid_record)
        assert exc_info.value.path == "correctIndex"
    
    def test_rejects_non_string_optional_field(self, valid_record):
        valid_record["point"] = 42
        with pytest.raises(ValidationError) as exc_info:
            validate_question_payload(valid_record)
        assert exc_info.value.path == "point"
    
    def test_null_optional_field_is_allowed(self, valid_record):
        valid_record["figure"] = None
        validate_question_payload(valid_record)


class TestValidateQuestionSetPayload:
    
    def _record(self, qid: str) -> dict:
        return {"id": qid, "prompt": "p", "choices": ["a", "b"], "correctIndex": 0}
    
    def test_valid_set_passes(self):
        validate_question_set_payload([self._record("q1"), self._record("q2")])
    
    def test_rejects_non_list(self):
        with pytest.raises(ValidationError, match="JSON array"):
            validate_question_set_payload({"questions": []})
    
    def test_rejects_empty_list(self):
        with pytest.raises(ValidationError, match="no questions"):
            validate_question_set_payload([])
    
    def test_record_error_carries_index_path(self):
        bad = self._record("q2")
        bad["correctIndex"] = 5
        with pytest.raises(ValidationError) as exc_info:
            validate_question_set_payload([self._record("q1"), bad])
        assert exc_info.value.path == "[1].correctIndex"
    
    def test_rejects_duplicate_ids(self):
        with pytest.raises(ValidationError, match="Duplicate question id"):
            validate_question_set_payload([self._record("q1"), self._record("q1")])
