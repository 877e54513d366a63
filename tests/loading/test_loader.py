"""Unit tests for question file loading."""

import json
from pathlib import Path

import pytest

from quiz_runner.loading import DEFAULT_QUESTIONS_PATH, LoaderError, load_question_set, parse_question_set


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadQuestionSet:
    
    def test_loads_questions_in_file_order(self, tmp_path):
        path = _write(tmp_path / "q.json", [
            {"id": "b", "prompt": "second?", "choices": ["x", "y"], "correctIndex": 1},
            {"id": "a", "prompt": "first?", "choices": ["x", "y", "z"], "correctIndex": 2,
             "figure": "fig.png", "point": "because"},
        ])
        
        questions = load_question_set(path)
        
        assert [q.id for q in questions] == ["b", "a"]
        assert questions[1].figure_ref == "fig.png"
        assert questions[1].explanation == "because"
    
    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(LoaderError, match="does not exist"):
            load_question_set(tmp_path / "nope.json")
    
    def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(LoaderError, match="not valid JSON"):
            load_question_set(path)
    
    def test_out_of_range_correct_index_rejects_whole_set(self, tmp_path):
        path = _write(tmp_path / "q.json", [
            {"id": "q1", "prompt": "p", "choices": ["a", "b"], "correctIndex": 0},
            {"id": "q2", "prompt": "p", "choices": ["a", "b"], "correctIndex": 2},
        ])
        with pytest.raises(LoaderError, match="correctIndex"):
            load_question_set(path)
    
    def test_empty_set_raises(self, tmp_path):
        with pytest.raises(LoaderError, match="no questions"):
            load_question_set(_write(tmp_path / "q.json", []))
    
    def test_bundled_sample_set_loads(self):
        questions = load_question_set(DEFAULT_QUESTIONS_PATH)
        assert len(questions) == 5
        assert len({q.id for q in questions}) == 5


class TestParseQuestionSet:
    
    def test_wraps_validation_error(self):
        with pytest.raises(LoaderError, match="Invalid question set"):
            parse_question_set({"id": "q1"})
