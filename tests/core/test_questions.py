"""
Unit Tests for Question Model

Tests for the Question dataclass and its file-format serialization.
"""

import pytest

from quiz_runner.core.models.questions import Question


class TestQuestion:
    """Tests for Question dataclass."""
    
    def test_init_when_valid_data_then_creates_question(self):
        """Valid question data should be created successfully."""
        q = Question(id="q1", prompt="What is $2 + 2$?", choices=("3", "4"), correct_choice_index=1)
        assert q.id == "q1"
        assert q.choice_count == 2
        assert q.correct_choice == "4"
        assert q.figure_ref is None
    
    def test_init_when_choices_is_list_then_stored_as_tuple(self):
        """Lists are accepted but stored immutably."""
        q = Question("q1", "p", ["a", "b", "c"], 0)
        assert q.choices == ("a", "b", "c")
    
    def test_init_when_empty_id_then_raises_error(self):
        with pytest.raises(ValueError, match="id must be a non-empty string"):
            Question("", "p", ("a", "b"), 0)
    
    def test_init_when_single_choice_then_raises_error(self):
        with pytest.raises(ValueError, match="at least 2 choices"):
            Question("q1", "p", ("a",), 0)
    
    def test_init_when_index_out_of_range_then_raises_error(self):
        """Correct index must point at an existing choice."""
        with pytest.raises(ValueError, match="out of range"):
            Question("q1", "p", ("a", "b"), 2)
        with pytest.raises(ValueError, match="out of range"):
            Question("q1", "p", ("a", "b"), -1)
    
    def test_init_when_index_is_bool_then_raises_error(self):
        with pytest.raises(ValueError, match="must be an int"):
            Question("q1", "p", ("a", "b"), True)
    
    def test_is_correct_when_correct_index_then_true(self):
        q = Question("q1", "p", ("a", "b", "c"), 2)
        assert q.is_correct(2)
        assert not q.is_correct(0)
        assert not q.is_correct(3)
    
    def test_is_valid_choice_checks_bounds(self):
        q = Question("q1", "p", ("a", "b"), 0)
        assert q.is_valid_choice(0)
        assert q.is_valid_choice(1)
        assert not q.is_valid_choice(2)
        assert not q.is_valid_choice(-1)
    
    def test_question_is_immutable(self):
        q = Question("q1", "p", ("a", "b"), 0)
        with pytest.raises(AttributeError):
            q.prompt = "changed"


class TestQuestionSerialization:
    """Tests for to_dict / from_dict."""
    
    def test_from_dict_when_full_record_then_maps_file_keys(self):
        q = Question.from_dict({
            "id": "q7",
            "prompt": "Area?",
            "choices": ["1", "2"],
            "correctIndex": 1,
            "figure": "figures/circle.png",
            "answerLatex": "\\pi r^2",
            "point": "Square the radius.",
        })
        assert q.id == "q7"
        assert q.choices == ("1", "2")
        assert q.correct_choice_index == 1
        assert q.figure_ref == "figures/circle.png"
        assert q.answer_expression == "\\pi r^2"
        assert q.explanation == "Square the radius."
    
    def test_from_dict_when_numeric_id_then_id_is_string(self):
        q = Question.from_dict({"id": 3, "prompt": "p", "choices": ["a", "b"], "correctIndex": 0})
        assert q.id == "3"
    
    def test_from_dict_when_empty_optional_fields_then_none(self):
        q = Question.from_dict({
            "id": "q1", "prompt": "p", "choices": ["a", "b"], "correctIndex": 0,
            "figure": "", "answerLatex": "", "point": "",
        })
        assert q.figure_ref is None
        assert q.answer_expression is None
        assert q.explanation is None
    
    def test_from_dict_when_missing_key_then_raises_key_error(self):
        with pytest.raises(KeyError):
            Question.from_dict({"id": "q1", "prompt": "p", "choices": ["a", "b"]})
    
    def test_to_dict_omits_unset_optional_fields(self):
        d = Question("q1", "p", ("a", "b"), 1).to_dict()
        assert d == {"id": "q1", "prompt": "p", "choices": ["a", "b"], "correctIndex": 1}
