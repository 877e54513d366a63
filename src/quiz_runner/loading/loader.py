"""
Module: loading.loader

Purpose:
    Load a question set from a JSON file with full validation.
    Any invalid record makes the whole set unusable: a quiz with a broken
    correct index must fail at load time, not mid-session.

Key Functions:
    - load_question_set(): Read and validate a question file
    - parse_question_set(): Validate an already-parsed payload

Key Classes:
    - LoaderError: Exception for loading failures

Dependencies:
    - json (std)
    - quiz_runner.core.schemas.validator

Used By:
    - gui.main_window.MainWindow
    - scripts/validate_questions.py
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from quiz_runner.core.models import Question
from quiz_runner.core.schemas import validate_question_set_payload, ValidationError


logger = logging.getLogger(__name__)

# Bundled sample set used when no file is given
DEFAULT_QUESTIONS_PATH = Path(__file__).resolve().parent.parent / "resources" / "sample_questions.json"


class LoaderError(Exception):
    """Error loading a question set."""
    pass


def load_question_set(path: Path) -> List[Question]:
    """
    Load all questions from a question file.
    
    Process:
    1. Read and parse JSON (array of question objects)
    2. Validate every record and id uniqueness
    3. Build Question objects in file order
    
    Args:
        path: Path to a JSON question file
        
    Returns:
        List of Question objects in file order (presentation order)
        
    Raises:
        LoaderError: If the file is missing, unreadable, malformed,
            empty, or contains an invalid record
        
    Example:
        >>> questions = load_question_set(Path("questions.json"))
        >>> len(questions)
        10
    """
    path = Path(path)
    if not path.exists():
        raise LoaderError(f"Question file does not exist: {path}")
    
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise LoaderError(f"Question file is not valid JSON: {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"Failed to read question file {path}: {e}") from e
    
    questions = parse_question_set(data)
    logger.info(f"Loaded {len(questions)} questions from {path.name}")
    return questions


def parse_question_set(data: Any) -> List[Question]:
    """
    Build questions from a parsed payload.
    
    Args:
        data: Parsed JSON document (list of question dicts)
        
    Returns:
        List of Question objects
        
    Raises:
        LoaderError: If validation fails
    """
    try:
        validate_question_set_payload(data)
    except ValidationError as e:
        raise LoaderError(f"Invalid question set: {e}") from e
    
    questions = []
    for i, record in enumerate(data):
        try:
            questions.append(Question.from_dict(record))
        except (KeyError, ValueError) as e:
            raise LoaderError(f"Invalid question [{i}]: {e}") from e
    return questions
