"""
Question Payload Validation

Validates raw question dictionaries (as read from a question file) before
they are turned into `Question` objects, so that load errors name the
offending field instead of surfacing as a bare KeyError.

Fail fast: the first violation in a record raises `ValidationError`.
"""

from __future__ import annotations

from typing import Any


REQUIRED_FIELDS = ("id", "prompt", "choices", "correctIndex")
OPTIONAL_TEXT_FIELDS = ("figure", "answerLatex", "point")


class ValidationError(Exception):
    """Raised when question data fails validation."""
    
    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_question_payload(data: Any) -> None:
    """
    Validate one question record in file format.
    
    Args:
        data: Parsed JSON object for a single question
        
    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Question record must be an object, got {type(data).__name__}",
            path="",
        )
    
    missing = [f for f in REQUIRED_FIELDS if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )
    
    qid = data["id"]
    if not isinstance(qid, (str, int)) or isinstance(qid, bool) or str(qid) == "":
        raise ValidationError(f"Invalid id: {qid!r}", path="id")
    
    if not isinstance(data["prompt"], str):
        raise ValidationError("prompt must be a string", path="prompt")
    
    choices = data["choices"]
    if not isinstance(choices, list) or len(choices) < 2:
        raise ValidationError(
            f"choices must be a list of at least 2 entries (question {qid!r})",
            path="choices",
        )
    bad = [i for i, c in enumerate(choices) if not isinstance(c, str)]
    if bad:
        raise ValidationError(
            f"choices must be strings (question {qid!r}, positions {bad})",
            path="choices",
        )
    
    index = data["correctIndex"]
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValidationError(
            f"correctIndex must be an integer (question {qid!r}): {index!r}",
            path="correctIndex",
        )
    if not (0 <= index < len(choices)):
        raise ValidationError(
            f"correctIndex out of range (question {qid!r}): {index} not in [0, {len(choices)})",
            path="correctIndex",
        )
    
    for name in OPTIONAL_TEXT_FIELDS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ValidationError(
                f"{name} must be a string when present (question {qid!r})",
                path=name,
            )


def validate_question_set_payload(data: Any) -> None:
    """
    Validate a whole question file payload.
    
    Checks the top-level shape, every record, and id uniqueness.
    
    Args:
        data: Parsed JSON document
        
    Raises:
        ValidationError: On the first invalid record, with path like "[3].choices"
    """
    if not isinstance(data, list):
        raise ValidationError(
            f"Question file must contain a JSON array, got {type(data).__name__}"
        )
    if not data:
        raise ValidationError("Question file contains no questions")
    
    seen: set[str] = set()
    for i, record in enumerate(data):
        try:
            validate_question_payload(record)
        except ValidationError as e:
            suffix = f".{e.path}" if e.path else ""
            raise ValidationError(f"Question [{i}]: {e}", path=f"[{i}]{suffix}", errors=e.errors) from e
        
        qid = str(record["id"])
        if qid in seen:
            raise ValidationError(f"Duplicate question id: {qid!r}", path=f"[{i}].id")
        seen.add(qid)
