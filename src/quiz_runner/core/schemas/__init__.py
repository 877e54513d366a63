"""Payload validation for question files."""

from .validator import validate_question_payload, validate_question_set_payload, ValidationError

__all__ = [
    "validate_question_payload",
    "validate_question_set_payload",
    "ValidationError",
]
