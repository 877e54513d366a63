"""
Module: loading

Purpose:
    Load question sets from JSON files into validated Question objects.
"""

from .loader import load_question_set, parse_question_set, LoaderError, DEFAULT_QUESTIONS_PATH

__all__ = [
    "load_question_set",
    "parse_question_set",
    "LoaderError",
    "DEFAULT_QUESTIONS_PATH",
]
