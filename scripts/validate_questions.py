#!/usr/bin/env python3
"""Validate question files before handing them to the quiz.

Loads each file through the same loader the GUI uses and reports the
first problem found per file.

Usage:
    python scripts/validate_questions.py FILE [FILE ...] [--verbose]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for quiz_runner imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from quiz_runner.loading import LoaderError, load_question_set

logger = logging.getLogger("validate_questions")


def validate_file(path: Path) -> bool:
    """Return True if the file loads as a usable question set."""
    try:
        questions = load_question_set(path)
    except LoaderError as e:
        logger.error(f"FAIL {path}: {e}")
        return False

    with_figures = sum(1 for q in questions if q.figure_ref)
    missing_explanations = [q.id for q in questions if not q.explanation]
    logger.info(f"OK   {path}: {len(questions)} questions, {with_figures} with figures")
    if missing_explanations:
        logger.warning(f"     no explanation for: {', '.join(missing_explanations)}")
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate quiz question files")
    parser.add_argument("files", nargs="+", type=Path, help="Question files (JSON)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show loader debug output")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='%(message)s')

    failures = [path for path in args.files if not validate_file(path)]
    if failures:
        logger.error(f"{len(failures)} of {len(args.files)} file(s) failed validation")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
