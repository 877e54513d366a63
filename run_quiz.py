#!/usr/bin/env python3
"""Launcher for the Quiz Runner GUI (PySide6)."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists() and SRC.as_posix() not in sys.path:
    sys.path.insert(0, SRC.as_posix())

from quiz_runner.gui.app import run


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Self-paced multiple-choice quiz")
    parser.add_argument("--questions", type=Path, help="Question file (JSON) to load")
    parser.add_argument("--seed", type=int, help="Seed for choice shuffling")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logs on the console")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    return run(questions_path=args.questions, seed=args.seed)


if __name__ == "__main__":
    raise SystemExit(main())
