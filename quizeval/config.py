"""Shared configuration for the quiz evaluator."""

from __future__ import annotations

import os
from pathlib import Path

OUTPUT_DIR_ENV = "QUIZEVAL_OUTPUT_DIR"
LOG_LEVEL_ENV = "QUIZEVAL_LOG_LEVEL"

OPTION_SEPARATOR = "|"
INPUT_ENCODING = "utf-8-sig"
OUTPUT_ENCODING = "utf-8"

SCORE_REPORT_NAME = "report.csv"
DIFFICULTY_REPORT_NAME = "difficulty.csv"
DETAILED_REPORT_NAME = "detailed_report.csv"

SCORE_COLUMNS = ["student", "score"]
DIFFICULTY_COLUMNS = ["qid", "correct", "total", "difficulty"]
DETAIL_COLUMNS = ["student", "qid", "chosen", "correct", "marks"]

QUESTION_FIELDS = ["id", "text", "options", "correctOption", "marks", "penalty"]
ANSWER_FIELDS = ["id", "correctOption"]
RESPONSE_FIELDS = ["studentId", "questionId", "chosenOption"]


def default_output_dir() -> Path:
    """Directory reports land in when the caller does not pick one."""
    configured = os.getenv(OUTPUT_DIR_ENV, "").strip()
    return Path(configured).expanduser() if configured else Path.cwd()


def default_log_level() -> str:
    return os.getenv(LOG_LEVEL_ENV, "WARNING").upper()


__all__ = [
    "ANSWER_FIELDS",
    "DETAILED_REPORT_NAME",
    "DETAIL_COLUMNS",
    "DIFFICULTY_COLUMNS",
    "DIFFICULTY_REPORT_NAME",
    "INPUT_ENCODING",
    "OPTION_SEPARATOR",
    "OUTPUT_ENCODING",
    "QUESTION_FIELDS",
    "RESPONSE_FIELDS",
    "SCORE_COLUMNS",
    "SCORE_REPORT_NAME",
    "default_log_level",
    "default_output_dir",
]
