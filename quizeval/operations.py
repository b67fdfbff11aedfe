"""Callable entry points behind every menu choice.

Each operation catches :class:`QuizEvalError` and reports it through an
:class:`OperationResult`, so callers never have to handle exceptions to keep
running.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

import pandas as pd

from quizeval import reports
from quizeval.config import (
    DETAILED_REPORT_NAME,
    DIFFICULTY_REPORT_NAME,
    SCORE_REPORT_NAME,
    default_output_dir,
)
from quizeval.errors import QuizEvalError
from quizeval.session import Session
from quizeval.writers import write_report

logger = logging.getLogger(__name__)


@dataclass
class OperationResult:
    ok: bool
    message: str
    path: Optional[Path] = None
    lines: List[str] = field(default_factory=list)


def _failed(label: str, exc: QuizEvalError) -> OperationResult:
    logger.error("%s failed: %s", label, exc)
    return OperationResult(ok=False, message=f"Error {label}: {exc}")


def _load(label: str, loader: Callable[[Path], int], path: Path) -> OperationResult:
    try:
        count = loader(Path(path))
    except QuizEvalError as exc:
        return _failed(f"loading {label}", exc)
    return OperationResult(ok=True, message=f"{label.capitalize()} loaded: {count}", path=Path(path))


def load_questions(session: Session, path: Path) -> OperationResult:
    return _load("questions", session.load_questions, path)


def load_answers(session: Session, path: Path) -> OperationResult:
    return _load("answers", session.load_answers, path)


def load_responses(session: Session, path: Path) -> OperationResult:
    return _load("responses", session.load_responses, path)


def load_data(
    session: Session,
    questions_path: Path,
    answers_path: Path,
    responses_path: Path,
) -> List[OperationResult]:
    """Load all three tables; a failure in one leaves the other two alone."""
    return [
        load_questions(session, questions_path),
        load_answers(session, answers_path),
        load_responses(session, responses_path),
    ]


def _export(
    label: str,
    build: Callable[[], pd.DataFrame],
    filename: str,
    output_dir: Optional[Path],
    xlsx: bool,
) -> OperationResult:
    destination = Path(output_dir or default_output_dir()) / filename
    try:
        frame = build()
        written = write_report(frame, destination, xlsx=xlsx)
    except QuizEvalError as exc:
        return _failed(label, exc)
    names = ", ".join(str(path) for path in written)
    return OperationResult(ok=True, message=f"Saved: {names}", path=destination)


def generate_score_report(
    session: Session, output_dir: Optional[Path] = None, xlsx: bool = False
) -> OperationResult:
    return _export(
        "writing report",
        lambda: reports.score_frame(reports.score_report(session)),
        SCORE_REPORT_NAME,
        output_dir,
        xlsx,
    )


def export_difficulty(
    session: Session, output_dir: Optional[Path] = None, xlsx: bool = False
) -> OperationResult:
    return _export(
        "difficulty",
        lambda: reports.difficulty_frame(reports.difficulty_report(session)),
        DIFFICULTY_REPORT_NAME,
        output_dir,
        xlsx,
    )


def export_detailed_report(
    session: Session, output_dir: Optional[Path] = None, xlsx: bool = False
) -> OperationResult:
    return _export(
        "detailed",
        lambda: reports.detail_frame(reports.detailed_report(session)),
        DETAILED_REPORT_NAME,
        output_dir,
        xlsx,
    )


def show_questions(session: Session) -> OperationResult:
    lines = reports.list_questions(session)
    return OperationResult(ok=True, message=f"=== QUESTIONS === ({len(lines)})", lines=lines)


def show_answers(session: Session) -> OperationResult:
    lines = reports.list_answers(session)
    return OperationResult(ok=True, message=f"=== ANSWERS === ({len(lines)})", lines=lines)
