"""Build the score, difficulty and detailed reports from a loaded session.

Nothing here mutates the session; every call reflects whatever is loaded at
that moment.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import pandas as pd

from quizeval.config import DETAIL_COLUMNS, DIFFICULTY_COLUMNS, SCORE_COLUMNS
from quizeval.errors import MissingReferenceError
from quizeval.models import DetailRecord, DifficultyRecord, ScoreRecord
from quizeval.scoring import Evaluator, options_match
from quizeval.session import Session

logger = logging.getLogger(__name__)


def _rule(session: Session, evaluator: Optional[Evaluator]) -> Evaluator:
    return evaluator if evaluator is not None else session.evaluator


def score_report(session: Session, evaluator: Optional[Evaluator] = None) -> List[ScoreRecord]:
    """Total score per student over every catalog question.

    Students come in the order they first appeared in the responses table. A
    question the student never answered counts as skipped.
    """
    rule = _rule(session, evaluator)
    records: List[ScoreRecord] = []
    for student_id in session.responses:
        total = 0.0
        for question_id, question in session.questions.items():
            chosen = session.chosen_option(student_id, question_id)
            total += rule(chosen, question.correct_option, question.marks, question.penalty)
        records.append(ScoreRecord(student_id=student_id, score=total))
    return records


def difficulty_report(session: Session) -> List[DifficultyRecord]:
    """Share of students who missed each catalog question, judged by the answer key.

    Every loaded student counts toward the total, answered or not.
    """
    total = len(session.responses)
    if total == 0:
        raise MissingReferenceError("Difficulty needs at least one student; no responses are loaded.")

    records: List[DifficultyRecord] = []
    for question_id in session.questions:
        keyed = session.answers.get(question_id)
        if keyed is None:
            logger.warning("No answer-key entry for %s; counting zero correct responses.", question_id)
        correct = sum(
            1
            for student_id in session.responses
            if options_match(session.chosen_option(student_id, question_id), keyed)
        )
        records.append(
            DifficultyRecord(
                question_id=question_id,
                correct=correct,
                total=total,
                difficulty=1 - correct / total,
            )
        )
    return records


def detailed_report(session: Session, evaluator: Optional[Evaluator] = None) -> List[DetailRecord]:
    """One row per student and catalog question, including unanswered cells."""
    rule = _rule(session, evaluator)
    records: List[DetailRecord] = []
    for student_id in session.responses:
        for question_id, question in session.questions.items():
            chosen = session.chosen_option(student_id, question_id)
            records.append(
                DetailRecord(
                    student_id=student_id,
                    question_id=question_id,
                    chosen=chosen or None,
                    correct_option=question.correct_option,
                    score=rule(chosen, question.correct_option, question.marks, question.penalty),
                )
            )
    return records


def list_questions(session: Session) -> List[str]:
    return [f"{question_id}: {question.text}" for question_id, question in session.questions.items()]


def list_answers(session: Session) -> List[str]:
    return [f"{question_id}: {option}" for question_id, option in session.answers.items()]


def score_frame(records: List[ScoreRecord]) -> pd.DataFrame:
    rows = [{"student": record.student_id, "score": float(record.score)} for record in records]
    return pd.DataFrame(rows, columns=SCORE_COLUMNS)


def difficulty_frame(records: List[DifficultyRecord]) -> pd.DataFrame:
    rows = [
        {
            "qid": record.question_id,
            "correct": record.correct,
            "total": record.total,
            "difficulty": float(record.difficulty),
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=DIFFICULTY_COLUMNS)


def detail_frame(records: List[DetailRecord]) -> pd.DataFrame:
    rows = [
        {
            "student": record.student_id,
            "qid": record.question_id,
            "chosen": record.chosen,
            "correct": record.correct_option,
            "marks": float(record.score),
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=DETAIL_COLUMNS)
