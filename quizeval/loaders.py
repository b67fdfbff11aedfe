"""Parse the questions, answers and responses tables into fresh indices.

Every loader reads the whole file before returning, so a malformed row raises
:class:`LoadError` without leaving half of a table behind.
"""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

from quizeval.config import (
    ANSWER_FIELDS,
    INPUT_ENCODING,
    OPTION_SEPARATOR,
    QUESTION_FIELDS,
    RESPONSE_FIELDS,
)
from quizeval.errors import LoadError
from quizeval.models import Question, ResponseMap

logger = logging.getLogger(__name__)


def read_csv_rows(path: Path) -> Iterator[Tuple[int, List[str]]]:
    """Yield ``(line_number, fields)`` for each data row, skipping the header.

    Fields are stripped and fully blank rows are skipped.
    """
    try:
        with path.open("r", encoding=INPUT_ENCODING, newline="") as fp:
            reader = csv.reader(fp)
            header = next(reader, None)
            if header is None:
                raise LoadError(f"{path} is empty; expected a header row.")
            for row in reader:
                fields = [field.strip() for field in row]
                if not any(fields):
                    continue
                yield reader.line_num, fields
    except FileNotFoundError as exc:
        raise LoadError(f"File not found: {path}") from exc
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise LoadError(f"Failed to read '{path}': {exc}") from exc


def _parse_amount(raw: str, field: str, path: Path, line: int) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise LoadError(f"{path}, line {line}: {field} '{raw}' is not a number.") from exc
    if not math.isfinite(value) or value < 0:
        raise LoadError(f"{path}, line {line}: {field} must be a non-negative number, got '{raw}'.")
    return value


def _expect_fields(fields: List[str], names: List[str], path: Path, line: int) -> None:
    if len(fields) != len(names):
        raise LoadError(
            f"{path}, line {line}: expected {len(names)} fields ({','.join(names)}), "
            f"found {len(fields)}."
        )


def load_questions(path: Path) -> Dict[str, Question]:
    """Read ``id,text,opt1|opt2|...,correctOption,marks,penalty`` rows."""
    catalog: Dict[str, Question] = {}
    for line, fields in read_csv_rows(path):
        _expect_fields(fields, QUESTION_FIELDS, path, line)
        question_id, text, raw_options, correct, raw_marks, raw_penalty = fields
        if not question_id:
            raise LoadError(f"{path}, line {line}: question id is blank.")
        if question_id in catalog:
            raise LoadError(f"{path}, line {line}: duplicate question '{question_id}'.")
        if not correct:
            raise LoadError(f"{path}, line {line}: question '{question_id}' has no correct option.")
        options = tuple(part.strip() for part in raw_options.split(OPTION_SEPARATOR) if part.strip())
        question = Question(
            question_id=question_id,
            text=text,
            options=options,
            correct_option=correct,
            marks=_parse_amount(raw_marks, "marks", path, line),
            penalty=_parse_amount(raw_penalty, "penalty", path, line),
        )
        if options and not question.has_option(correct):
            logger.warning(
                "%s, line %d: correct option '%s' for %s is not among its options (%s).",
                path,
                line,
                correct,
                question_id,
                ", ".join(options),
            )
        catalog[question_id] = question
    logger.info("Loaded %d question(s) from %s", len(catalog), path)
    return catalog


def load_answers(path: Path) -> Dict[str, str]:
    """Read ``id,correctOption`` rows."""
    answers: Dict[str, str] = {}
    for line, fields in read_csv_rows(path):
        _expect_fields(fields, ANSWER_FIELDS, path, line)
        question_id, correct = fields
        if not question_id or not correct:
            raise LoadError(f"{path}, line {line}: each row needs both a question id and an option.")
        if question_id in answers:
            raise LoadError(f"{path}, line {line}: duplicate question '{question_id}'.")
        answers[question_id] = correct
    logger.info("Loaded %d answer(s) from %s", len(answers), path)
    return answers


def load_responses(path: Path) -> Dict[str, ResponseMap]:
    """Read ``studentId,questionId,chosenOption`` rows into a per-student index.

    A missing or blank chosen option is kept as an unanswered cell. When a
    (student, question) pair repeats, the later row wins.
    """
    responses: Dict[str, ResponseMap] = {}
    for line, fields in read_csv_rows(path):
        if len(fields) == len(RESPONSE_FIELDS) - 1:
            fields = fields + [""]
        _expect_fields(fields, RESPONSE_FIELDS, path, line)
        student_id, question_id, chosen = fields
        if not student_id or not question_id:
            raise LoadError(f"{path}, line {line}: student id and question id are required.")
        answered = responses.setdefault(student_id, {})
        if question_id in answered:
            logger.debug(
                "%s, line %d: %s answered %s again; keeping the later choice.",
                path,
                line,
                student_id,
                question_id,
            )
        answered[question_id] = chosen
    logger.info("Loaded responses for %d student(s) from %s", len(responses), path)
    return responses
