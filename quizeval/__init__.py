"""Score quiz responses against an answer key and export CSV reports."""

from quizeval.errors import LoadError, MissingReferenceError, QuizEvalError, WriteError
from quizeval.models import DetailRecord, DifficultyRecord, Question, ScoreRecord
from quizeval.scoring import Evaluator, evaluate
from quizeval.session import Session

__all__ = [
    "DetailRecord",
    "DifficultyRecord",
    "Evaluator",
    "LoadError",
    "MissingReferenceError",
    "Question",
    "QuizEvalError",
    "ScoreRecord",
    "Session",
    "WriteError",
    "evaluate",
]
