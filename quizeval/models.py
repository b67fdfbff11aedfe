"""Records held in the session indices and emitted by the reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# question id -> chosen option
ResponseMap = Dict[str, str]


@dataclass(frozen=True)
class Question:
    question_id: str
    text: str
    options: Tuple[str, ...]
    correct_option: str
    marks: float
    penalty: float

    def has_option(self, label: str) -> bool:
        """Return True when ``label`` is one of the listed options, ignoring case."""
        wanted = label.strip().lower()
        return any(option.lower() == wanted for option in self.options)


@dataclass(frozen=True)
class ScoreRecord:
    student_id: str
    score: float


@dataclass(frozen=True)
class DifficultyRecord:
    question_id: str
    correct: int
    total: int
    difficulty: float


@dataclass(frozen=True)
class DetailRecord:
    """One (student, question) cell of the detailed report."""

    student_id: str
    question_id: str
    chosen: Optional[str]
    correct_option: str
    score: float
