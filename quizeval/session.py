"""The loaded state one evaluation works against."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from quizeval import loaders
from quizeval.models import Question, ResponseMap
from quizeval.scoring import Evaluator, evaluate

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Catalog, answer key and response matrix plus the active scoring rule.

    Each ``load_*`` call swaps in a complete new index only after the whole
    file parsed, so a failed load keeps whatever was loaded before. Sessions
    share nothing with each other.
    """

    questions: Dict[str, Question] = field(default_factory=dict)
    answers: Dict[str, str] = field(default_factory=dict)
    responses: Dict[str, ResponseMap] = field(default_factory=dict)
    evaluator: Evaluator = evaluate

    def load_questions(self, path: Path) -> int:
        self.questions = loaders.load_questions(Path(path))
        self._warn_on_key_mismatch()
        return len(self.questions)

    def load_answers(self, path: Path) -> int:
        self.answers = loaders.load_answers(Path(path))
        self._warn_on_key_mismatch()
        return len(self.answers)

    def load_responses(self, path: Path) -> int:
        self.responses = loaders.load_responses(Path(path))
        return len(self.responses)

    def chosen_option(self, student_id: str, question_id: str) -> Optional[str]:
        """The student's recorded option, or None when there is no such cell."""
        return self.responses.get(student_id, {}).get(question_id)

    def _warn_on_key_mismatch(self) -> None:
        # Scoring reads the catalog, difficulty reads the answer key.
        if not self.questions or not self.answers:
            return
        for question_id, question in self.questions.items():
            keyed = self.answers.get(question_id)
            if keyed is None:
                logger.warning("Question %s has no answer-key entry.", question_id)
            elif keyed.lower() != question.correct_option.lower():
                logger.warning(
                    "Question %s: catalog says '%s' but the answer key says '%s'.",
                    question_id,
                    question.correct_option,
                    keyed,
                )
