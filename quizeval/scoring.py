"""Scoring rules that turn one response into a signed score.

A rule is any callable ``(chosen, correct, marks, penalty) -> float``. The
session holds one and every report calls it the same way, so the score report
and the detailed report always agree.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

Evaluator = Callable[[Optional[str], str, float, float], float]


def _is_blank(chosen: Optional[str]) -> bool:
    return chosen is None or not chosen.strip()


def options_match(chosen: Optional[str], correct: Optional[str]) -> bool:
    """Case-insensitive option comparison; a blank side never matches."""
    if _is_blank(chosen) or _is_blank(correct):
        return False
    return chosen.strip().lower() == correct.strip().lower()


def evaluate(chosen: Optional[str], correct: str, marks: float, penalty: float) -> float:
    """Award ``marks`` for a correct option, deduct ``penalty`` for a wrong one.

    A skipped question (``None`` or blank) scores 0.
    """
    if _is_blank(chosen):
        return 0.0
    return float(marks) if options_match(chosen, correct) else 0.0 - float(penalty)


def no_penalty_evaluate(chosen: Optional[str], correct: str, marks: float, penalty: float) -> float:
    """Like :func:`evaluate` without negative marking."""
    return float(marks) if options_match(chosen, correct) else 0.0


def capped_penalty(max_penalty: float) -> Evaluator:
    """Build a rule whose deduction for a wrong answer never exceeds ``max_penalty``."""
    if max_penalty < 0:
        raise ValueError("max_penalty cannot be negative.")

    def _evaluate(chosen: Optional[str], correct: str, marks: float, penalty: float) -> float:
        return evaluate(chosen, correct, marks, min(float(penalty), float(max_penalty)))

    return _evaluate


SCORING_RULES: Dict[str, Evaluator] = {
    "standard": evaluate,
    "no-penalty": no_penalty_evaluate,
}


def resolve_rule(name: str, max_penalty: Optional[float] = None) -> Evaluator:
    """Look up a rule by its CLI name, optionally wrapping it with a penalty cap."""
    try:
        rule = SCORING_RULES[name]
    except KeyError as exc:
        choices = ", ".join(sorted(SCORING_RULES))
        raise ValueError(f"Unknown scoring rule '{name}'. Choose one of: {choices}.") from exc
    if max_penalty is not None and rule is evaluate:
        return capped_penalty(max_penalty)
    return rule
