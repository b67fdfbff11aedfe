"""Exceptions raised by the loaders, report generator and writers."""

from __future__ import annotations


class QuizEvalError(ValueError):
    """Base class for every error surfaced by an operation."""


class LoadError(QuizEvalError):
    """Raised when an input table is unreadable or malformed."""


class MissingReferenceError(QuizEvalError):
    """Raised when a report needs data that was never loaded."""


class WriteError(QuizEvalError):
    """Raised when a report file cannot be created or written."""
