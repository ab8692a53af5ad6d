"""
Base question type and shared result/error types.

The base ``Question`` is also the free-response variant: the user's answer is
correct when it equals the canonical answer, ignoring case.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from . import QuestionType, register


class QuizError(Exception):
    """Base class for quiz errors."""


class InvalidQuestionError(QuizError, ValueError):
    """A question could not be built from the supplied values."""


class EmptyQuizError(QuizError):
    """Raised when a quiz has no questions to ask or score."""


@dataclass(frozen=True)
class AnswerResult:
    """Result of checking an answer."""
    correct: bool
    feedback: str
    user_answer: str
    correct_answer: str


@register(QuestionType.FREE_RESPONSE)
@dataclass(frozen=True)
class Question:
    """A free response question with a case-insensitive expected answer."""

    prompt: str
    answer: str

    # Row fields required before any variant-specific extras: tag, prompt, answer
    MIN_FIELDS = 3

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Question:
        """Build a question from a ``[tag, prompt, answer, ...]`` row."""
        cls._require_fields(row)
        return cls(row[1], row[2])

    @classmethod
    def _require_fields(cls, row: Sequence[str]) -> None:
        if len(row) < cls.MIN_FIELDS:
            raise InvalidQuestionError(
                f"expected at least {cls.MIN_FIELDS} fields, got {len(row)}"
            )

    def check_answer(self, user_input: str) -> bool:
        """Return True if the input equals the answer, ignoring case."""
        return self.answer.lower() == user_input.lower()

    def get_answer(self) -> str:
        return self.answer

    def get_prompt(self) -> str:
        return self.prompt

    def grade(self, user_input: str) -> AnswerResult:
        """Check the input and package the outcome for display."""
        correct = self.check_answer(user_input)
        correct_answer = self.get_answer()
        return AnswerResult(
            correct=correct,
            feedback="Correct!" if correct else f"Incorrect. The correct answer is: {correct_answer}",
            user_answer=user_input,
            correct_answer=correct_answer,
        )

    def __str__(self) -> str:
        return f"{self.get_prompt()}\n{self.get_answer()}"
