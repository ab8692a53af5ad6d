"""
True/False question variant.

Binary statements. Any of T, True, Y, Yes (case-insensitive) counts as a
"true" response; every other response counts as "false".
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from . import QuestionType, register
from .base import InvalidQuestionError, Question

TRUE_INPUTS = frozenset({"t", "true", "y", "yes"})
PROMPT_PREFIX = "True or False: "


def parse_user_boolean(user_input: str) -> bool:
    """Map a raw response to a boolean; unrecognized input means False."""
    return user_input.lower() in TRUE_INPUTS


@register(QuestionType.TRUE_FALSE)
@dataclass(frozen=True)
class TrueFalseQuestion(Question):
    """A statement the user marks as true or false."""

    answer: bool | str

    def __post_init__(self) -> None:
        answer = self.answer
        if isinstance(answer, str):
            if answer.lower() not in ("true", "false"):
                raise InvalidQuestionError(f"answer must be true or false, got {answer!r}")
            answer = answer.lower() == "true"
        object.__setattr__(self, "answer", "true" if answer else "false")

    @classmethod
    def from_row(cls, row: Sequence[str]) -> TrueFalseQuestion:
        """Build from ``[tag, prompt, "true"|"false"]``; anything but "true" is False."""
        cls._require_fields(row)
        return cls(row[1], row[2].lower() == "true")

    @property
    def expected(self) -> bool:
        return self.answer == "true"

    def check_answer(self, user_input: str) -> bool:
        return parse_user_boolean(user_input) == self.expected

    def get_answer(self) -> str:
        return "True" if self.expected else "False"

    def get_prompt(self) -> str:
        return PROMPT_PREFIX + self.prompt
