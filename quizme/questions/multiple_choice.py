"""
Multiple choice question variant.

- The canonical answer is a letter; A maps to the first choice, B to the second, and so on.
- The user may answer with the letter or retype the choice text (both case-insensitive).
"""

from __future__ import annotations

import string
from collections.abc import Sequence
from dataclasses import dataclass

from . import QuestionType, register
from .base import InvalidQuestionError, Question

LETTERS = string.ascii_lowercase


@register(QuestionType.MULTIPLE_CHOICE)
@dataclass(frozen=True)
class MultipleChoiceQuestion(Question):
    """A question answered by choice letter or choice text."""

    choices: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        letter = self.answer.lower()
        if len(letter) != 1 or letter not in LETTERS:
            raise InvalidQuestionError(f"answer must be a single letter, got {self.answer!r}")
        if len(self.choices) > len(LETTERS):
            raise InvalidQuestionError(
                f"at most {len(LETTERS)} choices are supported, got {len(self.choices)}"
            )

        index = LETTERS.index(letter)
        if index >= len(self.choices):
            raise InvalidQuestionError(
                f"answer {self.answer.upper()!r} has no matching choice "
                f"({len(self.choices)} choices given)"
            )

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "answer", letter)
        object.__setattr__(self, "choices", tuple(self.choices))

    @classmethod
    def from_row(cls, row: Sequence[str]) -> MultipleChoiceQuestion:
        """Build from ``[tag, prompt, letter, choice1, choice2, ...]``."""
        cls._require_fields(row)
        return cls(row[1], row[2], tuple(row[3:]))

    @property
    def answer_index(self) -> int:
        """Zero-based index of the correct choice."""
        return LETTERS.index(self.answer)

    def check_answer(self, user_input: str) -> bool:
        """Accept the choice letter or the full choice text, ignoring case."""
        index = self.answer_index

        if len(user_input) == 1 and user_input.lower() == LETTERS[index]:
            return True

        return user_input.lower() == self.choices[index].lower()

    def get_answer(self) -> str:
        return self.answer.upper()

    def get_prompt(self) -> str:
        lines = [self.prompt]
        for letter, choice in zip(LETTERS.upper(), self.choices):
            lines.append(f"{letter}: {choice}")
        return "\n".join(lines)
