"""
Question variants for QuizMe sessions.

Each variant (free response, multiple choice, true/false) has its own module with:
- get_prompt(): Render the question for the user
- check_answer(): Validate a raw answer
- get_answer(): Render the canonical answer
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import Question


class QuestionType(str, Enum):
    """Row tags understood by the question bank."""
    FREE_RESPONSE = "FR"
    MULTIPLE_CHOICE = "MC"
    TRUE_FALSE = "TF"


# Variant registry - populated by @register decorator
QUESTION_CLASSES: dict[QuestionType, type["Question"]] = {}


def register(question_type: QuestionType):
    """Decorator to register a question variant."""
    def decorator(cls):
        QUESTION_CLASSES[question_type] = cls
        return cls
    return decorator


def get_question_class(tag: "str | QuestionType") -> "type[Question] | None":
    """Get the variant class for a row tag. Tags are matched exactly."""
    if isinstance(tag, str) and not isinstance(tag, QuestionType):
        try:
            tag = QuestionType(tag)
        except ValueError:
            return None
    return QUESTION_CLASSES.get(tag)


# Import variants to trigger registration
from . import base
from . import multiple_choice
from . import true_false

from .base import (
    AnswerResult,
    EmptyQuizError,
    InvalidQuestionError,
    Question,
    QuizError,
)
from .multiple_choice import MultipleChoiceQuestion
from .true_false import TrueFalseQuestion

__all__ = [
    "AnswerResult",
    "EmptyQuizError",
    "InvalidQuestionError",
    "MultipleChoiceQuestion",
    "QUESTION_CLASSES",
    "Question",
    "QuestionType",
    "QuizError",
    "TrueFalseQuestion",
    "get_question_class",
    "register",
]
