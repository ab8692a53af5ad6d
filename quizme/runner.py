"""
QuizRunner: orchestration layer for one quiz session.

- Rows -> typed questions via the variant registry (quizme.questions)
- Ordering -> fresh random permutation per run
- Console I/O -> QuizConsole collaborator (Rich by default)
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from loguru import logger
from rich.console import Console

from quizme.questions import get_question_class
from quizme.questions.base import AnswerResult, EmptyQuizError, InvalidQuestionError, Question

BANNER = (
    "=======================\n"
    ' "Quiz Me" Test Review \n'
    "=======================\n"
)


def score_percent(correct: int, total: int) -> int:
    """Whole-number percentage, truncated (2 of 3 is 66)."""
    if total == 0:
        raise EmptyQuizError("Cannot score a quiz with no questions")
    return correct * 100 // total


@dataclass(frozen=True)
class SkippedRow:
    """A source row that produced no question."""
    line: int
    reason: str


@dataclass
class QuizResult:
    """Outcome of a completed quiz."""
    total: int
    correct: int
    results: list[AnswerResult] = field(default_factory=list)

    @property
    def percent(self) -> int:
        return score_percent(self.correct, self.total)


class QuizConsole(Protocol):
    """Line-oriented I/O used by the runner."""

    def show(self, text: str, style: str | None = None) -> None:
        """Display one block of text."""
        ...

    def ask(self, prompt: str) -> str:
        """Read one line of user input. Raises EOFError when input ends."""
        ...


class RichQuizConsole:
    """QuizConsole backed by a Rich console on stdin/stdout."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def show(self, text: str, style: str | None = None) -> None:
        # Question text is user content: never interpret it as Rich markup
        self.console.print(text, style=style, markup=False)

    def ask(self, prompt: str) -> str:
        return self.console.input(prompt)


class QuizRunner:
    """
    Build, order, and ask the questions of one quiz.

    Args:
        console: I/O collaborator. Defaults to RichQuizConsole().
        rng: Random source for ordering. Defaults to a fresh unseeded Random.
    """

    def __init__(self, console: QuizConsole | None = None, rng: random.Random | None = None):
        self.console = console or RichQuizConsole()
        self.rng = rng or random.Random()
        self.skipped_rows: list[SkippedRow] = []

    def build_questions(
        self,
        rows: Iterable[Sequence[str]],
        line_numbers: Sequence[int] | None = None,
    ) -> list[Question]:
        """
        Turn raw rows into questions, dispatching on the row tag.

        Rows with an unknown tag, too few fields, or values the variant rejects
        are skipped; each skip is logged and recorded in ``skipped_rows``.

        Args:
            rows: Raw field rows.
            line_numbers: Source line of each row, used to report skips.
                Defaults to numbering the rows from 1.
        """
        rows = list(rows)
        if line_numbers is None:
            line_numbers = range(1, len(rows) + 1)

        questions: list[Question] = []
        skipped: list[SkippedRow] = []

        for line, row in zip(line_numbers, rows, strict=True):
            tag = row[0] if row else ""
            question_class = get_question_class(tag)
            if question_class is None:
                skipped.append(SkippedRow(line, f"unrecognized question type {tag!r}"))
                continue
            try:
                questions.append(question_class.from_row(row))
            except InvalidQuestionError as e:
                skipped.append(SkippedRow(line, f"invalid {tag} question: {e}"))

        for skip in skipped:
            logger.warning(f"Skipping line {skip.line}: {skip.reason}")
        logger.debug(f"Built {len(questions)} questions, skipped {len(skipped)} rows")

        self.skipped_rows = skipped
        return questions

    def shuffle(self, questions: Sequence[Question]) -> list[Question]:
        """Return a new, uniformly random ordering of the questions."""
        ordered = list(questions)
        self.rng.shuffle(ordered)
        return ordered

    def ask(self, number: int, question: Question) -> AnswerResult:
        """Present one question, read the answer, and show feedback."""
        self.console.show(f"Question {number}: {question.get_prompt()}")
        result = question.grade(self.console.ask("> "))
        self.console.show(result.feedback, style="green" if result.correct else "red")
        self.console.show("")
        return result

    def run(self, questions: Sequence[Question]) -> QuizResult:
        """
        Ask every question once in random order and report the score.

        Raises:
            EmptyQuizError: there are no questions to ask.
        """
        if not questions:
            raise EmptyQuizError("No questions to ask")

        self.console.show(BANNER)

        results = [
            self.ask(number, question)
            for number, question in enumerate(self.shuffle(questions), start=1)
        ]
        quiz = QuizResult(
            total=len(results),
            correct=sum(result.correct for result in results),
            results=results,
        )

        logger.info(f"Quiz finished: {quiz.correct}/{quiz.total} correct")
        self.console.show(f"Your score: {quiz.percent}%", style="bold")
        return quiz
