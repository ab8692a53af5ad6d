"""
Question bank loader.

Reads a delimited text file (or the bank bundled with the package) and
returns its rows as lists of raw fields, ready for ``QuizRunner.build_questions``.
"""

from __future__ import annotations

import csv
from importlib import resources
from pathlib import Path
from typing import TextIO

from loguru import logger

from quizme.questions.base import QuizError

BUNDLED_BANK = "questions.csv"


class QuestionSourceError(QuizError):
    """The question source could not be opened or read."""


class QuestionLoader:
    """Load raw question rows from a delimited text source."""

    def __init__(
        self,
        path: Path | str | None = None,
        delimiter: str = ",",
        encoding: str = "utf-8",
    ):
        """
        Initialize loader.

        Args:
            path: Question bank file. Defaults to the bank shipped in quizme/data/.
            delimiter: Single field separator character.
            encoding: Text encoding of the source.
        """
        self.path = Path(path) if path is not None else None
        self.delimiter = delimiter
        self.encoding = encoding

    @property
    def source_name(self) -> str:
        return str(self.path) if self.path is not None else f"<bundled {BUNDLED_BANK}>"

    def _open(self) -> TextIO:
        if self.path is None:
            bank = resources.files("quizme.data").joinpath(BUNDLED_BANK)
            return bank.open("r", encoding=self.encoding, newline="")
        return self.path.open("r", encoding=self.encoding, newline="")

    def load_numbered_rows(self) -> list[tuple[int, list[str]]]:
        """
        Read every non-blank row with its line number in the source.

        Fields are split on the delimiter only; quote characters are kept as text.

        Returns:
            ``(line, fields)`` pairs in file order, lines numbered from 1.

        Raises:
            QuestionSourceError: the source is missing or unreadable.
        """
        logger.debug(f"Loading questions from {self.source_name}")
        try:
            with self._open() as handle:
                reader = csv.reader(handle, delimiter=self.delimiter, quoting=csv.QUOTE_NONE)
                numbered = [
                    (reader.line_num, row)
                    for row in reader
                    if any(field.strip() for field in row)
                ]
        except FileNotFoundError as e:
            raise QuestionSourceError(f"File not found: {self.source_name}") from e
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise QuestionSourceError(f"Error reading {self.source_name}: {e}") from e

        logger.info(f"Loaded {len(numbered)} rows from {self.source_name}")
        return numbered

    def load_rows(self) -> list[list[str]]:
        """Read every non-blank row, split into fields on the delimiter."""
        return [row for _, row in self.load_numbered_rows()]
