"""
QuizMe CLI - terminal quiz runner.

Usage:
    quizme                         # Run the bundled question bank
    quizme run --file bank.csv     # Run a question bank from disk
    quizme run -f bank.tsv -d "\\t" # Tab-delimited bank
    quizme validate -f bank.csv    # Check a bank without asking anything
"""

from __future__ import annotations

import sys
from collections import Counter
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quizme.config import Settings, get_settings
from quizme.loader import QuestionLoader, QuestionSourceError
from quizme.questions import QUESTION_CLASSES
from quizme.questions.base import EmptyQuizError
from quizme.runner import QuizRunner, RichQuizConsole

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="quizme",
    help="QuizMe - answer a bank of questions in random order and get a score",
    invoke_without_command=True,
    rich_markup_mode="rich",
)

console = Console(highlight=False)

FileOption = Annotated[
    Path | None, typer.Option("--file", "-f", help="Question bank file (default: bundled bank)")
]
DelimiterOption = Annotated[
    str | None, typer.Option("--delimiter", "-d", help="Field delimiter (one character)")
]


def configure_logging(settings: Settings) -> None:
    """Route loguru output to stderr (and optionally a file) at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(
            settings.log_file,
            level="DEBUG",
            rotation="1 MB",
            retention=3,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        )


def _make_loader(file: Path | None, delimiter: str | None) -> QuestionLoader:
    settings = get_settings()
    delimiter = delimiter if delimiter is not None else settings.delimiter
    if delimiter == "\\t":
        delimiter = "\t"
    if len(delimiter) != 1:
        raise typer.BadParameter("delimiter must be exactly one character", param_hint="--delimiter")
    return QuestionLoader(
        path=file if file is not None else settings.questions_file,
        delimiter=delimiter,
        encoding=settings.encoding,
    )


def _load_rows(loader: QuestionLoader) -> tuple[list[list[str]], list[int]]:
    """Load rows and their source lines, reporting source errors and exiting instead of raising."""
    try:
        numbered = loader.load_numbered_rows()
    except QuestionSourceError as e:
        logger.error(str(e))
        console.print(f"[red]Could not load questions:[/] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    return [row for _, row in numbered], [line for line, _ in numbered]


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """
    QuizMe question bank runner.

    Run without arguments to take the quiz from the bundled question bank.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    configure_logging(settings)
    if ctx.invoked_subcommand is None:
        run(file=None, delimiter=None)


@app.command()
def run(file: FileOption = None, delimiter: DelimiterOption = None) -> None:
    """
    Take a quiz: every question once, in random order.

    Examples:
        quizme run
        quizme run --file review.csv
    """
    loader = _make_loader(file, delimiter)
    rows, line_numbers = _load_rows(loader)

    runner = QuizRunner(console=RichQuizConsole(console))
    questions = runner.build_questions(rows, line_numbers)

    try:
        runner.run(questions)
    except EmptyQuizError as e:
        console.print(f"[yellow]No questions to ask in {escape(loader.source_name)}[/]")
        raise typer.Exit(code=1) from e
    except (EOFError, KeyboardInterrupt) as e:
        console.print("\n[yellow]Quiz aborted before the last question.[/]")
        raise typer.Exit(code=1) from e


@app.command()
def validate(file: FileOption = None, delimiter: DelimiterOption = None) -> None:
    """
    Check a question bank without asking anything.

    Exits with code 1 when any row is skipped or no questions are built.
    """
    loader = _make_loader(file, delimiter)
    rows, line_numbers = _load_rows(loader)

    runner = QuizRunner(console=RichQuizConsole(console))
    questions = runner.build_questions(rows, line_numbers)

    counts = Counter(type(question) for question in questions)
    table = Table(title=escape(f"Question bank: {loader.source_name}"))
    table.add_column("Type", style="cyan")
    table.add_column("Questions", justify="right")
    for question_type, question_class in QUESTION_CLASSES.items():
        table.add_row(question_type.value, str(counts.get(question_class, 0)))
    table.add_row("[bold]Total[/]", f"[bold]{len(questions)}[/]")
    console.print(table)

    for skip in runner.skipped_rows:
        console.print(f"[red]Line {skip.line} skipped:[/] {escape(skip.reason)}")

    if runner.skipped_rows or not questions:
        raise typer.Exit(code=1)
    console.print("[green]Question bank OK[/]")


# =============================================================================
# Entry Point
# =============================================================================

def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
