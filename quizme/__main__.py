"""
Entry point for running QuizMe as a module.

Usage:
    python -m quizme
    python -m quizme run --file review.csv
    python -m quizme --help
"""
from .cli import main

if __name__ == "__main__":
    main()
