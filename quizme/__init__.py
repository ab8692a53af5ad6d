"""
QuizMe - terminal quiz runner.

Loads a delimited question bank, asks every question in random order,
and reports a whole-number percentage score.
"""

__version__ = "1.0.0"
