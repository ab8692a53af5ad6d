"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from quizme.config import get_settings
from quizme.questions import MultipleChoiceQuestion, Question, TrueFalseQuestion


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate each test from QUIZME_* variables and the settings cache."""
    for name in ("QUIZME_QUESTIONS_FILE", "QUIZME_DELIMITER", "QUIZME_LOG_LEVEL", "QUIZME_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_rows():
    """Raw rows covering every question type plus one unknown tag."""
    return [
        ["FR", "What is the default port for HTTP?", "80"],
        ["MC", "Capital of France?", "A", "Paris", "London"],
        ["TF", "The sky is blue", "TRUE"],
        ["XX", "prompt", "answer"],
    ]


@pytest.fixture
def sample_questions():
    """One question of each type."""
    return [
        Question("What is the default port for HTTP?", "80"),
        MultipleChoiceQuestion("Capital of France?", "a", ("Paris", "London")),
        TrueFalseQuestion("The sky is blue", True),
    ]


@pytest.fixture
def write_bank(tmp_path):
    """Write a question bank file and return its path."""
    def _write(text: str, name: str = "questions.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
