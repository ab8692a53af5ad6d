"""
Configuration settings for QuizMe.

Uses Pydantic Settings for environment variable management with .env file support.
Variables are prefixed with ``QUIZME_`` (e.g. ``QUIZME_QUESTIONS_FILE``).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="QUIZME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Question Bank
    # ========================================
    questions_file: str | None = Field(
        default=None,
        description="Question bank path (None for the bundled bank)",
    )
    delimiter: str = Field(
        default=",",
        description="Single character separating fields in a row",
    )
    encoding: str = Field(
        default="utf-8",
        description="Question bank text encoding",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )

    @field_validator("delimiter")
    @classmethod
    def delimiter_is_single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be exactly one character")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
