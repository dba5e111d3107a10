# config.py
"""
Runtime settings for the console front end.

Settings come from NOTATION_* environment variables; a .env file in the
working directory is loaded first if present.
"""

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "NOTATION_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class NotationSettings(BaseModel):
    """Settings shared by the REPL and the command-line interface."""
    log_level: str = "WARNING"
    history_file: str = Field(default_factory=lambda: os.path.expanduser("~/.notation_history"))
    max_stack_size: Optional[int] = Field(default=None, ge=1, description="Stack limit, unbounded if unset")
    precision: Optional[int] = Field(default=None, ge=0, description="Digits after the decimal point in printed results")

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator('history_file')
    @classmethod
    def history_file_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('history_file cannot be empty')
        return os.path.expanduser(v.strip())

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(**overrides) -> NotationSettings:
    """Build settings from the environment, then apply keyword overrides.

    Empty environment values are ignored. Raises pydantic.ValidationError for
    values that fail validation.
    """
    load_dotenv(find_dotenv(usecwd=True))
    values = {}
    for name in NotationSettings.model_fields:
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return NotationSettings(**values)
