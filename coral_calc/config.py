# config.py
"""
Settings for the command-line front end.

Values come from the environment (optionally via a .env file) and are validated with pydantic.
"""

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_HISTORY_FILE = "~/.coral_calc_history"

ENV_PREFIX = "CORAL_CALC_"


class Settings(BaseModel):
    """Validated front-end settings."""
    model_config = ConfigDict(validate_default=True)

    history_file: str = DEFAULT_HISTORY_FILE
    prompt: str = "> "
    color: bool = True
    log_level: str = "WARNING"

    @field_validator('history_file')
    @classmethod
    def history_file_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('History file cannot be empty')
        return os.path.expanduser(v.strip())

    @field_validator('prompt')
    @classmethod
    def prompt_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError('Prompt cannot be empty')
        return v

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown log level: {v}')
        return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from CORAL_CALC_* variables.

    Args:
        env: mapping to read instead of os.environ; when given, no .env file is loaded

    Raises:
        pydantic.ValidationError: if a value is invalid
    """
    if env is None:
        load_dotenv()
        env = os.environ
    values = {}
    for field, var in (('history_file', 'HISTORY'), ('prompt', 'PROMPT'),
                       ('color', 'COLOR'), ('log_level', 'LOG_LEVEL')):
        raw = env.get(ENV_PREFIX + var)
        if raw is not None:
            values[field] = raw
    return Settings(**values)
