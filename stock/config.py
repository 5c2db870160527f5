# stock/config.py
from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from stock.errors import ConfigurationError

DB_PATH_ENV = "STOCK_DB_PATH"
LOG_LEVEL_ENV = "STOCK_LOG_LEVEL"


def _get_env(key: str, default: str) -> str:
    v = os.getenv(key)
    if not v:
        return default
    return v


def parse_log_level(level: str) -> int:
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ConfigurationError(f"Unknown log level: {level}")
    return value


class Settings(BaseModel):
    db_path: str = Field(default="stock.db", description="SQLite file holding the products table")
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        parse_log_level(v)
        return v.strip().upper()


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Read settings from the environment, after loading a .env file if one exists.
    Variables already set in the environment win over the .env file.
    """
    load_dotenv(env_file)
    try:
        return Settings(
            db_path=_get_env(DB_PATH_ENV, "stock.db"),
            log_level=_get_env(LOG_LEVEL_ENV, "WARNING"),
        )
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
