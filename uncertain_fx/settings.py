from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

LOG_LEVEL_ENV = "UNCERTAIN_FX_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"


def _log_level() -> str:
    level = os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{LOG_LEVEL_ENV} must be a logging level name, got {level!r}")
    return level


def load_settings() -> Settings:
    """Read settings from the environment, after loading a local .env file."""
    load_dotenv()
    return Settings(log_level=_log_level())
