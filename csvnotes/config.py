"""
Runtime settings read from the environment.

A ``.env`` file in the working directory is loaded first, so local overrides
do not need to be exported. Recognized variables:

- CSVNOTES_LOG_LEVEL: logging level name (default "INFO")
- CSVNOTES_LOG_FILE: optional log file name, written under ``logs/``
- CSVNOTES_TITLE: page title shown on the upload and result pages
- CSVNOTES_HOST, CSVNOTES_PORT: where `csv-notes` serves the app
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_file: Optional[str] = None
    title: str = "CSV Notes"
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        log_level=os.getenv("CSVNOTES_LOG_LEVEL", "INFO"),
        log_file=os.getenv("CSVNOTES_LOG_FILE") or None,
        title=os.getenv("CSVNOTES_TITLE", "CSV Notes"),
        host=os.getenv("CSVNOTES_HOST", "127.0.0.1"),
        port=int(os.getenv("CSVNOTES_PORT", 8000)),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
