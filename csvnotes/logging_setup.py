import logging
import sys
from pathlib import Path
from typing import Optional

from .config import get_settings


def get_logger(name: str, log_file: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Returns a logger with console + optional file handler.

    Args:
        name: Logger name (usually __name__)
        log_file: Optional filename in logs/ dir; defaults to CSVNOTES_LOG_FILE
        level: Logging level; defaults to CSVNOTES_LOG_LEVEL
    """
    logger = logging.getLogger(name)

    # Avoid adding duplicate handlers if called multiple times
    if logger.handlers:
        return logger

    settings = get_settings()
    if level is None:
        level = settings.log_level_value
    if log_file is None:
        log_file = settings.log_file

    logger.setLevel(level)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = Path("logs")
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
