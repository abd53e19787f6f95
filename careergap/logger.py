"""
Logger setup for applications embedding the career analysis engine.

Library modules only emit records through ``loguru.logger``; sinks are
configured here, on demand, never at import time.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from careergap.config import load_settings

CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function} | {message}"


def setup_logger(level: str | None = None, log_file: Path | None = None) -> Path | None:
    """
    Configure loguru sinks for the engine.

    Args:
        level: Console level; falls back to CAREERGAP_LOG_LEVEL (default WARNING)
        log_file: Optional file that receives everything at DEBUG;
            falls back to CAREERGAP_LOG_FILE

    Returns:
        Path to the log file, or None when only the console sink is used
    """
    settings = load_settings()
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file is not None:
        log_file.parent.mkdir(exist_ok=True, parents=True)
        logger.add(log_file, format=FILE_FORMAT, level="DEBUG")

    logger.debug(f"Logger configured (console={level}, file={log_file})")
    return log_file
