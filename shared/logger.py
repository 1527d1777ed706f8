"""Loguru sinks for the CLI.

Library code only calls ``loguru.logger``; sinks are installed here, once, by
the entry point (``api.cli.repl.main``) from ``GenerationConfig.log_level`` and
``GenerationConfig.log_file``. Recovery strategy misses log at DEBUG, fallback
records at WARNING.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <7}</level> <cyan>{name}</cyan> | {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Replace loguru's default sink with the project sinks.

    Args:
        level: Minimum level for every sink
        log_file: Optional path of a rotating log file
        rotation: When the file sink rotates
        retention: How long rotated files are kept
    """
    logger.remove()
    # stdout carries command output
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        )

    logger.debug(f"Logging at {level}" + (f", file {log_file}" if log_file else ""))


__all__ = ["setup_logger", "CONSOLE_FORMAT", "FILE_FORMAT"]
