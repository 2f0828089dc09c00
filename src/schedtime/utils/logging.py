"""Logging configuration using loguru.

Library code logs through the shared loguru ``logger``. Parse failures are
reported at ERROR level instead of being raised, so applications that want
to see them call ``setup_logger`` once at startup.
"""

import sys
from pathlib import Path
from typing import List

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def _from_package(record) -> bool:
    return record["name"].split(".")[0] == "schedtime"


def setup_logger(
    log_level: str = "INFO",
    log_to_file: bool = False,
    log_dir: Path = Path("logs"),
    serialize: bool = False,
) -> List[int]:
    """Replace loguru sinks with a console sink and an optional file sink.

    The file sink only receives records emitted by this package.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_to_file: Whether to write ``schedtime.log`` under ``log_dir``.
        log_dir: Directory for log files.
        serialize: Whether to write the file sink as JSON lines.

    Returns:
        Handler ids of the installed sinks.
    """
    logger.remove()

    handler_ids = [
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=log_level, colorize=True)
    ]

    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                log_dir / "schedtime.log",
                format=FILE_FORMAT,
                level=log_level,
                filter=_from_package,
                rotation="10 MB",
                retention="30 days",
                compression="zip",
                serialize=serialize,
            )
        )

    return handler_ids
