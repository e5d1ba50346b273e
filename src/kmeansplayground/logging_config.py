"""
Logging Configuration
Console (and optionally file) output for the 'kmeansplayground' logger tree.

Model modules log through `logging.getLogger(__name__)`; nothing is printed
until `setup_logging` attaches handlers to the package logger.
"""
import logging
import sys
from typing import Optional, Union


LOGGER_NAMESPACE = "kmeansplayground"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_level(level: Union[int, str]) -> int:
    """
    Turn a level given as a number or a name ('debug', 'INFO', ...) into
    the numeric logging level.

    Raises:
        ValueError: for a name that is not one of LEVEL_NAMES.
    """
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name not in LEVEL_NAMES:
        raise ValueError(f"Unknown log level '{level}'. Choose one of: {', '.join(LEVEL_NAMES)}")
    return logging.getLevelNamesMapping()[name]


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger. Safe to call repeatedly: previous handlers
    are closed and replaced.

    Args:
        level: Numeric level or level name.
        log_file: Optional path; the file is truncated on every start.

    Returns:
        The configured package logger.
    """
    numeric_level = resolve_level(level)

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(numeric_level)

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.addHandler(_handler(logging.StreamHandler(sys.stdout), numeric_level))
    if log_file:
        logger.addHandler(_handler(logging.FileHandler(log_file, mode='w', encoding='utf-8'), numeric_level))

    logger.debug(f"Logging initialized at {logging.getLevelName(numeric_level)}.")
    return logger
