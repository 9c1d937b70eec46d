"""
Logging setup for the cachematrix package.

The library only creates loggers; nothing is printed until an application
(or the experiment scripts) calls `setup_logging`. The level can be given
explicitly or taken from the CACHEMATRIX_LOG_LEVEL environment variable.
"""
import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "cachematrix"
LEVEL_ENV_VAR = "CACHEMATRIX_LOG_LEVEL"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: Optional[Union[int, str]] = None) -> int:
    """
    Turn a level name or number into a logging level.

    Args:
        level: e.g. logging.DEBUG or "debug". None reads CACHEMATRIX_LOG_LEVEL,
            falling back to INFO.

    Returns:
        int: Numeric logging level

    Raises:
        ValueError: If the name is not a known logging level
    """
    if level is None:
        level = os.getenv(LEVEL_ENV_VAR, "INFO")
    if isinstance(level, int):
        return level

    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def setup_logging(level: Optional[Union[int, str]] = None,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the 'cachematrix' logger.

    Existing handlers on the logger are replaced, so calling this twice does
    not print every record twice.

    Args:
        level: Logging level or level name, see `resolve_level`
        log_file: Optional path to also write the log to (overwritten)

    Returns:
        logging.Logger: The configured package logger
    """
    level = resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging at level {logging.getLevelName(level)}")
    return logger
