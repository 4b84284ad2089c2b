"""Shared logger for the evaluator and its batch tooling."""
import logging
from typing import Union

LOGGER_NAME = "math_logic_evaluator"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.WARNING)


def set_log_level(level: Union[int, str]) -> None:
    """
    Change the verbosity of the shared logger.

    :param level: Logging level name (e.g. "DEBUG") or numeric value
    :raises ValueError: If the level name is unknown
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger.setLevel(level)
