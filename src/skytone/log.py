"""Logging setup for SkyTone.

DEBUG and INFO go to stdout, WARNING and above to stderr.
Level comes from the LOG_LEVEL environment variable.
"""

import logging
import sys

from skytone.config import LOG_LEVEL


class _LevelRange(logging.Filter):
    """Pass records whose level lies in [level_min, level_max]."""

    def __init__(self, level_min: int, level_max: int) -> None:
        super().__init__()
        self.level_min = level_min
        self.level_max = level_max

    def filter(self, record: logging.LogRecord) -> bool:
        return self.level_min <= record.levelno <= self.level_max


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configure the "skytone" logger and return it.

    Safe to call on every Streamlit rerun: existing handlers are replaced.
    """
    logger = logging.getLogger("skytone")
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_LevelRange(logging.DEBUG, logging.INFO))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    return logger
