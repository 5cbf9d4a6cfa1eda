"""Centralized logging configuration for tally.

Usage:
    from tally.logging import get_logger
    logger = get_logger(__name__)

    logger.debug("Detailed debug info")
    logger.info("General info")

Log records go to stderr so they never mix with the menu output on stdout.

Environment variables:
    TALLY_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR). Overrides
    the log_level config key. Default: WARNING
"""

import logging
import os
import sys

LOGGER_NAMESPACE = "tally"

DEFAULT_LOG_LEVEL = logging.WARNING

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_handler: logging.Handler | None = None


class StderrHandler(logging.StreamHandler):
    """Stream handler that always writes to the current sys.stderr."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def resolve_log_level(level: int | str | None = None, fallback: str | None = None) -> int:
    """Work out which log level to use.

    Args:
        level: Explicit level, wins over everything else.
        fallback: Level name from the config file, used when neither an
            explicit level nor TALLY_LOG_LEVEL is set.

    Returns:
        A logging level number.
    """
    if isinstance(level, int):
        return level
    if level is not None:
        return LEVEL_MAP.get(level.upper(), DEFAULT_LOG_LEVEL)

    env_level = os.environ.get("TALLY_LOG_LEVEL", "").upper()
    if env_level in LEVEL_MAP:
        return LEVEL_MAP[env_level]

    if fallback:
        return LEVEL_MAP.get(fallback.upper(), DEFAULT_LOG_LEVEL)

    return DEFAULT_LOG_LEVEL


def configure_logging(level: int | str | None = None, fallback: str | None = None) -> None:
    """Configure the tally logger namespace.

    Safe to call more than once; the stderr handler is only attached the
    first time, later calls just change the level.

    Args:
        level: Explicit level (number or name).
        fallback: Level name from the config file.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAMESPACE)
    if _handler is None:
        _handler = StderrHandler()
        logger.addHandler(_handler)
        logger.propagate = False

    set_log_level(resolve_log_level(level, fallback))


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Args:
        name: Module name, typically __name__

    Returns:
        Logger under the tally namespace.
    """
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def set_log_level(level: int) -> None:
    """Change the log level at runtime.

    Args:
        level: New log level (e.g., logging.DEBUG)
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    log_format = LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT
    for handler in logger.handlers:
        handler.setFormatter(logging.Formatter(log_format))
