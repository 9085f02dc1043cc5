"""Logging setup shared by every receiptsplit module.

Usage:
    from receiptsplit.runtime import get_logger
    logger = get_logger(__name__)

    logger.debug("Matched name_spaced_total: %r", line)
    logger.warning("Seeding placeholder items")

All loggers live under the ``receiptsplit`` namespace and write to stderr,
so stdout stays clean for CLI output.

Environment variables:
    RECEIPTSPLIT_LOG_LEVEL: DEBUG, INFO, WARNING (or WARN) or ERROR. Default: INFO
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

ROOT_LOGGER_NAME = "receiptsplit"
LOG_LEVEL_ENV_VAR = "RECEIPTSPLIT_LOG_LEVEL"

_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_logging_configured = False


def resolve_log_level(value: str | None) -> int:
    """Map a level name such as "debug" to a logging level; unknown names give the default."""
    if not value:
        return DEFAULT_LOG_LEVEL
    return _LEVEL_NAMES.get(value.strip().upper(), DEFAULT_LOG_LEVEL)


def _formatter_for(level: int) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT)


def configure_logging(level: int | None = None) -> None:
    """Attach a stderr handler to the ``receiptsplit`` logger once per process.

    Args:
        level: Log level to use. If None, it comes from RECEIPTSPLIT_LOG_LEVEL.
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        level = resolve_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter_for(level))

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    package_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the namespaced logger for a module, configuring logging on first use."""
    configure_logging()

    # Modules inside the package already carry the namespace prefix.
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def set_log_level(level: int) -> None:
    """Change the package log level at runtime, e.g. for ``--verbose``."""
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setFormatter(_formatter_for(level))
