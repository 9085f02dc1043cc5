"""Runtime infrastructure for receiptsplit.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Settings resolution via load_settings(), Settings

The OCR HTTP client lives in ``receiptsplit.runtime.ocr_client`` and is
imported explicitly by callers that need network access.

Usage:
    from receiptsplit.runtime import get_logger, load_settings

    logger = get_logger(__name__)
    settings = load_settings()
"""

from receiptsplit.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    resolve_log_level,
    set_log_level,
)
from receiptsplit.runtime.settings import Settings, load_settings

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "resolve_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Settings
    "Settings",
    "load_settings",
]
