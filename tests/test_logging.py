import logging

import pytest

from receiptsplit.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT_DEBUG,
    ROOT_LOGGER_NAME,
    get_logger,
    resolve_log_level,
    set_log_level,
)


@pytest.fixture
def restore_level():
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = package_logger.level
    yield
    set_log_level(level)


def test_package_modules_keep_their_name() -> None:
    assert get_logger("receiptsplit.receipt.receipt_parser").name == "receiptsplit.receipt.receipt_parser"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


def test_outside_names_are_namespaced() -> None:
    assert get_logger("scripts.batch").name == "receiptsplit.scripts.batch"


def test_logging_is_isolated_from_root() -> None:
    get_logger(__name__)
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert package_logger.propagate is False
    assert package_logger.handlers


def test_resolve_log_level() -> None:
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level(" WARN ") == logging.WARNING
    assert resolve_log_level("ERROR") == logging.ERROR
    assert resolve_log_level("chatty") == DEFAULT_LOG_LEVEL
    assert resolve_log_level(None) == DEFAULT_LOG_LEVEL


def test_set_log_level_switches_format(restore_level) -> None:
    get_logger(__name__)
    set_log_level(logging.DEBUG)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert package_logger.level == logging.DEBUG
    assert all(handler.formatter._fmt == LOG_FORMAT_DEBUG for handler in package_logger.handlers)
