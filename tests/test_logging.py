"""Tests for the logging setup."""

import logging

import pytest

from arcade.utils.logging import LOG_FORMAT, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT:
            root.removeHandler(handler)
    root.setLevel(level)


def test_level_name_is_applied(restore_root_logger):
    setup_logging("debug")
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert restore_root_logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_unknown_level_falls_back_to_info(restore_root_logger):
    setup_logging("chatty")
    assert restore_root_logger.level == logging.INFO


def test_repeated_setup_does_not_stack_handlers(restore_root_logger):
    setup_logging(logging.WARNING)
    setup_logging(logging.WARNING)
    assert len(restore_root_logger.handlers) == 1
    assert restore_root_logger.level == logging.WARNING
