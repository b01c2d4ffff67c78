"""Unit tests for the per-category logging setup."""

import logging

from data_design.config import Settings
from data_design.infrastructure.logging.log_config import _parse_level, setup_logging


def test_setup_logging_applies_category_levels():
    settings = Settings(log_level="WARNING", log_level_sql="ERROR", log_level_repository="DEBUG")

    setup_logging(settings)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("data_design.infrastructure.database").level == logging.DEBUG
    assert logging.getLogger().handlers


def test_parse_level_falls_back_to_info():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("chatty") == logging.INFO


def test_aiosqlite_follows_sql_level():
    setup_logging(Settings(log_level_sql="CRITICAL"))

    assert logging.getLogger("aiosqlite").level == logging.CRITICAL
    assert logging.getLogger("sqlalchemy.pool").level == logging.CRITICAL
