"""Tests for structlog configuration driven by AppConfig."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from spanish_quiz.config import AppConfig
from spanish_quiz.logging import APP_NAME, configure_logging, get_logger


@pytest.fixture
def restore_logging():
    """Put the root/urllib3 levels and structlog defaults back after the test."""
    root_level = logging.getLogger().level
    urllib3_level = logging.getLogger("urllib3").level
    yield
    logging.getLogger().setLevel(root_level)
    logging.getLogger("urllib3").setLevel(urllib3_level)
    structlog.reset_defaults()


def test_level_comes_from_config(restore_logging):
    configure_logging(AppConfig(log_level="WARNING"))

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_debug_keeps_urllib3_verbose(restore_logging):
    configure_logging(AppConfig(log_level="debug"))

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("urllib3").level == logging.DEBUG


def test_json_events_carry_app_and_logger_name(restore_logging, caplog):
    configure_logging(AppConfig(log_level="INFO", log_json=True))

    get_logger("spanish_quiz.controller").info("quiz_fetch_started", request_id=1)

    event = json.loads(caplog.records[-1].getMessage())
    assert event["event"] == "quiz_fetch_started"
    assert event["request_id"] == 1
    assert event["app"] == APP_NAME
    assert event["logger"] == "spanish_quiz.controller"
    assert event["level"] == "info"
