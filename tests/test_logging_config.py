"""
Unit tests for the structlog setup.
"""

import json
import logging

import pytest
import structlog

from config.logging_config import setup_logging


@pytest.fixture
def restore_logging():
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()
    structlog.reset_defaults()


def test_setup_logging_writes_json_lines(tmp_path, restore_logging):
    log_path = setup_logging(log_dir=tmp_path, console_level="WARNING")
    structlog.get_logger("tests.logging").info("Delay starting", node_id="n1", delay_ms=5)
    for handler in logging.getLogger().handlers:
        handler.flush()

    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    record = next(r for r in records if r["event"] == "Delay starting")
    assert record["node_id"] == "n1"
    assert record["delay_ms"] == 5
    assert record["level"] == "info"


def test_setup_logging_without_file(tmp_path, restore_logging):
    assert setup_logging(log_dir=tmp_path, json_file=False) is None
    assert list(tmp_path.iterdir()) == []
