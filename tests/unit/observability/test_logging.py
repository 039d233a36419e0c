"""Tests for logging setup."""

from __future__ import annotations

import json
import logging

import pytest

from solrsync.config.settings import ObservabilitySettings
from solrsync.observability.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(ObservabilitySettings(log_level="debug", log_format="json"))
    logging.getLogger("solrsync.adapters.solr.adapter").info("Flushing %d inserts or updates and %d deletes", 3, 1)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "Flushing 3 inserts or updates and 1 deletes"
    assert record["level"] == "info"
    assert record["logger"] == "solrsync.adapters.solr.adapter"


def test_level_filters(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(ObservabilitySettings(log_level="warning", log_format="console"))
    logging.getLogger("solrsync").debug("Flushed")
    assert "Flushed" not in capsys.readouterr().out
