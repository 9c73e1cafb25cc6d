"""Tests for pea_advisor/utils/logging.py."""

from __future__ import annotations

import json
import logging

import pytest

from pea_advisor.config import LoggingConfig
from pea_advisor.utils.logging import _JsonFormatter, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _record(msg: str = "hello %s", args=("world",), **extra) -> logging.LogRecord:
    record = logging.LogRecord("pea_advisor.test", logging.INFO, __file__, 1, msg, args, None)
    for key, val in extra.items():
        setattr(record, key, val)
    return record


class TestJsonFormatter:
    def test_core_fields(self):
        payload = json.loads(_JsonFormatter().format(_record()))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "pea_advisor.test"
        assert payload["msg"] == "hello world"
        assert payload["ts"].endswith("Z")

    def test_extra_fields_included(self):
        payload = json.loads(_JsonFormatter().format(_record(asset_id="etf001")))
        assert payload["asset_id"] == "etf001"

    def test_non_ascii_kept(self):
        line = _JsonFormatter().format(_record("Équilibré", ()))
        assert "Équilibré" in line


class TestConfigureLogging:
    def test_sets_root_level(self):
        configure_logging(LoggingConfig(level="WARNING"))
        assert logging.getLogger().level == logging.WARNING

    def test_file_handler_writes(self, tmp_path):
        log_file = tmp_path / "logs" / "advisor.log"
        configure_logging(LoggingConfig(level="INFO", log_file=str(log_file), json_format=True))
        logging.getLogger("pea_advisor.test").info("catalog loaded")
        for handler in logging.getLogger().handlers:
            handler.flush()
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["msg"] == "catalog loaded"
