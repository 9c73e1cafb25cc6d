"""
Logging setup for the pea-advisor CLI.

``configure_logging(config)`` is called once per command, right after the
config is loaded. Library modules only ever do ``logging.getLogger(__name__)``.

Console logs go to stderr so that stdout carries nothing but the command's
report (tables, recommendations) and can be piped or redirected cleanly.

With ``json_format = true`` in ``[logging]`` each record becomes one line::

    {"ts": "2025-06-30T09:12:44Z", "level": "INFO", "logger": "pea_advisor.ingestion.catalog_json", "msg": "Loaded 8 asset(s) from catalog.json"}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pea_advisor.config import LoggingConfig

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_BUILTIN_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger``, ``msg``,
    ``exc`` when an exception is attached, plus any ``extra=`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "ts":     created.strftime(TIMESTAMP_FORMAT),
            "level":  record.levelname,
            "logger": record.name,
            "msg":    record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        entry.update(
            (key, val)
            for key, val in record.__dict__.items()
            if key not in _BUILTIN_RECORD_ATTRS and not key.startswith("_")
        )
        return json.dumps(entry, default=str, ensure_ascii=False)


def _make_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return _JsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TIMESTAMP_FORMAT)


def _open_log_file(log_file: str) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, encoding="utf-8")


def configure_logging(config: "LoggingConfig") -> None:
    """Install stderr (and optionally file) handlers on the root logger.

    Replaces any handlers installed by a previous call.
    """
    level = logging.getLevelName(config.level)
    formatter = _make_formatter(config.json_format)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        handlers.append(_open_log_file(config.log_file))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
