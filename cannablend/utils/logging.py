"""
Root-logger setup for the cannablend CLI.

Each CLI command calls ``configure_logging(config.logging)`` after loading its
``AppConfig``.  Everything under ``cannablend`` only creates module loggers with
``logging.getLogger(__name__)``; handlers are attached here and nowhere else.

Output goes to stderr, so ``cannablend predict --json`` leaves stdout holding
nothing but the prediction.  With ``[logging] log_file`` set, the same records
are also appended to that file.

What gets logged
----------------
DEBUG   one line per prediction and per resolved blend
INFO    catalog loads, custom compounds found, blend edits that were refused

Setting ``[logging] json_format = true`` switches both sinks to JSON lines::

    {"ts": "2026-10-19T15:00:00Z", "level": "INFO",
     "logger": "cannablend.catalog.seed_loader", "msg": "Loaded 10 strain(s) ..."}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cannablend.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """Render a record as a single-line JSON object.

    Keys ``ts`` (UTC), ``level``, ``logger`` and ``msg`` are always present,
    ``exc`` when the record carries a traceback.  Values passed through
    ``extra=`` are merged in under their own names.
    """

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict = {
            "ts": stamp.strftime(LOG_DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        payload.update(
            (key, val)
            for key, val in vars(record).items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        )
        return json.dumps(payload, default=str)


def _make_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return _JsonFormatter()
    return logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def _make_handlers(log_file: str) -> list[logging.Handler]:
    """A stderr sink, plus an append-mode file sink when ``log_file`` is set."""
    sinks: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        sinks.append(logging.FileHandler(path, encoding="utf-8"))
    return sinks


def configure_logging(config: "LoggingConfig") -> None:
    """Install the cannablend handlers on the root logger.

    Replaces any handlers already on the root logger, so calling it twice
    (e.g. from tests) does not duplicate output.

    Args:
        config: The ``[logging]`` section of ``AppConfig``.
    """
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    formatter = _make_formatter(config.json_format)
    sinks = _make_handlers(config.log_file)
    for sink in sinks:
        sink.setLevel(level)
        sink.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=sinks, force=True)
