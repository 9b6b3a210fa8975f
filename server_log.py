"""Append-only activity log in ``<timestamp> [<TAG>] - <message>`` form."""

from __future__ import annotations

import logging
from pathlib import Path

from config import LOG_DATE_FORMAT, LOG_FILE, LOG_FORMAT

SERVER_STARTED = "SERVER STARTED"
SERVER_STOPPED = "SERVER STOPPED"
INFO = "INFO"
REQUEST = "REQUEST"
RESPONSE = "RESPONSE"
ERROR = "ERROR"


def tagged(tag: str) -> dict[str, str]:
    """Return the ``extra`` mapping that labels a record with a category tag."""
    return {"tag": tag}


class _TagFilter(logging.Filter):
    """Give every record a tag and keep it on a single line."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "tag", None):
            record.tag = record.levelname
        message = record.getMessage()
        if "\r" in message or "\n" in message:
            record.msg = message.replace("\r\n", " ").replace("\r", " ").replace("\n", " ").strip()
            record.args = None
        return True


def build_log_handler(log_path: str | Path = LOG_FILE) -> logging.Handler:
    handler = logging.FileHandler(log_path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler.addFilter(_TagFilter())
    return handler


def configure_logging(log_path: str | Path = LOG_FILE) -> logging.Handler:
    """Attach the activity log handler to the root logger and return it."""
    handler = build_log_handler(log_path)
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    return handler


def remove_logging(handler: logging.Handler) -> None:
    logging.getLogger().removeHandler(handler)
    handler.close()
