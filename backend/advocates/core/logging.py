"""JSON logging for the advocate directory service."""

import logging
import sys
from typing import Any

from pythonjsonlogger import jsonlogger

from advocates.core.config import settings

# Third-party loggers held above the application level
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "httpx": logging.WARNING,
}


class DirectoryJsonFormatter(jsonlogger.JsonFormatter):
    """One JSON object per record, tagged with the service name and environment.

    Structured ``extra`` fields (request ids, listing parameters, latency) are
    merged in by the base formatter.
    """

    def add_fields(
        self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["event"] = record.getMessage()
        log_record["service"] = settings.PROJECT_NAME
        log_record["env"] = settings.ENV

        log_record.pop("message", None)
        log_record.pop("asctime", None)


def build_formatter() -> DirectoryJsonFormatter:
    return DirectoryJsonFormatter(datefmt="%Y-%m-%dT%H:%M:%S")


def setup_logging(level: str | None = None) -> None:
    """Route every record to stdout as JSON at ``level`` (default: LOG_LEVEL)."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter())
    root_logger.addHandler(handler)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)
    if settings.DB_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
