"""Logging setup for the direwolf command line and header redaction."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterable, Optional

DEFAULT_MAX_BYTES = int(os.environ.get("LOG_MAX_BYTES", str(10 * 1024 * 1024)))
DEFAULT_BACKUP_COUNT = int(os.environ.get("LOG_BACKUP_COUNT", "5"))

SENSITIVE_HEADERS = frozenset(
    {"cookie", "set-cookie", "authorization", "proxy-authorization"}
)
# Custom X- headers whose name mentions one of these are treated as secrets.
_SECRET_FRAGMENTS = ("auth", "token", "key")
REDACTED = "[redacted]"

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def is_sensitive_header(name: str) -> bool:
    lower = name.lower()
    if lower in SENSITIVE_HEADERS:
        return True
    return lower.startswith("x-") and any(part in lower for part in _SECRET_FRAGMENTS)


def redact_headers(headers: Mapping[object, object]) -> dict[object, object]:
    """Return a copy of *headers* with secret values replaced."""

    return {
        key: REDACTED if isinstance(key, str) and is_sensitive_header(key) else value
        for key, value in headers.items()
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per line, timestamps in UTC."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, object] = {
            "timestamp": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, sort_keys=True)


class SensitiveDataFilter(logging.Filter):
    """Redact secret header values in log arguments.

    Covers a mapping passed as the sole argument as well as header mappings
    among positional arguments.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.args, Mapping):
            record.args = redact_headers(record.args)
        elif isinstance(record.args, tuple):
            record.args = tuple(
                redact_headers(arg) if isinstance(arg, Mapping) else arg
                for arg in record.args
            )
        return True


def _console_handler(level: int) -> logging.Handler:
    from rich.logging import RichHandler

    return RichHandler(level=level, show_path=False, markup=False, rich_tracebacks=True)


def _file_handler(logfile: Path | str, json_logs: bool) -> logging.Handler:
    path = Path(logfile)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path,
        maxBytes=DEFAULT_MAX_BYTES,
        backupCount=DEFAULT_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter() if json_logs else logging.Formatter(_TEXT_FORMAT))
    return handler


def configure_logging(
    level: int = logging.INFO,
    *,
    json_logs: bool = False,
    logfile: Optional[Path | str] = None,
    quiet_loggers: Iterable[str] = ("urllib3",),
) -> None:
    """Route root logging to the console and, optionally, a rotating file.

    Every handler redacts secret headers. *quiet_loggers* are held at
    WARNING or above.
    """

    handlers = [_console_handler(level)]
    if logfile:
        handlers.append(_file_handler(logfile, json_logs))
    redactor = SensitiveDataFilter()
    for handler in handlers:
        handler.addFilter(redactor)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


__all__ = [
    "JsonFormatter",
    "SensitiveDataFilter",
    "configure_logging",
    "is_sensitive_header",
    "redact_headers",
]
