from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO


DEFAULT_SERVICE = "identitypool"
_RESERVED_RECORD_FIELDS = set(logging.makeLogRecord({}).__dict__.keys()) | {"message", "asctime"}


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _context_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_RECORD_FIELDS and not key.startswith("_")
    }


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JsonFormatter(logging.Formatter):
    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": _utc_now().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service,
            "message": record.getMessage(),
        }
        context = _context_fields(record)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class TextFormatter(logging.Formatter):
    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            _utc_now().strftime("%Y-%m-%dT%H:%M:%S%z"),
            record.levelname,
            record.name,
            f"service={self.service}",
            f"message={record.getMessage()}",
        ]
        parts.extend(f"{key}={value!r}" for key, value in sorted(_context_fields(record).items()))
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(level: str | None = None, service: str = DEFAULT_SERVICE, stream: TextIO | None = None) -> None:
    """
    Install a single stdout handler on the root logger.
    LOG_LEVEL picks the level when `level` is not given; LOG_JSON switches to JSON lines
    and defaults to on inside a Lambda runtime.
    """
    requested = level or os.getenv("LOG_LEVEL", "INFO")
    resolved_level = getattr(logging, requested.upper(), logging.INFO)
    use_json = _parse_bool(os.getenv("LOG_JSON"), default=bool(os.getenv("AWS_LAMBDA_FUNCTION_NAME")))

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(JsonFormatter(service) if use_json else TextFormatter(service))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(resolved_level)
    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def with_context(logger: logging.Logger, **context: Any) -> logging.LoggerAdapter:
    return logging.LoggerAdapter(logger, extra=context)
