"""Structured logging for ExposureEngine.

Records are written to stdout as ``key=value`` pairs. Context fields passed
through ``log_with_context`` (request id, bands, best fit) are appended after
the message, with enum members rendered by value.
"""

import logging
import sys
from enum import Enum
from typing import Any

_CORE_FIELDS = ("timestamp", "level", "module", "function", "message")


def _render(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    text = str(value)
    if " " in text or "=" in text:
        return f'"{text}"'
    return text


class StructuredFormatter(logging.Formatter):
    """Key=value formatter with optional request id and context fields."""

    def format(self, record: logging.LogRecord) -> str:
        fields: dict[str, Any] = dict(
            zip(
                _CORE_FIELDS,
                (
                    self.formatTime(record, self.datefmt),
                    record.levelname,
                    record.module,
                    record.funcName,
                    record.getMessage(),
                ),
            )
        )

        request_id = getattr(record, "request_id", None)
        if request_id is not None:
            fields["request_id"] = request_id

        fields.update(getattr(record, "context", None) or {})

        line = " ".join(f"{key}={_render(value)}" for key, value in fields.items())
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _level_from_settings() -> int:
    try:
        from exposure_engine.core.config import get_settings

        settings = get_settings()
    except Exception:
        # Settings failed to load; fall back to INFO
        return logging.INFO

    if settings.LOG_LEVEL:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if isinstance(level, int):
            return level
    return logging.DEBUG if settings.EXPOSURE_ENGINE_ENV == "dev" else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    The level comes from LOG_LEVEL when set, otherwise DEBUG in dev and
    INFO everywhere else.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.setLevel(_level_from_settings())

    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **context: Any) -> None:
    """
    Log a message with extra ``key=value`` fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        msg: Log message
        **context: Context fields; ``request_id`` is placed before the others
    """
    extra: dict[str, Any] = {}
    if "request_id" in context:
        extra["request_id"] = context.pop("request_id")
    extra["context"] = context

    logger.log(level, msg, extra=extra)
