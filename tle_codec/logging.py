"""JSON event logging for tle-codec.

Messages are short event names (``tle_parsed``, ``check_failed``); details
travel in ``extra`` and in the per-input context bound with
:func:`log_context` (source path, text line, set name).
"""

from __future__ import annotations

import contextlib
import contextvars
import datetime as _dt
import json
import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterator, Optional, TextIO, Union

if TYPE_CHECKING:
    from .config import CodecConfig

_LOGGER_NAME = "tle_codec"
_HANDLER_NAME = "tle_codec.json"
_LEVEL_ENV = "TLE_CODEC_LOG_LEVEL"
_CONTEXT: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar(
    "tle_codec_log_context", default={}
)

LevelSpec = Union[str, int, "CodecConfig", None]


def resolve_level(level: LevelSpec = None) -> int:
    """Numeric level from a name, a number, a :class:`CodecConfig` or the environment."""

    level = getattr(level, "log_level", level)
    if isinstance(level, int):
        return level
    if level is None:
        level = os.getenv(_LEVEL_ENV, "INFO")
    if level.strip().isdigit():
        return int(level)
    numeric = logging.getLevelName(level.strip().upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def _record_attributes() -> FrozenSet[str]:
    blank = logging.LogRecord(_LOGGER_NAME, logging.INFO, __file__, 0, "", (), None)
    return frozenset(vars(blank)) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """One JSON object per event: level, logger, event name, context and extras."""

    _RESERVED = _record_attributes()

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": _dt.datetime.fromtimestamp(record.created, _dt.timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = _CONTEXT.get()
        if context:
            payload["context"] = dict(context)
        extras = {k: v for k, v in vars(record).items() if k not in self._RESERVED}
        if extras:
            payload["extra"] = extras
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=repr)


def configure_logging(
    level: LevelSpec = None,
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> logging.Logger:
    """Attach the JSON handler to the package logger.

    ``level`` may be a :class:`~tle_codec.config.CodecConfig`, in which case
    its ``log_level`` applies. Without ``force`` an existing handler is kept
    and only the level changes.
    """

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(resolve_level(level))
    logger.propagate = False

    current = [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]
    if current and not force:
        return logger
    for handler in current:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger or one of its children."""

    if not name or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    if name.startswith(_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


@contextlib.contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Bind input metadata to every event logged inside the block; ``None`` values are dropped."""

    merged = {**_CONTEXT.get(), **{k: v for k, v in kwargs.items() if v is not None}}
    token = _CONTEXT.set(merged)
    try:
        yield
    finally:
        _CONTEXT.reset(token)


def log_failure(logger: logging.Logger, event: str, exc: BaseException, **fields: Any) -> None:
    """Log a rejected input at ERROR with the exception type and message."""

    logger.error(event, extra={"error": str(exc), "error_type": type(exc).__name__, **fields})


__all__ = [
    "JSONFormatter",
    "configure_logging",
    "get_logger",
    "log_context",
    "log_failure",
    "resolve_level",
]
