"""Base structured logging utilities for the tracking layer.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across the tracker modules.

Every module obtains a child of the shared ``optrack`` logger through
``get_logger``; child loggers carry no handlers of their own and propagate to
the base logger, which owns a single stderr handler. ``OPTRACK_LOG_LEVEL``
overrides the level of that handler.
"""
from __future__ import annotations

import logging
import json
import sys
import os
import contextlib
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from .constants import PACKAGE_LOGGER_NAME
from .log_support import JsonFormatter, LogContext


_BASE_LOGGER_ATTR = "_optrack_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_optrack_console_handler"
_FILE_HANDLER_ATTR = "_optrack_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

LOG_LEVEL_ENV = "OPTRACK_LOG_LEVEL"


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``optrack`` logger."""

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                # pytest capture swaps sys.stderr between tests
                logger.removeHandler(existing)
                replacement = logging.StreamHandler(sys.stderr)
                replacement.setLevel(desired_level)
                replacement.setFormatter(_make_formatter(json_mode))
                setattr(replacement, _CONSOLE_HANDLER_ATTR, True)
                logger.addHandler(replacement)
                continue
            existing.setLevel(desired_level)
            if isinstance(existing, logging.StreamHandler):
                existing.setStream(sys.stderr)
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_make_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = PACKAGE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == PACKAGE_LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared ``optrack`` logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    file_path: Optional[str]
        When provided, a rotating file handler is attached (created if missing)
        writing JSON or plain logs to ``file_path``. When ``None``, any
        previously attached file handler managed by this module is removed.
    json_mode: bool
        Whether to use the JSON formatter or a plain text formatter for the
        added handler.

    Returns
    -------
    logging.Logger
        The configured base logger instance.

    Notes
    -----
    Handlers not created by this module are left untouched.
    """
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(_parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed_handlers = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed_handlers:
            logger.removeHandler(h)
            h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed_handlers:
        if isinstance(h, logging.FileHandler) and h.baseFilename == abs_path:
            existing = h
        else:
            logger.removeHandler(h)
            h.close()

    if existing is None:
        # 10MB x 5 backups
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setLevel(logger.level)
        fh.setFormatter(_make_formatter(json_mode))
        logger.addHandler(fh)
    else:
        existing.setFormatter(_make_formatter(json_mode))
        existing.setLevel(logger.level)

    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    keep_none: bool = False,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (normally obtained from ``get_logger``).
    event: str
        Event name (e.g. ``track.emit``).
    ctx: LogContext | None
        Tracker/handle context; merged shallowly.
    keep_none: bool
        When ``True``, preserve keys whose values are ``None``; otherwise drop them.
    level: int
        Logging level for the record.
    **fields: Any
        Arbitrary key/value pairs; non-JSON values are rendered with ``repr``.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=repr))


def describe(value: Any, limit: int = 120) -> str:
    """Return a bounded ``repr`` of a payload for log lines."""
    with contextlib.suppress(Exception):
        text = repr(value)
        return text if len(text) <= limit else text[: limit - 3] + "..."
    return f"<{type(value).__name__}>"


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "describe",
    "LOG_LEVEL_ENV",
]
