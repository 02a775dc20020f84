"""Structured logging for chain-resolver.

This module provides structured logging functions on top of the standard
library ``logging`` package. Every message goes to the ``chain_resolver``
logger; structured fields are appended to the message as ``key=value``
pairs and attached to the record as ``fields``.

Importing the module registers the ``TRACE`` level name with ``logging``
but installs no handlers and sets no levels. Call ``configure_logging``
(or configure the ``chain_resolver`` logger yourself) to see output.

Example:
    >>> from chain_resolver import configure_logging, log_debug
    >>>
    >>> configure_logging("debug")
    >>> log_debug("Resolved target", {
    ...     "resolver": "webhooks",
    ...     "token": "payment.created"
    ... })
"""

from __future__ import annotations

import logging
import os
from typing import Any

from .types import LogContext, ResolverConfig

LOGGER_NAME = "chain_resolver"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_LEVELS = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_logger = logging.getLogger(LOGGER_NAME)


def get_logger() -> logging.Logger:
    """Return the package logger."""
    return _logger


def is_enabled_for(level: str) -> bool:
    """Check whether a level name would currently be emitted.

    Lets callers skip building expensive log fields.
    """
    return _logger.isEnabledFor(_LEVELS[level])


def configure_logging(
    level: str | int | None = None,
    config: ResolverConfig | None = None,
) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    The level is taken from ``level``, then ``config.log_level``, then the
    ``CHAIN_RESOLVER_LOG_LEVEL`` environment variable, and defaults to
    ``warning``. Calling this more than once replaces the previous handler.

    Args:
        level: Level name (``"debug"``) or numeric level.
        config: Optional resolver config to read ``log_level`` from.

    Returns:
        The configured ``chain_resolver`` logger.
    """
    if level is None:
        level = config.log_level if config is not None else None
    if level is None:
        level = os.environ.get("CHAIN_RESOLVER_LOG_LEVEL", "warning")

    numeric = level if isinstance(level, int) else _LEVELS.get(level.strip().lower())
    if numeric is None:
        raise ValueError(f"Unknown log level: {level!r}")

    for existing in list(_logger.handlers):
        if getattr(existing, "_chain_resolver_handler", False):
            _logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler._chain_resolver_handler = True  # type: ignore[attr-defined]
    _logger.addHandler(handler)
    _logger.setLevel(numeric)
    return _logger


def log_error(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log an ERROR level message with structured fields.

    Use this for handler failures surfaced by the execution helpers.

    Args:
        message: The log message.
        fields: Optional structured fields for context. Can be a dict
                or a LogContext instance.
    """
    _log(logging.ERROR, message, fields)


def log_warn(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a WARN level message with structured fields.

    Use this for caller-correctable misuse, like an unsupported token.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _log(logging.WARNING, message, fields)


def log_info(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log an INFO level message with structured fields.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _log(logging.INFO, message, fields)


def log_debug(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a DEBUG level message with structured fields.

    Use this for registration and resolution details.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _log(logging.DEBUG, message, fields)


def log_trace(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a TRACE level message with structured fields.

    Use this for very verbose logging, like per-target ``supports`` checks.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _log(TRACE, message, fields)


def _log(level: int, message: str, fields: dict[str, Any] | LogContext | None) -> None:
    if not _logger.isEnabledFor(level):
        return

    fields_dict = _normalize_fields(fields)
    if fields_dict:
        rendered = " ".join(f"{k}={v}" for k, v in fields_dict.items())
        message = f"{message} [{rendered}]"
    _logger.log(level, message, extra={"fields": fields_dict or {}})


def _normalize_fields(
    fields: dict[str, Any] | LogContext | None,
) -> dict[str, str] | None:
    """Normalize fields to a dict of strings.

    Args:
        fields: Input fields as dict, LogContext, or None.

    Returns:
        Dict with string values, or None if no fields.
    """
    if fields is None:
        return None

    if isinstance(fields, LogContext):
        # Convert LogContext to dict, excluding None values
        return {k: str(v) for k, v in fields.model_dump().items() if v is not None}

    return {k: str(v) for k, v in fields.items()}


__all__ = [
    "LOGGER_NAME",
    "TRACE",
    "configure_logging",
    "get_logger",
    "is_enabled_for",
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]
