"""
Structured Logging Utilities

Provides utilities for adding structured context to log messages, and the
one-time logging setup used by the application wiring.
"""

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from constants import LogConfig


# Context variable for use-case scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Order picked up", extra={
            "order_id": str(order.id),
            "deliveryman_id": str(order.deliveryman_id),
        })
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Merge the bound context with per-call fields.

        The merged fields are also exposed as ``record.context`` so
        ContextFormatter can print them.
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return {**context, "context": context}

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


def set_logging_context(**kwargs):
    """
    Add fields to the logging context of the current operation.

    Args:
        **kwargs: Key-value pairs to add to context
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def get_logging_context() -> Dict[str, Any]:
    """Copy of the fields currently bound."""
    return _logging_context.get().copy()


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


@contextmanager
def logging_context(**kwargs):
    """
    Bind fields for the duration of a block, restoring the previous context.

    Example:
        with logging_context(operation="Pick up order", order_id="o-1"):
            logger.info("Loading order")
    """
    token = _logging_context.set({**_logging_context.get(), **kwargs})
    try:
        yield
    finally:
        _logging_context.reset(token)


class ContextFormatter(logging.Formatter):
    """Appends structured context as ``key=value`` pairs after the message."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "context", None)
        if not context:
            return line
        fields = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{line} [{fields}]"


def configure_logging(settings) -> logging.Logger:
    """
    Configure root logging: console always, rotating file when configured.

    Calling it again replaces the handlers it installed before.

    Args:
        settings: config.settings.Settings

    Returns:
        The root logger
    """
    level = getattr(logging, settings.log_level)
    formatter = ContextFormatter(LogConfig.FORMAT)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_fastfeet", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    console_handler._fastfeet = True
    root_logger.addHandler(console_handler)

    if settings.log_file:
        file_handler = RotatingFileHandler(
            settings.log_file,
            maxBytes=LogConfig.MAX_BYTES,
            backupCount=LogConfig.BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        file_handler._fastfeet = True
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)
    return root_logger
