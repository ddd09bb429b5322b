"""Field-name logging context for tracing validation failures.

Provides a field-aware logger that attaches the name of the form field
being checked to every log message, so a recorded validation error can
be traced back to the input it came from.

Usage:
    from normval.logging_context import field_scope, get_field_logger

    logger = get_field_logger(__name__)
    with field_scope("postal_code"):
        logger.debug("Checking value")  # record.field_name == "postal_code"
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

_field_name: ContextVar[str] = ContextVar("field_name", default="-")


def set_field_name(name: str) -> None:
    """Set the field name for the current context."""
    _field_name.set(name)


def get_field_name() -> str:
    """Retrieve the current field name."""
    return _field_name.get()


@contextmanager
def field_scope(name: str) -> Iterator[None]:
    """Set the field name for the duration of a ``with`` block."""
    token = _field_name.set(name)
    try:
        yield
    finally:
        _field_name.reset(token)


class FieldNameFilter(logging.Filter):
    """Injects field_name into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.field_name = _field_name.get()  # type: ignore[attr-defined]
        return True


def get_field_logger(name: str) -> logging.Logger:
    """Return a logger with the FieldNameFilter attached.

    The filter adds ``field_name`` to each record so formatters can
    include ``%(field_name)s`` in their format string.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, FieldNameFilter) for f in logger.filters):
        logger.addFilter(FieldNameFilter())
    return logger
