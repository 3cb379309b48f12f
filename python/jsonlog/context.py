# Carry a Logger through an OpenTelemetry context instead of a global.

from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, Optional

from opentelemetry.context import Context, attach, create_key, detach, get_current, get_value, set_value

from .logging import Logger, get_logger

_LOGGER_KEY = create_key("jsonlog-logger")

def context_with_logger(ctx: Optional[Context], logger: Logger) -> Context:
    """Return a copy of `ctx` (current context when None) holding `logger`."""
    return set_value(_LOGGER_KEY, logger, get_current() if ctx is None else ctx)

def logger_from_context_or_default(ctx: Optional[Context] = None) -> Logger:
    """Logger stored by context_with_logger, else the current default logger."""
    value = get_value(_LOGGER_KEY, get_current() if ctx is None else ctx)
    if isinstance(value, Logger):
        return value
    return get_logger()

@contextmanager
def use_logger(logger: Logger) -> Iterator[Logger]:
    """Make `logger` the one found in the current context for the block."""
    token = attach(context_with_logger(None, logger))
    try:
        yield logger
    finally:
        detach(token)
