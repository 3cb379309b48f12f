__all__ = [
    "Level", "Logger", "Sink", "DEFAULT_LOGGER", "get_logger",
    "log", "debug", "info", "warning", "error",
    "context_with_logger", "logger_from_context_or_default", "use_logger",
    "Config", "init", "shutdown",
    "JsonLogError", "EncodeError", "SinkError",
]
__version__ = "0.1.0"

from .errors import JsonLogError, EncodeError, SinkError
from .logging import Level, Logger, Sink, DEFAULT_LOGGER, get_logger, log, debug, info, warning, error
from .context import context_with_logger, logger_from_context_or_default, use_logger
from .config import Config
from .bootstrap import init, shutdown
