# Process-wide setup: swap the default logger for one built from a Config.
from typing import Optional
from . import logging as _logging
from .config import Config
from .errors import SinkError
from .logging import DEFAULT_LOGGER, Logger, _NopSink

def init(config: Optional[Config] = None) -> Logger:
    """Install the default logger described by `config` and return it.

    With no config, settings come from the environment (see Config.from_environment).
    """
    cfg = Config.from_environment() if config is None else config
    logger = DEFAULT_LOGGER.with_level(cfg.level).with_writer(
        cfg.stream if cfg.enable_logs else _NopSink()
    )
    for key, name in cfg.context_keys.items():
        logger = logger.with_context_key(key, name)
    _logging._install(logger)
    return logger

def shutdown() -> None:
    """Flush the default logger's sink and restore DEFAULT_LOGGER."""
    sink = _logging.get_logger().sink
    _logging._install(DEFAULT_LOGGER)
    flush = getattr(sink, "flush", None)
    if flush is not None:
        try:
            flush()
        except Exception as e:
            raise SinkError(f"failed to flush log sink: {e}") from e
