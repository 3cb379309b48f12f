"""
Configuration for the process-wide default logger.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional

from .logging import Level, Sink

_TRUE_VALUES = ("true", "1", "yes", "on")

@dataclass
class Config:
    """Settings used by bootstrap.init() to build the default logger."""

    level: Level = Level.INFO
    enable_logs: bool = True
    # None writes to sys.stdout
    stream: Optional[Sink] = None
    context_keys: Dict[Hashable, str] = field(default_factory=dict)

    @classmethod
    def from_environment(cls, **overrides: Any) -> "Config":
        """Read JSONLOG_LEVEL and JSONLOG_ENABLED; keyword overrides win."""
        level_env = os.getenv("JSONLOG_LEVEL", "info")
        try:
            level = Level.parse(level_env)
        except ValueError:
            raise ValueError(
                f"Invalid JSONLOG_LEVEL value '{level_env}': must be one of debug, info, warning, error"
            )
        enable_logs = os.getenv("JSONLOG_ENABLED", "true").strip().lower() in _TRUE_VALUES
        values: Dict[str, Any] = {"level": level, "enable_logs": enable_logs}
        values.update(overrides)
        return cls(**values)
