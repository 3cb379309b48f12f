# JSON-structured logging: one compact JSON object per line.
# Loggers are immutable values; every with_* call returns a new one.

from __future__ import annotations
import enum, io, json, sys, time
from dataclasses import dataclass, field, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any, Hashable, Mapping, Optional, Protocol

from opentelemetry.context import Context, get_current, get_value

from .errors import EncodeError, SinkError

class Sink(Protocol):
    """Anything with write(). Text is written as str; only io.RawIOBase and
    io.BufferedIOBase instances are handed UTF-8 bytes.
    """
    def write(self, s: Any) -> Any: ...

class _NopSink:
    def write(self, s: Any) -> int: return 0

_LEVEL_ALIASES = {"warn": "warning"}

class Level(enum.IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: Any) -> "Level":
        """Accept a Level, its integer value, or a case-insensitive label."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            name = value.strip().lower()
            name = _LEVEL_ALIASES.get(name, name)
            for member in cls:
                if member.label == name:
                    return member
        raise ValueError(
            f"Invalid log level {value!r}: must be one of {', '.join(m.label for m in cls)}"
        )

# Swapped out in tests to pin the timestamp.
_now_ns = time.time_ns

def _timestamp(ns: int) -> str:
    """RFC 3339 local time with nanoseconds, e.g. 2024-05-01T10:00:00.000000001+02:00."""
    secs, frac = divmod(ns, 1_000_000_000)
    dt = datetime.fromtimestamp(secs).astimezone()
    offset = dt.strftime("%z")
    tz = "Z" if offset in ("", "+0000") else f"{offset[:3]}:{offset[3:]}"
    return f"{dt:%Y-%m-%dT%H:%M:%S}.{frac:09d}{tz}"

def _write(sink: Optional[Sink], line: str, raw: bytes) -> None:
    out = sys.stdout if sink is None else sink
    try:
        if isinstance(out, (io.RawIOBase, io.BufferedIOBase)):
            n = out.write(raw)
        else:
            n = out.write(line)
        flush = getattr(out, "flush", None)
        if flush is not None:
            flush()
    except Exception as e:
        raise SinkError(f"failed to write log record: {e}") from e
    # Raw streams may write part of the buffer, or nothing, without raising.
    if isinstance(out, io.RawIOBase) and n != len(raw):
        raise SinkError(f"short write of log record: {n} of {len(raw)} bytes")

def _empty_keys() -> Mapping[Hashable, str]:
    return MappingProxyType({})

@dataclass(frozen=True, eq=False)
class Logger:
    """Writes records at or above `level` to `sink`, pulling `context_keys` out of `context`.

    A `sink` of None means whatever sys.stdout is at write time.
    """
    sink: Optional[Sink] = None
    level: Level = Level.INFO
    context_keys: Mapping[Hashable, str] = field(default_factory=_empty_keys)
    context: Context = field(default_factory=Context)

    def with_writer(self, sink: Optional[Sink]) -> "Logger":
        return replace(self, sink=sink)

    def with_level(self, level: Any) -> "Logger":
        return replace(self, level=Level.parse(level))

    def with_context(self, ctx: Optional[Context] = None) -> "Logger":
        """Bind `ctx`, or the currently attached OpenTelemetry context when omitted."""
        return replace(self, context=get_current() if ctx is None else ctx)

    def with_context_key(self, key: Hashable, output_name: str) -> "Logger":
        """Also emit the context value at `key` under `output_name` in "context"."""
        keys = dict(self.context_keys)
        keys[key] = output_name
        return replace(self, context_keys=MappingProxyType(keys))

    def debug(self, msg: str, data: Any = None) -> None: self.log(Level.DEBUG, msg, data)
    def info(self, msg: str, data: Any = None) -> None: self.log(Level.INFO, msg, data)
    def warning(self, msg: str, data: Any = None) -> None: self.log(Level.WARNING, msg, data)
    def error(self, msg: str, data: Any = None) -> None: self.log(Level.ERROR, msg, data)

    def log(self, level: Any, msg: str, data: Any = None) -> None:
        """Write one JSON line for `msg` unless `level` is below the threshold.

        `data` is left out of the record when None. Raises EncodeError when the
        record is not JSON serializable and SinkError when the sink fails.
        """
        level = Level.parse(level)
        if level < self.level:
            return
        rec: dict[str, Any] = {"level": level.label, "time": _timestamp(_now_ns()), "message": msg}
        if data is not None:
            rec["data"] = data
        ctx = self._context_values()
        if ctx:
            rec["context"] = ctx
        try:
            line = json.dumps(rec, separators=(",", ":"), ensure_ascii=False, allow_nan=False) + "\n"
            raw = line.encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodeError(f"failed to encode log record: {e}") from e
        _write(self.sink, line, raw)

    def _context_values(self) -> dict[str, Any]:
        # Two keys sharing an output name: whichever is looked up last wins.
        out: dict[str, Any] = {}
        for key, name in self.context_keys.items():
            value = get_value(key, self.context)
            if value is not None:
                out[name] = value
        return out

DEFAULT_LOGGER = Logger()

_global_logger: Logger = DEFAULT_LOGGER

def get_logger() -> Logger:
    return _global_logger

def _install(logger: Logger) -> None:
    global _global_logger
    _global_logger = logger

def log(level: Any, msg: str, data: Any = None) -> None: get_logger().log(level, msg, data)
def debug(msg: str, data: Any = None) -> None: get_logger().debug(msg, data)
def info(msg: str, data: Any = None) -> None: get_logger().info(msg, data)
def warning(msg: str, data: Any = None) -> None: get_logger().warning(msg, data)
def error(msg: str, data: Any = None) -> None: get_logger().error(msg, data)
