import io
import pytest

from jsonlog import logging as jsonlog_logging

# 2024-05-01T10:00:00Z plus 123 nanoseconds
FIXED_NS = 1714557600_000000123


@pytest.fixture()
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture(autouse=True)
def restore_default_logger():
    """Undo any init() a test performs."""
    yield
    jsonlog_logging._install(jsonlog_logging.DEFAULT_LOGGER)


@pytest.fixture()
def fixed_clock(monkeypatch) -> int:
    monkeypatch.setattr(jsonlog_logging, "_now_ns", lambda: FIXED_NS)
    return FIXED_NS
