"""Exceptions raised by a log call that could not be completed."""

from __future__ import annotations


class JsonLogError(Exception):
    """Base exception for a failed log call."""

    pass


class EncodeError(JsonLogError):
    """The record could not be serialized to JSON (unsupported type, cycle)."""

    pass


class SinkError(JsonLogError):
    """Writing or flushing the serialized record to the sink failed."""

    pass
