"""Domain entities and value objects used by the sink."""

from __future__ import annotations

from .config import SinkConfig
from .destination import UNSET, Destination, Handle, Name, Unset
from .errors import ConfigError, ProcessLogSinkError
from .events import FLUSH, FLUSH_TOKEN, LOGGER_ORIGIN, Delivery, FlushSignal, LogRecord
from .formatter import Direct, FormatError, Formatted, Formatter, Indirect, apply_formatter
from .levels import LogLevel, should_log

__all__ = [
    "ConfigError",
    "Delivery",
    "Destination",
    "Direct",
    "FLUSH",
    "FLUSH_TOKEN",
    "FlushSignal",
    "FormatError",
    "Formatted",
    "Formatter",
    "Handle",
    "Indirect",
    "LOGGER_ORIGIN",
    "LogLevel",
    "LogRecord",
    "Name",
    "ProcessLogSinkError",
    "SinkConfig",
    "UNSET",
    "Unset",
    "apply_formatter",
    "should_log",
]
