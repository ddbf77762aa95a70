"""Public package surface of the process mailbox log sink.

``EventSink`` is the object a dispatcher registers; the remaining exports are
the value objects and adapters needed to configure it and to consume what it
delivers.
"""

from __future__ import annotations

from .adapters.mailbox import Mailbox
from .adapters.registry import ProcessRegistry
from .adapters.settings_store import InMemorySettingsStore
from .application.use_cases import HandleOutcome
from .domain import (
    FLUSH,
    FLUSH_TOKEN,
    ConfigError,
    Delivery,
    Direct,
    Indirect,
    LogLevel,
    LogRecord,
    SinkConfig,
    should_log,
)
from .runtime import EventSink

__all__ = [
    "ConfigError",
    "Delivery",
    "Direct",
    "EventSink",
    "FLUSH",
    "FLUSH_TOKEN",
    "HandleOutcome",
    "InMemorySettingsStore",
    "Indirect",
    "LogLevel",
    "LogRecord",
    "Mailbox",
    "ProcessRegistry",
    "SinkConfig",
    "should_log",
]
