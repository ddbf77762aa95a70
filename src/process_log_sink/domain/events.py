"""Inbound events accepted by a sink and the message it delivers.

Purpose
-------
Provide immutable representations of what the dispatcher pushes into a sink
(log records and the flush signal) and of what the sink sends to its
destination.

Contents
--------
* :class:`LogRecord` dataclass describing one emitted record.
* :data:`FLUSH` signal and :data:`FLUSH_TOKEN` sent downstream on flush.
* :class:`Delivery` tuple sent to the destination mailbox.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Sits in the domain layer so the handle use case and the adapters manipulate
plain data objects only.
"""

from __future__ import annotations

import socket
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, NamedTuple

from .levels import LogLevel

LOGGER_ORIGIN = "logger"
"""Origin tag carried by records produced by the logging framework itself."""

FLUSH_TOKEN = "flush"
"""Message sent to the destination when the dispatcher asks for a flush."""


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


class FlushSignal:
    """Control signal asking the sink to flush its destination."""

    _instance: "FlushSignal | None" = None

    def __new__(cls) -> "FlushSignal":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FLUSH"


FLUSH = FlushSignal()


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Immutable log record pushed by the dispatcher.

    Attributes
    ----------
    level:
        :class:`LogLevel` severity of the record; names and stdlib numbers
        are coerced, anything else raises :class:`ConfigError`.
    message:
        Message as emitted; not necessarily a string.
    timestamp:
        Time of emission in timezone-aware UTC.
    metadata:
        Shallow copy of the caller-supplied metadata, insertion ordered.
    origin_node:
        Logical node on which the emitting code executed; defaults to the
        host name, which is also the default node of a sink.
    origin:
        Framework tag of the emitter; only :data:`LOGGER_ORIGIN` is delivered.
    """

    level: LogLevel
    message: Any
    timestamp: datetime
    metadata: dict[str, Any] = field(default_factory=dict)
    origin_node: str = field(default_factory=socket.gethostname)
    origin: str = LOGGER_ORIGIN

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogLevel.coerce(self.level))
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        object.__setattr__(self, "metadata", dict(self.metadata))


class Delivery(NamedTuple):
    """Message placed in the destination mailbox for an accepted record."""

    level: LogLevel
    message: Any
    timestamp: datetime
    metadata: dict[str, Any]


__all__ = ["Delivery", "FLUSH", "FLUSH_TOKEN", "FlushSignal", "LOGGER_ORIGIN", "LogRecord"]
