"""Error taxonomy shared by the sink layers."""

from __future__ import annotations


class ProcessLogSinkError(Exception):
    """Base class for errors raised by :mod:`process_log_sink`."""


class ConfigError(ProcessLogSinkError, ValueError):
    """Raised when sink options cannot be turned into a :class:`SinkConfig`.

    Configuration errors are the only errors that escape a sink; they surface
    from initialisation and reconfiguration, never from event handling.
    """


__all__ = ["ConfigError", "ProcessLogSinkError"]
