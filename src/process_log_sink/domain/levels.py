"""Severity ordering used to filter records before delivery.

Purpose
-------
Offer a domain-specific representation of log severities aligned with the
stdlib numeric levels, plus the threshold comparison applied by every sink.

Contents
--------
* :class:`LogLevel` enum with conversion helpers.
* :func:`should_log` threshold predicate.
* ``_CODE_TABLE`` constant mapping levels to four-letter codes.

System Role
-----------
Used by :class:`~process_log_sink.domain.config.SinkConfig` to validate the
configured threshold and by the handle use case to decide whether a record
passes the filter.
"""

from __future__ import annotations

import logging
from enum import Enum

from .errors import ConfigError

_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class LogLevel(Enum):
    """Enumerated logging levels ordered by severity."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def severity(self) -> str:
        """Return the lowercase severity name for structured payloads."""

        return self.name.lower()

    @property
    def code(self) -> str:
        """Return the fixed-width four-letter code used by console renderers."""

        return _CODE_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging level integer into :class:`LogLevel`."""
        return cls.from_numeric(level)

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` corresponding to ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def coerce(cls, value: "LogLevel | str | int") -> "LogLevel":
        """Normalise enum members, names, and stdlib numbers into :class:`LogLevel`.

        Raises
        ------
        ConfigError
            If ``value`` has the wrong type or names no known level.

        Examples
        --------
        >>> LogLevel.coerce("warn") is LogLevel.WARNING
        True
        >>> LogLevel.coerce(40) is LogLevel.ERROR
        True
        """
        if isinstance(value, LogLevel):
            return value
        # bool is an int subclass; True is not a level.
        if isinstance(value, bool):
            raise ConfigError(f"level must be a LogLevel, name, or number, got {value!r}")
        try:
            if isinstance(value, str):
                return cls.from_name(value)
            if isinstance(value, int):
                return cls.from_numeric(value)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        raise ConfigError(f"level must be a LogLevel, name, or number, got {value!r}")


def should_log(level: LogLevel, threshold: LogLevel) -> bool:
    """Return ``True`` unless ``level`` is strictly less severe than ``threshold``.

    Examples
    --------
    >>> should_log(LogLevel.WARNING, LogLevel.INFO)
    True
    >>> should_log(LogLevel.INFO, LogLevel.INFO)
    True
    >>> should_log(LogLevel.DEBUG, LogLevel.INFO)
    False
    """

    return level.value >= threshold.value


_CODE_TABLE = {
    LogLevel.DEBUG: "DEBG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERRO",
    LogLevel.CRITICAL: "CRIT",
}


__all__ = ["LogLevel", "should_log"]
