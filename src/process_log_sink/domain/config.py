"""Sink configuration doubling as the sink's state.

Purpose
-------
Hold the validated settings of one sink instance and build them strictly
from loosely typed option mappings.

Contents
--------
* :class:`SinkConfig` frozen dataclass.
* :func:`coerce_metadata` helper for the ``metadata`` option.

System Role
-----------
Created by the configure use case on initialisation and on every
reconfiguration; read (never mutated) by the handle use case.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from typing import Any, Optional

from .destination import UNSET, Destination, coerce_destination
from .errors import ConfigError
from .formatter import Formatter, coerce_formatter
from .levels import LogLevel

OPTION_KEYS = frozenset({"name", "level", "destination", "metadata", "formatter"})


def coerce_metadata(value: Any) -> dict[str, Any]:
    """Return ``value`` as an ordered ``dict`` with string keys.

    Mappings and sequences of ``(key, value)`` pairs are accepted; ``None``
    stands for no extra metadata.

    Examples
    --------
    >>> coerce_metadata([("region", "us"), ("tier", 1)])
    {'region': 'us', 'tier': 1}
    """

    if value is None:
        return {}
    if isinstance(value, Mapping):
        pairs = list(value.items())
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        pairs = []
        for item in value:
            if not isinstance(item, tuple) or len(item) != 2:
                raise ConfigError(f"metadata entries must be (key, value) pairs, got {item!r}")
            pairs.append(item)
    else:
        raise ConfigError(f"metadata must be a mapping or a sequence of pairs, got {value!r}")
    for key, _ in pairs:
        if not isinstance(key, str):
            raise ConfigError(f"metadata keys must be strings, got {key!r}")
    return dict(pairs)


@dataclass(frozen=True)
class SinkConfig:
    """Validated configuration and state of a single sink.

    Attributes
    ----------
    name:
        Identity of the sink; fixed when the sink is created.
    level:
        Minimum severity delivered.
    destination:
        Mailbox receiving deliveries; :data:`UNSET` disables delivery.
    metadata:
        Extra metadata merged into every delivery, winning over record
        metadata on key collisions.
    formatter:
        Optional formatter applied before delivery.
    """

    name: str
    level: LogLevel = LogLevel.INFO
    destination: Destination = UNSET
    metadata: dict[str, Any] = field(default_factory=dict)
    formatter: Optional[Formatter] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ConfigError(f"name must be a non-empty string, got {self.name!r}")
        object.__setattr__(self, "level", LogLevel.coerce(self.level))
        object.__setattr__(self, "destination", coerce_destination(self.destination))
        object.__setattr__(self, "metadata", coerce_metadata(self.metadata))
        object.__setattr__(self, "formatter", coerce_formatter(self.formatter))

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "SinkConfig":
        """Populate a config strictly from ``options``.

        Raises
        ------
        ConfigError
            When ``name`` is missing, an unknown key is present, or a value
            has the wrong shape.

        Examples
        --------
        >>> SinkConfig.from_options({"name": "audit", "level": "error"}).level
        <LogLevel.ERROR: 40>
        >>> SinkConfig.from_options({"level": "error"})
        Traceback (most recent call last):
        ...
        process_log_sink.domain.errors.ConfigError: missing required option: 'name'
        """

        if not isinstance(options, Mapping):
            raise ConfigError(f"options must be a mapping, got {options!r}")
        unknown = sorted(str(key) for key in options if key not in OPTION_KEYS)
        if unknown:
            raise ConfigError(f"unknown option(s): {', '.join(unknown)}")
        if "name" not in options:
            raise ConfigError("missing required option: 'name'")
        return cls(**dict(options))

    def to_options(self) -> dict[str, Any]:
        """Return the config as an option mapping accepted by :meth:`from_options`."""

        return {item.name: getattr(self, item.name) for item in fields(self)}


__all__ = ["OPTION_KEYS", "SinkConfig", "coerce_metadata"]
