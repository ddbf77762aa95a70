"""Destination variants naming the mailbox that receives deliveries.

A destination is either unset, a concrete process handle, or a logical name
that is resolved through a registry each time a record is delivered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .errors import ConfigError


@dataclass(frozen=True)
class Unset:
    """No destination configured; nothing is ever delivered."""


@dataclass(frozen=True)
class Handle:
    """A concrete process handle exposing ``is_alive()`` and ``send()``."""

    handle: Any


@dataclass(frozen=True)
class Name:
    """A logical process name resolved through the registry at delivery time."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigError("destination name must not be empty")


Destination = Union[Unset, Handle, Name]

UNSET = Unset()


def _looks_like_handle(value: Any) -> bool:
    return callable(getattr(value, "is_alive", None)) and callable(getattr(value, "send", None))


def coerce_destination(value: Any) -> Destination:
    """Translate a user-facing option value into a :data:`Destination`.

    Examples
    --------
    >>> coerce_destination(None) is UNSET
    True
    >>> coerce_destination("audit_inbox")
    Name(name='audit_inbox')
    """

    if value is None:
        return UNSET
    if isinstance(value, (Unset, Handle, Name)):
        return value
    if isinstance(value, str):
        return Name(value)
    if _looks_like_handle(value):
        return Handle(value)
    raise ConfigError(f"destination must be a process handle, a name, or None, got {value!r}")


__all__ = ["Destination", "Handle", "Name", "UNSET", "Unset", "coerce_destination"]
