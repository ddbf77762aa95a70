"""Ports describing addressable processes and the name registry."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ProcessHandle(Protocol):
    """A mailbox-owning process that accepts arbitrary messages."""

    def is_alive(self) -> bool:
        """Return ``True`` while the process accepts messages."""

    def send(self, message: Any) -> bool:
        """Enqueue ``message`` without waiting; return ``False`` if it was lost."""


@runtime_checkable
class ProcessRegistryPort(Protocol):
    """Resolve logical process names to live handles."""

    def resolve(self, name: str) -> ProcessHandle | None:
        """Return the live handle registered under ``name`` or ``None``."""


__all__ = ["ProcessHandle", "ProcessRegistryPort"]
