"""Name registry resolving logical process names to live handles.

A registered name disappears as soon as its handle dies, so resolving a
stale name yields ``None`` just like a name that was never registered.
"""

from __future__ import annotations

from threading import RLock
from typing import Dict

from process_log_sink.application.ports.process import ProcessHandle, ProcessRegistryPort


class ProcessRegistry(ProcessRegistryPort):
    """Thread-safe in-memory implementation of :class:`ProcessRegistryPort`."""

    def __init__(self) -> None:
        self._entries: Dict[str, ProcessHandle] = {}
        self._lock = RLock()

    def register(self, name: str, handle: ProcessHandle) -> None:
        """Register ``handle`` under ``name``.

        Raises
        ------
        ValueError
            If ``name`` is already held by a live handle.
        """
        if not name:
            raise ValueError("process name must not be empty")
        with self._lock:
            current = self._lookup(name)
            if current is not None and current is not handle:
                raise ValueError(f"process name already registered: {name!r}")
            self._entries[name] = handle

    def unregister(self, name: str) -> None:
        """Forget ``name``; unknown names are ignored."""
        with self._lock:
            self._entries.pop(name, None)

    def resolve(self, name: str) -> ProcessHandle | None:
        """Return the live handle registered under ``name`` or ``None``."""
        with self._lock:
            return self._lookup(name)

    def names(self) -> list[str]:
        """Return the names currently bound to live handles."""
        with self._lock:
            return [name for name in list(self._entries) if self._lookup(name) is not None]

    def _lookup(self, name: str) -> ProcessHandle | None:
        handle = self._entries.get(name)
        if handle is None:
            return None
        if not handle.is_alive():
            del self._entries[name]
            return None
        return handle


__all__ = ["ProcessRegistry"]
