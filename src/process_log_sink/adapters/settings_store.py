"""In-memory settings store shared by sinks living in one process."""

from __future__ import annotations

from collections.abc import Mapping
from threading import RLock
from typing import Any

from process_log_sink.application.ports.settings import SettingsStorePort


class InMemorySettingsStore(SettingsStorePort):
    """Keep option mappings keyed by sink name for the lifetime of the process.

    Values are copied on the way in and out, so callers never share a mutable
    mapping with the store.

    Examples
    --------
    >>> store = InMemorySettingsStore()
    >>> store.get("audit", {})
    {}
    >>> store.put("audit", {"level": "error"})
    >>> store.get("audit", {})
    {'level': 'error'}
    """

    def __init__(self, initial: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._lock = RLock()
        self._data: dict[str, dict[str, Any]] = {key: dict(value) for key, value in (initial or {}).items()}

    def get(self, key: str, default: Mapping[str, Any]) -> Mapping[str, Any]:
        with self._lock:
            stored = self._data.get(key)
            return dict(stored) if stored is not None else dict(default)

    def put(self, key: str, value: Mapping[str, Any]) -> None:
        with self._lock:
            self._data[key] = dict(value)

    def delete(self, key: str) -> None:
        """Drop the settings stored under ``key`` if present."""
        with self._lock:
            self._data.pop(key, None)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data)


__all__ = ["InMemorySettingsStore"]
