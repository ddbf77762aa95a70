"""Process-wide default collaborators and access helpers.

Sinks created without an explicit settings store or registry share these
instances, so settings persisted by one sink survive its replacement by a
new sink with the same name.
"""

from __future__ import annotations

from threading import RLock

from process_log_sink.adapters.registry import ProcessRegistry
from process_log_sink.adapters.settings_store import InMemorySettingsStore

_SETTINGS: InMemorySettingsStore | None = None
_REGISTRY: ProcessRegistry | None = None
_STATE_LOCK = RLock()


def default_settings_store() -> InMemorySettingsStore:
    """Return the shared settings store, creating it on first use."""

    global _SETTINGS
    with _STATE_LOCK:
        if _SETTINGS is None:
            _SETTINGS = InMemorySettingsStore()
        return _SETTINGS


def default_registry() -> ProcessRegistry:
    """Return the shared process registry, creating it on first use."""

    global _REGISTRY
    with _STATE_LOCK:
        if _REGISTRY is None:
            _REGISTRY = ProcessRegistry()
        return _REGISTRY


def reset_defaults() -> None:
    """Discard the shared instances; the next access creates fresh ones."""

    global _SETTINGS, _REGISTRY
    with _STATE_LOCK:
        _SETTINGS = None
        _REGISTRY = None


__all__ = ["default_registry", "default_settings_store", "reset_defaults"]
