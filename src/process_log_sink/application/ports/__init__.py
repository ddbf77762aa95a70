"""Application-layer ports consumed by the sink use cases."""

from __future__ import annotations

from .process import ProcessHandle, ProcessRegistryPort
from .settings import SettingsStorePort

__all__ = ["ProcessHandle", "ProcessRegistryPort", "SettingsStorePort"]
