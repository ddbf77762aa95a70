"""Port for the shared settings store keyed by sink identity."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SettingsStorePort(Protocol):
    """Persist option mappings so they survive sink restarts."""

    def get(self, key: str, default: Mapping[str, Any]) -> Mapping[str, Any]:
        """Return the mapping stored under ``key`` or ``default``."""

    def put(self, key: str, value: Mapping[str, Any]) -> None:
        """Replace the mapping stored under ``key``."""


__all__ = ["SettingsStorePort"]
