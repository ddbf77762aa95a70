from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from process_log_sink.adapters.mailbox import Mailbox
from process_log_sink.adapters.registry import ProcessRegistry
from process_log_sink.adapters.settings_store import InMemorySettingsStore
from process_log_sink.application.ports import ProcessHandle, ProcessRegistryPort, SettingsStorePort


class _FakeHandle:
    def __init__(self) -> None:
        self.sent: list[Any] = []

    def is_alive(self) -> bool:
        return True

    def send(self, message: Any) -> bool:
        self.sent.append(message)
        return True


class _FakeRegistry:
    def resolve(self, name: str) -> ProcessHandle | None:
        return None


class _FakeStore:
    def get(self, key: str, default: Mapping[str, Any]) -> Mapping[str, Any]:
        return default

    def put(self, key: str, value: Mapping[str, Any]) -> None:
        return None


@pytest.mark.parametrize(
    "factory, protocol",
    [
        (_FakeHandle, ProcessHandle),
        (Mailbox, ProcessHandle),
        (_FakeRegistry, ProcessRegistryPort),
        (ProcessRegistry, ProcessRegistryPort),
        (_FakeStore, SettingsStorePort),
        (InMemorySettingsStore, SettingsStorePort),
    ],
)
def test_adapters_and_fakes_satisfy_ports(factory, protocol) -> None:
    assert isinstance(factory(), protocol)


def test_objects_without_send_are_not_process_handles() -> None:
    class _Silent:
        def is_alive(self) -> bool:
            return True

    assert not isinstance(_Silent(), ProcessHandle)
