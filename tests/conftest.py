from __future__ import annotations

from datetime import datetime, timezone

import pytest

from process_log_sink.adapters.mailbox import Mailbox
from process_log_sink.adapters.registry import ProcessRegistry
from process_log_sink.adapters.settings_store import InMemorySettingsStore
from process_log_sink.runtime import reset_defaults
from tests.support import LOCAL_NODE


@pytest.fixture(autouse=True)
def _reset_shared_defaults() -> None:
    """Give every test fresh process-wide registry and settings store."""

    reset_defaults()
    yield
    reset_defaults()


@pytest.fixture
def timestamp() -> datetime:
    return datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def registry() -> ProcessRegistry:
    return ProcessRegistry()


@pytest.fixture
def store() -> InMemorySettingsStore:
    return InMemorySettingsStore()


@pytest.fixture
def inbox() -> Mailbox:
    return Mailbox(node=LOCAL_NODE)
