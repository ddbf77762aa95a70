"""Formatters and fakes shared by the test modules."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from process_log_sink.domain import LogLevel

LOCAL_NODE = "node-a"


def bracket_formatter(level: LogLevel, message: Any, timestamp: datetime, metadata: Mapping[str, Any]) -> str:
    return f"[{level.code}] {message}"


def exploding_formatter(level: LogLevel, message: Any, timestamp: datetime, metadata: Mapping[str, Any]) -> str:
    raise RuntimeError("formatter exploded")


class Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict]] = []

    def __call__(self, name: str, payload: dict) -> None:
        self.calls.append((name, payload))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]
