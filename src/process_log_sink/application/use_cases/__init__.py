"""Use cases: configuration and per-event handling."""

from __future__ import annotations

from .configure import configure_sink, init_state, reconfigure_state
from .handle_event import DiagnosticHook, HandleCallable, HandleOutcome, create_handle_event

__all__ = [
    "DiagnosticHook",
    "HandleCallable",
    "HandleOutcome",
    "configure_sink",
    "create_handle_event",
    "init_state",
    "reconfigure_state",
]
