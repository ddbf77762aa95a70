"""Use case deciding, per inbound event, whether and what to deliver.

Purpose
-------
Tie together origin checks, level filtering, destination liveness, metadata
enrichment, and formatting into one callable invoked for every event the
dispatcher pushes into a sink.

Contents
--------
* :class:`HandleOutcome` – result of one invocation.
* :func:`create_handle_event` factory returning the runtime callable.
* Helper functions for each pipeline stage.

System Role
-----------
Application-layer orchestrator used by
:class:`process_log_sink.runtime.EventSink`. Handling never raises: every
per-event failure ends as a dropped event with a reason.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Optional

from process_log_sink.application.ports import ProcessHandle, ProcessRegistryPort
from process_log_sink.domain import (
    FLUSH_TOKEN,
    LOGGER_ORIGIN,
    Delivery,
    FlushSignal,
    FormatError,
    Handle,
    LogRecord,
    Name,
    SinkConfig,
    Unset,
    apply_formatter,
    should_log,
)

logger = logging.getLogger(__name__)

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]


@dataclass(frozen=True)
class HandleOutcome:
    """Result of handling one event.

    Attributes
    ----------
    state:
        State after the event; always the state passed in.
    delivered:
        ``True`` when a message was handed to the destination.
    reason:
        Why nothing was delivered, ``None`` on delivery.
    """

    state: SinkConfig
    delivered: bool
    reason: str | None = None


HandleCallable = Callable[[Any, SinkConfig], HandleOutcome]


@dataclass(frozen=True)
class _PipelineToolkit:
    registry: ProcessRegistryPort
    local_node: str
    emit: Callable[[str, dict[str, Any]], None]


def create_handle_event(
    *,
    registry: ProcessRegistryPort,
    local_node: str,
    diagnostic: DiagnosticHook = None,
) -> HandleCallable:
    """Build the event handler bound to ``registry`` and ``local_node``.

    Parameters
    ----------
    registry:
        Adapter implementing :class:`ProcessRegistryPort`, used to resolve
        named destinations at delivery time.
    local_node:
        Name of the node the sink runs on; records emitted elsewhere are
        ignored.
    diagnostic:
        Optional callback invoked with ``delivered``, ``dropped`` and
        ``flushed`` milestones.

    Returns
    -------
    Callable[[Any, SinkConfig], HandleOutcome]
        Function accepting an event and the current state.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from process_log_sink.adapters.mailbox import Mailbox
    >>> from process_log_sink.adapters.registry import ProcessRegistry
    >>> from process_log_sink.domain import LogLevel
    >>> inbox = Mailbox()
    >>> handle = create_handle_event(registry=ProcessRegistry(), local_node="node-a")
    >>> state = SinkConfig(name="audit", destination=inbox)
    >>> ts = datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> handle(LogRecord(LogLevel.WARNING, "disk full", ts, origin_node="node-a"), state).delivered
    True
    >>> inbox.receive(timeout=0).message
    'disk full'
    """

    toolkit = _PipelineToolkit(
        registry=registry,
        local_node=local_node,
        emit=_build_diagnostic_emitter(diagnostic),
    )

    def handle_event(event: Any, state: SinkConfig) -> HandleOutcome:
        if isinstance(event, FlushSignal):
            return _flush(toolkit, state)
        if not isinstance(event, LogRecord):
            return _drop(toolkit, state, "unsupported_event")
        return _handle_record(toolkit, event, state)

    return handle_event


def _build_diagnostic_emitter(diagnostic: DiagnosticHook) -> Callable[[str, dict[str, Any]], None]:
    if diagnostic is None:

        def _noop(name: str, payload: dict[str, Any]) -> None:
            return None

        return _noop

    def emit(name: str, payload: dict[str, Any]) -> None:
        try:
            diagnostic(name, payload)
        except Exception:
            logger.exception("diagnostic hook failed for %s", name)

    return emit


def _handle_record(toolkit: _PipelineToolkit, event: LogRecord, state: SinkConfig) -> HandleOutcome:
    if event.origin_node != toolkit.local_node:
        return _drop(toolkit, state, "remote_origin")
    if isinstance(state.destination, Unset):
        return _drop(toolkit, state, "no_destination")
    if event.origin != LOGGER_ORIGIN:
        return _drop(toolkit, state, "foreign_origin")
    if not should_log(event.level, state.level):
        return _drop(toolkit, state, "below_threshold")
    target = _resolve_live(toolkit, state)
    if target is None:
        return _drop(toolkit, state, "destination_unavailable")
    metadata = _merge_metadata(event, state)
    # Formatters see a read-only view of the delivered metadata.
    result = apply_formatter(state.formatter, event.level, event.message, event.timestamp, MappingProxyType(metadata))
    if isinstance(result, FormatError):
        return _drop(toolkit, state, "format_error", error=repr(result.cause))
    if not target.send(Delivery(event.level, result.value, event.timestamp, metadata)):
        return _drop(toolkit, state, "destination_unavailable")
    toolkit.emit("delivered", {"sink": state.name, "level": event.level.name})
    return HandleOutcome(state=state, delivered=True)


def _flush(toolkit: _PipelineToolkit, state: SinkConfig) -> HandleOutcome:
    target = _resolve_live(toolkit, state)
    if target is None or not target.send(FLUSH_TOKEN):
        return _drop(toolkit, state, "destination_unavailable")
    toolkit.emit("flushed", {"sink": state.name})
    return HandleOutcome(state=state, delivered=True)


def _resolve_live(toolkit: _PipelineToolkit, state: SinkConfig) -> ProcessHandle | None:
    destination = state.destination
    if isinstance(destination, Handle):
        candidate = destination.handle
    elif isinstance(destination, Name):
        candidate = toolkit.registry.resolve(destination.name)
    else:
        return None
    if candidate is None or not candidate.is_alive():
        return None
    return candidate


def _merge_metadata(event: LogRecord, state: SinkConfig) -> dict[str, Any]:
    # Sink metadata wins; key order follows the record.
    return {**event.metadata, **state.metadata}


def _drop(toolkit: _PipelineToolkit, state: SinkConfig, reason: str, **details: Any) -> HandleOutcome:
    toolkit.emit("dropped", {"sink": state.name, "reason": reason, **details})
    return HandleOutcome(state=state, delivered=False, reason=reason)


__all__ = ["DiagnosticHook", "HandleCallable", "HandleOutcome", "create_handle_event"]
