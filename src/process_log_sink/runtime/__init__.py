"""Runtime façade wiring a sink's state to its use cases.

Purpose
-------
Expose :class:`EventSink`, the object a host dispatcher registers and then
calls for every event and reconfiguration request. It owns the current
:class:`SinkConfig` and replaces it only on reconfiguration.

Contents
--------
* :class:`EventSink` – registration, event, and reconfiguration call-ins.
* ``default_settings_store`` / ``default_registry`` – shared collaborators
  used when none are injected.

System Role
-----------
Outer shell of the package: high-level policy lives in the use cases, while
this module picks the adapters and keeps the state between calls. The host
guarantees serialized calls, so no locking happens here.
"""

from __future__ import annotations

import socket
from collections.abc import Mapping
from typing import Any

from process_log_sink.application.ports import ProcessRegistryPort, SettingsStorePort
from process_log_sink.application.use_cases import (
    DiagnosticHook,
    HandleOutcome,
    create_handle_event,
    init_state,
    reconfigure_state,
)
from process_log_sink.domain import FLUSH, ConfigError, SinkConfig

from ._state import default_registry, default_settings_store, reset_defaults


class EventSink:
    """Filter-and-forward stage delivering log records to one mailbox.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from process_log_sink.adapters.mailbox import Mailbox
    >>> from process_log_sink.adapters.registry import ProcessRegistry
    >>> from process_log_sink.adapters.settings_store import InMemorySettingsStore
    >>> from process_log_sink.domain import LogLevel, LogRecord
    >>> registry = ProcessRegistry()
    >>> inbox = Mailbox()
    >>> registry.register("inbox", inbox)
    >>> sink = EventSink("audit", {"destination": "inbox", "level": "warning"},
    ...                  settings_store=InMemorySettingsStore(), registry=registry, local_node="n1")
    >>> ts = datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> sink.handle(LogRecord(LogLevel.INFO, "quiet", ts, origin_node="n1")).reason
    'below_threshold'
    >>> sink.handle(LogRecord(LogLevel.ERROR, "loud", ts, origin_node="n1")).delivered
    True
    >>> inbox.receive(timeout=0).message
    'loud'
    """

    def __init__(
        self,
        name: str,
        options: Mapping[str, Any] | None = None,
        *,
        settings_store: SettingsStorePort | None = None,
        registry: ProcessRegistryPort | None = None,
        local_node: str | None = None,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        """Register a sink called ``name``.

        Parameters
        ----------
        name:
            Sink identity; also the key of its persisted settings.
        options:
            Initial options layered over persisted settings.
        settings_store:
            Store persisting merged options; defaults to the shared store.
        registry:
            Registry resolving named destinations; defaults to the shared one.
        local_node:
            Node the sink runs on; defaults to the host name.
        diagnostic:
            Optional callback receiving per-event milestones.

        Raises
        ------
        ConfigError
            When the merged options are invalid.
        """
        self._settings_store = settings_store if settings_store is not None else default_settings_store()
        self._registry = registry if registry is not None else default_registry()
        self._local_node = local_node or socket.gethostname()
        self._handle_event = create_handle_event(
            registry=self._registry,
            local_node=self._local_node,
            diagnostic=diagnostic,
        )
        self._state = init_state(name, options, settings_store=self._settings_store)

    @property
    def name(self) -> str:
        return self._state.name

    @property
    def state(self) -> SinkConfig:
        """Current configuration; replaced wholesale by :meth:`reconfigure`."""
        return self._state

    @property
    def local_node(self) -> str:
        return self._local_node

    def handle(self, event: Any) -> HandleOutcome:
        """Process one event pushed by the dispatcher; never raises."""
        outcome = self._handle_event(event, self._state)
        self._state = outcome.state
        return outcome

    def flush(self) -> HandleOutcome:
        """Forward a flush signal to the destination if it is alive."""
        return self.handle(FLUSH)

    def reconfigure(self, options: Mapping[str, Any] | None = None, **overrides: Any) -> SinkConfig:
        """Apply ``options`` (and keyword ``overrides``) and return the new state.

        The previous state stays in place when the options are rejected.
        """
        if options is not None and not isinstance(options, Mapping):
            raise ConfigError(f"options must be a mapping, got {options!r}")
        merged = {**(options or {}), **overrides}
        self._state = reconfigure_state(merged, self._state, settings_store=self._settings_store)
        return self._state

    def __repr__(self) -> str:
        return f"EventSink(name={self.name!r}, level={self._state.level.severity!r}, destination={self._state.destination!r})"


__all__ = [
    "EventSink",
    "default_registry",
    "default_settings_store",
    "reset_defaults",
]
