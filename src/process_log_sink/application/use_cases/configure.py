"""Use cases creating and replacing a sink's configuration.

Purpose
-------
Implement the merge-and-persist procedure shared by sink initialisation and
runtime reconfiguration.

Contents
--------
* :func:`configure_sink` – merge options over persisted settings and build a
  :class:`SinkConfig`.
* :func:`init_state` / :func:`reconfigure_state` – the two call-ins built on
  top of it.

System Role
-----------
Application-layer entry points invoked by
:class:`process_log_sink.runtime.EventSink`; the only place where sink
settings are written to the settings store.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from process_log_sink.application.ports import SettingsStorePort
from process_log_sink.domain import ConfigError, SinkConfig

logger = logging.getLogger(__name__)


def configure_sink(
    name: str,
    options: Mapping[str, Any] | None,
    *,
    settings_store: SettingsStorePort,
) -> SinkConfig:
    """Merge ``options`` over the settings persisted for ``name``.

    Why
    ---
    Settings persisted by earlier calls must survive restarts of the sink, and
    explicit options always win over them. The identity of the sink is never
    configurable, so ``name`` is forced last. Rejected options are not
    persisted.

    Parameters
    ----------
    name:
        Sink identity; also the settings-store key.
    options:
        Options layered over the persisted settings (later keys override).
    settings_store:
        Adapter implementing :class:`SettingsStorePort`.

    Returns
    -------
    SinkConfig
        Freshly validated configuration.

    Raises
    ------
    ConfigError
        When the merged options do not describe a valid configuration.

    Examples
    --------
    >>> from process_log_sink.adapters.settings_store import InMemorySettingsStore
    >>> store = InMemorySettingsStore()
    >>> configure_sink("audit", {"level": "error"}, settings_store=store).level
    <LogLevel.ERROR: 40>
    >>> store.get("audit", {})
    {'level': 'error', 'name': 'audit'}
    """

    if options is not None and not isinstance(options, Mapping):
        raise ConfigError(f"options must be a mapping, got {options!r}")
    persisted = settings_store.get(name, {})
    applied: dict[str, Any] = {**persisted, **(options or {})}
    applied["name"] = name
    config = SinkConfig.from_options(applied)
    settings_store.put(name, applied)
    logger.debug("sink %s configured: level=%s destination=%r", name, config.level.severity, config.destination)
    return config


def init_state(
    name: str,
    options: Mapping[str, Any] | None = None,
    *,
    settings_store: SettingsStorePort,
) -> SinkConfig:
    """Build the initial state of the sink registered as ``name``."""

    return configure_sink(name, options, settings_store=settings_store)


def reconfigure_state(
    options: Mapping[str, Any] | None,
    state: SinkConfig,
    *,
    settings_store: SettingsStorePort,
) -> SinkConfig:
    """Return the state replacing ``state`` after applying ``options``."""

    return configure_sink(state.name, options, settings_store=settings_store)


__all__ = ["configure_sink", "init_state", "reconfigure_state"]
