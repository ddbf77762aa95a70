"""Rich-powered renderer for messages drained from a destination mailbox.

Purpose
-------
Show what a sink delivered in a human-friendly, level-coloured form.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichDeliveryConsole` - renderer used by the CLI ``demo`` command.

System Role
-----------
Presentation helper on the consuming side of a mailbox; the sink itself never
prints anything.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping

from rich.console import Console

from process_log_sink.domain.events import FLUSH_TOKEN, Delivery
from process_log_sink.domain.levels import LogLevel


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


class RichDeliveryConsole:
    """Render deliveries and control tokens using Rich."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogLevel | str, str] | None = None,
    ) -> None:
        """Configure the renderer with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    def emit(self, message: Any, *, colorize: bool = True) -> None:
        """Print one mailbox message.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> from io import StringIO
        >>> ts = datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
        >>> console = Console(file=StringIO(), record=True)
        >>> RichDeliveryConsole(console=console).emit(Delivery(LogLevel.INFO, "msg", ts, {"req": 1}), colorize=False)
        >>> "msg req=1" in console.export_text()
        True
        """
        if isinstance(message, Delivery):
            style = self._style_map.get(message.level, "") if colorize and not self._no_color else ""
            self._console.print(self.format_line(message), style=style, highlight=False, markup=False, soft_wrap=True)
        elif message == FLUSH_TOKEN:
            self._console.print("-- flush --", style="dim" if colorize else "", highlight=False, soft_wrap=True)
        else:
            self._console.print(repr(message), highlight=False, markup=False, soft_wrap=True)

    @staticmethod
    def format_line(delivery: Delivery) -> str:
        """Return a single console line for ``delivery``."""
        pairs = " ".join(f"{key}={value}" for key, value in delivery.metadata.items())
        suffix = f" {pairs}" if pairs else ""
        return f"{delivery.timestamp.isoformat()} {delivery.level.code} {delivery.message}{suffix}"


__all__ = ["RichDeliveryConsole"]
