from __future__ import annotations

from datetime import datetime
from io import StringIO

from rich.console import Console

from process_log_sink.adapters.console.rich_console import RichDeliveryConsole
from process_log_sink.domain.events import FLUSH_TOKEN, Delivery
from process_log_sink.domain.levels import LogLevel


def _recording_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, force_terminal=True, color_system="truecolor")


def test_format_line_lists_metadata_in_delivery_order(timestamp: datetime) -> None:
    delivery = Delivery(LogLevel.ERROR, "disk full", timestamp, {"region": "us", "req": 1})

    line = RichDeliveryConsole.format_line(delivery)

    assert line == f"{timestamp.isoformat()} ERRO disk full region=us req=1"


def test_format_line_without_metadata(timestamp: datetime) -> None:
    line = RichDeliveryConsole.format_line(Delivery(LogLevel.INFO, "hello", timestamp, {}))

    assert line.endswith("INFO hello")


def test_emit_renders_plain_text_without_colour(timestamp: datetime) -> None:
    console = _recording_console()
    renderer = RichDeliveryConsole(console=console)

    renderer.emit(Delivery(LogLevel.WARNING, "[bold]literal[/bold]", timestamp, {}), colorize=False)

    output = console.file.getvalue()
    assert "[bold]literal[/bold]" in output
    assert "\x1b[" not in output


def test_emit_colours_by_level_with_overrides(timestamp: datetime) -> None:
    console = _recording_console()
    renderer = RichDeliveryConsole(console=console, styles={"ERROR": "magenta"})

    renderer.emit(Delivery(LogLevel.ERROR, "boom", timestamp, {}), colorize=True)

    assert "\x1b[" in console.file.getvalue()
    assert "boom" in console.export_text()


def test_emit_renders_flush_and_foreign_messages() -> None:
    console = _recording_console()
    renderer = RichDeliveryConsole(console=console)

    renderer.emit(FLUSH_TOKEN, colorize=False)
    renderer.emit({"raw": 1}, colorize=False)

    text = console.export_text()
    assert "-- flush --" in text
    assert "{'raw': 1}" in text
