"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "process_log_sink"
title = "Log-event sink forwarding records to process mailboxes"
version = "0.1.0"
shell_command = "process-log-sink"

LAYOUT = (
    ("name", name),
    ("title", title),
    ("version", version),
    ("shell_command", shell_command),
)


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner line by line.

    ``writer`` receives each line including its trailing newline; it defaults
    to writing to stdout.
    """

    emit = writer if writer is not None else (lambda text: print(text, end=""))
    width = max(len(label) for label, _ in LAYOUT)
    emit(f"Info for {name}:\n\n")
    for label, value in LAYOUT:
        emit(f"    {label:<{width}} = {value}\n")
