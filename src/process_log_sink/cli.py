"""Command line interface for inspecting and demonstrating the sink.

Purpose
-------
Expose the package metadata banner and a self-contained demonstration that
wires a registry, a named mailbox, and an :class:`EventSink`, pushes one record
per level through it, and renders what reached the mailbox.

Contents
--------
* :func:`cli` - click group with ``info`` and ``demo`` commands.
* :func:`main` - entry point delegating to ``lib_cli_exit_tools.run_cli``.
* :func:`summary_info` - metadata banner as a string.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Sequence

import click
import lib_cli_exit_tools
from rich.console import Console

from . import __init__conf__
from .adapters.console.rich_console import RichDeliveryConsole
from .adapters.mailbox import Mailbox
from .adapters.registry import ProcessRegistry
from .adapters.settings_store import InMemorySettingsStore
from .domain import Delivery, LogLevel, LogRecord
from .runtime import EventSink

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LEVEL_NAMES = [level.severity for level in LogLevel]
_DEMO_NODE = "demo-node"
_DEMO_INBOX = "demo_inbox"


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def _parse_meta(pairs: Sequence[str]) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--meta")
        parsed[key] = value
    return parsed


def _template_formatter(template: str) -> Callable[[LogLevel, Any, datetime, Mapping[str, Any]], str]:
    def format_message(level: LogLevel, message: Any, timestamp: datetime, metadata: Mapping[str, Any]) -> str:
        fields = {**metadata, "level": level.severity, "message": message, "timestamp": timestamp.isoformat()}
        return template.format_map(fields)

    return format_message


def _demo(
    *,
    level: str,
    metadata: Mapping[str, str],
    template: str | None,
    dead_destination: bool,
) -> dict[str, Any]:
    """Run the demonstration and return the drained messages plus statistics."""

    registry = ProcessRegistry()
    inbox = Mailbox(node=_DEMO_NODE)
    registry.register(_DEMO_INBOX, inbox)
    options: dict[str, Any] = {"destination": _DEMO_INBOX, "level": level, "metadata": dict(metadata)}
    if template is not None:
        options["formatter"] = _template_formatter(template)
    sink = EventSink(
        "demo",
        options,
        settings_store=InMemorySettingsStore(),
        registry=registry,
        local_node=_DEMO_NODE,
    )
    if dead_destination:
        inbox.close()

    reasons: Counter[str] = Counter()
    timestamp = datetime.now(timezone.utc)
    records = [
        LogRecord(
            level=record_level,
            message=f"{record_level.severity} message",
            timestamp=timestamp,
            metadata={"source": "demo", "seq": index},
            origin_node=_DEMO_NODE,
        )
        for index, record_level in enumerate(LogLevel)
    ]
    delivered = 0
    for record in records:
        outcome = sink.handle(record)
        if outcome.delivered:
            delivered += 1
        else:
            reasons[outcome.reason or "unknown"] += 1
    sink.flush()
    return {
        "messages": inbox.drain(),
        "emitted": len(records),
        "delivered": delivered,
        "dropped": dict(reasons),
    }


def _apply_traceback_preference(ctx: click.Context, param: click.Parameter, value: bool) -> bool:
    lib_cli_exit_tools.config.traceback = value
    lib_cli_exit_tools.config.traceback_force_color = value
    return value


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    expose_value=False,
    callback=_apply_traceback_preference,
    help="Show full Python tracebacks on errors.",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Print the metadata banner when no subcommand is given."""

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--level", type=click.Choice(_LEVEL_NAMES, case_sensitive=False), default="info", show_default=True, help="Sink threshold.")
@click.option("--meta", "meta", multiple=True, metavar="KEY=VALUE", help="Extra metadata merged into every delivery.")
@click.option("--template", default=None, help="str.format template using level, message, timestamp, and metadata keys.")
@click.option("--dead-destination", is_flag=True, default=False, help="Close the mailbox before emitting.")
@click.option("--no-color", is_flag=True, default=False, help="Disable coloured output.")
def cli_demo(level: str, meta: tuple[str, ...], template: str | None, dead_destination: bool, no_color: bool) -> None:
    """Push one record per level through a sink and show what was delivered."""

    result = _demo(level=level, metadata=_parse_meta(meta), template=template, dead_destination=dead_destination)
    renderer = RichDeliveryConsole(console=Console(no_color=no_color, highlight=False), no_color=no_color)
    for message in result["messages"]:
        renderer.emit(message, colorize=not no_color)
    deliveries = sum(1 for message in result["messages"] if isinstance(message, Delivery))
    click.echo(f"delivered {deliveries} of {result['emitted']} records")
    for reason, count in sorted(result["dropped"].items()):
        click.echo(f"dropped {count}: {reason}")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Parameters
    ----------
    argv:
        Optional sequence of argument strings (defaults to ``sys.argv[1:]``).
    restore_traceback:
        Restore ``lib_cli_exit_tools`` traceback settings changed by
        ``--traceback`` once the command finished.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
