"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import sys
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from process_log_sink import __init__conf__
from process_log_sink import cli as cli_mod


def run_cli(args: list[str]) -> tuple[int, str, BaseException | None]:
    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args, prog_name=__init__conf__.shell_command)
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli([])

    assert exit_code == 0
    assert stdout == cli_mod.summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == cli_mod.summary_info()


def test_cli_version_option() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert __init__conf__.version in stdout


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    exit_code, _stdout, _exception = run_cli(["--no-traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_cli_traceback_option_enables_tracebacks(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    exit_code, _stdout, _exception = run_cli(["--traceback", "info"])

    assert exit_code == 0
    assert lib_cli_exit_tools.config.traceback is True


def test_demo_delivers_records_at_or_above_threshold() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--no-color"])

    assert exit_code == 0
    assert "delivered 4 of 5 records" in stdout
    assert "dropped 1: below_threshold" in stdout
    assert "WARN warning message source=demo seq=2" in stdout
    assert "debug message" not in stdout
    assert "-- flush --" in stdout


def test_demo_level_and_metadata_options() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--no-color", "--level", "ERROR", "--meta", "region=eu", "--meta", "source=cli"])

    assert exit_code == 0
    assert "delivered 2 of 5 records" in stdout
    assert "dropped 3: below_threshold" in stdout
    assert "ERRO error message source=cli seq=3 region=eu" in stdout


def test_demo_template_formats_messages() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--no-color", "--template", "{level}|{message}|{source}"])

    assert exit_code == 0
    assert "warning|warning message|demo" in stdout


def test_demo_template_errors_drop_records() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--no-color", "--template", "{missing}"])

    assert exit_code == 0
    assert "delivered 0 of 5 records" in stdout
    assert "dropped 4: format_error" in stdout


def test_demo_with_dead_destination_delivers_nothing() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--no-color", "--dead-destination"])

    assert exit_code == 0
    assert "delivered 0 of 5 records" in stdout
    assert "dropped 4: destination_unavailable" in stdout
    assert "-- flush --" not in stdout


def test_demo_rejects_malformed_metadata() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--meta", "no-equals-sign"])

    assert exit_code != 0
    assert "KEY=VALUE" in stdout


def test_demo_result_shape() -> None:
    result = cli_mod._demo(level="critical", metadata={}, template=None, dead_destination=False)

    assert result["emitted"] == 5
    assert result["delivered"] == 1
    assert result["dropped"] == {"below_threshold": 4}
    assert result["messages"][-1] == "flush"


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        runner = CliRunner()
        result = runner.invoke(command, ["--no-traceback", "info"] if argv is None else argv)
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--no-traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": False}
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


def test_main_consumes_sys_argv(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "info"], raising=False)

    exit_code = cli_mod.main()
    captured = capsys.readouterr()

    assert exit_code == 0
    assert f"Info for {__init__conf__.name}" in captured.out
