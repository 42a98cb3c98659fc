"""Tests for the root objfacade CLI."""

from pathlib import Path

from click.testing import CliRunner

from objfacade import __version__
from objfacade.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "objfacade" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_unknown_command(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["frobnicate"])
    assert result.exit_code == 2


# --- Global flags ---


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    assert cli_runner.invoke(cli, ["--json", "--version"]).exit_code == 0


def test_quiet_flag_accepted(cli_runner: CliRunner) -> None:
    assert cli_runner.invoke(cli, ["-q", "--version"]).exit_code == 0


def test_explicit_config(cli_runner: CliRunner, project_root: Path) -> None:
    custom = project_root / "conf" / "facade.toml"
    custom.parent.mkdir()
    custom.write_text('[conventions]\ngetter_prefixes = ["fetch"]\n')
    result = cli_runner.invoke(
        cli, ["-c", str(custom), "get", "facade_target:account", "id", "--via", "method"]
    )
    assert result.exit_code == 1
    assert "No accessor" in result.stderr


def test_invalid_toml_reports_click_error(cli_runner: CliRunner, project_root: Path) -> None:
    (project_root / "objfacade.toml").write_text("[policy\n")
    result = cli_runner.invoke(cli, ["describe", "facade_target:account"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
