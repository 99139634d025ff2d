"""CLI smoke tests."""

from click.testing import CliRunner
from schema_paths.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "paths" in result.output
    assert "resolve" in result.output
    assert "export-inventory" in result.output


def test_resolve_help_mentions_explain_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["resolve", "--help"])

    assert result.exit_code == 0
    assert "--explain" in result.output
    assert "PATH" in result.output
