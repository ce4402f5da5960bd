# tests/cli/test_main_help.py
from __future__ import annotations

from typer.testing import CliRunner

from modelpath import __version__
from modelpath.cli.main import app


def test_main_help_lists_subcommands():
    """Verify main CLI help displays all subcommands."""
    result = CliRunner().invoke(app, ["--help"])
    assert result.exit_code == 0
    text = result.stdout
    for command in ("parse", "manifest", "blob", "store"):
        assert command in text


def test_version_flag():
    """Verify --version flag displays version and exits."""
    result = CliRunner().invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"modelpath version {__version__}" in result.stdout


def test_version_short_flag():
    """Verify -v flag displays version and exits."""
    result = CliRunner().invoke(app, ["-v"])
    assert result.exit_code == 0
    assert f"modelpath version {__version__}" in result.stdout
