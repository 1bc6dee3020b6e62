from __future__ import annotations

from typer.testing import CliRunner

from table2dsv.cli import app


def test_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "SOURCE" in result.stdout
    assert "--out" in result.stdout
    assert "--delimiter" in result.stdout
    assert "--config" in result.stdout
    assert "--base-dir" in result.stdout
