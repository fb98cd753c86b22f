from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from prog_cli import __version__
from prog_cli.__main__ import app
from prog_cli.core.constants import SESSION_COLUMNS

runner = CliRunner()


def test_bare_invocation_prints_help() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "Parse fitness program workbooks" in result.stdout
    for command in ("parse", "inspect", "classify", "render", "config"):
        assert command in result.stdout


def test_version_matches_package() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == __version__


def test_json_and_plain_conflict_stops_before_subcommand() -> None:
    result = runner.invoke(app, ["--json", "--plain", "classify", "Squat"])
    assert result.exit_code == 2
    assert "mutually exclusive" in result.stdout


def test_parse_help_lists_session_column_option() -> None:
    result = runner.invoke(app, ["parse", "--help"])
    assert result.exit_code == 0
    assert "--session-column" in result.stdout
    assert "--sheet" in result.stdout


def test_verbose_inspect_lists_dropped_cells(tmp_path: Path) -> None:
    source = tmp_path / "sheets.json"
    source.write_text(
        json.dumps({"W1": [{SESSION_COLUMNS[0]: "85%x3"}, {SESSION_COLUMNS[0]: "Squat"}]}, ensure_ascii=False),
        encoding="utf-8",
    )
    quiet = runner.invoke(app, ["inspect", str(source)])
    verbose = runner.invoke(app, ["--verbose", "inspect", str(source)])

    assert quiet.exit_code == 0, quiet.output
    assert verbose.exit_code == 0, verbose.output
    assert "dropped 85%x3" not in quiet.stdout
    assert "dropped 85%x3" in verbose.stdout
