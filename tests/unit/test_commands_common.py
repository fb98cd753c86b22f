from __future__ import annotations

from pathlib import Path

from rich.console import Console

from prog_cli.commands.common import resolve_session_columns
from prog_cli.core.state import CLIState


def _state(json_output: bool = False, plain_output: bool = False) -> CLIState:
    return CLIState(
        json_output=json_output,
        plain_output=plain_output,
        show_dropped=False,
        config_path=Path("config.toml"),
        config={},
        session_columns=("Day A", "Day B"),
        console=Console(),
    )


def test_resolve_session_columns_prefers_override() -> None:
    assert resolve_session_columns(_state(), ["Only"]) == ("Only",)


def test_resolve_session_columns_falls_back_to_state() -> None:
    assert resolve_session_columns(_state()) == ("Day A", "Day B")
    assert resolve_session_columns(_state(), []) == ("Day A", "Day B")


def test_rich_output_only_without_json_or_plain() -> None:
    assert _state().rich_output
    assert not _state(json_output=True).rich_output
    assert not _state(plain_output=True).rich_output
