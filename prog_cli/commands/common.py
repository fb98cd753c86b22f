"""Shared command helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

import typer

from prog_cli.core.models import SheetRows
from prog_cli.core.state import CLIState
from prog_cli.core.workbook import WorkbookError
from prog_cli.utils.parsing import SheetInputError, load_sheets, select_sheets


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))
        return
    state.console.print_json(data=payload, ensure_ascii=False)


def resolve_session_columns(state: CLIState, override: Optional[Sequence[str]] = None) -> Tuple[str, ...]:
    """Session columns from the command line, else those loaded at startup."""
    if override:
        return tuple(override)
    return state.session_columns


def load_input_sheets(
    input_path: Path,
    sheet_names: Optional[Sequence[str]] = None,
) -> List[SheetRows]:
    """Load and filter input sheets, exiting with a readable error on failure."""
    try:
        sheets = load_sheets(input_path.expanduser())
        return select_sheets(sheets, list(sheet_names or []))
    except WorkbookError as exc:
        typer.echo(f"Workbook error: {exc}", err=True)
        raise typer.Exit(code=1)
    except SheetInputError as exc:
        typer.echo(f"Input error: {exc}", err=True)
        raise typer.Exit(code=1)
