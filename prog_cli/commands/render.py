"""Render an exported program document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from prog_cli.commands.common import get_state
from prog_cli.core.models import Program, ProgramFormatError
from prog_cli.exporters.markdown import program_to_markdown, write_program_markdown


def render_command(
    ctx: typer.Context,
    program_path: Path = typer.Argument(..., help="Program JSON written by `parse`"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write markdown to this file"),
    title: str = typer.Option("Training Program", help="Document title"),
) -> None:
    """Render a program JSON file as markdown."""
    state = get_state(ctx)

    try:
        payload = json.loads(program_path.expanduser().read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        typer.echo(f"Input error: cannot read program {program_path}: {exc}", err=True)
        raise typer.Exit(code=1)
    if not isinstance(payload, dict):
        typer.echo("Input error: program JSON must be an object with a 'weeks' list", err=True)
        raise typer.Exit(code=1)

    try:
        program = Program.from_dict(payload)
    except ProgramFormatError as exc:
        typer.echo(f"Input error: invalid program {program_path}: {exc}", err=True)
        raise typer.Exit(code=1)

    if output is not None:
        path = write_program_markdown(output.expanduser(), program, title=title)
        state.console.print(f"Wrote: {path}")
        return

    typer.echo(program_to_markdown(program, title=title), nl=False)
