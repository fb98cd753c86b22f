"""Parse a program workbook into structured weeks."""

from __future__ import annotations

from contextlib import nullcontext
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.table import Table

from prog_cli.commands.common import (
    get_state,
    load_input_sheets,
    print_json_payload,
    resolve_session_columns,
)
from prog_cli.core.config import ConfigError, resolve_indent, resolve_output_path
from prog_cli.core.transform import build_program
from prog_cli.exporters.json_export import write_json
from prog_cli.exporters.markdown import write_program_markdown
from prog_cli.utils.formatting import program_summary


def parse_command(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., help="Workbook (.xlsx) or pre-extracted sheets (.json/.yaml)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output JSON file"),
    export_format: str = typer.Option("json", "--format", help="Export format: json|markdown|both"),
    session_column: Optional[List[str]] = typer.Option(
        None,
        "--session-column",
        help="Session column label (repeatable, replaces configured columns)",
    ),
    sheet: Optional[List[str]] = typer.Option(None, "--sheet", help="Only parse this sheet (repeatable)"),
    stdout: bool = typer.Option(False, "--stdout", help="Print the program JSON instead of a summary"),
) -> None:
    """Parse every sheet of a workbook into a program document."""
    state = get_state(ctx)

    if export_format not in {"json", "markdown", "both"}:
        raise typer.BadParameter("--format must be one of: json, markdown, both")

    try:
        indent = resolve_indent(state.config)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(code=2)

    columns = resolve_session_columns(state, session_column)
    sheets = load_input_sheets(input_path, sheet)
    if not sheets:
        typer.echo("No data found in the input file or the file is empty.", err=True)
        raise typer.Exit(code=1)

    status_ctx = (
        state.console.status(f"Processing {len(sheets)} sheet(s) from {input_path.name}...")
        if state.rich_output
        else nullcontext()
    )
    with status_ctx:
        program = build_program(sheets, session_columns=columns)

    json_path = resolve_output_path(state.config, explicit=output)
    exports: Dict[str, Any] = {"json_file": None, "markdown_file": None}

    if export_format in {"json", "both"}:
        exports["json_file"] = str(write_json(json_path, program.to_dict(), indent=indent))
    if export_format in {"markdown", "both"}:
        md_path = json_path.with_suffix(".md")
        exports["markdown_file"] = str(write_program_markdown(md_path, program))

    summary = program_summary(program)

    if stdout or state.json_output:
        print_json_payload(state, program.to_dict())
        return

    if state.plain_output:
        typer.echo("week\tsessions\texercises\tsets")
        for week in summary["by_week"]:
            typer.echo(f"{week['week_date']}\t{week['sessions']}\t{week['exercises']}\t{week['sets']}")
        typer.echo(f"total\t{summary['weeks']}")
        for key, value in exports.items():
            if value:
                typer.echo(f"{key}\t{value}")
        return

    table = Table(title=f"Weeks ({summary['weeks']} total)")
    table.add_column("Week")
    table.add_column("Sessions", justify="right")
    table.add_column("Exercises", justify="right")
    table.add_column("Sets", justify="right")
    for week in summary["by_week"]:
        table.add_row(week["week_date"], str(week["sessions"]), str(week["exercises"]), str(week["sets"]))

    state.console.print(table)
    state.console.print(
        f"Parsed {summary['weeks']} weeks, {summary['exercises']} exercises, {summary['sets']} sets"
    )
    for value in exports.values():
        if value:
            state.console.print(f"Wrote: {value}")
