"""Inspect how session columns of each sheet are parsed."""

from __future__ import annotations

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
from prog_cli.core.transform import ColumnReport, SheetReport, sheet_report


def _column_status(column: ColumnReport) -> str:
    if not column.present:
        return "absent"
    return "kept" if column.kept else "empty"


def _report_payload(report: SheetReport) -> Dict[str, Any]:
    return {
        "sheet": report.sheet,
        "rows": report.rows,
        "columns": [
            {
                "column": column.column,
                "status": _column_status(column),
                "cells": column.cells,
                "titles": column.titles,
                "sets": column.sets,
                "dropped": list(column.dropped),
            }
            for column in report.columns
        ],
    }


def inspect_command(
    ctx: typer.Context,
    input_path: Path = typer.Argument(..., help="Workbook (.xlsx) or pre-extracted sheets (.json/.yaml)"),
    session_column: Optional[List[str]] = typer.Option(
        None,
        "--session-column",
        help="Session column label (repeatable, replaces configured columns)",
    ),
    sheet: Optional[List[str]] = typer.Option(None, "--sheet", help="Only inspect this sheet (repeatable)"),
) -> None:
    """Report titles, sets and dropped cells per sheet and session column."""
    state = get_state(ctx)
    columns = resolve_session_columns(state, session_column)
    sheets = load_input_sheets(input_path, sheet)

    reports = [sheet_report(item.rows, item.name, columns) for item in sheets]

    if state.json_output:
        print_json_payload(state, {"sheets": [_report_payload(report) for report in reports]})
        return

    if state.plain_output:
        typer.echo("sheet\tcolumn\tstatus\tcells\ttitles\tsets\tdropped")
        for report in reports:
            for column in report.columns:
                typer.echo(
                    "\t".join(
                        [
                            report.sheet,
                            column.column,
                            _column_status(column),
                            str(column.cells),
                            str(column.titles),
                            str(column.sets),
                            str(len(column.dropped)),
                        ]
                    )
                )
        return

    for report in reports:
        table = Table(title=f"{report.sheet} ({report.rows} rows)")
        table.add_column("Column")
        table.add_column("Status")
        table.add_column("Cells", justify="right")
        table.add_column("Titles", justify="right")
        table.add_column("Sets", justify="right")
        table.add_column("Dropped", justify="right")
        for column in report.columns:
            table.add_row(
                column.column,
                _column_status(column),
                str(column.cells),
                str(column.titles),
                str(column.sets),
                str(len(column.dropped)),
            )
        state.console.print(table)
        for column in report.columns:
            if column.dropped and state.show_dropped:
                state.console.print(f"  {column.column}: dropped {', '.join(column.dropped)}")

    total_dropped = sum(report.dropped for report in reports)
    state.console.print(f"Inspected {len(reports)} sheets, {total_dropped} set cells without a title")
