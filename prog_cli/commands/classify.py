"""Classify raw cell values."""

from __future__ import annotations

from typing import List

import typer
from rich.table import Table

from prog_cli.commands.common import get_state, print_json_payload
from prog_cli.core.classify import explain_classification
from prog_cli.core.constants import CELL_KIND_LABELS, RULE_LABELS


def classify_command(
    ctx: typer.Context,
    values: List[str] = typer.Argument(..., help="Cell values to classify"),
) -> None:
    """Show whether each value reads as an exercise title or a set."""
    state = get_state(ctx)
    results = [explain_classification(value) for value in values]

    if state.json_output:
        print_json_payload(
            state,
            [{"text": item.text, "kind": item.kind.value, "rule": item.rule} for item in results],
        )
        return

    if state.plain_output:
        for item in results:
            typer.echo(f"{item.text}\t{item.kind.value}\t{item.rule}")
        return

    table = Table(title="Cell classification")
    table.add_column("Value")
    table.add_column("Kind")
    table.add_column("Rule")
    for item in results:
        table.add_row(item.text or "(empty)", CELL_KIND_LABELS[item.kind.value], RULE_LABELS[item.rule])
    state.console.print(table)
