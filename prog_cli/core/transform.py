"""Rebuild the week/session/exercise hierarchy from raw sheet rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from prog_cli.core.classify import cell_text, classify_cell
from prog_cli.core.constants import SESSION_COLUMNS
from prog_cli.core.models import CellKind, Exercise, Program, RowRecord, Session, SheetRows, Week

logger = logging.getLogger(__name__)


@dataclass
class ColumnReport:
    """Outcome of walking one session column of one sheet."""

    column: str
    present: bool = False
    cells: int = 0
    titles: int = 0
    sets: int = 0
    dropped: List[str] = field(default_factory=list)
    exercises: List[Exercise] = field(default_factory=list)

    @property
    def kept(self) -> bool:
        return bool(self.exercises)


@dataclass
class SheetReport:
    sheet: str
    rows: int
    columns: List[ColumnReport] = field(default_factory=list)

    @property
    def dropped(self) -> int:
        return sum(len(column.dropped) for column in self.columns)


def _walk_column(rows: Sequence[RowRecord], column: str) -> ColumnReport:
    report = ColumnReport(column=column)
    if not any(column in row for row in rows):
        return report

    report.present = True
    current: Optional[Exercise] = None

    for row in rows:
        # Rows without this column neither reset the cursor nor separate exercises.
        if column not in row:
            continue

        text = cell_text(row[column])
        report.cells += 1

        if classify_cell(text) is CellKind.TITLE:
            current = Exercise(title=text)
            report.exercises.append(current)
            report.titles += 1
        elif current is not None:
            current.sets.append(text)
            report.sets += 1
        else:
            report.dropped.append(text)

    return report


def transform_sheet(
    rows: Sequence[RowRecord],
    sheet_label: str,
    session_columns: Sequence[str] = SESSION_COLUMNS,
) -> Week:
    """Build one week from a sheet's rows.

    Each session column is walked independently. Columns absent from every row
    and columns that yield no exercises are left out; set cells that appear
    before any title in their column are dropped.
    """
    sessions: List[Session] = []

    for column in session_columns:
        report = _walk_column(rows, column)
        if not report.present:
            logger.debug("Sheet %r: column %r not present, skipping", sheet_label, column)
            continue
        if report.dropped:
            logger.debug(
                "Sheet %r, column %r: dropped %d set cell(s) with no preceding title: %s",
                sheet_label,
                column,
                len(report.dropped),
                report.dropped,
            )
        if report.kept:
            sessions.append(Session(session_number=column, exercises=report.exercises))

    return Week(week_date=sheet_label, sessions=sessions)


def build_program(
    sheets: Iterable[SheetRows],
    session_columns: Sequence[str] = SESSION_COLUMNS,
) -> Program:
    """Transform every sheet into a week, preserving sheet order."""
    weeks: List[Week] = []
    for sheet in sheets:
        logger.debug("Transforming sheet %r (%d rows)", sheet.name, len(sheet.rows))
        weeks.append(transform_sheet(sheet.rows, sheet.name, session_columns))
    return Program(weeks=weeks)


def sheet_report(
    rows: Sequence[RowRecord],
    sheet_label: str,
    session_columns: Sequence[str] = SESSION_COLUMNS,
) -> SheetReport:
    """Describe how each session column of a sheet would be parsed."""
    return SheetReport(
        sheet=sheet_label,
        rows=len(rows),
        columns=[_walk_column(rows, column) for column in session_columns],
    )


def session_columns_from_config(config: Dict[str, Any]) -> Tuple[str, ...]:
    """Return configured session columns, falling back to the defaults."""
    configured = config.get("sheets", {}).get("session_columns")
    if not isinstance(configured, (list, tuple)) or not configured:
        return SESSION_COLUMNS
    columns = tuple(str(item) for item in configured if str(item).strip())
    return columns or SESSION_COLUMNS
