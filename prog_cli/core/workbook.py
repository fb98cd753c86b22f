"""Read spreadsheet workbooks into ordered sheet rows."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from prog_cli.core.classify import cell_text
from prog_cli.core.constants import EMPTY_HEADER
from prog_cli.core.models import SheetRows

logger = logging.getLogger(__name__)


class WorkbookError(RuntimeError):
    """Raised when a workbook cannot be opened or read."""


def header_labels(raw_headers: Sequence[Any]) -> List[str]:
    """Turn a header row into unique column labels.

    Blank headers become ``__EMPTY``, ``__EMPTY_1``, ...; repeated labels get a
    numeric suffix so every column keeps its own key.
    """
    labels: List[str] = []
    used: Set[str] = set()
    suffixes: Dict[str, int] = {}

    for raw in raw_headers:
        base = cell_text(raw) if raw is not None else ""
        if not base:
            base = EMPTY_HEADER
        label = base
        while label in used:
            suffixes[base] = suffixes.get(base, 0) + 1
            label = f"{base}_{suffixes[base]}"
        used.add(label)
        labels.append(label)

    return labels


def rows_from_values(values: Iterable[Sequence[Any]]) -> List[Dict[str, Any]]:
    """Convert raw row tuples (header first) into row records.

    Empty cells are omitted so that key presence mirrors actual content, and
    rows with no content at all are skipped.
    """
    iterator = iter(values)
    headers: Optional[List[str]] = None
    for first in iterator:
        headers = header_labels(first)
        break
    if headers is None:
        return []

    records: List[Dict[str, Any]] = []
    for raw_row in iterator:
        record: Dict[str, Any] = {}
        for label, value in zip(headers, raw_row):
            if value is None:
                continue
            record[label] = value
        if record:
            records.append(record)
    return records


def read_workbook(path: Path) -> List[SheetRows]:
    """Read every sheet of an .xlsx workbook, in workbook order."""
    try:
        workbook = load_workbook(path, data_only=True)
    except (InvalidFileException, BadZipFile, OSError, KeyError, ValueError) as exc:
        raise WorkbookError(f"Error processing workbook {path}: {exc}") from exc

    sheets: List[SheetRows] = []
    try:
        for worksheet in workbook.worksheets:
            # iter_rows starts at A1 unless bounded; the header is the first used row.
            values = worksheet.iter_rows(
                min_row=worksheet.min_row,
                min_col=worksheet.min_column,
                values_only=True,
            )
            rows = rows_from_values(values)
            logger.debug("Read sheet %r: %d row(s)", worksheet.title, len(rows))
            sheets.append(SheetRows(name=worksheet.title, rows=rows))
    finally:
        workbook.close()

    return sheets
