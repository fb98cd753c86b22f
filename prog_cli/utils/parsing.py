"""Loading sheet rows from workbooks or pre-extracted JSON/YAML files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

import yaml

from prog_cli.core.constants import JSON_SUFFIXES, WORKBOOK_SUFFIXES, YAML_SUFFIXES
from prog_cli.core.models import SheetRows
from prog_cli.core.workbook import read_workbook


class SheetInputError(RuntimeError):
    """Raised when sheet input is missing, unsupported or malformed."""


def _normalize_rows(sheet_name: str, raw_rows: Any) -> List[Dict[str, Any]]:
    if raw_rows is None:
        return []
    if not isinstance(raw_rows, list):
        raise SheetInputError(f"Sheet {sheet_name!r} must be a list of rows")

    rows: List[Dict[str, Any]] = []
    for index, raw_row in enumerate(raw_rows, 1):
        if not isinstance(raw_row, Mapping):
            raise SheetInputError(f"Sheet {sheet_name!r}, row {index} must be an object")
        # A null cell is an empty cell: drop the key so presence reflects content.
        rows.append({str(key): value for key, value in raw_row.items() if value is not None})
    return rows


def sheets_from_payload(payload: Any) -> List[SheetRows]:
    """Build sheets from a decoded payload.

    Accepts either ``{"<sheet name>": [rows...]}`` or
    ``[{"name": "<sheet name>", "rows": [rows...]}, ...]``.
    """
    if isinstance(payload, Mapping):
        return [
            SheetRows(name=str(name), rows=_normalize_rows(str(name), rows))
            for name, rows in payload.items()
        ]

    if isinstance(payload, list):
        sheets: List[SheetRows] = []
        for index, item in enumerate(payload, 1):
            if not isinstance(item, Mapping) or "name" not in item:
                raise SheetInputError(f"Sheet entry {index} must be an object with a 'name'")
            name = str(item["name"])
            sheets.append(SheetRows(name=name, rows=_normalize_rows(name, item.get("rows"))))
        return sheets

    if payload is None:
        return []
    raise SheetInputError("Sheet input must be an object keyed by sheet name or a list of sheets")


def load_sheet_input(path: Path) -> List[SheetRows]:
    """Load pre-extracted sheet rows from a JSON or YAML file."""
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SheetInputError(f"Cannot read {path}: {exc}") from exc

    try:
        if suffix in YAML_SUFFIXES:
            payload = yaml.safe_load(text)
        else:
            payload = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SheetInputError(f"Failed to parse {path}: {exc}") from exc

    return sheets_from_payload(payload)


def load_sheets(path: Path) -> List[SheetRows]:
    """Load sheets from a workbook or a JSON/YAML export, based on suffix."""
    if not path.exists():
        raise SheetInputError(f"Input file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in WORKBOOK_SUFFIXES:
        return read_workbook(path)
    if suffix in JSON_SUFFIXES or suffix in YAML_SUFFIXES:
        return load_sheet_input(path)

    supported = ", ".join(sorted(WORKBOOK_SUFFIXES | JSON_SUFFIXES | YAML_SUFFIXES))
    raise SheetInputError(f"Unsupported input type {suffix or '(none)'!r}; expected one of {supported}")


def select_sheets(sheets: Sequence[SheetRows], names: Sequence[str]) -> List[SheetRows]:
    """Keep only the named sheets, in their original order."""
    if not names:
        return list(sheets)

    available = {sheet.name for sheet in sheets}
    missing = [name for name in names if name not in available]
    if missing:
        raise SheetInputError(f"Unknown sheet(s): {', '.join(missing)}")

    wanted = set(names)
    return [sheet for sheet in sheets if sheet.name in wanted]
