"""Cell classification heuristics.

Session columns interleave exercise titles and set prescriptions with no type
marker, so each cell is classified purely by the shape of its text.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any

from prog_cli.core.models import CellClassification, CellKind

_LEADING_DIGIT = re.compile(r"[0-9]")


def cell_text(value: Any) -> str:
    """Coerce a raw cell value to trimmed text."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value).strip()


def _rule_for(text: str) -> str:
    if "%" in text:
        return "percent"
    if _LEADING_DIGIT.match(text):
        return "leading-digit"
    return "title"


def classify_cell(text: str) -> CellKind:
    """Classify trimmed cell text as a set specification or an exercise title."""
    return CellKind.TITLE if _rule_for(text) == "title" else CellKind.SET_SPEC


def is_set_spec(text: str) -> bool:
    return classify_cell(text) is CellKind.SET_SPEC


def explain_classification(value: Any) -> CellClassification:
    """Classify a raw value and report which rule matched."""
    text = cell_text(value)
    rule = _rule_for(text)
    kind = CellKind.TITLE if rule == "title" else CellKind.SET_SPEC
    return CellClassification(text=text, kind=kind, rule=rule)
