"""JSON export helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional


def dump_json(payload: Any, indent: Optional[int] = 2) -> str:
    """Serialize payload keeping non-ASCII text (sheet and column names) literal."""
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def write_json(path: Path, payload: Any, indent: Optional[int] = 2) -> Path:
    """Write payload as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_json(payload, indent=indent) + "\n", encoding="utf-8")
    return path
