"""Per-invocation state shared by all commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

from rich.console import Console


@dataclass
class CLIState:
    """Output mode, loaded configuration and the session columns in effect."""

    json_output: bool
    plain_output: bool
    show_dropped: bool
    config_path: Path
    config: Dict[str, Any]
    session_columns: Tuple[str, ...]
    console: Console

    @property
    def rich_output(self) -> bool:
        """Tables and spinners only when neither --json nor --plain is set."""
        return not (self.json_output or self.plain_output)
