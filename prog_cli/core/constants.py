"""Static constants for the program-sheets CLI."""

from __future__ import annotations

# Session columns in the order sessions appear within a week.
SESSION_COLUMNS = ("אימון 1", "אימון 2", "אימון 3")

DEFAULT_OUTPUT_FILE = "parsed_program.json"
DEFAULT_JSON_INDENT = 2

WORKBOOK_SUFFIXES = {".xlsx", ".xlsm"}
JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}

EMPTY_HEADER = "__EMPTY"

CELL_KIND_LABELS = {
    "title": "Exercise title",
    "set": "Set specification",
}

RULE_LABELS = {
    "percent": "contains '%'",
    "leading-digit": "starts with a digit",
    "title": "no set marker",
}
