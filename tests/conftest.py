from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest
from openpyxl import Workbook
from typer.testing import CliRunner

S1 = "אימון 1"
S2 = "אימון 2"
S3 = "אימון 3"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("PROG_CONFIG_FILE", str(path))
    monkeypatch.delenv("PROG_OUTPUT_DIR", raising=False)
    return path


@pytest.fixture()
def week_one_rows() -> List[Dict[str, Any]]:
    return [
        {"Notes": "Warm up 10 min", S1: "Squat", S2: "Deadlift"},
        {S1: "80%x5", S2: "3x3"},
        {S1: "85%x3"},
        {S1: "Bench", S2: "RDL"},
        {S1: 5, S2: "70%x8"},
    ]


@pytest.fixture()
def week_two_rows() -> List[Dict[str, Any]]:
    return [
        {S3: "10"},
        {S3: "Front Squat"},
        {"Notes": "Deload"},
    ]


@pytest.fixture()
def sheet_payload(
    week_one_rows: List[Dict[str, Any]],
    week_two_rows: List[Dict[str, Any]],
) -> Dict[str, List[Dict[str, Any]]]:
    return {"Week 1": week_one_rows, "Week 2": week_two_rows}


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_temp_toml(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def sample_workbook(tmp_path: Path) -> Path:
    workbook = Workbook()
    first = workbook.active
    first.title = "2024-01-07"
    first.append(["Notes", S1, S2])
    first.append(["Warm up", "Squat", "Deadlift"])
    first.append([None, "80%x5", "3x3"])
    first.append([None, "85%x3", None])
    first.append([None, "Bench", None])
    first.append([None, 5, None])

    second = workbook.create_sheet("2024-01-14")
    second.append([S1, S3])
    second.append([None, 10])
    second.append([None, "Front Squat"])
    second.append([None, None])
    second.append(["Press", None])

    empty = workbook.create_sheet("2024-01-21")
    empty.append(["Notes"])
    empty.append(["Rest week"])

    path = tmp_path / "program.xlsx"
    workbook.save(path)
    return path
