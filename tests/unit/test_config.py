from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from prog_cli.core.config import (
    ConfigError,
    _deep_merge,
    config_to_toml,
    default_config_path,
    expand_path,
    load_config,
    resolve_indent,
    resolve_output_path,
    save_config,
)
from prog_cli.core.constants import SESSION_COLUMNS


def test_deep_merge_nested_dicts() -> None:
    base = {"a": {"b": 1, "c": 2}, "x": 3}
    override = {"a": {"b": 9}, "y": 4}
    merged = _deep_merge(base, override)
    assert merged == {"a": {"b": 9, "c": 2}, "x": 3, "y": 4}
    assert base["a"]["b"] == 1


def test_expand_path_expands_home_and_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PROG_TMP_PATH", str(tmp_path))
    expanded = expand_path("$PROG_TMP_PATH/config.toml")
    assert expanded == (tmp_path / "config.toml").resolve()


def test_default_config_path_uses_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    monkeypatch.setenv("PROG_CONFIG_FILE", str(path))
    assert default_config_path() == path.resolve()


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.toml")
    assert cfg["sheets"]["session_columns"] == list(SESSION_COLUMNS)
    assert cfg["export"]["output_file"] == "parsed_program.json"
    assert cfg["export"]["indent"] == 2


def test_load_config_from_json(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"export": {"indent": 4}}))
    cfg = load_config(path)
    assert cfg["export"]["indent"] == 4
    assert cfg["export"]["output_file"] == "parsed_program.json"


def test_load_config_from_toml(write_temp_toml) -> None:
    path = write_temp_toml(
        "config.toml",
        """
[sheets]
session_columns = ["Day 1", "Day 2"]

[export]
output_file = "program.json"
""",
    )
    cfg = load_config(path)
    assert cfg["sheets"]["session_columns"] == ["Day 1", "Day 2"]
    assert cfg["export"]["output_file"] == "program.json"
    assert cfg["export"]["indent"] == 2


def test_load_config_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{broken")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_invalid_toml_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[export\nindent = 3")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_non_table_root_raises(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        load_config(path)


def test_save_config_json(tmp_path: Path) -> None:
    payload: Dict[str, Any] = {"export": {"indent": 7}}
    path = save_config(payload, tmp_path / "config.json")
    assert json.loads(path.read_text())["export"]["indent"] == 7


def test_save_config_toml_and_reload(tmp_path: Path) -> None:
    payload: Dict[str, Any] = {"sheets": {"session_columns": list(SESSION_COLUMNS)}, "export": {"indent": 0}}
    path = save_config(payload, tmp_path / "nested" / "config.toml")
    cfg = load_config(path)
    assert cfg["sheets"]["session_columns"] == list(SESSION_COLUMNS)
    assert cfg["export"]["indent"] == 0


def test_config_to_toml_renders_tables() -> None:
    text = config_to_toml({"export": {"indent": 2, "output_file": "p.json"}})
    assert text == '[export]\nindent = 2\noutput_file = "p.json"\n'


def test_resolve_output_path_prefers_explicit(tmp_path: Path) -> None:
    explicit = tmp_path / "out.json"
    cfg = {"export": {"default_directory": "/tmp/ignored"}}
    assert resolve_output_path(cfg, explicit=explicit) == explicit.resolve()


def test_resolve_output_path_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PROG_OUTPUT_DIR", str(tmp_path / "from-env"))
    cfg = {"export": {"default_directory": "/tmp/ignored", "output_file": "week.json"}}
    assert resolve_output_path(cfg) == (tmp_path / "from-env").resolve() / "week.json"


def test_resolve_output_path_from_config(tmp_path: Path) -> None:
    cfg = {"export": {"default_directory": str(tmp_path)}}
    assert resolve_output_path(cfg) == tmp_path.resolve() / "parsed_program.json"


def test_resolve_indent() -> None:
    assert resolve_indent({}) == 2
    assert resolve_indent({"export": {"indent": 4}}) == 4
    assert resolve_indent({"export": {"indent": 0}}) is None
    with pytest.raises(ConfigError):
        resolve_indent({"export": {"indent": "wide"}})
