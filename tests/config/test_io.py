# topmark:header:start
#
#   project      : StatusKit
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Tests for TOML I/O helpers in statuskit.config.io."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from statuskit.config.io import (
    discover_config_file,
    extract_statuskit_table,
    get_string_value_or_none,
    load_toml_dict,
)
from statuskit.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_load_toml_dict_returns_plain_dicts(tmp_path: Path) -> None:
    path = tmp_path / "statuskit.toml"
    path.write_text('chatter = "minimal"\n[extra]\nanswer = 42\n', encoding="utf-8")

    data = load_toml_dict(path)

    assert data == {"chatter": "minimal", "extra": {"answer": 42}}
    assert type(data["extra"]) is dict


def test_load_toml_dict_rejects_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "statuskit.toml"
    path.write_text("chatter = \n", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid TOML") as info:
        load_toml_dict(path)
    assert info.value.source == str(path)


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot read file"):
        load_toml_dict(tmp_path / "absent.toml")


def test_extract_table_from_pyproject(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"

    assert extract_statuskit_table(pyproject, {"tool": {"statuskit": {"chatter": "normal"}}}) == {
        "chatter": "normal"
    }
    assert extract_statuskit_table(pyproject, {"tool": {"other": {}}}) is None
    assert extract_statuskit_table(pyproject, {"project": {"name": "x"}}) is None


def test_extract_table_from_statuskit_toml(tmp_path: Path) -> None:
    data = {"backend": "log"}
    assert extract_statuskit_table(tmp_path / "statuskit.toml", data) is data


def test_discover_prefers_statuskit_toml(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.statuskit]\nchatter = "minimal"\n')
    (tmp_path / "statuskit.toml").write_text('chatter = "normal"\n')

    assert discover_config_file(tmp_path) == tmp_path / "statuskit.toml"


def test_discover_ignores_pyproject_without_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')

    assert discover_config_file(tmp_path) is None


def test_discover_uses_pyproject_with_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.statuskit]\nbackend = "noop"\n')

    assert discover_config_file(tmp_path) == tmp_path / "pyproject.toml"


def test_discover_nothing(tmp_path: Path) -> None:
    assert discover_config_file(tmp_path) is None


def test_get_string_value_or_none() -> None:
    table = {"chatter": "minimal", "color": 3}

    assert get_string_value_or_none(table, "chatter", where="t") == "minimal"
    assert get_string_value_or_none(table, "backend", where="t") is None
    with pytest.raises(ConfigError, match="expected a string for 'color'"):
        get_string_value_or_none(table, "color", where="t")
