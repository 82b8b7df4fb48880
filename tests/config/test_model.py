# topmark:header:start
#
#   project      : StatusKit
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Tests for configuration loading and merge precedence.

Precedence, lowest to highest: defaults, discovered file, ``--config`` files,
environment, command-line overrides.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import pytest

from statuskit.cli_shared.color import ColorMode
from statuskit.config.model import (
    CLI_OVERRIDE_STR,
    ENV_OVERRIDE_STR,
    MutableStatusConfig,
    StatusConfig,
)
from statuskit.config.types import BackendKind
from statuskit.constants import ENV_BACKEND, ENV_CHATTER
from statuskit.core.errors import ConfigError
from statuskit.status.model import ChatterLevel

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    cfg = MutableStatusConfig().freeze()

    assert cfg == StatusConfig()
    assert cfg.chatter is ChatterLevel.NORMAL
    assert cfg.color_mode is ColorMode.AUTO
    assert cfg.backend is BackendKind.TERMINAL
    assert cfg.config_files == ()


def test_frozen_config_is_immutable_and_thaws() -> None:
    cfg = StatusConfig(chatter=ChatterLevel.MINIMAL)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.chatter = ChatterLevel.NORMAL  # type: ignore[misc]

    draft = cfg.thaw()
    draft.backend = BackendKind.NOOP
    assert draft.freeze() == StatusConfig(chatter=ChatterLevel.MINIMAL, backend=BackendKind.NOOP)


def test_from_toml_table_parses_tokens_and_aliases() -> None:
    draft = MutableStatusConfig.from_toml_table(
        {"chatter": "Quiet", "color": "NEVER", "backend": "logging"}, source="s.toml"
    )

    assert draft.chatter is ChatterLevel.MINIMAL
    assert draft.color_mode is ColorMode.NEVER
    assert draft.backend is BackendKind.LOG
    assert draft.config_files == ["s.toml"]


def test_from_toml_table_rejects_unknown_token() -> None:
    with pytest.raises(ConfigError, match="invalid value for 'backend'") as info:
        MutableStatusConfig.from_toml_table({"backend": "syslog"}, source="s.toml")
    assert str(info.value).startswith("s.toml: ")


def test_from_toml_table_warns_on_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING", logger="statuskit.config.model"):
        draft = MutableStatusConfig.from_toml_table({"verbosity": "high"}, source="s.toml")

    assert draft.freeze().chatter is ChatterLevel.NORMAL
    assert any("verbosity" in r.getMessage() for r in caplog.records)


def test_from_env() -> None:
    draft = MutableStatusConfig.from_env({ENV_CHATTER: "minimal", ENV_BACKEND: "noop"})

    assert draft.chatter is ChatterLevel.MINIMAL
    assert draft.backend is BackendKind.NOOP
    assert draft.config_files == [ENV_OVERRIDE_STR]


def test_from_env_ignores_empty_values() -> None:
    draft = MutableStatusConfig.from_env({ENV_CHATTER: "", ENV_BACKEND: ""})

    assert draft == MutableStatusConfig()


def test_from_env_rejects_bad_value() -> None:
    with pytest.raises(ConfigError, match=ENV_CHATTER):
        MutableStatusConfig.from_env({ENV_CHATTER: "loud"})


def test_load_merged_defaults_without_files(tmp_path: Path) -> None:
    draft = MutableStatusConfig.load_merged(cwd=tmp_path, environ={})

    assert draft.freeze() == StatusConfig()


def test_precedence_file_then_extra_then_env_then_cli(tmp_path: Path) -> None:
    (tmp_path / "statuskit.toml").write_text(
        'chatter = "minimal"\ncolor = "always"\nbackend = "log"\n', encoding="utf-8"
    )
    extra = tmp_path / "extra.toml"
    extra.write_text('color = "never"\nbackend = "noop"\n', encoding="utf-8")

    draft = MutableStatusConfig.load_merged(
        cwd=tmp_path,
        extra_config_files=[extra],
        environ={ENV_BACKEND: "terminal"},
    )
    merged = draft.freeze()

    assert merged.chatter is ChatterLevel.MINIMAL  # file
    assert merged.color_mode is ColorMode.NEVER  # extra file
    assert merged.backend is BackendKind.TERMINAL  # environment
    assert merged.config_files == (
        str(tmp_path / "statuskit.toml"),
        str(extra),
        ENV_OVERRIDE_STR,
    )

    final = draft.apply_cli_args({"chatter": ChatterLevel.NORMAL, "backend": None}).freeze()
    assert final.chatter is ChatterLevel.NORMAL
    assert final.backend is BackendKind.TERMINAL
    assert final.config_files[-1] == CLI_OVERRIDE_STR


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    (tmp_path / "statuskit.toml").write_text('backend = "noop"\n', encoding="utf-8")

    draft = MutableStatusConfig.load_merged(cwd=tmp_path, no_config=True, environ={})

    assert draft.freeze().backend is BackendKind.TERMINAL


def test_pyproject_section_is_used(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.statuskit]\nchatter = "minimal"\n', encoding="utf-8"
    )

    draft = MutableStatusConfig.load_merged(cwd=tmp_path, environ={})

    assert draft.freeze().chatter is ChatterLevel.MINIMAL


def test_extra_pyproject_without_section_is_an_error(tmp_path: Path) -> None:
    extra = tmp_path / "pyproject.toml"
    extra.write_text('[project]\nname = "demo"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match=r"no \[tool.statuskit\] section"):
        MutableStatusConfig.load_merged(
            cwd=tmp_path, extra_config_files=[extra], no_config=True, environ={}
        )


def test_apply_cli_args_without_overrides_keeps_provenance() -> None:
    draft = MutableStatusConfig().apply_cli_args({"chatter": None, "color_mode": None})

    assert draft.config_files == []
