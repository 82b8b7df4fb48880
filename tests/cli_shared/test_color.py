# topmark:header:start
#
#   project      : StatusKit
#   file         : test_color.py
#   file_relpath : tests/cli_shared/test_color.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Tests for color-mode parsing and resolution."""

from __future__ import annotations

from io import StringIO

import pytest

from statuskit.cli_shared.color import ColorMode, resolve_color_mode
from tests.conftest import parametrize


class _Tty(StringIO):
    def isatty(self) -> bool:
        return True


@parametrize(
    "raw, expected",
    [("auto", ColorMode.AUTO), (" Always ", ColorMode.ALWAYS), ("NEVER", ColorMode.NEVER)],
)
def test_parse(raw: str, expected: ColorMode) -> None:
    assert ColorMode.parse(raw) is expected


def test_parse_unknown() -> None:
    assert ColorMode.parse("sometimes") is None
    assert ColorMode.parse(None) is None


def test_explicit_modes_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(color_mode=ColorMode.ALWAYS, stream=StringIO()) is True
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(color_mode=ColorMode.NEVER, stream=_Tty()) is False


def test_auto_follows_tty() -> None:
    assert resolve_color_mode(color_mode=ColorMode.AUTO, stream=_Tty()) is True
    assert resolve_color_mode(color_mode=None, stream=StringIO()) is False


def test_force_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(color_mode=ColorMode.AUTO, stream=StringIO()) is True
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert resolve_color_mode(color_mode=ColorMode.AUTO, stream=_Tty()) is True


def test_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")
    assert resolve_color_mode(color_mode=ColorMode.AUTO, stream=_Tty()) is False


def test_stream_without_isatty() -> None:
    assert resolve_color_mode(color_mode=None, stream=object()) is False  # type: ignore[arg-type]
