# topmark:header:start
#
#   project      : StatusKit
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Pytest configuration for the StatusKit test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `statuskit.config.model.MutableStatusConfig`, then
      `freeze()` into a `statuskit.config.model.StatusConfig`.
    - Do **not** mutate a frozen `StatusConfig`. If you need to tweak one,
      call `StatusConfig.thaw()`, edit the returned builder, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from statuskit.cli_shared.console_std import StdConsole
from statuskit.config import logging
from statuskit.config.model import MutableStatusConfig
from statuskit.constants import ENV_BACKEND, ENV_CHATTER, ENV_LOG_LEVEL

if TYPE_CHECKING:
    from pathlib import Path

    from statuskit.config.model import StatusConfig

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_statuskit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure no StatusKit or color variables leak in from the developer's shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (ENV_LOG_LEVEL, ENV_CHATTER, ENV_BACKEND, "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests,
    ensuring detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty temporary working directory.

    Config discovery looks at the working directory, so this keeps the
    repository's own files out of the picture.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class Streams:
    """A `StdConsole` wired to in-memory stdout/stderr buffers."""

    def __init__(self) -> None:
        self.out = StringIO()
        self.err = StringIO()
        self.console = StdConsole(out=self.out, err=self.err)

    def out_lines(self) -> list[str]:
        """Return the lines written to stdout."""
        return self.out.getvalue().splitlines()

    def err_lines(self) -> list[str]:
        """Return the lines written to stderr."""
        return self.err.getvalue().splitlines()


@pytest.fixture
def streams() -> Streams:
    """Provide a fresh plain-text console with captured streams."""
    return Streams()


def make_config(**overrides: Any) -> StatusConfig:
    """Return a frozen `StatusConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Field values set on the mutable builder before freezing.

    Returns:
        StatusConfig: An immutable configuration snapshot for use in tests.
    """
    m = MutableStatusConfig()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
