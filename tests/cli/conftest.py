# topmark:header:start
#
#   project      : StatusKit
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""CLI test helpers for running StatusKit in a controlled working directory.

Every CLI test runs from an empty temporary directory (see `cli_workdir`) so
that configuration discovery never picks up files from the repository.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from statuskit.cli.main import cli
from statuskit.cli_shared.exit_codes import ExitCode
from statuskit.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence
    from pathlib import Path


@pytest.fixture(autouse=True)
def cli_workdir(isolation: Path) -> Iterator[Path]:
    """Run each CLI test in an isolated directory and restore test logging afterwards.

    The CLI reconfigures the root logger for every invocation, pointing its
    handler at the runner's captured stderr.

    Args:
        isolation (Path): The isolated working directory fixture.

    Yields:
        Path: The working directory of the test.
    """
    yield isolation
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI with separate stdout and stderr capture.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["emit", "note", "hi"]``.
        env (Mapping[str, str | None] | None): Extra environment variables for the invocation.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "emit", "warning", "careful"])
        assert result.stderr == "warning: careful\\n"
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, env=env, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
