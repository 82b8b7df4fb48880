# topmark:header:start
#
#   project      : StatusKit
#   file         : __init__.py
#   file_relpath : src/statuskit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""StatusKit CLI package.

This package groups the Click command definitions and supporting utilities
for the ``statuskit`` command line.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        statuskit = "statuskit.cli.main:cli"

All subcommands live in [`statuskit.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
