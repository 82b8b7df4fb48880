# topmark:header:start
#
#   project      : StatusKit
#   file         : __main__.py
#   file_relpath : src/statuskit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Module entry point for running StatusKit via ``python -m statuskit``.

Equivalent to running the ``statuskit`` console script.

Examples:
    Report a warning from a shell script::

        python -m statuskit emit warning "disk {} is {}% full" /var 93
"""

from __future__ import annotations

from statuskit.cli.main import cli

if __name__ == "__main__":
    cli()
