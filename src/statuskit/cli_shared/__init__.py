# topmark:header:start
#
#   project      : StatusKit
#   file         : __init__.py
#   file_relpath : src/statuskit/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Console and color helpers shared by the CLI and the terminal backend."""

from __future__ import annotations
