# topmark:header:start
#
#   project      : StatusKit
#   file         : __init__.py
#   file_relpath : src/statuskit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Configuration for StatusKit: logging setup, TOML loading and the config model.

Import the submodules directly (``statuskit.config.model``,
``statuskit.config.logging``); this package does not re-export them because
the status model itself depends on ``statuskit.config.logging``.
"""

from __future__ import annotations
