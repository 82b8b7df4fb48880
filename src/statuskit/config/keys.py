# topmark:header:start
#
#   project      : StatusKit
#   file         : keys.py
#   file_relpath : src/statuskit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Canonical TOML key names for StatusKit configuration.

These keys appear at the top level of ``statuskit.toml`` and inside
``[tool.statuskit]`` in ``pyproject.toml``. Renaming or removing a key is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by StatusKit configuration."""

    # pyproject.toml nesting: [tool.statuskit]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_STATUSKIT: Final[str] = "statuskit"

    KEY_CHATTER: Final[str] = "chatter"
    KEY_COLOR: Final[str] = "color"
    KEY_BACKEND: Final[str] = "backend"

    ALL_KEYS: Final[frozenset[str]] = frozenset({KEY_CHATTER, KEY_COLOR, KEY_BACKEND})
