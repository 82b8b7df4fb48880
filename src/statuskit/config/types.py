# topmark:header:start
#
#   project      : StatusKit
#   file         : types.py
#   file_relpath : src/statuskit/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Lightweight config types and token parsers.

This module hosts stable, import-friendly definitions that other config
modules can depend on without risk of circular imports.

Exports:
    - `TomlTable`: alias for a parsed TOML table.
    - `BackendKind`: the status backends a configuration can select.
    - `parse_chatter_level`: user token to `ChatterLevel`.
"""

from __future__ import annotations

from typing import Any

from statuskit.core.enum_mixins import KeyedStrEnum, enum_from_name, norm_token
from statuskit.status.model import ChatterLevel

TomlTable = dict[str, Any]


class BackendKind(KeyedStrEnum):
    """Status backends selectable from configuration or the command line."""

    NOOP = ("noop", "Discard all messages", ("silent", "none"))
    TERMINAL = ("terminal", "Styled terminal output", ("term", "console"))
    LOG = ("log", "Forward to the logging system", ("logging",))


# Tokens accepted in addition to the member names.
_CHATTER_ALIASES: dict[str, ChatterLevel] = {
    "quiet": ChatterLevel.MINIMAL,
    "default": ChatterLevel.NORMAL,
}


def parse_chatter_level(raw: str | None) -> ChatterLevel | None:
    """Parse a chatter token such as ``"minimal"`` or ``"default"``.

    Matching is case-insensitive. Accepted tokens are the member names
    (``minimal``, ``normal``) and the aliases ``quiet`` and ``default``.

    Args:
        raw (str | None): The token to parse.

    Returns:
        ChatterLevel | None: The matching level, or ``None`` for unknown tokens.
    """
    if raw is None:
        return None
    level: ChatterLevel | None = enum_from_name(ChatterLevel, raw, case_insensitive=True)
    if level is not None:
        return level
    return _CHATTER_ALIASES.get(norm_token(raw))
