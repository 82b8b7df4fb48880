# topmark:header:start
#
#   project      : StatusKit
#   file         : color.py
#   file_relpath : src/statuskit/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Click-independent color helpers for StatusKit.

This module provides:

- the `ColorMode` enum (``auto``/``always``/``never``);
- color-mode resolution based on the configured mode, the environment and
  whether the target stream is a terminal.

These helpers are kept Click-free so they can be reused by the
configuration layer, the backend factory and tests.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from statuskit.config.logging import get_logger

if TYPE_CHECKING:
    from typing import TextIO

    from statuskit.config.logging import StatuskitLogger


logger: StatuskitLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when the output stream is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def parse(cls, raw: str | None) -> ColorMode | None:
        """Return the mode matching ``raw`` (case-insensitive), or ``None``."""
        if raw is None:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


def resolve_color_mode(
    *,
    color_mode: ColorMode | None,
    stream: TextIO | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Explicit mode**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**:
            - ``FORCE_COLOR`` (set and not equal to ``"0"``) → True
            - ``NO_COLOR`` (set to any value) → False
        3. **Auto**: whether ``stream`` (default ``sys.stderr``, where warnings
           and errors go) is a TTY.

    Args:
        color_mode (ColorMode | None): Configured mode; ``None`` means ``AUTO``.
        stream (TextIO | None): Stream whose TTY status decides in auto mode.

    Returns:
        bool: True if ANSI color should be enabled; False otherwise.
    """
    if color_mode == ColorMode.ALWAYS:
        return True
    if color_mode == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    target = stream if stream is not None else sys.stderr
    try:
        isatty = target.isatty()
    except (AttributeError, OSError, ValueError):
        isatty = False
    logger.trace("Color auto-detection on %r: isatty=%s", target, isatty)
    return bool(isatty)
