# topmark:header:start
#
#   project      : StatusKit
#   file         : model.py
#   file_relpath : src/statuskit/status/model.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Value types shared by every status backend.

Sections:
    * ChatterLevel: the verbosity threshold a backend uses to gate output.
    * MessageKind: the closed classification of a single report.
    * LazyMessage: a template plus positional arguments, formatted on demand.

`ChatterLevel` and `MessageKind` are deliberately distinct: the former is a
property of the *backend* (how much to show), the latter a property of the
*message* (what it is). Message kinds are categorical and carry no ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

from statuskit.config.logging import get_logger
from statuskit.core.enum_mixins import norm_token

if TYPE_CHECKING:
    from statuskit.config.logging import StatuskitLogger


logger: StatuskitLogger = get_logger(__name__)


class ChatterLevel(IntEnum):
    """Verbosity setting consumed by backends to decide what to display.

    The two levels are totally ordered, ``MINIMAL < NORMAL``. The integer
    representation makes the ordering a plain numeric comparison.

    Attributes:
        MINIMAL: Only show what the user must see (warnings and errors).
        NORMAL: Show everything, including informational notes.
    """

    MINIMAL = 0
    NORMAL = 1


class MessageKind(Enum):
    """Classification of a reported message.

    Exactly three members exist. Kinds are categorical: no ordering is defined
    between them, so comparing two kinds with ``<`` raises ``TypeError``.
    Code that dispatches on a kind must cover all three members.
    """

    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"

    @property
    def label(self) -> str:
        """Lower-case label used as the message prefix by terminal backends."""
        return self.value

    @classmethod
    def parse(cls, raw: str | None) -> MessageKind | None:
        """Parse a user token (``"note"``, ``"WARN"``, ``"error"``...) into a kind.

        Args:
            raw (str | None): Token to parse; matching is case-insensitive.

        Returns:
            MessageKind | None: The matching kind, or ``None`` for unknown tokens.
        """
        if raw is None:
            return None
        return _KIND_TOKENS.get(norm_token(raw))


_KIND_TOKENS: dict[str, MessageKind] = {
    "note": MessageKind.NOTE,
    "info": MessageKind.NOTE,
    "warning": MessageKind.WARNING,
    "warn": MessageKind.WARNING,
    "error": MessageKind.ERROR,
    "err": MessageKind.ERROR,
}


@dataclass(frozen=True, slots=True)
class LazyMessage:
    """A format template and its positional arguments, rendered only on request.

    Backends receive a `LazyMessage` rather than a string so that a message
    which is never displayed is never formatted. Rendering uses
    `str.format` semantics (``"retry {0} of {1}"`` or ``"retry {} of {}"``).

    Attributes:
        template (str): The ``str.format`` template.
        args (tuple[object, ...]): Positional arguments interpolated into ``template``.
    """

    template: str
    args: tuple[object, ...] = ()

    def render(self) -> str:
        """Interpolate the arguments into the template.

        A template that does not match its arguments, or an argument whose
        ``__format__`` fails, never raises: the problem is logged and a
        placeholder text is returned instead.

        Returns:
            str: The formatted message text.
        """
        try:
            return self.template.format(*self.args)
        except Exception as exc:
            logger.warning("Cannot format status message %r: %r", self.template, exc)
            return f"<formatting error in {self.template!r}>"

    def __str__(self) -> str:
        return self.render()
