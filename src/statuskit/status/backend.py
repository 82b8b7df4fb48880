# topmark:header:start
#
#   project      : StatusKit
#   file         : backend.py
#   file_relpath : src/statuskit/status/backend.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""The status backend protocol and the no-op backend.

`StatusBackend` is the single extension point through which the rest of an
application emits user-facing notices. It is a structural protocol: any
object with a matching ``report`` method is a backend, without inheriting
from anything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from statuskit.status.model import LazyMessage, MessageKind


@runtime_checkable
class StatusBackend(Protocol):
    """Anything that can receive a classified, lazily formatted message.

    Implementations decide whether and how to display a report. They must
    never raise from `report`: reporting is how problems reach the user, so
    a failing sink (closed stream, broken pipe) is absorbed by the backend.
    """

    def report(
        self,
        kind: MessageKind,
        message: LazyMessage,
        err: BaseException | None = None,
    ) -> None:
        """Handle one reported message.

        Args:
            kind (MessageKind): Classification of the message.
            message (LazyMessage): Deferred message text; call ``render()`` only when
                the text is actually needed.
            err (BaseException | None): Optional error associated with the message.
                Backends may read it during the call but must not rely on it afterwards.
        """
        ...


class NoopStatusBackend:
    """Backend that discards every message and every attached error.

    Used for silent operation and as a test double.
    """

    __slots__ = ()

    def report(
        self,
        kind: MessageKind,
        message: LazyMessage,
        err: BaseException | None = None,
    ) -> None:
        """Discard the message without rendering it."""

    def __repr__(self) -> str:
        return "NoopStatusBackend()"
