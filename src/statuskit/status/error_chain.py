# topmark:header:start
#
#   project      : StatusKit
#   file         : error_chain.py
#   file_relpath : src/statuskit/status/error_chain.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Helpers for presenting an exception and the exceptions behind it.

Backends only need a readable description of an error; they never inspect
its structure beyond the standard ``__cause__`` / ``__context__`` links.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from statuskit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from statuskit.config.logging import StatuskitLogger

logger: StatuskitLogger = get_logger(__name__)


def iter_error_chain(err: BaseException) -> Iterator[BaseException]:
    """Yield ``err`` followed by the exceptions that led to it.

    An explicit cause (``raise ... from cause``) takes precedence over the
    implicit context, and the context is skipped when it was suppressed
    (``raise ... from None``). Each exception is yielded at most once.

    Args:
        err (BaseException): The outermost exception.

    Yields:
        BaseException: The exceptions of the chain, outermost first.
    """
    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__suppress_context__:
            current = None
        else:
            current = current.__context__


def describe_error(err: BaseException) -> str:
    """Return a one-line, human-readable description of ``err``.

    Falls back to the exception class name when the message is empty, and to
    ``<unprintable ClassName>`` when converting the error to text fails.
    """
    try:
        text = str(err)
    except Exception as exc:
        logger.debug("Cannot convert %s to text: %r", type(err).__name__, exc)
        return f"<unprintable {type(err).__name__}>"
    return text if text.strip() else type(err).__name__
