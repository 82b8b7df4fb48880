# topmark:header:start
#
#   project      : StatusKit
#   file         : __init__.py
#   file_relpath : src/statuskit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""StatusKit package.

StatusKit lets a tool report notes, warnings and errors to its user without
tying its internals to a presentation mechanism. The tool reports through a
`StatusBackend`; the backend decides whether and how to display the message.
"""

from __future__ import annotations

from statuskit.status import (
    ChatterLevel,
    LazyMessage,
    MessageKind,
    NoopStatusBackend,
    StatusBackend,
    error,
    note,
    warning,
)

__all__ = [
    "ChatterLevel",
    "LazyMessage",
    "MessageKind",
    "NoopStatusBackend",
    "StatusBackend",
    "error",
    "note",
    "warning",
]
