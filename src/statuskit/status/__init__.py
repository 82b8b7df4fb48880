# topmark:header:start
#
#   project      : StatusKit
#   file         : __init__.py
#   file_relpath : src/statuskit/status/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""A framework for showing status messages to the user.

Application code reports through a `StatusBackend` chosen by its caller,
using the `note`, `warning` and `error` helpers. Backends decide whether
and how messages are displayed:

- `NoopStatusBackend`: discards everything (silent mode, tests).
- `TermcolorStatusBackend`: styled terminal output gated by a `ChatterLevel`.
- `LoggingStatusBackend`: forwards to a `logging.Logger`.
- `CapturingStatusBackend`: records reports in memory.
"""

from __future__ import annotations

from statuskit.status.backend import NoopStatusBackend, StatusBackend
from statuskit.status.capture import CapturedReport, CapturingStatusBackend
from statuskit.status.helpers import error, note, report_message, warning
from statuskit.status.logging_backend import LoggingStatusBackend
from statuskit.status.model import ChatterLevel, LazyMessage, MessageKind
from statuskit.status.termcolor import TermcolorStatusBackend

__all__ = [
    "CapturedReport",
    "CapturingStatusBackend",
    "ChatterLevel",
    "LazyMessage",
    "LoggingStatusBackend",
    "MessageKind",
    "NoopStatusBackend",
    "StatusBackend",
    "TermcolorStatusBackend",
    "error",
    "note",
    "report_message",
    "warning",
]
