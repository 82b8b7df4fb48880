# topmark:header:start
#
#   project      : StatusKit
#   file         : __init__.py
#   file_relpath : src/statuskit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Subcommands of the ``statuskit`` group (``emit``, ``version``)."""
