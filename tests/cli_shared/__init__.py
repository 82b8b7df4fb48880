# topmark:header:start
#
#   project      : StatusKit
#   file         : __init__.py
#   file_relpath : tests/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end
