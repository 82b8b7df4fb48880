# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/statuskit/cli_shared/exit_codes.py
#   project      : StatusKit
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Exit codes for the StatusKit CLI.

StatusKit aligns with the BSD `sysexits` convention where practical, so that
calling scripts can tell a usage mistake from a broken configuration.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the StatusKit CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; also used by ``emit --exit-code`` after an
            error message.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
