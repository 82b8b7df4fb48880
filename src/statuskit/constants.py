# topmark:header:start
#
#   project      : StatusKit
#   file         : constants.py
#   file_relpath : src/statuskit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""StatusKit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

STATUSKIT_VERSION: str = get_version("statuskit")

# Configuration discovery (current working directory)
STATUSKIT_TOML_NAME: str = "statuskit.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Environment variables
ENV_LOG_LEVEL: str = "STATUSKIT_LOG_LEVEL"
ENV_CHATTER: str = "STATUSKIT_CHATTER"
ENV_BACKEND: str = "STATUSKIT_BACKEND"

# Logger used by status backends for their own diagnostics
STATUS_LOGGER_NAME: str = "statuskit.status"
