# topmark:header:start
#
#   project      : StatusKit
#   file         : io.py
#   file_relpath : src/statuskit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Read StatusKit configuration from TOML files.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Unlike value coercion (which is lenient), a file that cannot be read or
parsed is a `ConfigError`: silently ignoring a broken config would hide the
user's intent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from statuskit.config.keys import Toml
from statuskit.config.logging import get_logger
from statuskit.constants import PYPROJECT_TOML_NAME, STATUSKIT_TOML_NAME
from statuskit.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from statuskit.config.logging import StatuskitLogger
    from statuskit.config.types import TomlTable

logger: StatuskitLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"cannot read file: {e}", source=str(path)) from e
    except TomlkitParseError as e:
        raise ConfigError(f"invalid TOML: {e}", source=str(path)) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_statuskit_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the StatusKit settings held by a parsed config file.

    ``statuskit.toml`` holds its keys at the top level; ``pyproject.toml``
    holds them under ``[tool.statuskit]``.

    Args:
        path (Path): Path of the file ``data`` was read from.
        data (TomlTable): Parsed TOML content.

    Returns:
        TomlTable | None: The settings table, or ``None`` if a ``pyproject.toml``
            has no ``[tool.statuskit]`` section.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_STATUSKIT) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.statuskit] section in %s", path)
        return None
    return cast("TomlTable", section)


def discover_config_file(start: Path) -> Path | None:
    """Return the config file that applies to directory ``start``.

    ``statuskit.toml`` wins over ``pyproject.toml``; the latter only counts
    when it has a ``[tool.statuskit]`` section. No upward search is done.

    Args:
        start (Path): Directory to look in.

    Returns:
        Path | None: The config file, or ``None`` if there is none.
    """
    candidate: Path = start / STATUSKIT_TOML_NAME
    if candidate.is_file():
        return candidate
    candidate = start / PYPROJECT_TOML_NAME
    if candidate.is_file():
        if extract_statuskit_table(candidate, load_toml_dict(candidate)) is not None:
            return candidate
    return None


def get_string_value_or_none(table: TomlTable, key: str, *, where: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Location used in error messages (usually the file path).

    Returns:
        str | None: The string value, or ``None`` when absent.

    Raises:
        ConfigError: If the key is present but not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise ConfigError(
        f"expected a string for '{key}', got {type(value).__name__}: {value!r}", source=where
    )
