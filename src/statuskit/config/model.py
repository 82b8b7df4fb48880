# topmark:header:start
#
#   project      : StatusKit
#   file         : model.py
#   file_relpath : src/statuskit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `StatusConfig`: an immutable snapshot used to build a status backend.
    - `MutableStatusConfig`: a mutable builder used during discovery and
      merging; it is frozen into a `StatusConfig` once all layers are applied.

Merge order (lowest → highest precedence):
    1) Built-in defaults (``normal`` chatter, ``auto`` color, ``terminal`` backend)
    2) The config file discovered in the working directory
    3) Extra config files passed explicitly (``--config``), in order
    4) Environment variables (``STATUSKIT_CHATTER``, ``STATUSKIT_BACKEND``)
    5) Command-line options

Every field of the builder is tri-state (``None`` = inherit), so a layer only
overrides what it actually sets.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from statuskit.cli_shared.color import ColorMode
from statuskit.config.io import (
    discover_config_file,
    extract_statuskit_table,
    get_string_value_or_none,
    load_toml_dict,
)
from statuskit.config.keys import Toml
from statuskit.config.logging import get_logger
from statuskit.config.types import BackendKind, parse_chatter_level
from statuskit.constants import ENV_BACKEND, ENV_CHATTER
from statuskit.core.errors import ConfigError
from statuskit.status.model import ChatterLevel

if TYPE_CHECKING:
    from statuskit.config.logging import StatuskitLogger
    from statuskit.config.types import TomlTable

logger: StatuskitLogger = get_logger(__name__)

ArgsLike = Mapping[str, Any]

ENV_OVERRIDE_STR = "<environment>"
CLI_OVERRIDE_STR = "<CLI overrides>"


@dataclass(frozen=True)
class StatusConfig:
    """Immutable status configuration.

    Attributes:
        chatter (ChatterLevel): Display threshold handed to the backend.
        color_mode (ColorMode): Color intent for terminal output.
        backend (BackendKind): Which status backend to create.
        config_files (tuple[str, ...]): Sources that contributed to this snapshot.
    """

    chatter: ChatterLevel = ChatterLevel.NORMAL
    color_mode: ColorMode = ColorMode.AUTO
    backend: BackendKind = BackendKind.TERMINAL
    config_files: tuple[str, ...] = ()

    def thaw(self) -> MutableStatusConfig:
        """Return a mutable copy of this snapshot."""
        return MutableStatusConfig(
            chatter=self.chatter,
            color_mode=self.color_mode,
            backend=self.backend,
            config_files=list(self.config_files),
        )


def _parse_value(raw: str | None, parser: Any, *, key: str, source: str) -> Any:
    """Run ``parser`` on ``raw``, turning an unknown token into a `ConfigError`."""
    if raw is None:
        return None
    value = parser(raw)
    if value is None:
        raise ConfigError(f"invalid value for '{key}': {raw!r}", source=source)
    return value


@dataclass
class MutableStatusConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        chatter (ChatterLevel | None): Display threshold, or None to inherit.
        color_mode (ColorMode | None): Color intent, or None to inherit.
        backend (BackendKind | None): Backend selection, or None to inherit.
        config_files (list[str]): Sources applied so far, in merge order.
    """

    chatter: ChatterLevel | None = None
    color_mode: ColorMode | None = None
    backend: BackendKind | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> StatusConfig:
        """Freeze this builder into a `StatusConfig`, filling unset fields with defaults."""
        defaults = StatusConfig()
        return StatusConfig(
            chatter=self.chatter if self.chatter is not None else defaults.chatter,
            color_mode=self.color_mode if self.color_mode is not None else defaults.color_mode,
            backend=self.backend if self.backend is not None else defaults.backend,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_toml_table(cls, table: TomlTable, *, source: str) -> MutableStatusConfig:
        """Create a draft from the StatusKit settings table of a config file.

        Unknown keys are ignored with a warning in the log.

        Args:
            table (TomlTable): Top-level ``statuskit.toml`` table or ``[tool.statuskit]``.
            source (str): Where the table came from (for provenance and errors).

        Returns:
            MutableStatusConfig: The draft holding the values set in ``table``.

        Raises:
            ConfigError: If a value has the wrong type or is not a known token.
        """
        for key in sorted(set(table) - Toml.ALL_KEYS):
            logger.warning("Ignoring unknown config key '%s' in %s", key, source)

        def _get(key: str) -> str | None:
            return get_string_value_or_none(table, key, where=source)

        return cls(
            chatter=_parse_value(
                _get(Toml.KEY_CHATTER), parse_chatter_level, key=Toml.KEY_CHATTER, source=source
            ),
            color_mode=_parse_value(
                _get(Toml.KEY_COLOR), ColorMode.parse, key=Toml.KEY_COLOR, source=source
            ),
            backend=_parse_value(
                _get(Toml.KEY_BACKEND), BackendKind.parse, key=Toml.KEY_BACKEND, source=source
            ),
            config_files=[source],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableStatusConfig | None:
        """Load a draft from ``statuskit.toml`` or ``pyproject.toml``.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableStatusConfig | None: The draft, or ``None`` when a
                ``pyproject.toml`` carries no ``[tool.statuskit]`` section.
        """
        logger.debug("Loading status config from %s", path)
        table: TomlTable | None = extract_statuskit_table(path, load_toml_dict(path))
        if table is None:
            return None
        return cls.from_toml_table(table, source=str(path))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MutableStatusConfig:
        """Create a draft from ``STATUSKIT_CHATTER`` and ``STATUSKIT_BACKEND``.

        Empty variables are treated as unset.

        Args:
            environ (Mapping[str, str] | None): Environment to read; defaults to ``os.environ``.

        Returns:
            MutableStatusConfig: The draft holding the values set in the environment.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        raw_chatter: str | None = env.get(ENV_CHATTER) or None
        raw_backend: str | None = env.get(ENV_BACKEND) or None
        draft = cls(
            chatter=_parse_value(raw_chatter, parse_chatter_level, key=ENV_CHATTER, source="env"),
            backend=_parse_value(raw_backend, BackendKind.parse, key=ENV_BACKEND, source="env"),
        )
        if raw_chatter or raw_backend:
            draft.config_files = [ENV_OVERRIDE_STR]
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> MutableStatusConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            cwd (Path | None): Directory searched for a config file; defaults to the CWD.
            extra_config_files (Iterable[Path] | None): Explicit files merged after discovery.
            no_config (bool): If True, skip discovery in ``cwd``.
            environ (Mapping[str, str] | None): Environment overrides; defaults to ``os.environ``.

        Returns:
            MutableStatusConfig: The merged draft, ready for CLI overrides and `freeze`.
        """
        draft = cls()

        if not no_config:
            discovered: Path | None = discover_config_file(cwd or Path.cwd())
            if discovered is not None:
                layer = cls.from_toml_file(discovered)
                if layer is not None:
                    draft = draft.merge_with(layer)

        for extra in extra_config_files or ():
            layer = cls.from_toml_file(Path(extra))
            if layer is None:
                raise ConfigError("no [tool.statuskit] section", source=str(extra))
            draft = draft.merge_with(layer)

        return draft.merge_with(cls.from_env(environ))

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableStatusConfig) -> MutableStatusConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableStatusConfig(
            chatter=other.chatter if other.chatter is not None else self.chatter,
            color_mode=other.color_mode if other.color_mode is not None else self.color_mode,
            backend=other.backend if other.backend is not None else self.backend,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableStatusConfig:
        """Apply already-parsed command-line overrides in place.

        Recognized keys are ``chatter``, ``color_mode`` and ``backend``; a
        ``None`` value means the option was not given.

        Args:
            args (ArgsLike): Parsed arguments mapping (from CLI or API).

        Returns:
            MutableStatusConfig: This draft, for chaining.
        """
        logger.debug("Applying CLI arguments to MutableStatusConfig: %s", args)
        applied = False
        if args.get("chatter") is not None:
            self.chatter = args["chatter"]
            applied = True
        if args.get("color_mode") is not None:
            self.color_mode = args["color_mode"]
            applied = True
        if args.get("backend") is not None:
            self.backend = args["backend"]
            applied = True
        if applied:
            self.config_files.append(CLI_OVERRIDE_STR)
        return self
