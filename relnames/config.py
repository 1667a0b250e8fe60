"""Configuration file loader for relnames.

Supports two formats:

- ``relnames.toml`` with settings under a ``[relnames]`` table
- ``pyproject.toml`` with settings under ``[tool.relnames]``

Discovery order:

1. Explicit path from ``--config`` or ``RELNAMES_CONFIG``
2. ``relnames.toml`` in the current directory
3. ``pyproject.toml`` with a ``[tool.relnames]`` section

Example (``relnames.toml``)::

    [relnames]
    version_format = "ruby"
    include_v = false
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from relnames.exceptions import ConfigError
from relnames.utils.logger import get_logger
from relnames.core.version_format import VERSION_FORMATS
from relnames.constants import DEFAULT_INCLUDE_V, DEFAULT_VERSION_FORMAT

logger = get_logger("config")

_SECTION = "relnames"
_CONFIG_FILE_NAME = "relnames.toml"


@dataclass
class RelnamesConfig:
    """Parsed and validated relnames configuration.

    Attributes:
        version_format: Name of the default version dialect.
        include_v: Render tags with a leading ``v``.
        source_path: Path to the loaded file, or ``None`` for defaults.
    """

    version_format: str = DEFAULT_VERSION_FORMAT
    include_v: bool = DEFAULT_INCLUDE_V

    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return the user-facing options for debug logging."""
        return {
            "version_format": self.version_format,
            "include_v": self.include_v,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path, or ``None`` when no configuration is found.

    Raises:
        ConfigError: ``explicit_path`` does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    config_toml = cwd / _CONFIG_FILE_NAME
    if config_toml.is_file():
        logger.debug("Found %s: %s", _CONFIG_FILE_NAME, config_toml)
        return config_toml

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_section(pyproject_toml):
        logger.debug("Found [tool.%s] in pyproject.toml: %s", _SECTION, pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_section(path: Path) -> bool:
    """Return True if ``path`` has a ``[tool.relnames]`` table.

    An unreadable or invalid pyproject.toml is treated as having none; it
    belongs to the project, not to relnames.
    """
    try:
        raw = _read_toml(path)
    except ConfigError:
        return False
    return _SECTION in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> RelnamesConfig:
    """Load and validate relnames configuration.

    Args:
        config_path: Explicit config file; ``None`` means auto-discovery.

    Returns:
        Validated configuration, or defaults when no file is found.

    Raises:
        ConfigError: The file cannot be parsed or holds invalid options.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        return RelnamesConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get(_SECTION, {})
    else:
        section = raw.get(_SECTION, {})

    if not section:
        logger.debug("Config file has no %s section, using defaults", _SECTION)
        return RelnamesConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: The file cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> RelnamesConfig:
    """Validate a ``[relnames]`` table.

    Raises:
        ConfigError: Unknown keys, wrong types or an unregistered
            ``version_format``.
    """
    config = RelnamesConfig()

    unknown = set(section) - {"version_format", "include_v"}
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    if "version_format" in section:
        val = section["version_format"]
        if not isinstance(val, str):
            raise ConfigError(
                f"version_format must be a string, got {type(val).__name__}",
                config_path=config_path,
                option="version_format",
            )
        if val.lower() not in VERSION_FORMATS:
            raise ConfigError(
                f"version_format must be one of {', '.join(sorted(VERSION_FORMATS))}, "
                f"got {val!r}",
                config_path=config_path,
                option="version_format",
            )
        config.version_format = val.lower()

    if "include_v" in section:
        val = section["include_v"]
        if not isinstance(val, bool):
            raise ConfigError(
                f"include_v must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option="include_v",
            )
        config.include_v = val

    return config
