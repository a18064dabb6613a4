#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the pandoc-filter command.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and merging file values with environment
variables.

Priority order (highest to lowest):

1. Command line flags
2. ``PANDOC_FILTER_ACTIONS`` / ``PANDOC_FILTER_LOG_LEVEL`` environment variables
3. Explicit config file (``--config``) or ``PANDOC_FILTER_CONFIG``
4. Auto-discovered config file (``.pandoc-filter.toml`` etc. in the working
   directory or its parents, then the home directory)

Example ``.pandoc-filter.toml``::

    actions = ["myfilters.caps:action", "myfilters/links.py:rewrite"]
    log_level = "INFO"
    log_file = "filter.log"
    trace = false

"""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from pandoc_filter.constants import (
    CONFIG_FILENAMES,
    DEFAULT_LOG_LEVEL,
    ENV_ACTIONS,
    ENV_CONFIG,
    ENV_LOG_LEVEL,
    PYPROJECT_TOOL_SECTION,
)
from pandoc_filter.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class FilterConfig:
    """Settings for the pandoc-filter command.

    Parameters
    ----------
    actions : list of str
        Action specifications, applied in order
    log_level : str, default "WARNING"
        Logging level name
    log_file : str, optional
        File that receives a copy of the log output
    trace : bool, default False
        Use the detailed, timestamped log format

    """

    actions: list[str] = field(default_factory=list)
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    trace: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FilterConfig:
        """Build a config from a loaded mapping, validating value types.

        Raises
        ------
        ValidationError
            If a key is unknown or a value has the wrong type

        """
        known = {"actions", "log_level", "log_file", "trace"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(
                f"Unknown configuration key(s): {', '.join(unknown)}", parameter_name=unknown[0]
            )

        actions = data.get("actions", [])
        if isinstance(actions, str):
            actions = [actions]
        if not isinstance(actions, list) or not all(isinstance(a, str) for a in actions):
            raise ValidationError(
                "'actions' must be a list of strings", parameter_name="actions", parameter_value=actions
            )

        log_level = data.get("log_level", DEFAULT_LOG_LEVEL)
        if not isinstance(log_level, str):
            raise ValidationError(
                "'log_level' must be a string", parameter_name="log_level", parameter_value=log_level
            )

        log_file = data.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ValidationError("'log_file' must be a string", parameter_name="log_file", parameter_value=log_file)

        trace = data.get("trace", False)
        if not isinstance(trace, bool):
            raise ValidationError("'trace' must be a boolean", parameter_name="trace", parameter_value=trace)

        return cls(actions=list(actions), log_level=log_level.upper(), log_file=log_file, trace=trace)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.pandoc-filter]`` table from a pyproject.toml file."""
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValidationError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", original_error=e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ValidationError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching ``start_dir`` and its parents.

    Dedicated config files win over ``pyproject.toml`` in the same directory,
    and a ``pyproject.toml`` only counts when it has a
    ``[tool.pandoc-filter]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ValidationError:
                logger.debug("Skipping unreadable %s", pyproject_path)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Searches ``start_dir`` (default: cwd) up to the filesystem root, then
    the user's home directory.
    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ValidationError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ValidationError(f"Configuration file does not exist: {config_path}", parameter_name="config")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ValidationError(
                f"Unsupported config file format: {ext}. Use .toml, .yaml or .json", parameter_name="config"
            )
    except ValidationError:
        raise
    except (OSError, tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ValidationError(f"Error reading config file {config_path}: {e}", original_error=e) from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValidationError(
            f"Config file {config_path} must contain a mapping, got {type(config).__name__}", parameter_name="config"
        )

    logger.debug("Loaded configuration from %s", config_path)
    return config


def load_filter_config(
    explicit_path: Optional[str] = None,
    no_config: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> FilterConfig:
    """Load the effective configuration for the command line driver.

    Parameters
    ----------
    explicit_path : str, optional
        Config file path from the ``--config`` flag
    no_config : bool, default False
        Skip file discovery (environment variables still apply)
    environ : mapping, optional
        Environment to read, defaults to ``os.environ``

    Returns
    -------
    FilterConfig
        Merged configuration

    """
    if environ is None:
        environ = os.environ

    data: Dict[str, Any] = {}
    if explicit_path:
        data = load_config_file(explicit_path)
    elif not no_config:
        env_path = environ.get(ENV_CONFIG)
        if env_path:
            data = load_config_file(env_path)
        else:
            discovered = discover_config_file()
            if discovered:
                data = load_config_file(discovered)

    data = dict(data)
    env_actions = environ.get(ENV_ACTIONS)
    if env_actions:
        data["actions"] = [spec.strip() for spec in env_actions.split(",") if spec.strip()]
    env_level = environ.get(ENV_LOG_LEVEL)
    if env_level:
        data["log_level"] = env_level

    return FilterConfig.from_dict(data)


__all__ = [
    "FilterConfig",
    "find_config_in_parents",
    "discover_config_file",
    "load_config_file",
    "load_filter_config",
]
