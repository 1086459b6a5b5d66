"""YAML configuration loader with inheritance support.

Supports:
- Loading YAML config files
- Config inheritance via 'extends' key
- Deep merging of nested config
- Lookup via --config, $NAG_CONFIG, then the user config directory
"""

import logging
import os
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from ..errors import ConfigError
from . import LoggingConfig, NagConfig, SchedulerConfig, SpeechConfig, TestingConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "NAG_CONFIG"
LOG_LEVEL_ENV_VAR = "NAG_LOG_LEVEL"
DEFAULT_CONFIG_PATH = Path("~/.config/nag/config.yaml")


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values from override take precedence. Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_with_inheritance(path: Path) -> dict[str, Any]:
    """Load YAML file with inheritance support.

    If the file contains an 'extends' key, the base config is loaded first
    and merged with the current config.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    # Handle inheritance
    if "extends" in config:
        base_name = config.pop("extends")
        base_path = path.parent / base_name
        base_config = load_yaml_with_inheritance(base_path)
        config = deep_merge(base_config, config)

    return config


def check_types(section: str, value: Any) -> None:
    """Check every field of a config section against its annotation.

    Raises:
        ConfigError: If a value has the wrong type
    """
    for f in fields(value):
        item = getattr(value, f.name)
        expected = (int, float) if f.type is float else f.type
        # bool is an int subclass but never a valid number here
        wrong_bool = isinstance(item, bool) and f.type is not bool
        if wrong_bool or not isinstance(item, expected):
            raise ConfigError(
                f"Invalid value for nag.{section}.{f.name}: {item!r} "
                f"(expected {getattr(f.type, '__name__', f.type)})"
            )


def dict_to_config(data: dict[str, Any]) -> NagConfig:
    """Convert raw dict to typed NagConfig dataclass.

    Raises:
        ConfigError: If a section is not a mapping, contains unknown keys,
                     or holds a value of the wrong type
    """
    nag_data = data.get("nag", {}) or {}
    if not isinstance(nag_data, dict):
        raise ConfigError(f"'nag' must be a mapping, got {type(nag_data).__name__}")

    # Helper to safely get dict values (handles None from YAML)
    def safe_get(key: str) -> dict[str, Any]:
        value = nag_data.get(key, {})
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ConfigError(f"'nag.{key}' must be a mapping, got {type(value).__name__}")
        return value

    try:
        config = NagConfig(
            speech=SpeechConfig(**safe_get("speech")),
            scheduler=SchedulerConfig(**safe_get("scheduler")),
            logging=LoggingConfig(**safe_get("logging")),
            testing=TestingConfig(**safe_get("testing")),
        )
    except TypeError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    for f in fields(config):
        check_types(f.name, getattr(config, f.name))
    return config


def resolve_config_path(path: str | Path | None = None) -> Path | None:
    """Find the config file to load.

    Checks in order:
    1. Explicit path
    2. NAG_CONFIG environment variable
    3. ~/.config/nag/config.yaml, if it exists

    Returns:
        Path to load, or None to use built-in defaults
    """
    if path is not None:
        return Path(path).expanduser()

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    default_path = DEFAULT_CONFIG_PATH.expanduser()
    if default_path.exists():
        return default_path
    return None


def load_config(path: str | Path | None = None) -> NagConfig:
    """Load nag configuration.

    Args:
        path: Direct path to config file (takes precedence)

    Returns:
        Parsed NagConfig, with NAG_LOG_LEVEL applied

    Examples:
        >>> config = load_config()
        >>> config = load_config(path="/path/to/config.yaml")
    """
    config_path = resolve_config_path(path)
    if config_path is None:
        config = NagConfig()
    else:
        logger.debug(f"Loading config from {config_path}")
        config = dict_to_config(load_yaml_with_inheritance(config_path))

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        config.logging.level = env_level

    return config


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "LOG_LEVEL_ENV_VAR",
    "deep_merge",
    "dict_to_config",
    "load_config",
    "load_yaml_with_inheritance",
    "resolve_config_path",
]
