"""
Configuration loader for notifykit.

Loads a ``NotifyConfig`` from:
1. Default values
2. A YAML file (if given)
3. Environment variables (NOTIFYKIT_*)
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from notifykit.config.schema import NotifyConfig
from notifykit.exceptions import ConfigurationError

ENV_PREFIX = "NOTIFYKIT_"


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed configuration dictionary.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return content


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Environment variables follow the pattern NOTIFYKIT_<FIELD>=<value>,
    e.g. NOTIFYKIT_PLATFORM=Slack or NOTIFYKIT_CHAT_IDS=1,2,3.

    Args:
        config: Configuration dictionary to modify.

    Returns:
        Configuration with environment overrides applied.
    """
    result = dict(config)
    fields = NotifyConfig.model_fields

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue

        field = key[len(ENV_PREFIX) :].lower()
        if field not in fields:
            continue

        result[field] = _parse_env_value(field, value)

    return result


def _parse_env_value(field: str, value: str) -> Any:
    """
    Parse an environment variable value for a config field.

    Args:
        field: Target field name.
        value: String value from environment.

    Returns:
        Parsed value.
    """
    if field == "chat_ids":
        return [item.strip() for item in value.split(",") if item.strip()]

    if field == "others":
        # key=value pairs, comma separated
        pairs = [item.split("=", 1) for item in value.split(",") if "=" in item]
        return {k.strip(): v.strip() for k, v in pairs}

    if field == "priority" and re.match(r"^-?\d+$", value):
        return int(value)

    return value


def load_config(path: Path | None = None, skip_env: bool = False) -> NotifyConfig:
    """
    Load and validate a notification config.

    Args:
        path: Optional YAML file to read.
        skip_env: Skip environment variable overrides.

    Returns:
        Validated NotifyConfig.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    config_dict: dict[str, Any] = {}

    if path is not None:
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        config_dict = load_yaml_file(path)

    if not skip_env:
        config_dict = apply_env_overrides(config_dict)

    try:
        return NotifyConfig.model_validate(config_dict)
    except Exception as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
