"""Environment variable integration for configuration.

Environment variables prefixed with ``LOOPBENCH_`` override configuration
values, with ``__`` separating nested keys: ``LOOPBENCH_RUNNER__FORKS=0``
sets ``config["runner"]["forks"]``.
"""

import os
from typing import Any

ENV_PREFIX = "LOOPBENCH_"
ENV_SEPARATOR = "__"


def get_env_value(env_var: str, default: Any = None, prefix: str = ENV_PREFIX) -> str | None:
    """Get a value from an environment variable.

    Args:
        env_var: The name of the environment variable (without prefix)
        default: Default value to return if the environment variable is not set
        prefix: Prefix to apply to the environment variable name

    Returns:
        The environment variable value, or the default if not set
    """
    full_name = f"{prefix}{env_var}"
    return os.environ.get(full_name, default)


def apply_environment_overrides(
    config: dict[str, Any], prefix: str = ENV_PREFIX, separator: str = ENV_SEPARATOR
) -> dict[str, Any]:
    """Apply environment variable overrides to a configuration dictionary.

    Only variables containing the separator are treated as overrides, so
    flat settings such as ``LOOPBENCH_LOG_LEVEL`` are left alone.

    Args:
        config: The configuration dictionary to apply overrides to
        prefix: Prefix for environment variables to consider
        separator: Separator used to indicate nested keys

    Returns:
        Configuration dictionary with environment overrides applied
    """
    result = {k: dict(v) if isinstance(v, dict) else v for k, v in config.items()}

    for env_name, env_value in os.environ.items():
        if not env_name.startswith(prefix):
            continue

        config_path = env_name[len(prefix) :]
        if separator not in config_path:
            continue

        keys = [k.lower() for k in config_path.split(separator)]
        _set_nested_value(result, keys, _convert_value(env_value))

    return result


def _convert_value(value: str) -> Any:
    """Convert a string value to an appropriate type.

    Comma-separated values become lists, then booleans, integers and
    floats are tried in that order; anything else stays a string.

    Args:
        value: The string value to convert

    Returns:
        The converted value
    """
    if "," in value:
        return [v.strip() for v in value.split(",") if v.strip()]

    # Handle boolean values
    if value.lower() in ("true", "yes"):
        return True
    if value.lower() in ("false", "no"):
        return False

    try:
        return int(value)
    except ValueError:
        try:
            return float(value)
        except ValueError:
            return value


def _set_nested_value(config: dict[str, Any], keys: list[str], value: Any) -> None:
    """Set a value in a nested dictionary using a list of keys.

    Args:
        config: The dictionary to modify
        keys: List of keys indicating the path to the value
        value: The value to set
    """
    if len(keys) == 1:
        config[keys[0]] = value
        return

    current_key = keys[0]
    if current_key not in config or not isinstance(config[current_key], dict):
        config[current_key] = {}

    _set_nested_value(config[current_key], keys[1:], value)
