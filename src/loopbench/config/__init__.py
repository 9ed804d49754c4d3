"""Configuration management for loopbench.

This package provides utilities for loading runner options from TOML files
and applying environment variable overrides.
"""

from loopbench.config.environment import (
    apply_environment_overrides,
    get_env_value,
)
from loopbench.config.loaders import (
    deep_merge_dict,
    default_config,
    load_runner_options,
    load_toml,
    save_toml,
)


__all__ = [
    # Loaders
    "load_toml",
    "save_toml",
    "deep_merge_dict",
    "default_config",
    "load_runner_options",
    # Environment
    "apply_environment_overrides",
    "get_env_value",
]
