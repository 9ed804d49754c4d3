"""TOML configuration loading and saving utilities.

A configuration file holds a ``[runner]`` table whose keys are
``RunnerOptions`` fields::

    [runner]
    includes = ["LoopBenchmark"]
    mode = "thrpt"
    warmup_iterations = 5
    warmup_time = 5.0
    measurement_iterations = 5
    measurement_time = 5.0
    forks = 1
    interpreter_args = ["-O"]
"""

from pathlib import Path
from typing import Any, Union

import tomllib

import tomli_w  # type: ignore

from loopbench.benchmarking.errors import ConfigurationError
from loopbench.benchmarking.options import RunnerOptions
from loopbench.config.environment import apply_environment_overrides

RUNNER_SECTION = "runner"


def load_toml(config_path: Union[str, Path]) -> dict[str, Any]:
    """Load a TOML configuration file.

    Args:
        config_path: Path to the TOML configuration file

    Returns:
        Dictionary containing the parsed TOML configuration

    Raises:
        FileNotFoundError: If the configuration file does not exist
        tomllib.TOMLDecodeError: If the configuration file is invalid TOML
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_path.open("rb") as f:
        return tomllib.load(f)


def save_toml(config: dict[str, Any], config_path: Union[str, Path]) -> None:
    """Save a configuration dictionary to a TOML file.

    Args:
        config: Dictionary containing the configuration to save
        config_path: Path to save the TOML configuration file

    Raises:
        OSError: If the file cannot be written
    """
    config_path = Path(config_path)

    # Create parent directories if they don't exist
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with config_path.open("wb") as f:
        tomli_w.dump(config, f)


def deep_merge_dict(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge two dictionaries.

    Values from `override` take precedence. Nested dictionaries are merged
    recursively; neither input is modified.

    Args:
        base: Base dictionary to merge into
        override: Dictionary with values that override the base

    Returns:
        A new dictionary containing the merged values
    """
    result = base.copy()

    for key, override_value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(override_value, dict):
            result[key] = deep_merge_dict(result[key], override_value)
        else:
            result[key] = override_value

    return result


def default_config(base: RunnerOptions | None = None) -> dict[str, Any]:
    """Configuration dict for the given options, or the defaults."""
    return {RUNNER_SECTION: (base or RunnerOptions()).to_dict()}


def load_runner_options(
    config_path: Union[str, Path, None] = None,
    base: RunnerOptions | None = None,
    use_environment: bool = True,
) -> RunnerOptions:
    """Resolve runner options from defaults, a config file and the environment.

    Precedence, lowest first: ``base`` (or the RunnerOptions defaults), the
    ``[runner]`` table of ``config_path``, then ``LOOPBENCH_RUNNER__*``
    environment variables.

    Args:
        config_path: Optional TOML file to read.
        base: Options to start from.
        use_environment: Whether to apply environment overrides.

    Returns:
        Validated RunnerOptions.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        ConfigurationError: If the file is not valid TOML or the resolved
            options are invalid.
    """
    config = default_config(base)
    if config_path is not None:
        try:
            file_config = load_toml(config_path)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid configuration file {config_path}: {e}") from e
        config = deep_merge_dict(config, file_config)
    if use_environment:
        config = apply_environment_overrides(config)
    return RunnerOptions.from_config(config.get(RUNNER_SECTION, {}))
