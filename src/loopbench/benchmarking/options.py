"""Runner options.

``RunnerOptions`` carries the experiment parameters of one run: which
benchmarks to include, the measurement mode, warmup and measurement
iteration counts and durations, and how many isolated worker processes
to fork.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any

from loopbench.benchmarking.errors import ConfigurationError


class Mode(str, Enum):
    """Measurement mode."""

    THROUGHPUT = "thrpt"
    AVERAGE_TIME = "avgt"


class TimeUnit(str, Enum):
    """Time unit used for reported scores."""

    SECONDS = "s"
    MILLISECONDS = "ms"
    MICROSECONDS = "us"
    NANOSECONDS = "ns"

    @property
    def per_second(self) -> float:
        """Number of units in one second."""
        return _UNITS_PER_SECOND[self]


_UNITS_PER_SECOND = {
    TimeUnit.SECONDS: 1.0,
    TimeUnit.MILLISECONDS: 1e3,
    TimeUnit.MICROSECONDS: 1e6,
    TimeUnit.NANOSECONDS: 1e9,
}


@dataclass(frozen=True)
class RunnerOptions:
    """Experiment parameters for one benchmark run.

    Attributes:
        includes: Regular expressions selecting benchmarks by qualified name.
            Empty selects every registered benchmark.
        mode: Measurement mode.
        time_unit: Unit scores are reported in.
        warmup_iterations: Iterations run and discarded before measuring.
        warmup_time: Duration of each warmup iteration in seconds.
        measurement_iterations: Iterations recorded per fork.
        measurement_time: Duration of each measurement iteration in seconds.
        forks: Number of isolated worker processes per benchmark.
            Zero runs in the current process.
        interpreter_args: Extra interpreter flags for forked workers.
    """

    includes: tuple[str, ...] = ()
    mode: Mode = Mode.THROUGHPUT
    time_unit: TimeUnit = TimeUnit.SECONDS
    warmup_iterations: int = 5
    warmup_time: float = 5.0
    measurement_iterations: int = 5
    measurement_time: float = 5.0
    forks: int = 1
    interpreter_args: tuple[str, ...] = field(default=())

    def __post_init__(self):
        # Accept plain strings and lists from config files and the CLI
        object.__setattr__(self, "mode", _coerce_enum(Mode, self.mode, "mode"))
        object.__setattr__(
            self, "time_unit", _coerce_enum(TimeUnit, self.time_unit, "time_unit")
        )
        object.__setattr__(self, "includes", _coerce_tuple(self.includes, "includes"))
        object.__setattr__(
            self, "interpreter_args", _coerce_tuple(self.interpreter_args, "interpreter_args")
        )
        self.validate()

    def validate(self) -> None:
        """Check option types and ranges.

        Raises:
            ConfigurationError: If a value has the wrong type or is out of range.
        """
        for name in ("warmup_iterations", "measurement_iterations", "forks"):
            value = getattr(self, name)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        for name in ("warmup_time", "measurement_time"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
        for pattern in self.includes:
            compile_include(pattern)

        if self.warmup_iterations < 0:
            raise ConfigurationError(
                f"warmup_iterations must be >= 0, got {self.warmup_iterations}"
            )
        if self.measurement_iterations < 1:
            raise ConfigurationError(
                f"measurement_iterations must be >= 1, got {self.measurement_iterations}"
            )
        if self.warmup_iterations > 0 and self.warmup_time <= 0:
            raise ConfigurationError(f"warmup_time must be > 0, got {self.warmup_time}")
        if self.measurement_time <= 0:
            raise ConfigurationError(
                f"measurement_time must be > 0, got {self.measurement_time}"
            )
        if self.forks < 0:
            raise ConfigurationError(f"forks must be >= 0, got {self.forks}")

    @property
    def score_unit(self) -> str:
        """Unit label for reported scores, e.g. ``ops/s`` or ``ms/op``."""
        if self.mode is Mode.THROUGHPUT:
            return f"ops/{self.time_unit.value}"
        return f"{self.time_unit.value}/op"

    def replace(self, **overrides: Any) -> "RunnerOptions":
        """Return a copy with the given fields replaced. ``None`` values are skipped."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON and TOML compatible dict."""
        return {
            "includes": list(self.includes),
            "mode": self.mode.value,
            "time_unit": self.time_unit.value,
            "warmup_iterations": self.warmup_iterations,
            "warmup_time": self.warmup_time,
            "measurement_iterations": self.measurement_iterations,
            "measurement_time": self.measurement_time,
            "forks": self.forks,
            "interpreter_args": list(self.interpreter_args),
        }

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "RunnerOptions":
        """Build options from a mapping such as the ``[runner]`` table of a config file.

        Args:
            config: Mapping of option names to values. Missing keys keep
                their defaults.

        Returns:
            Validated RunnerOptions.

        Raises:
            ConfigurationError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ConfigurationError(f"Unknown runner options: {', '.join(unknown)}")
        try:
            return cls(**dict(config))
        except TypeError as e:
            raise ConfigurationError(f"Invalid runner options: {e}") from e


def _coerce_enum(enum_cls: type[Enum], value: Any, name: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise ConfigurationError(f"Invalid {name} '{value}', expected one of: {choices}") from None


def _coerce_tuple(value: Any, name: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list | tuple):
        raise ConfigurationError(f"{name} must be a string or a list of strings")
    return tuple(str(v) for v in value)


def compile_include(pattern: str) -> re.Pattern[str]:
    """Compile an include pattern, raising ConfigurationError when it is invalid."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(f"Invalid include pattern '{pattern}': {e}") from e
