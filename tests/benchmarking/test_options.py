"""Tests for RunnerOptions, Mode and TimeUnit."""

import pytest

from loopbench.benchmarking.errors import ConfigurationError
from loopbench.benchmarking.options import Mode, RunnerOptions, TimeUnit


class TestRunnerOptionsDefaults:
    """Default experiment parameters."""

    def test_defaults(self):
        options = RunnerOptions()
        assert options.includes == ()
        assert options.mode is Mode.THROUGHPUT
        assert options.time_unit is TimeUnit.SECONDS
        assert options.warmup_iterations == 5
        assert options.warmup_time == 5.0
        assert options.measurement_iterations == 5
        assert options.measurement_time == 5.0
        assert options.forks == 1
        assert options.interpreter_args == ()

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            RunnerOptions().forks = 3


class TestRunnerOptionsCoercion:
    """Plain values from config files and the CLI are coerced."""

    def test_mode_from_string(self):
        assert RunnerOptions(mode="avgt").mode is Mode.AVERAGE_TIME

    def test_time_unit_from_string(self):
        assert RunnerOptions(time_unit="ms").time_unit is TimeUnit.MILLISECONDS

    def test_single_include_string(self):
        assert RunnerOptions(includes="LoopBenchmark").includes == ("LoopBenchmark",)

    def test_include_list(self):
        assert RunnerOptions(includes=["a", "b"]).includes == ("a", "b")

    def test_interpreter_args_list(self):
        assert RunnerOptions(interpreter_args=["-O", "-X", "dev"]).interpreter_args == (
            "-O",
            "-X",
            "dev",
        )

    def test_invalid_mode(self):
        with pytest.raises(ConfigurationError, match="Invalid mode 'fast'"):
            RunnerOptions(mode="fast")

    def test_invalid_time_unit(self):
        with pytest.raises(ConfigurationError, match="time_unit"):
            RunnerOptions(time_unit="minutes")

    def test_invalid_includes_type(self):
        with pytest.raises(ConfigurationError, match="includes"):
            RunnerOptions(includes=42)


class TestRunnerOptionsValidation:
    """Out-of-range values are rejected."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"warmup_iterations": -1},
            {"measurement_iterations": 0},
            {"warmup_time": 0.0},
            {"measurement_time": -1.0},
            {"forks": -1},
        ],
    )
    def test_rejects_out_of_range(self, overrides):
        with pytest.raises(ConfigurationError):
            RunnerOptions(**overrides)

    def test_zero_warmup_allows_zero_warmup_time(self):
        options = RunnerOptions(warmup_iterations=0, warmup_time=0.0)
        assert options.warmup_iterations == 0

    def test_zero_forks_allowed(self):
        assert RunnerOptions(forks=0).forks == 0


class TestRunnerOptionsTypes:
    """Values of the wrong type are rejected before they reach the runner."""

    @pytest.mark.parametrize(
        "name,value",
        [
            ("warmup_iterations", 1.5),
            ("warmup_iterations", True),
            ("measurement_iterations", 2.0),
            ("measurement_iterations", "5"),
            ("forks", False),
            ("forks", None),
        ],
    )
    def test_rejects_non_integer_counts(self, name, value):
        with pytest.raises(ConfigurationError, match=f"{name} must be an integer"):
            RunnerOptions(**{name: value})

    @pytest.mark.parametrize(
        "name,value",
        [("warmup_time", "5"), ("measurement_time", True), ("measurement_time", None)],
    )
    def test_rejects_non_numeric_times(self, name, value):
        with pytest.raises(ConfigurationError, match=f"{name} must be a number"):
            RunnerOptions(**{name: value})

    def test_integer_times_accepted(self):
        options = RunnerOptions(warmup_time=1, measurement_time=2)
        assert options.measurement_time == 2

    def test_invalid_include_pattern(self):
        with pytest.raises(ConfigurationError, match="Invalid include pattern '\\['"):
            RunnerOptions(includes=("[",))


class TestRunnerOptionsMethods:
    """replace(), to_dict(), from_config() and score_unit."""

    def test_replace_skips_none(self):
        options = RunnerOptions().replace(forks=0, mode=None)
        assert options.forks == 0
        assert options.mode is Mode.THROUGHPUT

    def test_replace_validates(self):
        with pytest.raises(ConfigurationError):
            RunnerOptions().replace(measurement_iterations=0)

    def test_to_dict_from_config_roundtrip(self):
        options = RunnerOptions(
            includes=("LoopBenchmark",),
            mode=Mode.AVERAGE_TIME,
            time_unit=TimeUnit.NANOSECONDS,
            forks=2,
            interpreter_args=("-O",),
        )
        assert RunnerOptions.from_config(options.to_dict()) == options

    def test_to_dict_uses_plain_values(self):
        data = RunnerOptions().to_dict()
        assert data["mode"] == "thrpt"
        assert data["time_unit"] == "s"
        assert data["includes"] == []

    def test_from_config_partial(self):
        options = RunnerOptions.from_config({"forks": 0})
        assert options.forks == 0
        assert options.warmup_iterations == 5

    def test_from_config_unknown_key(self):
        with pytest.raises(ConfigurationError, match="Unknown runner options: threads"):
            RunnerOptions.from_config({"threads": 4})

    def test_from_config_wrong_type(self):
        with pytest.raises(ConfigurationError, match="forks must be an integer"):
            RunnerOptions.from_config({"forks": "many"})

    def test_from_config_fractional_count(self):
        with pytest.raises(ConfigurationError, match="warmup_iterations must be an integer"):
            RunnerOptions.from_config({"warmup_iterations": 1.5, "forks": 0})

    @pytest.mark.parametrize(
        "mode,unit,expected",
        [
            ("thrpt", "s", "ops/s"),
            ("thrpt", "ms", "ops/ms"),
            ("avgt", "us", "us/op"),
            ("avgt", "ns", "ns/op"),
        ],
    )
    def test_score_unit(self, mode, unit, expected):
        assert RunnerOptions(mode=mode, time_unit=unit).score_unit == expected


class TestTimeUnit:
    def test_per_second(self):
        assert TimeUnit.SECONDS.per_second == 1.0
        assert TimeUnit.MILLISECONDS.per_second == 1e3
        assert TimeUnit.MICROSECONDS.per_second == 1e6
        assert TimeUnit.NANOSECONDS.per_second == 1e9
