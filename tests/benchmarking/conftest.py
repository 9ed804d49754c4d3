"""Shared test factories for benchmarking tests.

Provides factory functions for IterationResult, ForkResult and RunResult.

- make_iteration / make_fork / make_run_result: Full-featured with override pattern.
- make_result_for_scores: Quick factory producing a RunResult whose
  throughput scores (ops/s) equal the given values.
"""

from loopbench.benchmarking.options import RunnerOptions
from loopbench.benchmarking.results import ForkResult, RunResult
from loopbench.benchmarking.timing import IterationResult


def make_iteration(**overrides) -> IterationResult:
    """Create an IterationResult with sensible defaults."""
    defaults = {"ops": 1000, "wall_clock_sec": 1.0}
    defaults.update(overrides)
    return IterationResult(**defaults)


def make_fork(**overrides) -> ForkResult:
    """Create a ForkResult with one warmup and three measurement iterations."""
    defaults = {
        "warmup": [make_iteration(ops=500)],
        "measurement": [
            make_iteration(ops=1000),
            make_iteration(ops=1100),
            make_iteration(ops=900),
        ],
    }
    defaults.update(overrides)
    return ForkResult(**defaults)


def make_run_result(**overrides) -> RunResult:
    """Create a RunResult with full defaults."""
    defaults = {
        "benchmark": "LoopBenchmark.for_each_loop",
        "options": RunnerOptions(forks=1),
        "forks": [make_fork()],
    }
    defaults.update(overrides)
    return RunResult(**defaults)


def make_result_for_scores(
    benchmark: str, scores: list[float], options: RunnerOptions | None = None
) -> RunResult:
    """Create a RunResult whose measurement iterations each last one second.

    With the default throughput options each score equals the iteration's
    op count.
    """
    measurement = [IterationResult(ops=int(s), wall_clock_sec=1.0) for s in scores]
    return RunResult(
        benchmark=benchmark,
        options=options or RunnerOptions(),
        forks=[ForkResult(warmup=[], measurement=measurement)],
    )
