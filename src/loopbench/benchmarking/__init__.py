"""Micro-benchmark runner for loopbench.

This package provides:

- options.py: RunnerOptions, Mode and TimeUnit experiment parameters
- registry.py: @benchmark decorator and lookup by include pattern
- timing.py: TimingCollector for time-bounded iterations
- statistics.py: StatisticalAnalyzer for score aggregation
- results.py: ForkResult and RunResult containers
- comparative.py: BenchmarkComparison relative to the best benchmark
- runner.py: Runner orchestrating warmup, measurement and forks
- worker.py: entry point of forked worker processes
- report.py: text rendering of results
"""

from loopbench.benchmarking.comparative import BenchmarkComparison, ComparisonEntry
from loopbench.benchmarking.errors import (
    BenchmarkError,
    ConfigurationError,
    ForkedRunError,
    NoBenchmarksError,
)
from loopbench.benchmarking.options import Mode, RunnerOptions, TimeUnit
from loopbench.benchmarking.registry import (
    Benchmark,
    benchmark,
    find_benchmarks,
    get_benchmark,
)
from loopbench.benchmarking.results import ForkResult, RunResult
from loopbench.benchmarking.runner import Runner, run_iterations
from loopbench.benchmarking.statistics import StatisticalAnalyzer, StatisticalResult
from loopbench.benchmarking.timing import IterationResult, TimingCollector


__all__ = [
    # Options
    "Mode",
    "RunnerOptions",
    "TimeUnit",
    # Registry
    "Benchmark",
    "benchmark",
    "find_benchmarks",
    "get_benchmark",
    # Timing
    "IterationResult",
    "TimingCollector",
    # Statistics
    "StatisticalAnalyzer",
    "StatisticalResult",
    # Results
    "ForkResult",
    "RunResult",
    "BenchmarkComparison",
    "ComparisonEntry",
    # Execution
    "Runner",
    "run_iterations",
    # Errors
    "BenchmarkError",
    "ConfigurationError",
    "ForkedRunError",
    "NoBenchmarksError",
]
