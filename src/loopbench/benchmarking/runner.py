"""Benchmark runner: main orchestrator for a run.

Selects benchmarks by include pattern, runs warmup and measurement
iterations for each one (in the current process or in isolated worker
processes), then prints the results table and a relative comparison.
"""

import functools
import json
import logging
import subprocess
import sys
from typing import TextIO

from loopbench.benchmarking.comparative import BenchmarkComparison
from loopbench.benchmarking.environment import capture_environment, format_environment
from loopbench.benchmarking.errors import ForkedRunError, NoBenchmarksError
from loopbench.benchmarking.options import RunnerOptions
from loopbench.benchmarking.registry import Benchmark, find_benchmarks
from loopbench.benchmarking.report import (
    format_comparison,
    format_iteration,
    format_results,
    format_score,
)
from loopbench.benchmarking.results import ForkResult, RunResult
from loopbench.benchmarking.statistics import StatisticalAnalyzer
from loopbench.benchmarking.timing import TimingCollector
from loopbench.sink import Blackhole

logger = logging.getLogger(__name__)

WORKER_MODULE = "loopbench.benchmarking.worker"


def run_iterations(
    bench: Benchmark,
    options: RunnerOptions,
    collector: TimingCollector | None = None,
    progress: TextIO | None = None,
) -> ForkResult:
    """Run the warmup and measurement iterations of one benchmark.

    A fresh state and sink are built once and shared by every iteration.

    Args:
        bench: Benchmark to run.
        options: Iteration counts, durations and scoring mode.
        collector: Timing collector. Defaults to a perf_counter collector.
        progress: Stream receiving one line per iteration. None is silent.

    Returns:
        ForkResult with warmup and measurement iterations.
    """
    collector = collector or TimingCollector()
    state = bench.state_factory()
    sink = Blackhole()
    op = functools.partial(bench.function, state, sink)
    result = ForkResult()

    for i in range(1, options.warmup_iterations + 1):
        iteration = collector.measure_iteration(op, options.warmup_time)
        result.warmup.append(iteration)
        _print_progress(progress, "# Warmup Iteration", i, iteration, options)

    for i in range(1, options.measurement_iterations + 1):
        iteration = collector.measure_iteration(op, options.measurement_time)
        result.measurement.append(iteration)
        _print_progress(progress, "Iteration", i, iteration, options)

    logger.debug("%s consumed %d values (%r)", bench.name, sink.count, sink)
    return result


def _print_progress(
    stream: TextIO | None, label: str, index: int, iteration, options: RunnerOptions
) -> None:
    if stream is None:
        return
    score = iteration.score(options.mode, options.time_unit)
    print(format_iteration(label, index, score, options.score_unit), file=stream, flush=True)


class Runner:
    """Orchestrates a benchmark run.

    Args:
        options: Experiment parameters.
        output: Stream for progress and the report. Defaults to stdout.
        analyzer: Statistics used to aggregate scores.
        collector: Timing collector for in-process runs.
    """

    def __init__(
        self,
        options: RunnerOptions,
        output: TextIO | None = None,
        analyzer: StatisticalAnalyzer | None = None,
        collector: TimingCollector | None = None,
    ) -> None:
        self.options = options
        self.output = output or sys.stdout
        self.analyzer = analyzer or StatisticalAnalyzer()
        self.collector = collector or TimingCollector()

    def run(self) -> list[RunResult]:
        """Run every selected benchmark and print the report.

        Returns:
            One RunResult per benchmark, sorted by name.

        Raises:
            NoBenchmarksError: If the include patterns match nothing.
            ForkedRunError: If a worker process fails.
        """
        benchmarks = find_benchmarks(self.options.includes)
        if not benchmarks:
            raise NoBenchmarksError(self.options.includes)

        logger.info("Running %d benchmarks with %s", len(benchmarks), self.options)
        for line in format_environment(capture_environment()):
            self._print(line)

        results = [self.run_benchmark(bench) for bench in benchmarks]

        self._print("")
        self._print(format_results(results, self.analyzer))
        comparison = format_comparison(BenchmarkComparison.from_results(results, self.analyzer))
        if len(results) > 1 and comparison:
            self._print("")
            self._print(comparison)

        logger.info("Run completed")
        return results

    def run_benchmark(self, bench: Benchmark) -> RunResult:
        """Run one benchmark across all configured forks."""
        opts = self.options
        self._print("")
        self._print(f"# Benchmark: {bench.name}")
        mode_label = opts.mode.name.replace("_", " ").title()
        self._print(f"# Benchmark mode: {mode_label}, {opts.score_unit}")
        self._print(f"# Warmup: {opts.warmup_iterations} iterations, {opts.warmup_time:g} s each")
        self._print(
            f"# Measurement: {opts.measurement_iterations} iterations, "
            f"{opts.measurement_time:g} s each"
        )

        result = RunResult(benchmark=bench.name, options=opts)
        if opts.forks == 0:
            self._print("# Fork: N/A, test runs in the host process")
            result.forks.append(run_iterations(bench, opts, self.collector, self.output))
        else:
            for fork in range(1, opts.forks + 1):
                self._print(f"# Fork: {fork} of {opts.forks}")
                result.forks.append(self._run_fork(bench, fork))

        summary = result.summarize(self.analyzer)
        error = format_score(summary.error)
        score = format_score(summary.mean) + (f" ±({error})" if error else "")
        self._print(f'Result "{bench.name}": {score} {opts.score_unit}')
        return result

    def _run_fork(self, bench: Benchmark, fork: int) -> ForkResult:
        """Run one benchmark in an isolated worker interpreter.

        The request goes to the worker as JSON on stdin and the iterations
        come back as JSON on stdout. The worker's stderr is inherited so its
        progress lines appear as they happen.
        """
        request = json.dumps(
            {"benchmark": bench.name, "module": bench.module, "options": self.options.to_dict()}
        )
        command = [sys.executable, *self.options.interpreter_args, "-m", WORKER_MODULE]
        logger.info("Forking %s (fork %d): %s", bench.name, fork, " ".join(command))

        self.output.flush()
        proc = subprocess.run(
            command, input=request, stdout=subprocess.PIPE, text=True, check=False
        )
        if proc.returncode != 0:
            raise ForkedRunError(bench.name, fork, proc.returncode)
        return ForkResult.from_dict(json.loads(proc.stdout))

    def _print(self, line: str) -> None:
        print(line, file=self.output)
