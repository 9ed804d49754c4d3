"""Benchmark result containers.

``ForkResult`` holds the iterations of one worker (or of the in-process
run when forking is disabled). ``RunResult`` pools the forks of one
benchmark and aggregates their measurement scores.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

from loopbench.benchmarking.options import RunnerOptions
from loopbench.benchmarking.statistics import StatisticalAnalyzer, StatisticalResult
from loopbench.benchmarking.timing import IterationResult


@dataclass
class ForkResult:
    """Iterations of a single fork.

    Attributes:
        warmup: Warmup iterations, excluded from scoring.
        measurement: Measurement iterations.
    """

    warmup: list[IterationResult] = field(default_factory=list)
    measurement: list[IterationResult] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ForkResult":
        return cls(
            warmup=[IterationResult(**it) for it in data.get("warmup", [])],
            measurement=[IterationResult(**it) for it in data.get("measurement", [])],
        )


@dataclass
class RunResult:
    """Result of running one benchmark across all its forks.

    Attributes:
        benchmark: Qualified benchmark name.
        options: Options the benchmark ran with.
        forks: Per-fork iteration results.
    """

    benchmark: str
    options: RunnerOptions
    forks: list[ForkResult] = field(default_factory=list)

    def scores(self) -> list[float]:
        """Measurement scores of all forks, in fork then iteration order."""
        return [
            iteration.score(self.options.mode, self.options.time_unit)
            for fork in self.forks
            for iteration in fork.measurement
        ]

    def summarize(self, analyzer: StatisticalAnalyzer | None = None) -> StatisticalResult:
        """Aggregate the pooled measurement scores."""
        return (analyzer or StatisticalAnalyzer()).summarize(self.scores())
