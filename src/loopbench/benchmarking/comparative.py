"""Relative comparison of benchmark results.

Ranks the benchmarks of one run against the best-scoring one, so the
report can show how each traversal mechanism fares relative to the
fastest.
"""

from dataclasses import dataclass, field

from loopbench.benchmarking.options import Mode
from loopbench.benchmarking.results import RunResult
from loopbench.benchmarking.statistics import StatisticalAnalyzer, StatisticalResult


@dataclass
class ComparisonEntry:
    """One benchmark's standing relative to the best.

    Attributes:
        benchmark: Qualified benchmark name.
        ratio: Score relative to the best benchmark, where 1.0 is the best
            and lower is worse regardless of mode.
        significant: Whether the difference to the best passes Welch's t-test.
    """

    benchmark: str
    ratio: float
    significant: bool


@dataclass
class BenchmarkComparison:
    """Comparison of several benchmarks measured in the same mode.

    Attributes:
        mode: Shared measurement mode.
        summaries: Aggregated statistics per benchmark name.
        best: Name of the best benchmark, None when empty.
        worst: Name of the worst benchmark, None when empty.
        entries: Relative standing per benchmark, best first.
    """

    mode: Mode
    summaries: dict[str, StatisticalResult] = field(default_factory=dict)
    best: str | None = None
    worst: str | None = None
    entries: list[ComparisonEntry] = field(default_factory=list)

    @classmethod
    def from_results(
        cls, results: list[RunResult], analyzer: StatisticalAnalyzer | None = None
    ) -> "BenchmarkComparison":
        """Compare the given results.

        Higher scores win in throughput mode, lower scores in average time
        mode.
        """
        analyzer = analyzer or StatisticalAnalyzer()
        mode = results[0].options.mode if results else Mode.THROUGHPUT
        comparison = cls(mode=mode)
        if not results:
            return comparison

        scores = {r.benchmark: r.scores() for r in results}
        comparison.summaries = {name: analyzer.summarize(s) for name, s in scores.items()}

        higher_is_better = mode is Mode.THROUGHPUT
        ranked = sorted(
            comparison.summaries,
            key=lambda name: comparison.summaries[name].mean,
            reverse=higher_is_better,
        )
        comparison.best, comparison.worst = ranked[0], ranked[-1]

        best_mean = comparison.summaries[comparison.best].mean
        for name in ranked:
            mean = comparison.summaries[name].mean
            if higher_is_better:
                ratio = mean / best_mean if best_mean > 0 else 0.0
            else:
                ratio = best_mean / mean if mean > 0 else 0.0
            significant = name != comparison.best and analyzer.is_significant(
                scores[comparison.best], scores[name]
            )
            comparison.entries.append(ComparisonEntry(name, ratio, significant))

        return comparison
