"""Text report for benchmark runs."""

import math

from loopbench.benchmarking.comparative import BenchmarkComparison
from loopbench.benchmarking.results import RunResult
from loopbench.benchmarking.statistics import StatisticalAnalyzer

_HEADERS = ("Benchmark", "Mode", "Cnt", "Score", "", "Error", "Units")


def format_score(value: float) -> str:
    if math.isnan(value):
        return ""
    return f"{value:,.3f}"


def format_iteration(label: str, index: int, score: float, unit: str) -> str:
    """Progress line for one iteration, e.g. ``# Warmup Iteration   1: 12.345 ops/s``."""
    return f"{label} {index:3d}: {format_score(score)} {unit}"


def format_results(
    results: list[RunResult], analyzer: StatisticalAnalyzer | None = None
) -> str:
    """Render the results table, one row per benchmark sorted by name.

    Args:
        results: Results to render.
        analyzer: Analyzer used to aggregate scores.

    Returns:
        The table as a single string without trailing newline.
    """
    analyzer = analyzer or StatisticalAnalyzer()
    rows: list[tuple[str, ...]] = []
    for result in sorted(results, key=lambda r: r.benchmark):
        summary = result.summarize(analyzer)
        error = format_score(summary.error)
        rows.append(
            (
                result.benchmark,
                result.options.mode.value,
                str(summary.n),
                format_score(summary.mean),
                "±" if error else "",
                error,
                result.options.score_unit,
            )
        )

    widths = [max(len(row[i]) for row in [_HEADERS, *rows]) for i in range(len(_HEADERS))]

    def render(row: tuple[str, ...]) -> str:
        name, *rest = row
        cells = [name.ljust(widths[0])]
        cells += [cell.rjust(width) for cell, width in zip(rest[:-1], widths[1:-1])]
        cells.append(rest[-1].ljust(widths[-1]))
        return "  ".join(cells).rstrip()

    return "\n".join(render(row) for row in [_HEADERS, *rows])


def format_comparison(comparison: BenchmarkComparison) -> str:
    """Render each benchmark relative to the best one."""
    if comparison.best is None:
        return ""
    lines = [f"Relative to {comparison.best} ({comparison.mode.value}):"]
    width = max(len(entry.benchmark) for entry in comparison.entries)
    for entry in comparison.entries:
        if entry.benchmark == comparison.best or entry.significant:
            marker = ""
        else:
            marker = "  (not significant)"
        lines.append(f"  {entry.benchmark.ljust(width)}  {entry.ratio:6.1%}{marker}")
    return "\n".join(lines)
