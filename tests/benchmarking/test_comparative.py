"""Tests for BenchmarkComparison."""

import pytest

from loopbench.benchmarking.comparative import BenchmarkComparison
from loopbench.benchmarking.options import Mode, RunnerOptions
from tests.benchmarking.conftest import make_result_for_scores


class TestBenchmarkComparison:
    """Tests for BenchmarkComparison.from_results()."""

    def test_empty_results(self):
        comparison = BenchmarkComparison.from_results([])
        assert comparison.best is None
        assert comparison.worst is None
        assert comparison.entries == []

    def test_throughput_best_is_highest(self):
        results = [
            make_result_for_scores("A.slow", [50, 51, 49]),
            make_result_for_scores("A.fast", [100, 101, 99]),
        ]
        comparison = BenchmarkComparison.from_results(results)

        assert comparison.mode is Mode.THROUGHPUT
        assert comparison.best == "A.fast"
        assert comparison.worst == "A.slow"

    def test_entries_ranked_best_first_with_ratios(self):
        results = [
            make_result_for_scores("A.slow", [50, 51, 49]),
            make_result_for_scores("A.fast", [100, 101, 99]),
        ]
        comparison = BenchmarkComparison.from_results(results)

        assert [e.benchmark for e in comparison.entries] == ["A.fast", "A.slow"]
        assert comparison.entries[0].ratio == pytest.approx(1.0)
        assert comparison.entries[1].ratio == pytest.approx(0.5)

    def test_clear_difference_is_significant(self):
        results = [
            make_result_for_scores("A.slow", [50, 51, 49, 50, 50]),
            make_result_for_scores("A.fast", [100, 101, 99, 100, 100]),
        ]
        comparison = BenchmarkComparison.from_results(results)

        assert comparison.entries[0].significant is False
        assert comparison.entries[1].significant is True

    def test_noise_is_not_significant(self):
        results = [
            make_result_for_scores("A.one", [100, 110, 90, 105, 95]),
            make_result_for_scores("A.two", [101, 109, 91, 104, 96]),
        ]
        comparison = BenchmarkComparison.from_results(results)
        assert all(not e.significant for e in comparison.entries)

    def test_average_time_best_is_lowest(self):
        options = RunnerOptions(mode=Mode.AVERAGE_TIME)
        # One op per second gives 1 s/op, four ops per second 0.25 s/op
        results = [
            make_result_for_scores("A.slow", [1, 1, 1], options),
            make_result_for_scores("A.fast", [4, 4, 4], options),
        ]
        comparison = BenchmarkComparison.from_results(results)

        assert comparison.best == "A.fast"
        assert comparison.entries[1].benchmark == "A.slow"
        assert comparison.entries[1].ratio == pytest.approx(0.25)

    def test_summaries_per_benchmark(self):
        results = [make_result_for_scores("A.one", [10, 20, 30])]
        comparison = BenchmarkComparison.from_results(results)
        assert comparison.summaries["A.one"].mean == pytest.approx(20.0)
