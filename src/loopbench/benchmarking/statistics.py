"""Statistical analysis for benchmark measurements.

Scores are summarized with a Student-t confidence interval at 99.9%, and
the reported error is the half-width of that interval. With a single
sample there is no interval and the error is NaN.
"""

import math
from dataclasses import dataclass
from collections.abc import Sequence

import numpy as np
from scipy import stats as scipy_stats

# Confidence level of the reported error margin.
CONFIDENCE_LEVEL: float = 0.999

# Coefficient of variation threshold for measurement stability.
# CV < this value → "stable" measurement (low noise).
STABILITY_CV_THRESHOLD: float = 0.10

# Significance level for comparing two benchmarks.
SIGNIFICANCE_ALPHA: float = 0.05


@dataclass
class StatisticalResult:
    """Summary statistics with confidence interval.

    Attributes:
        mean: Arithmetic mean.
        median: Median value.
        std: Sample standard deviation (ddof=1).
        min: Minimum value.
        max: Maximum value.
        cv: Coefficient of variation (std / mean).
        error: Half-width of the confidence interval, NaN for one sample.
        ci_lower: Lower confidence bound.
        ci_upper: Upper confidence bound.
        n: Number of samples.
        is_stable: True when CV < 10%.
    """

    mean: float
    median: float
    std: float
    min: float
    max: float
    cv: float
    error: float
    ci_lower: float
    ci_upper: float
    n: int
    is_stable: bool


class StatisticalAnalyzer:
    """Statistical analysis for benchmark measurements.

    Provides:
    - Summary statistics with a Student-t confidence interval
    - Welch's t-test for comparing two benchmarks (unequal variances)

    Args:
        confidence: Confidence level of the interval.
    """

    def __init__(self, confidence: float = CONFIDENCE_LEVEL):
        self._confidence = confidence

    def summarize(self, samples: Sequence[float]) -> StatisticalResult:
        """Compute summary statistics with confidence interval.

        Args:
            samples: Sequence of measurement values (at least 1).

        Returns:
            StatisticalResult with all computed statistics.

        Raises:
            ValueError: If ``samples`` is empty.
        """
        if len(samples) == 0:
            raise ValueError("Cannot summarize an empty sample")

        arr = np.array(samples, dtype=np.float64)
        n = len(arr)
        mean = float(np.mean(arr))
        median = float(np.median(arr))
        std = float(np.std(arr, ddof=1)) if n > 1 else 0.0
        cv = std / mean if mean != 0 else 0.0

        if n > 1:
            t_crit = float(scipy_stats.t.ppf(1 - (1 - self._confidence) / 2, n - 1))
            error = t_crit * std / math.sqrt(n)
            ci_lower, ci_upper = mean - error, mean + error
        else:
            error = math.nan
            ci_lower, ci_upper = mean, mean

        return StatisticalResult(
            mean=mean,
            median=median,
            std=std,
            min=float(np.min(arr)),
            max=float(np.max(arr)),
            cv=cv,
            error=error,
            ci_lower=ci_lower,
            ci_upper=ci_upper,
            n=n,
            is_stable=cv < STABILITY_CV_THRESHOLD,
        )

    def welch_t_test(self, a: Sequence[float], b: Sequence[float]) -> tuple[float, float]:
        """Welch's t-test for unequal variances.

        Args:
            a: Reference measurements.
            b: Compared measurements.

        Returns:
            Tuple of (t_statistic, p_value). NaN when either side has fewer
            than two samples.
        """
        if len(a) < 2 or len(b) < 2:
            return (math.nan, math.nan)
        result = scipy_stats.ttest_ind(a, b, equal_var=False)
        return (float(result.statistic), float(result.pvalue))

    def is_significant(self, a: Sequence[float], b: Sequence[float]) -> bool:
        """True when ``a`` and ``b`` differ at the SIGNIFICANCE_ALPHA level."""
        _, p_value = self.welch_t_test(a, b)
        return not math.isnan(p_value) and p_value < SIGNIFICANCE_ALPHA
