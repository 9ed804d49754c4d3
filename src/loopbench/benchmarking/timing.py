"""Time-bounded iteration timing.

One iteration calls the measured operation back to back until the
iteration duration has elapsed, then reports how many operations completed
and how long that took. Uses ``time.perf_counter()`` exclusively.
"""

import time
from dataclasses import dataclass
from collections.abc import Callable

from loopbench.benchmarking.options import Mode, TimeUnit


@dataclass
class IterationResult:
    """Result of one warmup or measurement iteration.

    Attributes:
        ops: Number of operations completed.
        wall_clock_sec: Elapsed time for those operations.
    """

    ops: int
    wall_clock_sec: float

    def score(self, mode: Mode, time_unit: TimeUnit = TimeUnit.SECONDS) -> float:
        """Score of this iteration in the given mode and unit.

        Throughput is operations per time unit; average time is time units
        per operation.
        """
        if mode is Mode.THROUGHPUT:
            if self.wall_clock_sec <= 0:
                return 0.0
            return self.ops / self.wall_clock_sec / time_unit.per_second
        if self.ops == 0:
            return 0.0
        return self.wall_clock_sec / self.ops * time_unit.per_second


class TimingCollector:
    """Measures time-bounded iterations of a zero-argument callable.

    Args:
        clock: Monotonic clock returning seconds. Defaults to
            ``time.perf_counter``.
    """

    def __init__(self, clock: Callable[[], float] | None = None):
        self.clock = clock or time.perf_counter

    def measure_iteration(self, fn: Callable[[], None], duration_sec: float) -> IterationResult:
        """Call ``fn`` repeatedly until ``duration_sec`` has elapsed.

        At least one call is always made, so a duration shorter than a
        single call still yields a result.

        Args:
            fn: Operation to measure.
            duration_sec: Target iteration duration in seconds.

        Returns:
            IterationResult with the completed operation count and elapsed time.
        """
        ops = 0
        start = self.clock()
        deadline = start + duration_sec

        while True:
            fn()
            ops += 1
            now = self.clock()
            if now >= deadline:
                break

        return IterationResult(ops=ops, wall_clock_sec=now - start)
