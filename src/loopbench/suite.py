"""Loop iteration micro-benchmarks.

Six ways of visiting every element of the same fixed sequence, each handing
every element to a sink in index order. The operations differ only in the
traversal mechanism:

1. ``basic_for_loop`` queries ``len()`` on every iteration.
2. ``for_loop_with_cached_size`` reads the bound once into a local.
3. ``for_loop_with_cached_final_size`` freezes the bound into a ``range``.
4. ``for_each_loop`` uses the native ``for`` statement.
5. ``while_iterator`` drives an explicit cursor.
6. ``for_each_lambda`` applies a callback to every element.

Run with ``python -m loopbench`` or ``loopbench run``.

Sample report for the fixed configuration. The scores are illustrative:
they depend on the host and the interpreter and vary between runs::

    Benchmark                                       Mode  Cnt       Score         Error  Units
    LoopBenchmark.basic_for_loop                   thrpt    5  11,842.307  ±    412.915  ops/s
    LoopBenchmark.for_each_lambda                  thrpt    5  19,506.118  ±    630.442  ops/s
    LoopBenchmark.for_each_loop                    thrpt    5  17,931.664  ±  1,127.380  ops/s
    LoopBenchmark.for_loop_with_cached_final_size  thrpt    5  14,215.092  ±    508.271  ops/s
    LoopBenchmark.for_loop_with_cached_size        thrpt    5  12,664.853  ±    377.604  ops/s
    LoopBenchmark.while_iterator                   thrpt    5   6,973.210  ±    244.187  ops/s
"""

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Callable

from loopbench.benchmarking.options import Mode, RunnerOptions
from loopbench.benchmarking.registry import benchmark
from loopbench.benchmarking.runner import Runner
from loopbench.sink import Sink

SUITE_NAME = "LoopBenchmark"

DEFAULT_SIZE = 1_000
DEFAULT_VALUE = 42


@dataclass(frozen=True)
class LoopState:
    """Fixture shared read-only by every operation during one run.

    Attributes:
        size: Number of elements.
        value: Value repeated ``size`` times, or None for a state built
            from arbitrary values.
        values: The fixture sequence itself.
    """

    size: int = DEFAULT_SIZE
    value: int | None = DEFAULT_VALUE
    values: tuple[int, ...] = field(default=(), init=False, repr=False)

    def __post_init__(self):
        if self.value is not None:
            object.__setattr__(self, "values", (self.value,) * self.size)

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "LoopState":
        """Build a state over arbitrary values instead of repeated copies."""
        state = cls(size=len(values), value=None)
        object.__setattr__(state, "values", tuple(values))
        return state


class IndexCursor:
    """Explicit cursor over a sequence.

    Holds the sequence and the index of the next element to return.
    """

    def __init__(self, sequence: Sequence[Any]):
        self._sequence = sequence
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._sequence)

    def next(self) -> Any:
        """Advance the cursor and return the element it was on.

        Raises:
            IndexError: If the cursor is exhausted.
        """
        if self._index >= len(self._sequence):
            raise IndexError("cursor is exhausted")
        value = self._sequence[self._index]
        self._index += 1
        return value


def for_each(sequence: Sequence[Any], action: Callable[[Any], None]) -> None:
    """Apply ``action`` to every element of ``sequence`` in order."""
    # deque with maxlen=0 drains the map without storing results
    deque(map(action, sequence), maxlen=0)


@benchmark(SUITE_NAME, LoopState)
def basic_for_loop(state: LoopState, sink: Sink) -> None:
    values = state.values
    i = 0
    while i < len(values):
        sink.consume(values[i])
        i += 1


@benchmark(SUITE_NAME, LoopState)
def for_loop_with_cached_size(state: LoopState, sink: Sink) -> None:
    values = state.values
    i, n = 0, len(values)
    while i < n:
        sink.consume(values[i])
        i += 1


@benchmark(SUITE_NAME, LoopState)
def for_loop_with_cached_final_size(state: LoopState, sink: Sink) -> None:
    values = state.values
    for i in range(len(values)):
        sink.consume(values[i])


@benchmark(SUITE_NAME, LoopState)
def for_each_loop(state: LoopState, sink: Sink) -> None:
    for value in state.values:
        sink.consume(value)


@benchmark(SUITE_NAME, LoopState)
def while_iterator(state: LoopState, sink: Sink) -> None:
    cursor = IndexCursor(state.values)
    while cursor.has_next():
        sink.consume(cursor.next())


@benchmark(SUITE_NAME, LoopState)
def for_each_lambda(state: LoopState, sink: Sink) -> None:
    for_each(state.values, sink.consume)


def loop_benchmark_options() -> RunnerOptions:
    """Fixed experiment parameters for the loop comparison."""
    return RunnerOptions(
        includes=(SUITE_NAME,),
        mode=Mode.THROUGHPUT,
        warmup_iterations=5,
        warmup_time=5.0,
        measurement_iterations=5,
        measurement_time=5.0,
        interpreter_args=("-O",),
        forks=1,
    )


def main() -> int:
    """Run the loop comparison with the fixed experiment parameters."""
    Runner(loop_benchmark_options()).run()
    return 0
