"""loopbench: a micro-benchmark comparing ways of iterating over a sequence.

Six semantically equivalent traversals of the same fixed sequence are
measured side by side, each forwarding every element to a side-effecting
sink, so only the traversal mechanism varies between them.
"""

from loopbench.sink import Blackhole, Sink
from loopbench.suite import (
    SUITE_NAME,
    IndexCursor,
    LoopState,
    for_each,
    loop_benchmark_options,
)

__version__ = "0.1.0"

__all__ = [
    "Blackhole",
    "Sink",
    "SUITE_NAME",
    "IndexCursor",
    "LoopState",
    "for_each",
    "loop_benchmark_options",
]
