"""Side-effecting value consumers for measured operations.

Every measured loop hands each element it visits to a sink. The sink has
to do something observable with the value, otherwise the loop body is
indistinguishable from an empty one and the measurement says nothing about
the traversal mechanism.
"""

from typing import Any, Protocol


class Sink(Protocol):
    """Anything that can consume one value at a time."""

    def consume(self, value: Any) -> None: ...


class Blackhole:
    """Sink that folds every consumed value into observable state.

    Attributes:
        count: Number of values consumed so far.
        checksum: Running hash of all consumed values, order sensitive.
    """

    def __init__(self) -> None:
        self.count = 0
        self.checksum = 0

    def consume(self, value: Any) -> None:
        """Consume one value."""
        self.count += 1
        self.checksum = (self.checksum * 31 + hash(value)) & 0xFFFFFFFF

    def reset(self) -> None:
        self.count = 0
        self.checksum = 0

    def __repr__(self) -> str:
        return f"Blackhole(count={self.count}, checksum={self.checksum:#010x})"
