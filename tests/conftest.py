"""Test configuration for loopbench."""

import os
from typing import Any

import pytest

from loopbench import suite
from loopbench.benchmarking.options import RunnerOptions
from loopbench.suite import LoopState

# Register custom markers
def pytest_configure(config):
    """Register custom markers for pytest."""
    config.addinivalue_line("markers", "integration: mark test as starting a worker interpreter")


# All six measured operations, in declaration order
OPERATIONS = [
    suite.basic_for_loop,
    suite.for_loop_with_cached_size,
    suite.for_loop_with_cached_final_size,
    suite.for_each_loop,
    suite.while_iterator,
    suite.for_each_lambda,
]


class RecordingSink:
    """Sink that records every consumed value in order."""

    def __init__(self) -> None:
        self.values: list[Any] = []

    def consume(self, value: Any) -> None:
        self.values.append(value)


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def default_state() -> LoopState:
    return LoopState()


@pytest.fixture
def fast_options() -> RunnerOptions:
    """In-process options with very short iterations."""
    return RunnerOptions(
        includes=("LoopBenchmark",),
        warmup_iterations=1,
        warmup_time=0.001,
        measurement_iterations=2,
        measurement_time=0.001,
        forks=0,
    )


@pytest.fixture
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove LOOPBENCH_ variables inherited from the caller's shell."""
    for name in list(os.environ):
        if name.startswith("LOOPBENCH_"):
            monkeypatch.delenv(name)
