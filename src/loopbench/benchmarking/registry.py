"""Benchmark registry.

Measured operations are registered with the ``@benchmark`` decorator and
looked up by qualified name (``"<group>.<function>"``). Forked workers
re-import the defining module, which repopulates the registry in the child
process.
"""

import importlib
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable

from loopbench.benchmarking.options import compile_include

# Measured operation: (state, sink) -> None
BenchmarkFunction = Callable[[Any, Any], None]
StateFactory = Callable[[], Any]

_BENCHMARK_REGISTRY: dict[str, "Benchmark"] = {}


@dataclass(frozen=True)
class Benchmark:
    """A registered measured operation.

    Attributes:
        name: Qualified name, ``"<group>.<function>"``.
        function: The operation, called as ``function(state, sink)``.
        state_factory: Builds the shared state for one run of the operation.
        module: Module that defines the operation.
    """

    name: str
    function: BenchmarkFunction
    state_factory: StateFactory
    module: str


def benchmark(
    group: str, state_factory: StateFactory, name: str | None = None
) -> Callable[[BenchmarkFunction], BenchmarkFunction]:
    """Register a measured operation with the registry.

    Args:
        group: Group the operation belongs to, usually the suite name.
        state_factory: Zero-argument callable building the operation's state.
        name: Optional custom name. Defaults to the function name.

    Returns:
        A decorator that registers the function and returns it unchanged.

    Examples:
        ```python
        @benchmark("LoopBenchmark", LoopState)
        def for_each_loop(state, sink):
            for value in state.values:
                sink.consume(value)
        ```
    """

    def decorator(fn: BenchmarkFunction) -> BenchmarkFunction:
        qualified = f"{group}.{name or fn.__name__}"
        _BENCHMARK_REGISTRY[qualified] = Benchmark(
            name=qualified,
            function=fn,
            state_factory=state_factory,
            module=fn.__module__,
        )
        return fn

    return decorator


def get_benchmark(name: str, module: str | None = None) -> Benchmark:
    """Look up a registered benchmark by qualified name.

    Args:
        name: Qualified benchmark name.
        module: Module to import first when the name is not registered yet.

    Returns:
        The registered Benchmark.

    Raises:
        KeyError: If no benchmark with that name is registered.
    """
    if name not in _BENCHMARK_REGISTRY and module is not None:
        importlib.import_module(module)
    if name not in _BENCHMARK_REGISTRY:
        raise KeyError(f"Benchmark not registered: {name}")
    return _BENCHMARK_REGISTRY[name]


def find_benchmarks(includes: Iterable[str] = ()) -> list[Benchmark]:
    """Return registered benchmarks matching any include pattern.

    Patterns are regular expressions searched anywhere in the qualified
    name. No patterns selects every registered benchmark.

    Raises:
        ConfigurationError: If a pattern is not a valid regular expression.
    """
    patterns = [compile_include(p) for p in includes]
    selected = [
        bench
        for name, bench in _BENCHMARK_REGISTRY.items()
        if not patterns or any(p.search(name) for p in patterns)
    ]
    return sorted(selected, key=lambda b: b.name)


def unregister_benchmark(name: str) -> None:
    """Remove a benchmark from the registry. Missing names are ignored."""
    _BENCHMARK_REGISTRY.pop(name, None)
