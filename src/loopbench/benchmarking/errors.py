"""Exceptions raised by the benchmark runner."""


class BenchmarkError(Exception):
    """Base class for runner failures."""

    pass


class ConfigurationError(BenchmarkError):
    """Exception raised when runner options are invalid."""

    pass


class NoBenchmarksError(BenchmarkError):
    """Exception raised when the include patterns match no benchmark."""

    def __init__(self, includes: tuple[str, ...]):
        self.includes = includes
        patterns = ", ".join(includes) if includes else "<all>"
        super().__init__(f"No benchmarks to run; check the include patterns: {patterns}")


class ForkedRunError(BenchmarkError):
    """Exception raised when a forked worker process fails."""

    def __init__(self, benchmark: str, fork: int, returncode: int):
        self.benchmark = benchmark
        self.fork = fork
        self.returncode = returncode
        super().__init__(
            f"Fork {fork} of benchmark '{benchmark}' exited with status {returncode}"
        )
