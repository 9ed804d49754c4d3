"""Command line interface for loopbench.

Usage:
    loopbench run          Run the loop benchmarks and print the report
    loopbench list         List the benchmarks an include filter selects
    loopbench init-config  Write a default configuration file
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from loopbench import __version__
from loopbench.benchmarking.errors import BenchmarkError
from loopbench.benchmarking.options import Mode, TimeUnit
from loopbench.benchmarking.registry import find_benchmarks
from loopbench.benchmarking.runner import Runner
from loopbench.config.environment import get_env_value
from loopbench.config.loaders import default_config, load_runner_options, save_toml
from loopbench.suite import loop_benchmark_options


def _configure_logging() -> None:
    level = str(get_env_value("LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group()
@click.version_option(__version__, prog_name="loopbench")
def main() -> None:
    """loopbench: compare ways of iterating over a sequence."""
    _configure_logging()


@main.command()
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--include", "includes", multiple=True, help="Benchmark name regex (repeatable)")
@click.option("--mode", type=click.Choice([m.value for m in Mode]), default=None)
@click.option("--time-unit", type=click.Choice([u.value for u in TimeUnit]), default=None)
@click.option("--warmup-iterations", type=int, default=None)
@click.option("--warmup-time", type=float, default=None, help="Seconds per warmup iteration")
@click.option("--measurement-iterations", type=int, default=None)
@click.option("--measurement-time", type=float, default=None, help="Seconds per iteration")
@click.option("--forks", type=int, default=None, help="Worker processes; 0 runs in-process")
def run(
    config_path: str | None,
    includes: tuple[str, ...],
    mode: str | None,
    time_unit: str | None,
    warmup_iterations: int | None,
    warmup_time: float | None,
    measurement_iterations: int | None,
    measurement_time: float | None,
    forks: int | None,
) -> None:
    """Run the benchmarks and print the results table."""
    try:
        options = load_runner_options(config_path, base=loop_benchmark_options())
        options = options.replace(
            includes=includes or None,
            mode=mode,
            time_unit=time_unit,
            warmup_iterations=warmup_iterations,
            warmup_time=warmup_time,
            measurement_iterations=measurement_iterations,
            measurement_time=measurement_time,
            forks=forks,
        )
        Runner(options).run()
    except BenchmarkError as e:
        raise click.ClickException(str(e)) from e


@main.command(name="list")
@click.option("--include", "includes", multiple=True, help="Benchmark name regex (repeatable)")
def list_benchmarks(includes: tuple[str, ...]) -> None:
    """List the benchmarks matching the include patterns."""
    try:
        benchmarks = find_benchmarks(includes)
    except BenchmarkError as e:
        raise click.ClickException(str(e)) from e
    if not benchmarks:
        raise click.ClickException("No benchmarks match the include patterns")
    for bench in benchmarks:
        click.echo(bench.name)


@main.command(name="init-config")
@click.argument("output", type=click.Path(dir_okay=False))
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init_config(output: str, force: bool) -> None:
    """Write the default configuration to OUTPUT."""
    path = Path(output)
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")
    save_toml(default_config(loop_benchmark_options()), path)
    click.echo(f"Created configuration at {path}")
