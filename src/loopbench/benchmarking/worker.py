"""Worker process entry point for forked benchmark runs.

Reads a JSON request from stdin::

    {"benchmark": "<qualified name>", "module": "<defining module>", "options": {...}}

runs the benchmark's iterations and writes the resulting ForkResult as JSON
to stdout. Progress lines go to stderr.
"""

import json
import sys
from typing import TextIO

from loopbench.benchmarking.options import RunnerOptions
from loopbench.benchmarking.registry import get_benchmark
from loopbench.benchmarking.runner import run_iterations


def main(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    request = json.loads(stdin.read())
    options = RunnerOptions.from_config(request["options"])
    bench = get_benchmark(request["benchmark"], module=request.get("module"))

    result = run_iterations(bench, options, progress=stderr)

    json.dump(result.to_dict(), stdout)
    stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
