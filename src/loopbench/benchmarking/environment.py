"""Host fingerprint printed in the run header.

Results from micro-benchmarks mean little without the host they were
measured on, so every run starts by describing the interpreter, the OS and
the current git commit.
"""

import os
import platform
import subprocess
import sys
from datetime import UTC, datetime
from typing import Any


def capture_environment() -> dict[str, Any]:
    """Capture the environment a run executes in.

    Returns:
        Dictionary containing timestamp, git commit, Python version and
        implementation, CPU count and OS info.
    """
    return {
        "timestamp": datetime.now(UTC).isoformat(),
        "git_commit": _get_git_commit(),
        "python_version": platform.python_version(),
        "python_implementation": platform.python_implementation(),
        "executable": sys.executable,
        "cpu_count": os.cpu_count(),
        "os": {
            "system": platform.system(),
            "release": platform.release(),
            "machine": platform.machine(),
        },
    }


def format_environment(env: dict[str, Any]) -> list[str]:
    """Render an environment dict as ``# ``-prefixed header lines."""
    os_info = env.get("os", {})
    return [
        f"# HOST: {os_info.get('system', '?')} {os_info.get('release', '')} "
        f"({os_info.get('machine', '?')}), {env.get('cpu_count', '?')} CPUs",
        f"# Python: {env.get('python_implementation', '?')} {env.get('python_version', '?')}",
        f"# Commit: {env.get('git_commit', 'unknown')}",
        f"# Started: {env.get('timestamp', '?')}",
    ]


def _get_git_commit() -> str:
    """Get current git commit hash, or 'unknown' if not in a repo."""
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"
