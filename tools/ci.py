#!/usr/bin/env python3
# Copyright 2026 replcheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local CI chain for replcheck: format, lint, tests with coverage, build.

Pass step names to run a subset, e.g. ``tools/ci.py lint tests``.
"""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"],
    "tests": ["uv", "run", "pytest", "--cov=replcheck", "--cov-report=term-missing"],
    "build": ["uv", "build"],
}


def main(argv: list[str]) -> int:
    """Run the selected CI steps (all by default) and print a summary."""
    unknown = [name for name in argv if name not in STEPS]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}. Choose from: {', '.join(STEPS)}"))
        return 2

    selected = argv or list(STEPS)
    results = [_run_step(name, STEPS[name]) for name in selected]

    print(f"\n{_banner('Summary')}")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = Path(__file__).resolve().parent.parent


def _banner(title: str) -> str:
    sep = chalk.blue("=" * 60)
    return f"{sep}\n{chalk.blue(title)}\n{sep}"


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    print(f"\n{_banner(name)}")
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_REPO_ROOT)
    return name, proc.returncode == 0, time.monotonic() - start


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
