#!/usr/bin/env python3
# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local CI pipeline: format, lint, type check, tests, and build."""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=fixturegen", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]

RULE_WIDTH = 60


def main() -> int:
    """Run every step, even after a failure, and print a summary."""
    results = [_run_step(name, cmd) for name, cmd in STEPS]
    _print_banner("Summary")
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        print(color(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    _print_banner(name)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=pathlib.Path(__file__).parent.parent)
    return name, proc.returncode == 0, time.monotonic() - start


def _print_banner(title: str) -> None:
    rule = chalk.blue("=" * RULE_WIDTH)
    print(f"\n{rule}")
    print(chalk.blue(f"  {title}"))
    print(rule)


if __name__ == "__main__":
    sys.exit(main())
