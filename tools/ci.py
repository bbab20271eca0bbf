#!/usr/bin/env python3
# Copyright 2026 Chainparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the chainparse CI checks locally: format, lint, type check, tests with coverage, and build."""

import argparse
import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/"],
    "typecheck": ["uv", "run", "ty", "check", "src/"],
    "tests": ["uv", "run", "pytest", "--cov=chainparse", "--cov-report=term-missing"],
    "build": ["uv", "build"],
}


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps and print a coloured summary."""
    parser = argparse.ArgumentParser(description="Run the chainparse CI checks.")
    parser.add_argument(
        "steps",
        nargs="*",
        help=f"Steps to run (default: all of them, in order). One of: {', '.join(STEPS)}",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first failing step",
    )
    args = parser.parse_args(argv)

    unknown = [name for name in args.steps if name not in STEPS]
    if unknown:
        parser.error(f"unknown step(s): {', '.join(unknown)}")
    selected = args.steps or list(STEPS)
    results: list[tuple[str, bool, float]] = []
    for name in selected:
        passed, elapsed = _run_step(name, STEPS[name])
        results.append((name, passed, elapsed))
        if args.fail_fast and not passed:
            break

    return _print_summary(results)


# ################
# Implementation
# ################

_RULE = "=" * 60


def _run_step(name: str, cmd: list[str]) -> tuple[bool, float]:
    """Run one step from the repository root, returning (passed, seconds)."""
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue(name))
    print(chalk.blue(_RULE))
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=pathlib.Path(__file__).parent.parent)
    return proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> int:
    """Print one PASS/FAIL line per step and return the process exit code."""
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_RULE))
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


if __name__ == "__main__":
    sys.exit(main())
