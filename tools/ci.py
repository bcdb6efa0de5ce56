#!/usr/bin/env python3
# Copyright 2026 ctoparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, example models, tests, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############


def steps() -> list[tuple[str, list[str]]]:
    """Return the CI steps as (name, command) pairs."""
    return [
        ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
        ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
        ("Type check", ["uv", "run", "ty", "check", "src/"]),
        ("Example models", ["uv", "run", "ctoparse", "check", *_example_models()]),
        ("Tests", ["uv", "run", "pytest", "--cov=ctoparse", "--cov-report=term-missing"]),
        ("Build", ["uv", "build"]),
    ]


def main() -> int:
    """Run all CI steps and report results."""
    results: list[tuple[str, bool, float]] = []
    sep = "=" * 60

    for name, cmd in steps():
        print(f"\n{chalk.blue(sep)}")
        print(chalk.blue(name))
        print(chalk.blue(sep))
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    print(f"\n{chalk.blue(sep)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(sep))
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))

    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _repo_root() -> Path:
    return Path(__file__).parent.parent


def _example_models() -> list[str]:
    return sorted(str(p.relative_to(_repo_root())) for p in (_repo_root() / "examples").glob("*.cto"))


if __name__ == "__main__":
    sys.exit(main())
