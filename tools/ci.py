#!/usr/bin/env python3
# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, tests, sample programs, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=act", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run all CI steps and report results."""
    # Sample programs run through the installed CLI, before packaging.
    steps = list(STEPS)
    steps.insert(-1, ("Sample programs", ["uv", "run", "act", "check", *_sample_programs()]))
    results: list[tuple[str, bool, float]] = []

    for name, cmd in steps:
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("  Summary")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(colour(f"  {status}  {name} ({elapsed:.1f}s)"))

    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


def _repo_root() -> Path:
    return Path(__file__).parent.parent


def _sample_programs() -> list[str]:
    """Return the positive example programs, relative to the repository root."""
    root = _repo_root()
    return sorted(str(path.relative_to(root)) for path in (root / "tests" / "data" / "positive").glob("*.act"))


if __name__ == "__main__":
    sys.exit(main())
