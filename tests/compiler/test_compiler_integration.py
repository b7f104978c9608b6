# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Integration tests for the ACT transpiler pipeline.

These tests run the full pipeline (tokenizing, parsing, and code generation)
against real .act files stored in tests/data/. Each positive example sits next
to the .bat script it must produce; each negative example starts with an
``# expect: row, column: message`` comment naming the diagnostic it must raise.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from act import TranspileError, transpile
from act.compiler.pipeline import format_error

# ###############
# Helpers
# ###############

DATA_DIR = Path(__file__).parent.parent / "data"
POSITIVE_DIR = DATA_DIR / "positive"
NEGATIVE_DIR = DATA_DIR / "negative"

_EXPECT_PREFIX = "# expect: "


def _read(path: Path) -> str:
    # Read bytes so that line endings are compared exactly.
    return path.read_bytes().decode("utf-8")


def _expected_error(path: Path) -> str:
    """Return the '[Error] row, column: message' text declared on the first line."""
    first_line = _read(path).split("\n", 1)[0]
    assert first_line.startswith(_EXPECT_PREFIX), f"{path.name}: missing expectation comment"
    return "[Error] " + first_line[len(_EXPECT_PREFIX) :]


# ###############
# Positive Examples
# ###############


@pytest.mark.parametrize("source", sorted(POSITIVE_DIR.glob("*.act")), ids=lambda p: p.stem)
def test_positive_example(source: Path) -> None:
    result = transpile(_read(source))
    assert result.success is True, f"{source.name}: {result.value}"
    assert result.value == _read(source.with_suffix(".bat"))


# ###############
# Negative Examples
# ###############


@pytest.mark.parametrize("source", sorted(NEGATIVE_DIR.glob("*.act")), ids=lambda p: p.stem)
def test_negative_example(source: Path) -> None:
    result = transpile(_read(source))
    assert result.success is False, f"{source.name}: expected a diagnostic"
    assert isinstance(result.value, TranspileError)
    assert format_error(result.value) == _expected_error(source)


def test_every_positive_example_has_expected_script() -> None:
    for source in POSITIVE_DIR.glob("*.act"):
        assert source.with_suffix(".bat").exists(), f"{source.name}: missing expected script"
