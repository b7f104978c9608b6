# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""ACT: a small arithmetic scripting language transpiled to Windows batch scripts."""

from act.compiler import TranspileError, TranspileResult, transpile

__all__ = [
    "transpile",
    "TranspileResult",
    "TranspileError",
]
