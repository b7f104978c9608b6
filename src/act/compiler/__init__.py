# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for ACT source: tokenizing, parsing, and code generation."""

from act.compiler.build import BuildError, BuildOutcome, build_project, transpile_file
from act.compiler.errors import TranspileError
from act.compiler.parser import parse
from act.compiler.pipeline import TranspileResult, format_error, transpile
from act.compiler.tokenizer import Token, TokenType, tokenize

__all__ = [
    "tokenize",
    "Token",
    "TokenType",
    "parse",
    "transpile",
    "TranspileResult",
    "TranspileError",
    "format_error",
    "transpile_file",
    "build_project",
    "BuildOutcome",
    "BuildError",
]
