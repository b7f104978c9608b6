# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostic type shared by every stage of the ACT transpiler."""

# ###############
# Public Interface
# ###############


class TranspileError(Exception):
    """Raised when ACT source text cannot be transpiled.

    Attributes:
        row: 1-based row of the first offending character.
        column: 1-based column of the first offending character.
        message: Human-readable description of the failure.
    """

    def __init__(self, row: int, column: int, message: str) -> None:
        super().__init__(f"Line {row}, column {column}: {message}")
        self.row = row
        self.column = column
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TranspileError):
            return NotImplemented
        return (self.row, self.column, self.message) == (other.row, other.column, other.message)

    def __hash__(self) -> int:
        return hash((self.row, self.column, self.message))

    def __repr__(self) -> str:
        return f"TranspileError(row={self.row}, column={self.column}, message={self.message!r})"
