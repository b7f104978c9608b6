# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Single entry point running the tokenizer and parser over ACT source text."""

from pydantic import BaseModel, ConfigDict, model_validator

from act.compiler.errors import TranspileError
from act.compiler.parser import parse
from act.compiler.tokenizer import tokenize

# ###############
# Public Interface
# ###############


class TranspileResult(BaseModel):
    """Outcome of one transpilation.

    Attributes:
        success: True exactly when ``value`` holds generated script text.
        value: The generated script on success, the diagnostic on failure.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    value: str | TranspileError

    @model_validator(mode="after")
    def _check_success_matches_value(self) -> "TranspileResult":
        if self.success != isinstance(self.value, str):
            raise ValueError("success must be true for generated text and false for a diagnostic")
        return self


def transpile(source: str) -> TranspileResult:
    """Transpile ACT source text into a Windows command-interpreter script.

    Diagnostics are returned inside the result rather than raised. Anything
    that is not a :class:`TranspileError` propagates to the caller.

    Raises:
        TypeError: If *source* is not a string.
    """
    if not isinstance(source, str):
        raise TypeError(f"source must be a str, not {type(source).__name__}")
    try:
        script = parse(tokenize(source))
    except TranspileError as exc:
        return TranspileResult(success=False, value=exc)
    return TranspileResult(success=True, value=script)


def format_error(error: TranspileError) -> str:
    """Render a diagnostic the way editors and the CLI display it."""
    return f"[Error] {error.row}, {error.column}: {error.message}"
