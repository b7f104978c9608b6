# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser and code generator for ACT token streams.

Recognizes calculation statements and the ``echo`` statement, emitting one
Windows command-interpreter script. Operators are emitted in source order
without applying precedence; ``SET /A`` evaluates them at run time.
"""

from act.compiler import keywords
from act.compiler.errors import TranspileError
from act.compiler.tokenizer import Token, TokenType

# ###############
# Public Interface
# ###############

SCRIPT_HEADER = "@ECHO OFF\nSETLOCAL\n"
SCRIPT_FOOTER = "EXIT /B 0\n"


def parse(tokens: list[Token]) -> str:
    """Parse a token list and return the generated script.

    The generated statements are wrapped once in the common header and footer,
    so an empty token list yields the wrapper alone.

    Args:
        tokens: Tokens produced by :func:`~act.compiler.tokenizer.tokenize`.

    Returns:
        The complete generated script text.

    Raises:
        TranspileError: If the token sequence is not a valid ACT program.
    """
    body = _Parser(tokens).parse()
    return f"{SCRIPT_HEADER}{body}{SCRIPT_FOOTER}"


# ################
# Implementation
# ################

_EXIT_ASSIGNMENT = "SET /A act.@exit="
_ECHO_ARGUMENT = "SET act.@argument1=%act.@exit%\nECHO %act.@argument1%\n"
_ECHO_BLANK_LINE = "ECHO;\n"

_BINARY_OPERATORS: frozenset[TokenType] = frozenset(
    {
        TokenType.PLUS,
        TokenType.MINUS,
        TokenType.STAR,
        TokenType.SLASH,
        TokenType.PERCENT,
    }
)

_UNARY_OPERATORS: frozenset[TokenType] = frozenset({TokenType.PLUS, TokenType.MINUS})

_OPERAND_STARTS: frozenset[TokenType] = _UNARY_OPERATORS | {TokenType.NUMBER, TokenType.LPAREN}


class _Parser:
    """Recursive-descent parser for ACT token streams."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._output: list[str] = []

    def parse(self) -> str:
        """Parse every statement and return the generated body."""
        while not self._at_end():
            if self._parse_calculation_statement() or self._parse_echo_statement():
                continue
            self._raise_unexpected_token()
        return "".join(self._output)

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def _current(self) -> Token | None:
        """Return the current (un-consumed) token, or None past the end."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _advance(self) -> Token:
        """Consume and return the current token."""
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    def _on_row(self, row: int) -> Token | None:
        """Return the current token if it sits on *row*, otherwise None."""
        tok = self._current()
        if tok is not None and tok.row == row:
            return tok
        return None

    def _raise_unexpected_token(self) -> None:
        """Raise an 'unexpected token' error at the current token.

        Every caller checks that a token is present first. The past-the-end
        branch is a guard only, and points just after the last token.
        """
        tok = self._current()
        if tok is None:
            last = self._tokens[-1]
            raise TranspileError(last.row, last.column + len(last.value), "unexpected token")
        raise TranspileError(tok.row, tok.column, "unexpected token")

    # ------------------------------------------------------------------
    # Calculation expressions
    # ------------------------------------------------------------------

    def _parse_calculation_expression(self) -> list[Token]:
        """Parse: operand { binary_op operand } on a single row.

        operand := [ "+" | "-" ] ( number | "(" expression ")" )

        Returns the consumed tokens, or an empty list when no expression starts
        at the cursor. Emits the ``SET /A`` line for a parsed expression.
        """
        first = self._current()
        if first is None or first.type not in _OPERAND_STARTS:
            return []

        row = first.row
        consumed: list[Token] = []
        depth = 0
        expect_operand = True
        allow_unary = True
        # The operator whose right-hand operand is still outstanding.
        pending: Token | None = None

        while True:
            tok = self._on_row(row)
            if expect_operand:
                if tok is None or tok.type not in _OPERAND_STARTS or (
                    tok.type in _UNARY_OPERATORS and not allow_unary
                ):
                    if pending is not None:
                        raise TranspileError(
                            pending.row,
                            pending.column,
                            f"{pending.value} has no right-hand operand",
                        )
                    break
                consumed.append(self._advance())
                if tok.type in _UNARY_OPERATORS:
                    pending = tok
                    allow_unary = False
                elif tok.type == TokenType.LPAREN:
                    depth += 1
                    pending = None
                    allow_unary = True
                else:
                    pending = None
                    expect_operand = False
            elif tok is not None and tok.type == TokenType.RPAREN and depth > 0:
                consumed.append(self._advance())
                depth -= 1
            elif tok is not None and tok.type in _BINARY_OPERATORS:
                consumed.append(self._advance())
                pending = tok
                expect_operand = True
                allow_unary = True
            else:
                break

        if depth > 0:
            last = consumed[-1]
            raise TranspileError(last.row, last.column + len(last.value), "group not closed")

        self._output.append(_EXIT_ASSIGNMENT + "".join(t.value for t in consumed) + "\n")
        return consumed

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_calculation_statement(self) -> bool:
        """Parse a calculation expression that occupies its row alone."""
        expression = self._parse_calculation_expression()
        if not expression:
            return False
        if self._on_row(expression[-1].row) is not None:
            self._raise_unexpected_token()
        return True

    def _parse_echo_statement(self) -> bool:
        """Parse: echo [ "(" expression ")" | number ]"""
        echo_tok = self._current()
        if (
            echo_tok is None
            or echo_tok.type != TokenType.FUNCTION_NAME
            or echo_tok.value != keywords.ECHO_FUNCTION
        ):
            return False
        self._advance()  # consume 'echo'

        if self._on_row(echo_tok.row) is None:
            self._output.append(_ECHO_BLANK_LINE)
            return True

        argument = self._parse_calculation_expression()
        if not argument:
            self._raise_unexpected_token()

        # Arguments are space separated, so anything longer than a bare
        # literal has to be wrapped in a group.
        if len(argument) > 1 and argument[-1].type != TokenType.RPAREN:
            first = argument[0]
            raise TranspileError(first.row, first.column, "invalid argument count")

        extra = self._on_row(echo_tok.row)
        if extra is not None:
            raise TranspileError(extra.row, extra.column, "invalid argument count")

        self._output.append(_ECHO_ARGUMENT)
        return True
