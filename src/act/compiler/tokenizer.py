# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for ACT source text.

Converts raw source text into a sequence of positioned tokens for the parser.
Spaces, line feeds and comments are consumed but never emitted.
"""

import enum
import string
from dataclasses import dataclass

from act.compiler import keywords
from act.compiler.errors import TranspileError

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the ACT tokenizer."""

    # Arithmetic operators
    PLUS = keywords.ADDITION_OPERATOR
    MINUS = keywords.SUBTRACTION_OPERATOR
    STAR = keywords.MULTIPLICATION_OPERATOR
    SLASH = keywords.DIVISION_OPERATOR
    PERCENT = keywords.REMAINDER_OPERATOR

    # Grouping tags
    LPAREN = keywords.GROUPING_OPENING_TAG
    RPAREN = keywords.GROUPING_CLOSING_TAG

    # Literals
    NUMBER = "NUMBER"

    # Function names
    FUNCTION_NAME = "FUNCTION_NAME"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The raw source text of the token.
        row: 1-based row where the token starts.
        column: 1-based column where the token starts.
        index: 0-based offset of the token's first character in the source.
    """

    type: TokenType
    value: str
    row: int
    column: int
    index: int


def tokenize(source: str) -> list[Token]:
    """Tokenize ACT source text into a list of tokens.

    Args:
        source: The full text of an ACT program.

    Returns:
        The tokens in source order. Empty for blank or comment-only input.

    Raises:
        TranspileError: On unexpected characters, malformed numeric literals,
            identifiers containing uppercase letters, or an unterminated
            multi-line comment.
    """
    return _Tokenizer(source).tokenize()


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    keywords.ADDITION_OPERATOR: TokenType.PLUS,
    keywords.SUBTRACTION_OPERATOR: TokenType.MINUS,
    keywords.MULTIPLICATION_OPERATOR: TokenType.STAR,
    keywords.DIVISION_OPERATOR: TokenType.SLASH,
    keywords.REMAINDER_OPERATOR: TokenType.PERCENT,
    keywords.GROUPING_OPENING_TAG: TokenType.LPAREN,
    keywords.GROUPING_CLOSING_TAG: TokenType.RPAREN,
}

_NUMBER_CHARS = frozenset(string.digits + ".")
_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_UPPERCASE_CHARS = frozenset(string.ascii_uppercase)


class _Tokenizer:
    """Internal scanner state, created fresh for every call to tokenize()."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._row = 1
        self._column = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens."""
        while not self._at_end():
            if self._encounter(keywords.SPACE) or self._encounter(keywords.LINE_FEED):
                self._advance()
            elif self._encounter(keywords.SINGLE_LINE_COMMENT):
                self._skip_single_line_comment()
            elif self._encounter(keywords.MULTI_LINE_COMMENT_OPENING_TAG):
                self._skip_multi_line_comment()
            else:
                self._scan_token()
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _encounter(self, word: str) -> bool:
        """Return True if *word* starts at the current position."""
        return self._source.startswith(word, self._pos)

    def _advance(self, count: int = 1) -> None:
        """Consume *count* characters, keeping row and column in step."""
        for _ in range(count):
            ch = self._source[self._pos]
            self._pos += 1
            if ch == keywords.LINE_FEED:
                self._row += 1
                self._column = 1
            else:
                self._column += 1

    # ------------------------------------------------------------------
    # Comment skipping
    # ------------------------------------------------------------------

    def _skip_single_line_comment(self) -> None:
        """Consume from '#' through the terminating line feed, or to end of input."""
        self._advance(len(keywords.SINGLE_LINE_COMMENT))
        while not self._at_end():
            is_line_feed = self._encounter(keywords.LINE_FEED)
            self._advance()
            if is_line_feed:
                return

    def _skip_multi_line_comment(self) -> None:
        """Consume from '<#' through the matching '#>'."""
        self._advance(len(keywords.MULTI_LINE_COMMENT_OPENING_TAG))
        while not self._at_end():
            if self._encounter(keywords.MULTI_LINE_COMMENT_CLOSING_TAG):
                self._advance(len(keywords.MULTI_LINE_COMMENT_CLOSING_TAG))
                return
            self._advance()
        raise TranspileError(self._row, self._column, "multi-line comment not closed")

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch to the appropriate handler based on the current character."""
        ch = self._current()
        if ch in _NUMBER_CHARS:
            self._scan_number()
        elif ch in _SINGLE_CHAR_TOKENS:
            self._tokens.append(Token(_SINGLE_CHAR_TOKENS[ch], ch, self._row, self._column, self._pos))
            self._advance()
        elif ch in _IDENTIFIER_CHARS:
            self._scan_function_name()
        else:
            raise TranspileError(self._row, self._column, "unexpected token")

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_number(self) -> None:
        """Scan a maximal run of digits and dots as an integer literal.

        Only unpadded integers are accepted; any dot makes the literal invalid.
        """
        row, column, start = self._row, self._column, self._pos
        while self._current() in _NUMBER_CHARS:
            self._advance()
        value = self._source[start : self._pos]
        if "." in value:
            raise TranspileError(row, column, "numeric literals must be 32-bit integers")
        if len(value) > 1 and value[0] == "0":
            raise TranspileError(row, column, "numeric literals must not be zero-padded")
        self._tokens.append(Token(TokenType.NUMBER, value, row, column, start))

    def _scan_function_name(self) -> None:
        """Scan a maximal run of letters, digits and underscores."""
        row, column, start = self._row, self._column, self._pos
        while self._current() in _IDENTIFIER_CHARS:
            self._advance()
        value = self._source[start : self._pos]
        if any(ch in _UPPERCASE_CHARS for ch in value):
            raise TranspileError(
                row,
                column,
                "identifiers may use only lowercase letters, digits, and underscore",
            )
        self._tokens.append(Token(TokenType.FUNCTION_NAME, value, row, column, start))
