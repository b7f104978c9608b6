# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the ACT tokenizer."""

import pytest

from act.compiler import keywords
from act.compiler.errors import TranspileError
from act.compiler.tokenizer import Token, TokenType, tokenize

# ###############
# Test Helpers
# ###############


def _types(source: str) -> list[TokenType]:
    """Return the token types for all tokens."""
    return [tok.type for tok in tokenize(source)]


def _values(source: str) -> list[str]:
    """Return the token values for all tokens."""
    return [tok.value for tok in tokenize(source)]


def _error(source: str) -> TranspileError:
    """Tokenize *source* and return the raised TranspileError."""
    with pytest.raises(TranspileError) as exc_info:
        tokenize(source)
    return exc_info.value


# ###############
# Empty Input
# ###############


class TestEmptyInput:
    def test_empty_string_produces_no_tokens(self) -> None:
        assert tokenize("") == []

    def test_spaces_are_skipped(self) -> None:
        assert tokenize("    ") == []

    def test_line_feeds_are_skipped(self) -> None:
        assert tokenize("\n\n\n") == []

    def test_mixed_whitespace_produces_no_tokens(self) -> None:
        assert tokenize("  \n \n  ") == []


# ###############
# Comments
# ###############


class TestSingleLineComments:
    def test_bare_comment_marker(self) -> None:
        assert tokenize("#") == []

    def test_comment_text_is_skipped(self) -> None:
        assert tokenize("#Single line comment.\n") == []

    def test_comment_markers_inside_comment(self) -> None:
        assert tokenize("#Single#line#comment.#\n") == []

    def test_comment_without_trailing_line_feed(self) -> None:
        assert tokenize("# no line feed") == []

    def test_comment_ends_at_line_feed(self) -> None:
        assert tokenize("#c\n5") == [Token(TokenType.NUMBER, "5", 2, 1, 3)]

    def test_comment_after_token(self) -> None:
        assert _values("1 # one") == ["1"]

    def test_operators_inside_comment_are_ignored(self) -> None:
        assert tokenize("# 1 + (2 * 3)") == []


class TestMultiLineComments:
    def test_empty_comment(self) -> None:
        assert tokenize("<##>") == []

    def test_comment_text_is_skipped(self) -> None:
        assert tokenize("<#Multi line comment.#>") == []

    def test_comment_spanning_lines(self) -> None:
        assert tokenize("<#\n  Multi\n  line\n  comment.\n#>") == []

    def test_position_after_comment(self) -> None:
        assert tokenize("<#a\nb#>7") == [Token(TokenType.NUMBER, "7", 2, 4, 7)]

    def test_tokens_on_both_sides(self) -> None:
        assert _values("1<#x#>") == ["1"]
        assert _values("<#x#>1") == ["1"]

    def test_unclosed_comment_reports_end_position(self) -> None:
        err = _error("<#abc")
        assert (err.row, err.column) == (1, 6)
        assert err.message == "multi-line comment not closed"

    def test_unclosed_bare_opening_tag(self) -> None:
        err = _error("<#")
        assert (err.row, err.column) == (1, 3)

    def test_unclosed_comment_row_counts_line_feeds(self) -> None:
        err = _error("<#\n\n\n")
        assert (err.row, err.column) == (4, 1)

    def test_unclosed_comment_after_code(self) -> None:
        err = _error("1\n<# open\nstill open")
        assert (err.row, err.column) == (3, 11)

    def test_single_line_marker_wins_over_closing_tag(self) -> None:
        # '#>' outside a multi-line comment is just a single-line comment.
        assert tokenize("#> 1") == []


# ###############
# Numeric Literals
# ###############


class TestNumberLiterals:
    def test_zero(self) -> None:
        assert tokenize("0") == [Token(TokenType.NUMBER, "0", 1, 1, 0)]

    @pytest.mark.parametrize("literal", ["1", "9", "10", "100", "2147483647", "1234567890"])
    def test_integer_literal_round_trips(self, literal: str) -> None:
        assert tokenize(literal) == [Token(TokenType.NUMBER, literal, 1, 1, 0)]

    @pytest.mark.parametrize("literal", ["00", "01", "007", "0123"])
    def test_zero_padding_is_rejected(self, literal: str) -> None:
        err = _error(literal)
        assert (err.row, err.column) == (1, 1)
        assert err.message == "numeric literals must not be zero-padded"

    def test_zero_padding_reports_literal_start(self) -> None:
        err = _error("1\n  05")
        assert (err.row, err.column) == (2, 3)

    @pytest.mark.parametrize("literal", ["1.5", "0.5", "1.", ".5", ".", "1.2.3", "00.5"])
    def test_decimal_is_rejected(self, literal: str) -> None:
        err = _error(literal)
        assert (err.row, err.column) == (1, 1)
        assert "32-bit integer" in err.message

    def test_decimal_reports_literal_start(self) -> None:
        err = _error("1 + 2.5")
        assert (err.row, err.column) == (1, 5)

    def test_number_followed_by_name(self) -> None:
        tokens = tokenize("12ab")
        assert tokens == [
            Token(TokenType.NUMBER, "12", 1, 1, 0),
            Token(TokenType.FUNCTION_NAME, "ab", 1, 3, 2),
        ]


# ###############
# Operators and Grouping
# ###############


class TestOperators:
    @pytest.mark.parametrize(
        ("source", "expected_type"),
        [
            ("+", TokenType.PLUS),
            ("-", TokenType.MINUS),
            ("*", TokenType.STAR),
            ("/", TokenType.SLASH),
            ("%", TokenType.PERCENT),
            ("(", TokenType.LPAREN),
            (")", TokenType.RPAREN),
        ],
    )
    def test_single_character_token(self, source: str, expected_type: TokenType) -> None:
        assert tokenize(source) == [Token(expected_type, source, 1, 1, 0)]

    def test_sign_and_operator_tokenize_identically(self) -> None:
        assert _types("-1-1") == [TokenType.MINUS, TokenType.NUMBER, TokenType.MINUS, TokenType.NUMBER]

    def test_adjacent_operators_are_separate_tokens(self) -> None:
        assert _values("+-*/%()") == ["+", "-", "*", "/", "%", "(", ")"]

    def test_every_operator_token_is_a_keyword(self) -> None:
        spellings = set(keywords.KEYWORDS.values())
        for token_type in TokenType:
            if token_type not in (TokenType.NUMBER, TokenType.FUNCTION_NAME):
                assert token_type.value in spellings


# ###############
# Function Names
# ###############


class TestFunctionNames:
    def test_name_with_digits_and_underscore(self) -> None:
        assert tokenize("a1_") == [Token(TokenType.FUNCTION_NAME, "a1_", 1, 1, 0)]

    def test_underscore_prefix(self) -> None:
        assert _types("_name") == [TokenType.FUNCTION_NAME]

    def test_echo_is_a_function_name(self) -> None:
        assert tokenize("echo") == [Token(TokenType.FUNCTION_NAME, "echo", 1, 1, 0)]

    @pytest.mark.parametrize("source", ["A", "Echo", "echO", "a_B1"])
    def test_uppercase_is_rejected(self, source: str) -> None:
        err = _error(source)
        assert (err.row, err.column) == (1, 1)
        assert err.message == "identifiers may use only lowercase letters, digits, and underscore"

    def test_uppercase_reports_name_start(self) -> None:
        err = _error("echo (1)\n  fooBar")
        assert (err.row, err.column) == (2, 3)


# ###############
# Unexpected Characters
# ###############


class TestUnexpectedCharacters:
    @pytest.mark.parametrize("source", ["$", "=", "\t", "\r", "<", "!", "\"", "{"])
    def test_unrecognized_character(self, source: str) -> None:
        err = _error(source)
        assert (err.row, err.column) == (1, 1)
        assert err.message == "unexpected token"

    def test_variable_sigil_is_not_tokenized(self) -> None:
        err = _error("1\n$a = 1")
        assert (err.row, err.column) == (2, 1)

    def test_carriage_return_line_ending_is_rejected(self) -> None:
        err = _error("1\r\n2")
        assert (err.row, err.column) == (1, 2)


# ###############
# Position Tracking
# ###############


class TestPositions:
    def test_rows_columns_and_indexes(self) -> None:
        assert tokenize("1 +\n 23") == [
            Token(TokenType.NUMBER, "1", 1, 1, 0),
            Token(TokenType.PLUS, "+", 1, 3, 2),
            Token(TokenType.NUMBER, "23", 2, 2, 5),
        ]

    def test_echo_statement_positions(self) -> None:
        assert tokenize("echo (10)") == [
            Token(TokenType.FUNCTION_NAME, "echo", 1, 1, 0),
            Token(TokenType.LPAREN, "(", 1, 6, 5),
            Token(TokenType.NUMBER, "10", 1, 7, 6),
            Token(TokenType.RPAREN, ")", 1, 9, 8),
        ]

    def test_tokenize_is_independent_between_calls(self) -> None:
        tokenize("1\n2\n3")
        assert tokenize("4") == [Token(TokenType.NUMBER, "4", 1, 1, 0)]
