# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the Go lexical scanner."""

import pytest

from fixturegen.parser.lexer import LexerError, Token, TokenType, tokenize

# ###############
# Test Helpers
# ###############


def _tokens_no_eof(source: str) -> list[Token]:
    """Return all tokens except the terminal EOF token."""
    result = tokenize(source)
    assert result[-1].type == TokenType.EOF
    return result[:-1]


def _types(source: str) -> list[TokenType]:
    return [tok.type for tok in _tokens_no_eof(source)]


def _values(source: str) -> list[str]:
    return [tok.value for tok in _tokens_no_eof(source)]


# ###############
# EOF Handling
# ###############


class TestEof:
    def test_empty_string_produces_eof(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF
        assert tokens[0].value == ""

    def test_whitespace_only_produces_eof(self) -> None:
        assert _types("   \t\n  ") == []

    def test_semicolon_inserted_before_eof(self) -> None:
        assert _types("x") == [TokenType.IDENTIFIER, TokenType.SEMICOLON]


# ###############
# Keywords and Identifiers
# ###############


class TestKeywordsAndIdentifiers:
    @pytest.mark.parametrize(
        ("source", "expected_type"),
        [
            ("package", TokenType.PACKAGE),
            ("import", TokenType.IMPORT),
            ("type", TokenType.TYPE),
            ("struct", TokenType.STRUCT),
            ("interface", TokenType.INTERFACE),
            ("const", TokenType.CONST),
            ("var", TokenType.VAR),
            ("func", TokenType.FUNC),
            ("map", TokenType.MAP),
            ("chan", TokenType.CHAN),
        ],
    )
    def test_keyword(self, source: str, expected_type: TokenType) -> None:
        assert _types(source)[0] == expected_type

    @pytest.mark.parametrize("source", ["User", "_", "isUser_Id", "x1", "string", "iota", "ΔValue"])
    def test_identifier(self, source: str) -> None:
        tokens = _tokens_no_eof(source)
        assert tokens[0].type == TokenType.IDENTIFIER
        assert tokens[0].value == source

    def test_keyword_prefix_is_identifier(self) -> None:
        assert _types("types")[0] == TokenType.IDENTIFIER


# ###############
# Literals
# ###############


class TestLiterals:
    def test_string_value_excludes_quotes(self) -> None:
        assert _values('"time"')[0] == "time"

    def test_string_escapes_kept_verbatim(self) -> None:
        assert _values(r'"a\"b"')[0] == r"a\"b"

    def test_raw_string_spans_lines(self) -> None:
        tokens = _tokens_no_eof('`json:"id"\nx`')
        assert tokens[0].type == TokenType.STRING
        assert tokens[0].value == 'json:"id"\nx'

    def test_rune(self) -> None:
        tokens = _tokens_no_eof(r"'\n'")
        assert tokens[0].type == TokenType.CHAR
        assert tokens[0].value == r"\n"

    @pytest.mark.parametrize(
        ("source", "expected_type"),
        [
            ("42", TokenType.INTEGER),
            ("0x1F", TokenType.INTEGER),
            ("1_000", TokenType.INTEGER),
            ("0b101", TokenType.INTEGER),
            ("3.14", TokenType.FLOAT),
            (".5", TokenType.FLOAT),
            ("1e10", TokenType.FLOAT),
            ("1e-3", TokenType.FLOAT),
            ("2i", TokenType.IMAGINARY),
        ],
    )
    def test_number(self, source: str, expected_type: TokenType) -> None:
        tokens = _tokens_no_eof(source)
        assert tokens[0].type == expected_type
        assert tokens[0].value == source

    def test_hex_digit_e_is_not_exponent(self) -> None:
        assert _types("0xE")[0] == TokenType.INTEGER


# ###############
# Operators and Punctuation
# ###############


class TestOperators:
    @pytest.mark.parametrize(
        ("source", "expected_type"),
        [
            ("(", TokenType.LPAREN),
            ("{", TokenType.LBRACE),
            ("[", TokenType.LBRACKET),
            (",", TokenType.COMMA),
            (".", TokenType.DOT),
            ("*", TokenType.STAR),
            ("=", TokenType.ASSIGN),
            ("...", TokenType.ELLIPSIS),
            ("<-", TokenType.ARROW),
            ("~", TokenType.TILDE),
            ("|", TokenType.PIPE),
        ],
    )
    def test_punctuation(self, source: str, expected_type: TokenType) -> None:
        assert _types(source)[0] == expected_type

    @pytest.mark.parametrize("source", [":=", "&&", "<<", "&^=", "!=", "+", "%"])
    def test_other_operators(self, source: str) -> None:
        tokens = _tokens_no_eof(source)
        assert tokens[0].type == TokenType.OPERATOR
        assert tokens[0].value == source

    def test_longest_match(self) -> None:
        assert _values("a<<=b") == ["a", "<<=", "b", "\n"]

    def test_unexpected_character(self) -> None:
        with pytest.raises(LexerError) as exc_info:
            tokenize("x @ y")
        assert exc_info.value.line == 1
        assert exc_info.value.column == 3


# ###############
# Comments
# ###############


class TestComments:
    def test_line_comment_skipped(self) -> None:
        assert _values("x // comment") == ["x", "\n"]

    def test_block_comment_on_one_line_skipped(self) -> None:
        assert _types("x /* c */ y") == [TokenType.IDENTIFIER, TokenType.IDENTIFIER, TokenType.SEMICOLON]

    def test_multi_line_block_comment_acts_like_newline(self) -> None:
        assert _types("x /* a\nb */ y") == [
            TokenType.IDENTIFIER,
            TokenType.SEMICOLON,
            TokenType.IDENTIFIER,
            TokenType.SEMICOLON,
        ]

    def test_unterminated_block_comment(self) -> None:
        with pytest.raises(LexerError, match="Unterminated block comment"):
            tokenize("/* never closed")


# ###############
# Semicolon Insertion
# ###############


class TestSemicolonInsertion:
    def test_after_identifier(self) -> None:
        assert _values("a\nb") == ["a", "\n", "b", "\n"]

    def test_not_after_open_brace(self) -> None:
        assert _types("struct {\n}") == [TokenType.STRUCT, TokenType.LBRACE, TokenType.RBRACE, TokenType.SEMICOLON]

    def test_not_after_operator(self) -> None:
        assert _types("a +\nb") == [
            TokenType.IDENTIFIER,
            TokenType.OPERATOR,
            TokenType.IDENTIFIER,
            TokenType.SEMICOLON,
        ]

    @pytest.mark.parametrize("source", ["x)", "x]", "x}", '"s"', "1", "return", "i++"])
    def test_after_trigger(self, source: str) -> None:
        assert _types(source + "\n")[-1] == TokenType.SEMICOLON

    def test_no_duplicate_for_blank_lines(self) -> None:
        assert _types("a\n\n\n") == [TokenType.IDENTIFIER, TokenType.SEMICOLON]

    def test_after_line_comment(self) -> None:
        assert _types("a // c\nb") == [
            TokenType.IDENTIFIER,
            TokenType.SEMICOLON,
            TokenType.IDENTIFIER,
            TokenType.SEMICOLON,
        ]


# ###############
# Locations and Errors
# ###############


class TestLocations:
    def test_line_and_column(self) -> None:
        tokens = _tokens_no_eof("package x\n\ntype  User struct{}")
        user = next(tok for tok in tokens if tok.value == "User")
        assert user.line == 3
        assert user.column == 7

    @pytest.mark.parametrize(
        ("source", "message"),
        [
            ('"open', "Unterminated string literal"),
            ('"split\nline"', "Unterminated string literal"),
            ("`raw", "Unterminated raw string literal"),
            ("'a", "Unterminated rune literal"),
        ],
    )
    def test_unterminated_literals(self, source: str, message: str) -> None:
        with pytest.raises(LexerError, match=message):
            tokenize(source)
