# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and declaration parser for Go source files."""

from fixturegen.parser.lexer import LexerError, Token, TokenType, tokenize
from fixturegen.parser.parser import ParseError, parse

__all__ = [
    "parse",
    "ParseError",
    "tokenize",
    "LexerError",
    "Token",
    "TokenType",
]
