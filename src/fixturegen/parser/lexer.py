# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Go source files.

Converts raw source text into a sequence of tokens for the declaration
parser. Semicolons are inserted automatically at line ends following the Go
language rules, so the parser can treat every declaration as terminated.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the Go lexer."""

    # Keywords
    BREAK = "break"
    CASE = "case"
    CHAN = "chan"
    CONST = "const"
    CONTINUE = "continue"
    DEFAULT = "default"
    DEFER = "defer"
    ELSE = "else"
    FALLTHROUGH = "fallthrough"
    FOR = "for"
    FUNC = "func"
    GO = "go"
    GOTO = "goto"
    IF = "if"
    IMPORT = "import"
    INTERFACE = "interface"
    MAP = "map"
    PACKAGE = "package"
    RANGE = "range"
    RETURN = "return"
    SELECT = "select"
    STRUCT = "struct"
    SWITCH = "switch"
    TYPE = "type"
    VAR = "var"

    # Punctuation the declaration parser cares about
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COMMA = ","
    DOT = "."
    SEMICOLON = ";"
    STAR = "*"
    ASSIGN = "="
    ELLIPSIS = "..."
    ARROW = "<-"
    TILDE = "~"
    PIPE = "|"
    INC_DEC = "INC_DEC"

    # Every other operator (+, &&, :=, ...)
    OPERATOR = "OPERATOR"

    # Literals
    STRING = "STRING"
    CHAR = "CHAR"
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    IMAGINARY = "IMAGINARY"

    # Identifiers
    IDENTIFIER = "IDENTIFIER"

    # End of file
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The raw text of the token. For STRING tokens this is the text
            between the quotes, with escape sequences left undecoded. An
            automatically inserted SEMICOLON has the value ``"\\n"``.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    type: TokenType
    value: str
    line: int
    column: int


class LexerError(Exception):
    """Raised when the scanner encounters an invalid character or unterminated literal.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


def tokenize(source: str) -> list[Token]:
    """Tokenize Go source text into a sequence of tokens.

    The final token is always an EOF token. Comments and whitespace are
    consumed; a newline (or a block comment spanning lines) after an
    identifier, literal, ``break``/``continue``/``fallthrough``/``return``,
    ``++``, ``--``, ``)``, ``]`` or ``}`` produces a SEMICOLON token.

    Args:
        source: The full text of a .go file.

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        LexerError: On unexpected characters, unterminated string, rune
            or raw string literals, or unterminated block comments.
    """
    return _Lexer(source).tokenize()


# ################
# Implementation
# ################

_KEYWORDS: dict[str, TokenType] = {
    "break": TokenType.BREAK,
    "case": TokenType.CASE,
    "chan": TokenType.CHAN,
    "const": TokenType.CONST,
    "continue": TokenType.CONTINUE,
    "default": TokenType.DEFAULT,
    "defer": TokenType.DEFER,
    "else": TokenType.ELSE,
    "fallthrough": TokenType.FALLTHROUGH,
    "for": TokenType.FOR,
    "func": TokenType.FUNC,
    "go": TokenType.GO,
    "goto": TokenType.GOTO,
    "if": TokenType.IF,
    "import": TokenType.IMPORT,
    "interface": TokenType.INTERFACE,
    "map": TokenType.MAP,
    "package": TokenType.PACKAGE,
    "range": TokenType.RANGE,
    "return": TokenType.RETURN,
    "select": TokenType.SELECT,
    "struct": TokenType.STRUCT,
    "switch": TokenType.SWITCH,
    "type": TokenType.TYPE,
    "var": TokenType.VAR,
}

# Longest operators first so that prefix matching picks the longest spelling.
_OPERATORS: tuple[str, ...] = (
    "&^=",
    "<<=",
    ">>=",
    "...",
    "&&",
    "||",
    "<-",
    "++",
    "--",
    "==",
    "!=",
    "<=",
    ">=",
    ":=",
    "+=",
    "-=",
    "*=",
    "/=",
    "%=",
    "&=",
    "|=",
    "^=",
    "<<",
    ">>",
    "&^",
    "+",
    "-",
    "*",
    "/",
    "%",
    "&",
    "|",
    "^",
    "<",
    ">",
    "=",
    "!",
    "(",
    ")",
    "[",
    "]",
    "{",
    "}",
    ",",
    ";",
    ".",
    ":",
    "~",
)

_PUNCTUATION: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
    "=": TokenType.ASSIGN,
    "...": TokenType.ELLIPSIS,
    "<-": TokenType.ARROW,
    "~": TokenType.TILDE,
    "|": TokenType.PIPE,
    "++": TokenType.INC_DEC,
    "--": TokenType.INC_DEC,
}

_SEMICOLON_TRIGGERS: frozenset[TokenType] = frozenset(
    {
        TokenType.IDENTIFIER,
        TokenType.STRING,
        TokenType.CHAR,
        TokenType.INTEGER,
        TokenType.FLOAT,
        TokenType.IMAGINARY,
        TokenType.BREAK,
        TokenType.CONTINUE,
        TokenType.FALLTHROUGH,
        TokenType.RETURN,
        TokenType.INC_DEC,
        TokenType.RPAREN,
        TokenType.RBRACKET,
        TokenType.RBRACE,
    }
)


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        while self._pos < len(self._source):
            self._skip_whitespace_and_comments()
            if self._pos >= len(self._source):
                break
            self._scan_token()
        self._insert_semicolon(self._line, self._column)
        self._tokens.append(Token(TokenType.EOF, "", self._line, self._column))
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _insert_semicolon(self, line: int, col: int) -> None:
        """Append an automatic SEMICOLON if the previous token allows one."""
        if self._tokens and self._tokens[-1].type in _SEMICOLON_TRIGGERS:
            self._tokens.append(Token(TokenType.SEMICOLON, "\n", line, col))

    # ------------------------------------------------------------------
    # Whitespace and comment skipping
    # ------------------------------------------------------------------

    def _skip_whitespace_and_comments(self) -> None:
        """Skip all whitespace and comment runs, inserting semicolons at line ends."""
        while self._pos < len(self._source):
            ch = self._current()
            if ch == "\n":
                self._insert_semicolon(self._line, self._column)
                self._advance()
            elif ch in " \t\r":
                self._advance()
            elif ch == "/" and self._peek() == "/":
                self._skip_line_comment()
            elif ch == "/" and self._peek() == "*":
                self._skip_block_comment()
            else:
                break

    def _skip_line_comment(self) -> None:
        """Consume from '//' through end-of-line (exclusive of the newline itself)."""
        while self._pos < len(self._source) and self._current() != "\n":
            self._advance()

    def _skip_block_comment(self) -> None:
        """Consume from '/*' through the matching '*/'.

        A block comment containing a newline acts like a newline.
        """
        start_line = self._line
        start_col = self._column
        self._advance()  # /
        self._advance()  # *
        while self._pos < len(self._source):
            if self._current() == "*" and self._peek() == "/":
                self._advance()  # *
                self._advance()  # /
                if self._line != start_line:
                    self._insert_semicolon(start_line, start_col)
                return
            self._advance()
        raise LexerError("Unterminated block comment", start_line, start_col)

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch to the appropriate handler based on the current character."""
        ch = self._current()
        line = self._line
        col = self._column

        if ch == '"':
            self._scan_string(line, col)
        elif ch == "`":
            self._scan_raw_string(line, col)
        elif ch == "'":
            self._scan_char(line, col)
        elif ch.isdigit() or (ch == "." and self._peek().isdigit()):
            self._scan_number(line, col)
        elif ch.isalpha() or ch == "_":
            self._scan_identifier_or_keyword(line, col)
        else:
            self._scan_operator(line, col)

    def _scan_operator(self, line: int, col: int) -> None:
        """Scan the longest operator or punctuation spelling at the current position."""
        for op in _OPERATORS:
            if self._source.startswith(op, self._pos):
                for _ in op:
                    self._advance()
                self._tokens.append(Token(_PUNCTUATION.get(op, TokenType.OPERATOR), op, line, col))
                return
        raise LexerError(f"Unexpected character: {self._current()!r}", line, col)

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self, line: int, col: int) -> None:
        """Scan an interpreted string literal. Escape sequences are kept verbatim."""
        self._advance()  # opening "
        start = self._pos
        while self._pos < len(self._source):
            ch = self._current()
            if ch == '"':
                value = self._source[start : self._pos]
                self._advance()  # closing "
                self._tokens.append(Token(TokenType.STRING, value, line, col))
                return
            if ch == "\n":
                raise LexerError("Unterminated string literal", line, col)
            if ch == "\\":
                self._advance()
                if self._pos >= len(self._source):
                    raise LexerError("Unterminated string literal", line, col)
            self._advance()
        raise LexerError("Unterminated string literal", line, col)

    def _scan_raw_string(self, line: int, col: int) -> None:
        """Scan a back-quoted raw string literal, which may span lines."""
        self._advance()  # opening `
        start = self._pos
        while self._pos < len(self._source):
            if self._current() == "`":
                value = self._source[start : self._pos]
                self._advance()  # closing `
                self._tokens.append(Token(TokenType.STRING, value, line, col))
                return
            self._advance()
        raise LexerError("Unterminated raw string literal", line, col)

    def _scan_char(self, line: int, col: int) -> None:
        """Scan a rune literal such as 'a' or '\\n'."""
        self._advance()  # opening '
        start = self._pos
        while self._pos < len(self._source):
            ch = self._current()
            if ch == "'":
                value = self._source[start : self._pos]
                self._advance()  # closing '
                self._tokens.append(Token(TokenType.CHAR, value, line, col))
                return
            if ch == "\n":
                raise LexerError("Unterminated rune literal", line, col)
            if ch == "\\":
                self._advance()
                if self._pos >= len(self._source):
                    raise LexerError("Unterminated rune literal", line, col)
            self._advance()
        raise LexerError("Unterminated rune literal", line, col)

    def _scan_number(self, line: int, col: int) -> None:
        """Scan an integer, floating-point, or imaginary literal.

        Hex, octal and binary prefixes, digit separators and exponents are
        accepted; the literal's value is never interpreted.
        """
        start = self._pos
        is_hex = self._current() == "0" and self._peek() in "xX"
        is_float = False
        while self._pos < len(self._source):
            ch = self._current()
            if ch.isalnum() or ch == "_":
                if (ch in "eE" and not is_hex) or ch in "pP":
                    is_float = True
                    self._advance()
                    if self._current() in "+-":
                        self._advance()
                    continue
                self._advance()
            elif ch == ".":
                is_float = True
                self._advance()
            else:
                break
        value = self._source[start : self._pos]
        if value.endswith("i"):
            token_type = TokenType.IMAGINARY
        elif is_float:
            token_type = TokenType.FLOAT
        else:
            token_type = TokenType.INTEGER
        self._tokens.append(Token(token_type, value, line, col))

    def _scan_identifier_or_keyword(self, line: int, col: int) -> None:
        """Scan an identifier and map it to a keyword token type if applicable."""
        start = self._pos
        while self._pos < len(self._source) and (self._current().isalnum() or self._current() == "_"):
            self._advance()
        value = self._source[start : self._pos]
        token_type = _KEYWORDS.get(value, TokenType.IDENTIFIER)
        self._tokens.append(Token(token_type, value, line, col))
