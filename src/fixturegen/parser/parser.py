# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for Go declarations.

Converts a token stream produced by the lexer into a SourceFile holding the
package clause, type declarations and const declarations. Imports, function
and variable declarations are recognised and skipped.
"""

from collections.abc import Callable
from typing import TypeVar

from fixturegen.parser.lexer import Token, TokenType, tokenize
from fixturegen.parser.syntax import (
    ArrayExpr,
    ChanExpr,
    ConstSpec,
    FieldDecl,
    FuncExpr,
    GenericExpr,
    IdentExpr,
    InterfaceExpr,
    MapExpr,
    PointerExpr,
    QualifiedExpr,
    SliceExpr,
    SourceFile,
    StructExpr,
    TypeExpr,
    TypeSpec,
)

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Raised when the parser encounters a syntactically invalid construct.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


def parse(source: str) -> SourceFile:
    """Parse Go source text into its declarations.

    Args:
        source: The full text of a .go file.

    Returns:
        A SourceFile with the file's package name, type and const
        declarations in source order.

    Raises:
        LexerError: If the source contains invalid characters or unterminated literals.
        ParseError: If the source is syntactically invalid.
    """
    tokens = tokenize(source)
    return _Parser(tokens).parse()


# ################
# Implementation
# ################

_T = TypeVar("_T")

_TYPE_START: frozenset[TokenType] = frozenset(
    {
        TokenType.IDENTIFIER,
        TokenType.STAR,
        TokenType.LBRACKET,
        TokenType.MAP,
        TokenType.CHAN,
        TokenType.ARROW,
        TokenType.FUNC,
        TokenType.STRUCT,
        TokenType.INTERFACE,
    }
)

# Tokens that can follow "Name [Ident" only when the brackets hold type parameters.
_TYPE_PARAM_FOLLOWERS: frozenset[TokenType] = frozenset(
    {
        TokenType.IDENTIFIER,
        TokenType.COMMA,
        TokenType.INTERFACE,
        TokenType.STAR,
        TokenType.LBRACKET,
        TokenType.TILDE,
        TokenType.MAP,
        TokenType.CHAN,
        TokenType.FUNC,
        TokenType.STRUCT,
    }
)

_OPENERS: dict[TokenType, TokenType] = {
    TokenType.LPAREN: TokenType.RPAREN,
    TokenType.LBRACKET: TokenType.RBRACKET,
    TokenType.LBRACE: TokenType.RBRACE,
}

_CLOSERS: frozenset[TokenType] = frozenset(_OPENERS.values())


class _Parser:
    """Recursive-descent parser for Go token streams."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def parse(self) -> SourceFile:
        """Parse the full token stream and return a SourceFile."""
        self._skip_semicolons()
        self._expect(TokenType.PACKAGE)
        name_tok = self._expect(TokenType.IDENTIFIER)
        self._expect_terminator()
        result = SourceFile(package=name_tok.value)

        self._skip_semicolons()
        while self._check(TokenType.IMPORT):
            self._skip_import_decl()
            self._expect_terminator()
            self._skip_semicolons()

        while not self._at_end():
            self._parse_top_level(result)
            self._skip_semicolons()
        return result

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        """Return the current (un-consumed) token."""
        return self._tokens[self._pos]

    def _peek_type(self, offset: int = 0) -> TokenType:
        """Return the type of the token *offset* positions ahead, or EOF past the end."""
        index = self._pos + offset
        if index < len(self._tokens):
            return self._tokens[index].type
        return TokenType.EOF

    def _at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self._peek_type() == TokenType.EOF

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _expect(self, *types: TokenType) -> Token:
        """Consume the current token if it matches any of the given types.

        Raises ParseError if the current token does not match.
        """
        tok = self._current()
        if tok.type not in types:
            expected = ", ".join(repr(t.value) for t in types)
            raise ParseError(
                f"Expected {expected}, got {_describe(tok)}",
                tok.line,
                tok.column,
            )
        return self._advance()

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types (without consuming)."""
        return self._peek_type() in types

    def _skip_semicolons(self) -> None:
        while self._check(TokenType.SEMICOLON):
            self._advance()

    def _expect_terminator(self) -> None:
        """Consume the ';' that ends a declaration. EOF also ends one."""
        if self._check(TokenType.EOF):
            return
        self._expect(TokenType.SEMICOLON)

    def _matching_offset(self, offset: int) -> int:
        """Return the offset of the bracket closing the one at *offset*, or -1."""
        depth = 0
        index = offset
        while True:
            token_type = self._peek_type(index)
            if token_type == TokenType.EOF:
                return -1
            if token_type in _OPENERS:
                depth += 1
            elif token_type in _CLOSERS:
                depth -= 1
                if depth == 0:
                    return index
            index += 1

    def _skip_balanced(self, open_type: TokenType) -> None:
        """Consume a bracketed group starting at the current token, including both brackets."""
        open_tok = self._expect(open_type)
        close_type = _OPENERS[open_type]
        depth = 1
        while depth > 0:
            tok = self._current()
            if tok.type == TokenType.EOF:
                raise ParseError(
                    f"Unclosed {open_type.value!r}",
                    open_tok.line,
                    open_tok.column,
                )
            if tok.type == open_type:
                depth += 1
            elif tok.type == close_type:
                depth -= 1
            self._advance()

    def _skip_until(self, *stops: TokenType) -> None:
        """Consume tokens until one of *stops* appears outside any bracket group."""
        depth = 0
        while not self._at_end():
            token_type = self._peek_type()
            if depth == 0 and token_type in stops:
                return
            if token_type in _OPENERS:
                depth += 1
            elif token_type in _CLOSERS:
                if depth == 0:
                    return
                depth -= 1
            self._advance()

    def _parse_group(self, parse_spec: Callable[[], _T]) -> list[_T]:
        """Parse either a single spec or a parenthesised, ';'-separated list of specs."""
        if not self._check(TokenType.LPAREN):
            return [parse_spec()]
        self._advance()  # consume (
        specs: list[_T] = []
        self._skip_semicolons()
        while not self._check(TokenType.RPAREN, TokenType.EOF):
            specs.append(parse_spec())
            if not self._check(TokenType.RPAREN):
                self._expect(TokenType.SEMICOLON)
            self._skip_semicolons()
        self._expect(TokenType.RPAREN)
        return specs

    def _parse_identifier_list(self) -> list[str]:
        """Parse a comma-separated list of identifiers."""
        names = [self._expect(TokenType.IDENTIFIER).value]
        while self._check(TokenType.COMMA):
            self._advance()  # consume ,
            names.append(self._expect(TokenType.IDENTIFIER).value)
        return names

    # ------------------------------------------------------------------
    # Top-level declarations
    # ------------------------------------------------------------------

    def _parse_top_level(self, result: SourceFile) -> None:
        """Parse one top-level declaration and record it in the SourceFile."""
        tok = self._current()
        if tok.type == TokenType.TYPE:
            self._advance()
            result.types.extend(self._parse_group(self._parse_type_spec))
        elif tok.type == TokenType.CONST:
            self._advance()
            result.const_groups.append(self._parse_group(self._parse_const_spec))
        elif tok.type == TokenType.VAR:
            self._skip_var_decl()
        elif tok.type == TokenType.FUNC:
            self._skip_func_decl()
        elif tok.type == TokenType.IMPORT:
            raise ParseError("Imports must appear before other declarations", tok.line, tok.column)
        else:
            raise ParseError(f"Unexpected {_describe(tok)} at top level", tok.line, tok.column)
        self._expect_terminator()

    def _skip_import_decl(self) -> None:
        """Skip: import spec | import ( spec; ... )"""
        self._expect(TokenType.IMPORT)
        self._parse_group(self._skip_import_spec)

    def _skip_import_spec(self) -> None:
        """Skip: [name | .] path"""
        if self._check(TokenType.IDENTIFIER, TokenType.DOT):
            self._advance()
        self._expect(TokenType.STRING)

    def _parse_type_spec(self) -> TypeSpec:
        """Parse: Name [TypeParams] [=] Type"""
        name_tok = self._expect(TokenType.IDENTIFIER)
        is_generic = False
        if (
            self._check(TokenType.LBRACKET)
            and self._peek_type(1) == TokenType.IDENTIFIER
            and self._peek_type(2) in _TYPE_PARAM_FOLLOWERS
        ):
            self._skip_balanced(TokenType.LBRACKET)
            is_generic = True
        is_alias = False
        if self._check(TokenType.ASSIGN):
            self._advance()  # consume =
            is_alias = True
        type_expr = self._parse_type()
        return TypeSpec(
            name=name_tok.value,
            type=type_expr,
            line=name_tok.line,
            is_generic=is_generic,
            is_alias=is_alias,
        )

    def _parse_const_spec(self) -> ConstSpec:
        """Parse: Name {, Name} [Type] [= Expr {, Expr}]"""
        first = self._current()
        names = self._parse_identifier_list()
        type_expr: TypeExpr | None = None
        if not self._check(TokenType.ASSIGN, TokenType.SEMICOLON, TokenType.RPAREN, TokenType.EOF):
            type_expr = self._parse_type()
        has_values = False
        if self._check(TokenType.ASSIGN):
            self._advance()  # consume =
            has_values = True
            self._skip_until(TokenType.SEMICOLON, TokenType.RPAREN)
        return ConstSpec(names=tuple(names), type=type_expr, has_values=has_values, line=first.line)

    def _skip_var_decl(self) -> None:
        """Skip: var spec | var ( spec; ... )"""
        self._expect(TokenType.VAR)
        if self._check(TokenType.LPAREN):
            self._skip_balanced(TokenType.LPAREN)
        else:
            self._skip_until(TokenType.SEMICOLON)

    def _skip_func_decl(self) -> None:
        """Skip: func [(recv)] Name [TypeParams] (params) [results] [{ body }]"""
        self._expect(TokenType.FUNC)
        if self._check(TokenType.LPAREN):
            self._skip_balanced(TokenType.LPAREN)
        self._expect(TokenType.IDENTIFIER)
        if self._check(TokenType.LBRACKET):
            self._skip_balanced(TokenType.LBRACKET)
        self._skip_signature()
        if self._check(TokenType.LBRACE):
            self._skip_balanced(TokenType.LBRACE)

    def _skip_signature(self) -> None:
        """Skip a parameter list and optional result list or result type."""
        self._skip_balanced(TokenType.LPAREN)
        if self._check(TokenType.LPAREN):
            self._skip_balanced(TokenType.LPAREN)
        elif self._peek_type() in _TYPE_START:
            self._parse_type()

    # ------------------------------------------------------------------
    # Type expressions
    # ------------------------------------------------------------------

    def _parse_type(self) -> TypeExpr:
        """Parse a type expression."""
        tok = self._current()
        if tok.type == TokenType.IDENTIFIER:
            return self._parse_type_name()
        if tok.type == TokenType.STAR:
            self._advance()
            return PointerExpr(self._parse_type())
        if tok.type == TokenType.LBRACKET:
            if self._peek_type(1) == TokenType.RBRACKET:
                self._advance()  # [
                self._advance()  # ]
                return SliceExpr(self._parse_type())
            self._skip_balanced(TokenType.LBRACKET)
            return ArrayExpr(self._parse_type())
        if tok.type == TokenType.MAP:
            self._advance()
            self._expect(TokenType.LBRACKET)
            key = self._parse_type()
            self._expect(TokenType.RBRACKET)
            return MapExpr(key=key, value=self._parse_type())
        if tok.type == TokenType.CHAN:
            self._advance()
            if self._check(TokenType.ARROW):
                self._advance()
            return ChanExpr(self._parse_type())
        if tok.type == TokenType.ARROW:
            self._advance()
            self._expect(TokenType.CHAN)
            return ChanExpr(self._parse_type())
        if tok.type == TokenType.FUNC:
            self._advance()
            self._skip_signature()
            return FuncExpr()
        if tok.type == TokenType.STRUCT:
            return self._parse_struct_type()
        if tok.type == TokenType.INTERFACE:
            return self._parse_interface_type()
        if tok.type == TokenType.LPAREN:
            self._advance()
            inner = self._parse_type()
            self._expect(TokenType.RPAREN)
            return inner
        raise ParseError(f"Expected type, got {_describe(tok)}", tok.line, tok.column)

    def _parse_type_name(self) -> TypeExpr:
        """Parse: Name | Package.Name, optionally followed by type arguments."""
        name = self._expect(TokenType.IDENTIFIER).value
        expr: TypeExpr
        if self._check(TokenType.DOT):
            self._advance()  # consume .
            expr = QualifiedExpr(package=name, name=self._expect(TokenType.IDENTIFIER).value)
        else:
            expr = IdentExpr(name=name)
        if self._check(TokenType.LBRACKET):
            self._skip_balanced(TokenType.LBRACKET)
            return GenericExpr(base=expr)
        return expr

    def _parse_struct_type(self) -> StructExpr:
        """Parse: struct { FieldDecl; ... }"""
        self._expect(TokenType.STRUCT)
        self._expect(TokenType.LBRACE)
        self._skip_semicolons()
        fields: list[FieldDecl] = []
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            fields.append(self._parse_field_decl())
            if not self._check(TokenType.RBRACE):
                self._expect(TokenType.SEMICOLON)
            self._skip_semicolons()
        self._expect(TokenType.RBRACE)
        return StructExpr(fields=tuple(fields))

    def _parse_field_decl(self) -> FieldDecl:
        """Parse a named field list with its type, or an embedded field, plus an optional tag."""
        names: list[str] = []
        type_expr: TypeExpr
        if self._check(TokenType.STAR):
            self._advance()
            type_expr = PointerExpr(self._parse_type_name())
        elif self._is_embedded_field():
            type_expr = self._parse_type_name()
        else:
            names = self._parse_identifier_list()
            type_expr = self._parse_type()
        tag: str | None = None
        if self._check(TokenType.STRING):
            tag = self._advance().value
        return FieldDecl(names=tuple(names), type=type_expr, tag=tag)

    def _is_embedded_field(self) -> bool:
        """Return True if the field starting at the current identifier declares no name."""
        if not self._check(TokenType.IDENTIFIER):
            return False
        ends = (TokenType.SEMICOLON, TokenType.RBRACE, TokenType.STRING)
        follower = self._peek_type(1)
        if follower == TokenType.DOT or follower in ends:
            return True
        if follower == TokenType.LBRACKET:
            closing = self._matching_offset(1)
            return closing != -1 and self._peek_type(closing + 1) in ends
        return False

    def _parse_interface_type(self) -> InterfaceExpr:
        """Parse: interface { Method(...) ...; Embedded; ... } keeping method names."""
        self._expect(TokenType.INTERFACE)
        self._expect(TokenType.LBRACE)
        self._skip_semicolons()
        methods: list[str] = []
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            if self._check(TokenType.IDENTIFIER) and self._peek_type(1) == TokenType.LPAREN:
                methods.append(self._current().value)
            self._skip_until(TokenType.SEMICOLON, TokenType.RBRACE)
            self._skip_semicolons()
        self._expect(TokenType.RBRACE)
        return InterfaceExpr(methods=tuple(methods))


def _describe(tok: Token) -> str:
    """Return a readable description of *tok* for error messages."""
    if tok.type == TokenType.EOF:
        return "end of file"
    if tok.type == TokenType.SEMICOLON and tok.value == "\n":
        return "newline"
    return repr(tok.value)
