"""
Main parser entry point for loxlang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`loxlang.parser.expressions` and `loxlang.parser.statements`.

The parser pulls tokens from the lexer one at a time and is itself an
iterator: every pull yields the next statement. Syntax errors never escape
the iteration. They are collected in `Parser.errors`, the parser skips ahead
to the next statement boundary, and parsing carries on from there.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import Iterable, Iterator

from loxlang.exceptions import LoxSyntaxError, NestingTooDeepError
from loxlang.position import Located, Position
from loxlang.tokens import STATEMENT_KEYWORDS, Token, TokenType

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """loxlang parser."""

    def __init__(self, tokens: Iterable):
        """
        Initialize the parser over a stream of lexer results.

        Parameters:
            tokens (Iterable): Located tokens and syntax errors, normally a
                `loxlang.lexer.Lexer`.
        """
        self.tokens = iter(tokens)
        self.errors: list[LoxSyntaxError] = []
        self.consumed = 0
        self._lookahead: Located[Token] | None = None
        self._exhausted = False

    def __iter__(self) -> Iterator[tuple]:
        return self

    def __next__(self) -> tuple:
        while self.peek() is not None:
            start = self.consumed
            try:
                return self.declaration()
            except LoxSyntaxError as err:
                self.errors.append(err)
                self.synchronize(start)
            except RecursionError:
                self.errors.append(NestingTooDeepError(self.current_position()))
                self.synchronize(start)
        raise StopIteration


    # Token plumbing
    def peek(self) -> Located[Token] | None:
        """
        Return the next token without consuming it, or None at end of input.

        Lexing errors met on the way are recorded and skipped.
        """
        while self._lookahead is None and not self._exhausted:
            item = next(self.tokens, None)
            if item is None:
                self._exhausted = True
            elif isinstance(item, LoxSyntaxError):
                self.errors.append(item)
            else:
                self._lookahead = item
        return self._lookahead

    def advance(self) -> Located[Token] | None:
        """
        Consume and return the next token, or None at end of input.
        """
        tok = self.peek()
        if tok is not None:
            self._lookahead = None
            self.consumed += 1
        return tok

    def check(self, *token_types: TokenType) -> bool:
        """
        Whether the next token is one of the given types.
        """
        tok = self.peek()
        return tok is not None and tok.value.type in token_types

    def match(self, *token_types: TokenType) -> Located[Token] | None:
        """
        Consume the next token if it is one of the given types.
        """
        if self.check(*token_types):
            return self.advance()
        return None

    def current_position(self) -> Position:
        """
        Position of the next token, or `Position.EOF` when input is exhausted.
        """
        tok = self.peek()
        return tok.pos if tok is not None else Position.EOF

    def eat(self, token_type: TokenType, error: type[LoxSyntaxError]) -> Located[Token]:
        """
        Consume the next token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.
            error (type): The syntax error to raise otherwise.

        Raises:
            LoxSyntaxError: `error`, positioned at the unexpected token.
        """
        tok = self.match(token_type)
        if tok is None:
            raise error(self.current_position())
        return tok

    def synchronize(self, start: int) -> None:
        """
        Discard tokens until a statement boundary after a syntax error.

        Stops in front of a statement keyword, or just past a ';'. When the
        failed statement consumed nothing, its first token is dropped so
        parsing always moves forward.
        """
        if self.consumed == start:
            skipped = self.advance()
            if skipped is not None and skipped.value.type == TokenType.SEMICOLON:
                return
        while (tok := self.peek()) is not None:
            if tok.value.type in STATEMENT_KEYWORDS:
                return
            self.advance()
            if tok.value.type == TokenType.SEMICOLON:
                return


    # Expression wrappers
    def primary(self) -> tuple:
        """
        Parse a literal, variable, or parenthesized group.
        """
        return _expr.parse_primary(self)

    def unary(self) -> tuple:
        """
        Parse a '!' or '-' prefixed expression.
        """
        return _expr.parse_unary(self)

    def factor(self) -> tuple:
        """
        Parse multiplication and division.
        """
        return _expr.parse_factor(self)

    def term(self) -> tuple:
        """
        Parse addition and subtraction.
        """
        return _expr.parse_term(self)

    def comparison(self) -> tuple:
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def equality(self) -> tuple:
        """
        Parse an equality expression.
        """
        return _expr.parse_equality(self)

    def assignment(self) -> tuple:
        """
        Parse a variable assignment or fall through to equality.
        """
        return _expr.parse_assignment(self)

    def expression(self) -> tuple:
        """
        Parse a full expression.
        """
        return _expr.parse_expression(self)


    # Statement wrappers
    def declaration(self) -> tuple:
        """
        Parse a declaration or any other statement.
        """
        return _stmt.parse_declaration(self)

    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_var_declaration(self) -> tuple:
        """
        Parse a 'var' declaration.
        """
        return _stmt.parse_var_declaration(self)

    def parse_print(self) -> tuple:
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_expression_statement(self) -> tuple:
        """
        Parse an expression evaluated for its effect.
        """
        return _stmt.parse_expression_statement(self)


    def parse(self) -> list[tuple]:
        """
        Parse the remaining input into a list of statements.
        """
        return list(self)
