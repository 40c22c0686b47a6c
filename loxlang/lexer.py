"""Lexer for loxlang.

The lexer is a lazy iterator over the source text. A combined regular
expression of named groups is matched at the current offset on every pull,
and each match yields either a located :class:`Token` or a
:class:`LoxSyntaxError` describing why the text could not be tokenized.
Errors are yielded, not raised, so the parser can record them and carry on.

Whitespace and ``//`` comments are skipped without producing anything.
Every element is positioned at its first character; rows advance on ``\\n``
and columns restart at 1.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re
from typing import Iterator

from loxlang.exceptions import (
    LoxSyntaxError,
    StrayCharacterError,
    UnterminatedStringError,
)
from loxlang.position import Located, Position
from loxlang.tokens import KEYWORDS, Token, TokenType

LexResult = Located[Token] | LoxSyntaxError

token_specification: list[tuple[str, str]] = [
    # Skipped text
    ('COMMENT',      r'//[^\n]*'),
    ('SKIP',         r'\s+'),

    # Literals
    ('NUMBER',       r'[0-9]+(?:\.[0-9]+)?'),
    ('STRING',       r'"[^"]*"'),
    ('UNTERMINATED', r'"'),

    # Identifiers and keywords
    ('ID',           r'[^\W\d]\w*'),

    # Two-character operators first, then single characters
    ('OPERATOR',     r'!=|==|>=|<=|[(){},.\-+;/*!=<>]'),

    # Anything else
    ('MISMATCH',     r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)


class Lexer:
    """
    Lazy, forward-only token producer.

    Iterating a lexer yields ``Located[Token]`` for every token and a
    ``LoxSyntaxError`` instance for every lexing failure. A lexer cannot be
    restarted; create a new one to scan the source again.
    """
    def __init__(self, source: str):
        self.source = source
        self.offset = 0
        self.row = 1
        self.col = 1

    def __iter__(self) -> Iterator[LexResult]:
        return self

    def __next__(self) -> LexResult:
        while self.offset < len(self.source):
            match_obj = TOKEN_REGEX.match(self.source, self.offset)
            kind = match_obj.lastgroup
            value = match_obj.group()
            pos = Position(self.row, self.col)
            self._consume(value)

            if kind in ('SKIP', 'COMMENT'):
                continue
            if kind == 'MISMATCH':
                return StrayCharacterError(pos, value)
            if kind == 'UNTERMINATED':
                # The rest of the input belongs to the broken string.
                self._consume(self.source[self.offset:])
                return UnterminatedStringError(Position.EOF)

            if kind == 'NUMBER':
                token = Token(TokenType.NUMBER, float(value))
            elif kind == 'STRING':
                token = Token(TokenType.STRING, value[1:-1])
            elif kind == 'ID':
                if value in KEYWORDS:
                    token = Token(KEYWORDS[value], value)
                else:
                    token = Token(TokenType.IDENTIFIER, value)
            else:
                token = Token(TokenType(value), value)
            return Located(pos, token)

        raise StopIteration

    def _consume(self, text: str) -> None:
        """
        Advance past ``text``, keeping the row and column in step.
        """
        self.offset += len(text)
        newlines = text.count('\n')
        if newlines:
            self.row += newlines
            self.col = len(text) - text.rfind('\n')
        else:
            self.col += len(text)


def tokenize(code: str) -> tuple[list[Located[Token]], list[LoxSyntaxError]]:
    """
    Scan a whole source text eagerly.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Located[Token]]: The tokens, in source order.
        list[LoxSyntaxError]: The lexing errors, in source order.
    """
    tokens = []
    errors = []
    for item in Lexer(code):
        if isinstance(item, LoxSyntaxError):
            errors.append(item)
        else:
            tokens.append(item)
    return tokens, errors
