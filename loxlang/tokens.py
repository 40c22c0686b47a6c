"""Token definitions shared by the lexer and parser.

Token types are kept in one enumeration so the lexer, the parser and the
interpreter cannot drift apart when a token is added or renamed.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class TokenType(str, Enum):
    """
    Enumeration of every token the lexer can produce.
    """

    # Single-character punctuation
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # One or two character operators
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Literals
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"

    # Keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


KEYWORDS: dict[str, TokenType] = {
    tt.value: tt
    for tt in (
        TokenType.AND,
        TokenType.CLASS,
        TokenType.ELSE,
        TokenType.FALSE,
        TokenType.FUN,
        TokenType.FOR,
        TokenType.IF,
        TokenType.NIL,
        TokenType.OR,
        TokenType.PRINT,
        TokenType.RETURN,
        TokenType.SUPER,
        TokenType.THIS,
        TokenType.TRUE,
        TokenType.VAR,
        TokenType.WHILE,
    )
}

# Tokens that may begin a statement; the parser resynchronizes on these.
STATEMENT_KEYWORDS = frozenset({
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_: TokenType, value):
        """
        Initialize a new token.

        Parameters:
            type_ (TokenType): The token type.
            value (Any): The float for numbers, the text for strings and
                identifiers, otherwise the lexeme.
        """
        self.type = type_
        self.value = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type.name}, {self.value!r})"


__all__ = ["TokenType", "Token", "KEYWORDS", "STATEMENT_KEYWORDS"]
