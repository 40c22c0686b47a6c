"""
Expression parsing utilities for loxlang.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity. Binary levels fold to the left;
unary operators and assignment nest to the right.

Nodes are tuples tagged by their first element:
    ('literal', value)
    ('grouping', expr)
    ('unary', op, operand)
    ('binary', left, op, right)
    ('variable', name)
    ('assign', name, value)
where `op` is the located operator token and `name` a located string.
"""

from typing import TYPE_CHECKING

from loxlang.exceptions import (
    ExpectedExpressionError,
    InvalidAssignmentTargetError,
    UnclosedGroupingError,
)
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> tuple:
    """Parse a literal, variable, or parenthesized expression."""
    tok = parser.peek()
    if tok is None:
        raise ExpectedExpressionError(parser.current_position())
    kind = tok.value.type

    if kind in (TokenType.NUMBER, TokenType.STRING):
        parser.advance()
        return ('literal', tok.value.value)

    if kind in (TokenType.TRUE, TokenType.FALSE):
        parser.advance()
        return ('literal', kind == TokenType.TRUE)

    if kind == TokenType.NIL:
        parser.advance()
        return ('literal', None)

    if kind == TokenType.IDENTIFIER:
        parser.advance()
        return ('variable', tok.co_locate(tok.value.value))

    if kind == TokenType.LEFT_PAREN:
        parser.advance()
        node = parser.expression()
        parser.eat(TokenType.RIGHT_PAREN, UnclosedGroupingError)
        return ('grouping', node)

    raise ExpectedExpressionError(tok.pos)


def parse_unary(parser: 'Parser') -> tuple:
    """Parse '!' and '-' prefix operators."""
    op_tok = parser.match(TokenType.BANG, TokenType.MINUS)
    if op_tok is not None:
        return ('unary', op_tok, parser.unary())
    return parser.primary()


def parse_factor(parser: 'Parser') -> tuple:
    """Parse multiplication and division expressions."""
    result = parser.unary()
    while (op_tok := parser.match(TokenType.SLASH, TokenType.STAR)) is not None:
        result = ('binary', result, op_tok, parser.unary())
    return result


def parse_term(parser: 'Parser') -> tuple:
    """Parse addition and subtraction expressions."""
    result = parser.factor()
    while (op_tok := parser.match(TokenType.MINUS, TokenType.PLUS)) is not None:
        result = ('binary', result, op_tok, parser.factor())
    return result


def parse_comparison(parser: 'Parser') -> tuple:
    """Parse comparison expressions (<, >, <=, >=)."""
    result = parser.term()
    while (op_tok := parser.match(
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
    )) is not None:
        result = ('binary', result, op_tok, parser.term())
    return result


def parse_equality(parser: 'Parser') -> tuple:
    """Parse equality expressions (==, !=)."""
    result = parser.comparison()
    while (op_tok := parser.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)) is not None:
        result = ('binary', result, op_tok, parser.comparison())
    return result


def parse_assignment(parser: 'Parser') -> tuple:
    """Parse 'name = value', right-associative, or an equality expression."""
    target = parser.equality()
    equals = parser.match(TokenType.EQUAL)
    if equals is None:
        return target

    value = parser.assignment()
    if target[0] == 'variable':
        return ('assign', target[1], value)
    raise InvalidAssignmentTargetError(equals.pos)


# ---- Entry point ----

def parse_expression(parser: 'Parser') -> tuple:
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.assignment()
