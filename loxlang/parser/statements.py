"""
Statement parsing utilities for loxlang.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle the statement forms of the language: variable declarations, print
statements and bare expression statements. Every form ends with ';'.

Nodes:
    ('var', name, initializer)
    ('print', expr)
    ('expr_stmt', expr)
"""

from typing import TYPE_CHECKING

from loxlang.exceptions import (
    ExpectedInitializerError,
    ExpectedVariableNameError,
    UnterminatedStatementError,
)
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


def parse_declaration(parser: 'Parser') -> tuple:
    """
    Parse a declaration, or any statement that is not one.

    Syntax:
        var <identifier> = <expression> ; | <statement>
    """
    if parser.check(TokenType.VAR):
        return parser.parse_var_declaration()
    return parser.statement()


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement.

    Syntax:
        print <expression> ; | <expression> ;
    """
    if parser.match(TokenType.PRINT):
        return parser.parse_print()
    return parser.parse_expression_statement()


def parse_var_declaration(parser: 'Parser') -> tuple:
    """
    Parse a variable declaration. The initializer is required.

    Args:
        parser: The parser instance, positioned on 'var'.

    Returns:
        tuple: ('var', located_name, initializer_expr)
    """
    parser.advance()
    name_tok = parser.eat(TokenType.IDENTIFIER, ExpectedVariableNameError)
    parser.eat(TokenType.EQUAL, ExpectedInitializerError)
    initializer = parser.expression()
    parser.eat(TokenType.SEMICOLON, UnterminatedStatementError)
    return ('var', name_tok.co_locate(name_tok.value.value), initializer)


def parse_print(parser: 'Parser') -> tuple:
    """
    Parse the remainder of a 'print' statement after the keyword.
    """
    value = parser.expression()
    parser.eat(TokenType.SEMICOLON, UnterminatedStatementError)
    return ('print', value)


def parse_expression_statement(parser: 'Parser') -> tuple:
    """
    Parse an expression followed by ';'.
    """
    expr = parser.expression()
    parser.eat(TokenType.SEMICOLON, UnterminatedStatementError)
    return ('expr_stmt', expr)
