"""Errors.

Two separate families: :class:`LoxSyntaxError` for anything the lexer or
parser rejects, and :class:`LoxRuntimeError` for failures while the
interpreter walks the tree. Each error carries the :class:`Position` it was
raised at and renders as ``<row>:<col>: <message>`` (or ``eof: <message>``).


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.position import Position


class LoxSyntaxError(Exception):
    """
    Base class for lexing and parsing errors.
    """
    message = "syntax error"

    def __init__(self, pos: Position):
        self.pos = pos
        super().__init__(f"{pos}: {self.message}")


class UnterminatedStringError(LoxSyntaxError):
    """
    A string literal ran into the end of input.
    """
    message = "expected '\"' at the end of string"


class StrayCharacterError(LoxSyntaxError):
    """
    A character that cannot start any token.
    """
    def __init__(self, pos: Position, char: str):
        self.char = char
        self.message = f"stray {char} in program"
        super().__init__(pos)


class ExpectedExpressionError(LoxSyntaxError):
    message = "expected expression"


class UnclosedGroupingError(LoxSyntaxError):
    message = "expected ')' at the end of grouping expression"


class UnterminatedStatementError(LoxSyntaxError):
    message = "expected ';' at the end of statement"


class ExpectedVariableNameError(LoxSyntaxError):
    message = "expected variable name"


class ExpectedInitializerError(LoxSyntaxError):
    message = "expected '=' after variable name"


class InvalidAssignmentTargetError(LoxSyntaxError):
    message = "invalid assignment target"


class NestingTooDeepError(LoxSyntaxError):
    """
    An expression nested deeper than the parser can recurse.
    """
    message = "expression nests too deeply"


class LoxRuntimeError(Exception):
    """
    Base class for errors raised while evaluating a program.
    """
    message = "runtime error"

    def __init__(self, pos: Position):
        self.pos = pos
        super().__init__(f"{pos}: {self.message}")


class ExpectedNumbersError(LoxRuntimeError):
    """
    Error for arithmetic or comparison on non-numeric operands.
    """
    message = "operands must be numbers"


class ExpectedNumberError(ExpectedNumbersError):
    """
    Error for unary minus on a non-numeric operand.
    """
    message = "operand must be a number"


class ExpectedNumbersOrStringsError(LoxRuntimeError):
    """
    Error for '+' on anything but two numbers or two strings.
    """
    message = "operands must be either all numbers or all strings"


class UndefinedVariableError(LoxRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, pos: Position, varname: str):
        self.varname = varname
        self.message = f"variable '{varname}' is not defined"
        super().__init__(pos)
