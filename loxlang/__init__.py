"""loxlang: a small tree-walking interpreter for Lox expressions.

Source text flows through three stages:

    Lexer -> Parser -> Interpreter

each of which keeps the source position of what it produces so errors can be
reported as ``<row>:<col>: <message>``.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from loxlang.environment import Environment
from loxlang.exceptions import LoxRuntimeError, LoxSyntaxError
from loxlang.interpreter import Interpreter
from loxlang.lexer import Lexer, tokenize
from loxlang.parser import Parser
from loxlang.position import Located, Position

__all__ = [
    "Environment",
    "Interpreter",
    "Lexer",
    "Located",
    "LoxRuntimeError",
    "LoxSyntaxError",
    "Parser",
    "Position",
    "tokenize",
]
