"""
Utility functions shared across loxlang tests.
"""
from loxlang.interpreter import Interpreter
from loxlang.lexer import Lexer
from loxlang.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the AST and the collected syntax errors.
    """
    parser = Parser(Lexer(source))
    statements = parser.parse()
    return statements, parser.errors


def parse_expr(source: str) -> tuple:
    """
    Parse a single expression statement (';' is appended) and return its expression.
    """
    statements, errors = parse_source(source + ";")
    assert errors == []
    assert len(statements) == 1 and statements[0][0] == 'expr_stmt'
    return statements[0][1]


def evaluate(source: str, interpreter: Interpreter | None = None):
    """
    Evaluate a single expression and return its value.
    """
    interpreter = interpreter or Interpreter()
    return interpreter.eval_expr(parse_expr(source))


def run_source(source: str) -> Interpreter:
    """
    Parse and execute a program that is expected to be syntactically valid.
    """
    statements, errors = parse_source(source)
    assert errors == [], [str(e) for e in errors]
    interpreter = Interpreter()
    interpreter.execute(statements)
    return interpreter
