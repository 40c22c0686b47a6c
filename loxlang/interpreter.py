"""
Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, comparison, equality, string concatenation, global variables and print statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via `execute_stmt()`, and expressions are evaluated using
`eval_expr()`. Both operate over the tagged tuples built by `loxlang.parser`.

2. Values
Runtime values are plain Python objects: `bool`, `float`, `str` and `None` for nil.
Numbers are always floats, so `isinstance(value, float)` never mistakes a boolean for a number.

3. Environment
A single `Environment` holds every variable for the lifetime of the interpreter. `var`
statements define names (redefinition simply overwrites) and assignments update them.

4. Error Handling
Type mismatches and unknown variables raise `LoxRuntimeError` subclasses positioned at the
offending operator or variable. Nothing is caught here: the first error aborts the current
statement and `execute()` stops, leaving the continuation policy to the caller.
"""
import decimal
import math
import sys

from loxlang.environment import Environment
from loxlang.exceptions import (
    ExpectedNumberError,
    ExpectedNumbersError,
    ExpectedNumbersOrStringsError,
)
from loxlang.tokens import TokenType


def is_truthy(value) -> bool:
    """
    Nil and false are falsy; every other value, including 0 and "", is truthy.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left, right) -> bool:
    """
    Compare two values; values of different types are never equal.
    """
    if type(left) is not type(right):
        return False
    return left == right


def stringify(value) -> str:
    """
    Render a value the way `print` shows it.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        # Shortest round-trip digits, always written out positionally.
        text = format(decimal.Decimal(repr(value)), "f")
        if value.is_integer():
            return text.removesuffix(".0")
        return text
    return value


class Interpreter:
    """
    Tree-walk interpreter for loxlang.
    """
    def __init__(self, out=None):
        """
        Initialize the interpreter.

        Parameters:
            out (TextIO | None): Stream for print output; defaults to the current `sys.stdout`.
        """
        self.environment = Environment()
        self.out = out

    def _numbers(self, op, left, right) -> tuple[float, float]:
        if isinstance(left, float) and isinstance(right, float):
            return left, right
        raise ExpectedNumbersError(op.pos)

    def eval_expr(self, node):
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (tuple): An expression node; the first element is its kind
                ('literal', 'grouping', 'unary', 'binary', 'variable', 'assign').

        Returns:
            The evaluated result of the expression.

        Raises:
            ExpectedNumbersError: If an arithmetic or comparison operand is not a number.
            ExpectedNumbersOrStringsError: If '+' mixes types or gets neither numbers nor strings.
            UndefinedVariableError: If a variable is referenced that has not been defined.
        """
        kind = node[0]

        match kind:
            case 'literal':
                return node[1]

            case 'grouping':
                return self.eval_expr(node[1])

            case 'variable':
                return self.environment.get(node[1])

            case 'assign':
                _, name, value_node = node
                value = self.eval_expr(value_node)
                self.environment.assign(name, value)
                return value

            case 'unary':
                _, op, operand_node = node
                operand = self.eval_expr(operand_node)
                if op.value.type == TokenType.BANG:
                    return not is_truthy(operand)
                if not isinstance(operand, float):
                    raise ExpectedNumberError(op.pos)
                return -operand

            case 'binary':
                _, left_node, op, right_node = node
                lhs = self.eval_expr(left_node)
                rhs = self.eval_expr(right_node)
                return self._binary(op, lhs, rhs)

        raise ValueError(f"Unknown expression node {kind!r}")

    def _binary(self, op, lhs, rhs):
        match op.value.type:
            # Equality never fails
            case TokenType.EQUAL_EQUAL:
                return is_equal(lhs, rhs)
            case TokenType.BANG_EQUAL:
                return not is_equal(lhs, rhs)

            # Addition doubles as string concatenation
            case TokenType.PLUS:
                if isinstance(lhs, float) and isinstance(rhs, float):
                    return lhs + rhs
                if isinstance(lhs, str) and isinstance(rhs, str):
                    return lhs + rhs
                raise ExpectedNumbersOrStringsError(op.pos)

            # Arithmetic
            case TokenType.MINUS:
                lhs, rhs = self._numbers(op, lhs, rhs)
                return lhs - rhs
            case TokenType.STAR:
                lhs, rhs = self._numbers(op, lhs, rhs)
                return lhs * rhs
            case TokenType.SLASH:
                lhs, rhs = self._numbers(op, lhs, rhs)
                if rhs == 0:
                    # IEEE-754 division, which Python refuses for zero divisors.
                    if lhs == 0 or math.isnan(lhs):
                        return math.nan
                    return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
                return lhs / rhs

            # Comparison
            case TokenType.GREATER:
                lhs, rhs = self._numbers(op, lhs, rhs)
                return lhs > rhs
            case TokenType.GREATER_EQUAL:
                lhs, rhs = self._numbers(op, lhs, rhs)
                return lhs >= rhs
            case TokenType.LESS:
                lhs, rhs = self._numbers(op, lhs, rhs)
                return lhs < rhs
            case TokenType.LESS_EQUAL:
                lhs, rhs = self._numbers(op, lhs, rhs)
                return lhs <= rhs

        raise ValueError(f"Unknown binary operator {op.value.type!r}")

    def execute_stmt(self, stmt: tuple) -> None:
        """
        Execute a single statement.

        Parameters:
            stmt (tuple): A ('print' | 'expr_stmt' | 'var', ...) tuple.

        Raises:
            LoxRuntimeError: If evaluating the statement's expression fails.
        """
        kind = stmt[0]

        if kind == 'print':
            value = self.eval_expr(stmt[1])
            print(stringify(value), file=self.out or sys.stdout)

        elif kind == 'expr_stmt':
            self.eval_expr(stmt[1])

        elif kind == 'var':
            _, name, initializer = stmt
            value = self.eval_expr(initializer)
            self.environment.define(name.value, value)

        else:
            raise ValueError(f"Unknown statement {kind!r}")

    def execute(self, statements) -> None:
        """
        Executes statements in order, stopping at the first runtime error.

        Parameters:
            statements (Iterable[tuple]): Statements, e.g. a list or a `Parser`.

        Raises:
            LoxRuntimeError: The first error raised; later statements are not run.
        """
        for stmt in statements:
            self.execute_stmt(stmt)
