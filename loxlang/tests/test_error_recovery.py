"""
Tests for syntax error reporting and parser synchronization.
"""
import sys

from loxlang.exceptions import (
    ExpectedExpressionError,
    ExpectedInitializerError,
    ExpectedVariableNameError,
    InvalidAssignmentTargetError,
    NestingTooDeepError,
    StrayCharacterError,
    UnclosedGroupingError,
    UnterminatedStatementError,
    UnterminatedStringError,
)
from loxlang.position import Position
from loxlang.tests.utils import parse_source


def test_missing_semicolon_at_eof():
    statements, errors = parse_source("print 1")
    assert statements == []
    assert len(errors) == 1
    assert isinstance(errors[0], UnterminatedStatementError)
    assert errors[0].pos == Position.EOF
    assert str(errors[0]) == "eof: expected ';' at the end of statement"


def test_missing_semicolon_before_next_statement():
    statements, errors = parse_source("print 1 print 2;")
    assert [type(e) for e in errors] == [UnterminatedStatementError]
    assert errors[0].pos == Position(1, 9)
    assert len(statements) == 1
    assert statements[0] == ('print', ('literal', 2.0))


def test_recovers_after_bad_expression():
    statements, errors = parse_source("1 + ; print 2;")
    assert len(errors) == 1
    assert isinstance(errors[0], ExpectedExpressionError)
    assert errors[0].pos == Position(1, 5)
    assert statements == [('print', ('literal', 2.0))]


def test_collects_every_error():
    source = "1 +;\n(2;\nprint 3;\nvar;"
    statements, errors = parse_source(source)
    assert [type(e) for e in errors] == [
        ExpectedExpressionError,
        UnclosedGroupingError,
        ExpectedVariableNameError,
    ]
    assert [str(e.pos) for e in errors] == ["1:4", "2:3", "4:4"]
    assert statements == [('print', ('literal', 3.0))]


def test_unclosed_grouping_at_eof():
    _, errors = parse_source("(1 + 2")
    assert isinstance(errors[0], UnclosedGroupingError)
    assert errors[0].pos == Position.EOF


def test_expected_expression_at_eof():
    _, errors = parse_source("print")
    assert isinstance(errors[0], ExpectedExpressionError)
    assert errors[0].pos == Position.EOF


def test_var_requires_name_and_initializer():
    _, errors = parse_source("var 1 = 2;")
    assert isinstance(errors[0], ExpectedVariableNameError)
    assert errors[0].pos == Position(1, 5)

    statements, errors = parse_source("var a; print 1;")
    assert isinstance(errors[0], ExpectedInitializerError)
    assert errors[0].pos == Position(1, 6)
    assert statements == [('print', ('literal', 1.0))]


def test_invalid_assignment_target():
    statements, errors = parse_source("1 = 2; (a) = 3; print 4;")
    assert [type(e) for e in errors] == [
        InvalidAssignmentTargetError,
        InvalidAssignmentTargetError,
    ]
    assert [str(e.pos) for e in errors] == ["1:3", "1:12"]
    assert statements == [('print', ('literal', 4.0))]


def test_lexer_errors_are_recorded_and_skipped():
    statements, errors = parse_source("print 1 @ + 2;")
    assert [type(e) for e in errors] == [StrayCharacterError]
    assert errors[0].pos == Position(1, 9)
    assert len(statements) == 1
    assert statements[0][0] == 'print'


def test_lexer_error_while_peeking_past_last_token():
    statements, errors = parse_source('print 1; "open')
    assert len(statements) == 1
    assert [type(e) for e in errors] == [UnterminatedStringError]
    assert errors[0].pos == Position.EOF


def test_stops_in_front_of_statement_keyword():
    statements, errors = parse_source("1 + + var a = 1; print a;")
    assert [type(e) for e in errors] == [ExpectedExpressionError]
    assert [stmt[0] for stmt in statements] == ['var', 'print']


def test_unparseable_keyword_does_not_loop_forever():
    statements, errors = parse_source("class; fun; print 1;")
    assert [type(e) for e in errors] == [ExpectedExpressionError, ExpectedExpressionError]
    assert statements == [('print', ('literal', 1.0))]


def test_leading_semicolon_only_skips_itself():
    statements, errors = parse_source("; 1; 2;")
    assert len(errors) == 1
    assert len(statements) == 2


def test_deep_nesting_is_reported_and_parsing_continues():
    depth = sys.getrecursionlimit()
    source = "print " + "(" * depth + "1" + ")" * depth + "; print 2;"
    statements, errors = parse_source(source)
    assert [type(e) for e in errors] == [NestingTooDeepError]
    assert str(errors[0]).endswith("expression nests too deeply")
    assert statements == [('print', ('literal', 2.0))]


def test_moderate_nesting_still_parses():
    source = "print " + "(" * 30 + "1" + ")" * 30 + ";"
    statements, errors = parse_source(source)
    assert errors == []
    assert len(statements) == 1
