"""
Tests for variable declaration, assignment, lookup and print statements.
"""
import pytest

from loxlang.environment import Environment
from loxlang.exceptions import ExpectedNumbersError, UndefinedVariableError
from loxlang.interpreter import Interpreter
from loxlang.lexer import Lexer
from loxlang.parser import Parser
from loxlang.position import Located, Position
from loxlang.tests.utils import evaluate, parse_source, run_source


def test_var_then_print(capsys):
    run_source("var a = 5; print a;")
    captured = capsys.readouterr().out.splitlines()
    assert captured == ['5']


def test_print_renders_each_kind(capsys):
    run_source('print 1 + 1.5; print "hi"; print nil; print 1 < 2; print "a" + "b";')
    captured = capsys.readouterr().out.splitlines()
    assert captured == ['2.5', 'hi', 'null', 'true', 'ab']


def test_redeclaration_overwrites(capsys):
    interpreter = run_source('var a = 1; var a = "two"; print a;')
    assert capsys.readouterr().out.splitlines() == ['two']
    assert interpreter.environment.values['a'] == "two"


def test_initializer_can_read_previous_binding():
    interpreter = run_source("var a = 1; var a = a + 1;")
    assert interpreter.environment.values['a'] == 2.0


def test_assignment_updates_and_yields_value(capsys):
    interpreter = run_source("var a = 1; var b = 0; print b = a = 3; print a;")
    assert capsys.readouterr().out.splitlines() == ['3', '3']
    assert interpreter.environment.values == {'a': 3.0, 'b': 3.0}


def test_expression_statement_output_is_discarded(capsys):
    run_source("1 + 2; \"ignored\";")
    assert capsys.readouterr().out == ""


def test_undefined_variable_lookup():
    interpreter = Interpreter()
    with pytest.raises(UndefinedVariableError) as excinfo:
        evaluate("1 +\n   x", interpreter)
    assert excinfo.value.varname == "x"
    assert excinfo.value.pos == Position(2, 4)
    assert str(excinfo.value) == "2:4: variable 'x' is not defined"


def test_assignment_without_declaration_raises():
    statements, _ = parse_source("x = 5;")
    interpreter = Interpreter()
    with pytest.raises(UndefinedVariableError):
        interpreter.execute(statements)
    assert 'x' not in interpreter.environment


def test_first_runtime_error_stops_execution(capsys):
    statements, errors = parse_source('print 1; print "a" - 1; print 3;')
    assert errors == []
    interpreter = Interpreter()
    with pytest.raises(ExpectedNumbersError):
        interpreter.execute(statements)
    assert capsys.readouterr().out.splitlines() == ['1']


def test_execute_pulls_statements_lazily(capsys):
    parser = Parser(Lexer("var a = 1; print a; print b;"))
    interpreter = Interpreter()
    with pytest.raises(UndefinedVariableError):
        interpreter.execute(parser)
    assert capsys.readouterr().out.splitlines() == ['1']


def test_interpreter_writes_to_given_stream(tmp_path):
    out_file = tmp_path / "out.txt"
    statements, _ = parse_source('print "to file";')
    with out_file.open("w", encoding="utf-8") as out:
        Interpreter(out).execute(statements)
    assert out_file.read_text(encoding="utf-8") == "to file\n"


def test_environment_define_get_assign():
    env = Environment()
    name = Located(Position(1, 1), "n")
    with pytest.raises(UndefinedVariableError):
        env.get(name)
    with pytest.raises(UndefinedVariableError):
        env.assign(name, 1.0)
    env.define("n", 1.0)
    env.define("n", 2.0)
    assert env.get(name) == 2.0
    env.assign(name, None)
    assert env.get(name) is None
    assert "n" in env
