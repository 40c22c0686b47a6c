"""
Lox Language Interpreter

This is the main entry point for the loxlang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into located tokens.
3. The Parser processes tokens into an AST, collecting every syntax error.
4. If parsing succeeded, the Interpreter walks the AST, executing statements
   until the program ends or a runtime error stops it.

Exit codes follow the sysexits convention: 64 for bad usage, 65 when the
program has syntax errors, 66 when the script cannot be read, 70 when it
fails at runtime.
"""
import os
import sys

from loxlang.exceptions import LoxRuntimeError
from loxlang.interpreter import Interpreter
from loxlang.lexer import Lexer, tokenize
from loxlang.parser import Parser

EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70


def print_usage():
    """
    Print usage.
    """
    print()
    print("Lox Language Interpreter")
    print()
    print("Usage:")
    print("    lox <script.lox>")
    print()
    print("Arguments:")
    print("    <script.lox>")
    print("        Path to a Lox source file to execute.")
    print()
    print("Example:")
    print("    lox hello.lox")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    LOXDEBUG")
    print("        When set, dump the tokens and AST to stderr before running.")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n", file=sys.stderr)
    print(tokens, file=sys.stderr)
    print("\nAST:\n", file=sys.stderr)
    print(ast, file=sys.stderr)
    print(" ", file=sys.stderr)


def run_source(source: str, interpreter: Interpreter | None = None) -> int:
    """
    Parse and run a program, reporting errors on stderr.

    Nothing is executed when the program has syntax errors. Returns the
    process exit code.
    """
    if interpreter is None:
        interpreter = Interpreter()

    parser = Parser(Lexer(source))
    ast = parser.parse()

    if os.environ.get('LOXDEBUG'):
        tokens, _ = tokenize(source)
        debug_print_tokens_ast(tokens, ast)

    if parser.errors:
        for error in parser.errors:
            print(error, file=sys.stderr)
        return EX_DATAERR

    try:
        interpreter.execute(ast)
    except LoxRuntimeError as e:
        print(e, file=sys.stderr)
        return EX_SOFTWARE
    except RecursionError:
        print("error: program nests too deeply to evaluate", file=sys.stderr)
        return EX_SOFTWARE
    return 0


def run_script(script_name: str) -> int:
    """
    Run a Lox script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"cannot read {script_name}: {e}", file=sys.stderr)
        return EX_NOINPUT
    return run_source(code)


def run_repl():
    """
    Run the interactive REPL
    """
    print("Lox Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter()
    while True:
        try:
            line = input(">>> ")
            if line.strip() in {"exit", "quit"}:
                break
            run_source(line, interpreter)
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return EX_USAGE


def cli() -> int:
    """
    Console-script wrapper around `main`.
    """
    return main(sys.argv)


if __name__ == "__main__":
    sys.exit(main(sys.argv))
