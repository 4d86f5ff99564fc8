"""
Tests for the golox resolver
"""
import pytest

from loxlang import nodes
from loxlang.interpreter import Interpreter
from loxlang.resolver import Resolver
from loxlang.tokens import Token, TokenType

from loxlang.tests.utils import parse_source


def resolve(source: str):
    """
    Parse and resolve source code.

    Returns:
        The statements, the interpreter holding the side table and the reporter.
    """
    statements, reporter = parse_source(source)
    assert not reporter.had_error, reporter.messages
    interpreter = Interpreter(reporter)
    Resolver(interpreter, reporter).resolve(statements)
    return statements, interpreter, reporter


@pytest.mark.parametrize(
    "source, message",
    [
        ("{ var a = a; }", "[line 1] Error at 'a': Can't read local variable in its own initializer."),
        ("return 1;", "[line 1] Error at 'return': Can't return from top-level code."),
        ("class A { init() { return 1; } }", "[line 1] Error at 'return': Can't return value from an initializer."),
        ("print this;", "[line 1] Error at 'this': Can't use 'this' outside of a class."),
        ("fn f() { print this; }", "[line 1] Error at 'this': Can't use 'this' outside of a class."),
        ("{ var a = 1; var a = 2; }", "[line 1] Error at 'a': Already a variable with this name in this scope."),
        ("fn f(a, a) { }", "[line 1] Error at 'a': Already a variable with this name in this scope."),
        ("break;", "[line 1] Error at 'break': Can't use 'break' outside of a loop."),
        ("continue;", "[line 1] Error at 'continue': Can't use 'continue' outside of a loop."),
        ("while true { break nowhere; }", "[line 1] Error at 'nowhere': No enclosing loop labeled 'nowhere'."),
        (
            "a: while true { a: while true { break a; } }",
            "[line 1] Error at 'a': Label 'a' is already in use.",
        ),
    ],
)
def test_static_errors(source, message):
    """
    Test every static rule the resolver enforces.
    """
    _, _, reporter = resolve(source)
    assert reporter.had_error
    assert reporter.messages == [message]


def test_valid_programs_have_no_errors():
    """
    Test programs that look close to the error cases but are valid.
    """
    sources = [
        "var a = 1; var a = 2;",
        "var a = 1; { var b = a; }",
        "class A { init() { return; } }",
        "fn f() { return 1; }",
        "class A { m() { return this; } }",
        "a: while true { b: while true { break a; } }",
        "a: while true { break; } a: while true { break; }",
        "for var i = 0; i < 1; i = i + 1 { continue; }",
    ]
    for source in sources:
        _, _, reporter = resolve(source)
        assert not reporter.had_error, (source, reporter.messages)


def test_global_self_reference_in_initializer_is_allowed():
    """
    Test that the own-initializer rule only applies to locals.
    """
    _, _, reporter = resolve("var a = a;")
    assert not reporter.had_error


def test_loops_do_not_leak_into_functions():
    """
    Test that a function body cannot break out of a loop around it.
    """
    _, _, reporter = resolve("while true { fn f() { break; } }")
    assert reporter.messages == ["[line 1] Error at 'break': Can't use 'break' outside of a loop."]


def test_all_errors_are_reported_in_one_pass():
    """
    Test that the walk continues after an error.
    """
    _, _, reporter = resolve("return 1;\nprint this;\nbreak;")
    assert reporter.messages == [
        "[line 1] Error at 'return': Can't return from top-level code.",
        "[line 2] Error at 'this': Can't use 'this' outside of a class.",
        "[line 3] Error at 'break': Can't use 'break' outside of a loop.",
    ]


def test_globals_are_absent_from_the_side_table():
    """
    Test that only local references get a distance.
    """
    statements, interpreter, _ = resolve("var a = 1; print a;")
    assert statements[1].expression not in interpreter.locals
    assert interpreter.locals == {}


def test_local_distances():
    """
    Test distances for references at different depths.
    """
    statements, interpreter, _ = resolve(
        "fn outer() {\n"
        "    var a = 1;\n"
        "    fn inner() {\n"
        "        var b = 2;\n"
        "        { print a + b; }\n"
        "    }\n"
        "}\n"
    )
    outer = statements[0]
    inner = outer.body[1]
    print_stmt = inner.body[1].statements[0]
    binary = print_stmt.expression
    assert isinstance(binary, nodes.Binary)
    # block -> inner body -> outer body
    assert interpreter.locals[binary.left] == 2
    assert interpreter.locals[binary.right] == 1


def test_this_resolves_to_the_method_binding_scope():
    """
    Test that `this` is one scope out from a method body.
    """
    statements, interpreter, _ = resolve("class A { m() { return this; } }")
    method = statements[0].methods[0]
    this_expr = method.body[0].value
    assert interpreter.locals[this_expr] == 1


def test_identical_lexemes_get_separate_entries():
    """
    Test that two references to the same name are keyed by node identity.
    """
    statements, interpreter, _ = resolve("var a = 1; { var a = 2; print a; } print a;")
    inner_ref = statements[1].statements[1].expression
    outer_ref = statements[2].expression
    assert interpreter.locals[inner_ref] == 0
    assert outer_ref not in interpreter.locals


def test_excessive_nesting_is_reported():
    """
    Test that a tree too deep to walk is a static error and later statements
    are still resolved.
    """
    minus = Token(TokenType.MINUS, "-", None, 4)
    expr = nodes.Literal(1)
    for _ in range(50_000):
        expr = nodes.Unary(minus, expr)
    statements, reporter = parse_source("{ var a = 1; print a; }")
    interpreter = Interpreter(reporter)
    Resolver(interpreter, reporter).resolve([nodes.Print(expr)] + statements)
    assert reporter.messages == ["[line 4] Error at '-': Too much nesting."]
    assert interpreter.locals[statements[0].statements[1].expression] == 0
