"""
Tests for the golox parser
"""
from loxlang import nodes
from loxlang.printer import AstPrinter

from loxlang.tests.utils import parse_source


def render(source: str) -> list[str]:
    """
    Parse source and render each statement with the AST printer.
    """
    statements, reporter = parse_source(source)
    assert not reporter.had_error, reporter.messages
    printer = AstPrinter()
    return [printer.print(stmt) for stmt in statements]


def test_precedence():
    """
    Test that factor binds tighter than term and unary tighter than factor.
    """
    assert render("1 + 2 * 3;") == ["(; (+ 1 (* 2 3)))"]
    assert render("-1 * (2 - 3);") == ["(; (* (- 1) (group (- 2 3))))"]
    assert render("a or b and c == d < e;") == ["(; (or a (and b (== c (< d e)))))"]


def test_ternary_is_right_associative():
    """
    Test nested conditional expressions.
    """
    assert render("a ? b : c ? d : e;") == ["(; (?: a b (?: c d e)))"]


def test_comma_expression():
    """
    Test that the comma operator has the lowest precedence.
    """
    assert render("a = 1, b = 2;") == ["(; (, (= a 1) (= b 2)))"]


def test_call_arguments_are_not_comma_expressions():
    """
    Test that commas inside a call separate arguments.
    """
    statements, _ = parse_source("f(1, 2)(3).g;")
    expr = statements[0].expression
    assert isinstance(expr, nodes.Get)
    assert isinstance(expr.obj, nodes.Call)
    assert len(expr.obj.arguments) == 1
    assert len(expr.obj.callee.arguments) == 2


def test_assignment_targets():
    """
    Test that variables become Assign and property accesses become Set.
    """
    statements, _ = parse_source("a = 1; a.b.c = 2;")
    assert isinstance(statements[0].expression, nodes.Assign)
    set_expr = statements[1].expression
    assert isinstance(set_expr, nodes.Set)
    assert set_expr.name.lexeme == "c"
    assert isinstance(set_expr.obj, nodes.Get)


def test_invalid_assignment_target_is_reported_without_unwinding():
    """
    Test that a bad assignment target is reported and the statement kept.
    """
    statements, reporter = parse_source("1 = 2; print 3;")
    assert reporter.messages == ["[line 1] Error at '=': Invalid assignment target."]
    assert len(statements) == 2


def test_for_desugars_into_while():
    """
    Test that for loops become a For scope around an initializer and a While.
    """
    statements, _ = parse_source("for (var i = 0; i < 3; i = i + 1) { print i; }")
    loop = statements[0]
    assert isinstance(loop, nodes.For)
    init, while_stmt = loop.body.statements
    assert isinstance(init, nodes.Var)
    assert isinstance(while_stmt, nodes.While)
    assert isinstance(while_stmt.increment, nodes.Assign)
    assert render("for (var i = 0; i < 3; i = i + 1) { print i; }") == [
        "(for (block (var i = 0) (while (< i 3) (block (print i)) (= i (+ i 1)))))"
    ]


def test_for_without_parentheses_or_clauses():
    """
    Test that the for header parentheses and every clause are optional.
    """
    statements, reporter = parse_source("for ;; { break; }")
    assert not reporter.had_error
    (while_stmt,) = statements[0].body.statements
    assert isinstance(while_stmt.condition, nodes.Literal)
    assert while_stmt.condition.value is True
    assert while_stmt.increment is None

    assert render("for var i = 0; i < 1; i = i + 1 { }") == [
        "(for (block (var i = 0) (while (< i 1) (block) (= i (+ i 1)))))"
    ]


def test_bodies_must_be_blocks():
    """
    Test that control-flow bodies must be braces.
    """
    _, reporter = parse_source("if (true) print 1;")
    assert reporter.messages == ["[line 1] Error at 'print': Expect block."]

    _, reporter = parse_source("while true print 1;")
    assert reporter.messages == ["[line 1] Error at 'print': Expect block."]


def test_else_if_chain():
    """
    Test that `else if` nests another If.
    """
    assert render("if a { } else if b { } else { }") == [
        "(if-else a (block) (if-else b (block) (block)))"
    ]


def test_labeled_loops_and_jumps():
    """
    Test labels on loops and on break/continue.
    """
    statements, _ = parse_source("outer: while true { continue outer; break; }")
    loop = statements[0]
    assert loop.label.lexeme == "outer"
    jump, plain_break = loop.body.statements
    assert isinstance(jump, nodes.Continue)
    assert jump.label.lexeme == "outer"
    assert isinstance(plain_break, nodes.Break)
    assert plain_break.label is None


def test_label_must_precede_a_loop():
    """
    Test that a label on anything but a loop is an error.
    """
    _, reporter = parse_source("here: print 1;")
    assert reporter.messages == ["[line 1] Error at 'print': Expect loop after label."]


def test_class_declaration():
    """
    Test that classes collect their methods.
    """
    statements, _ = parse_source(
        "class A {\n"
        "    init(x) { this.x = x; }\n"
        "    get() { return this.x; }\n"
        "}\n"
    )
    klass = statements[0]
    assert isinstance(klass, nodes.Class)
    assert [m.name.lexeme for m in klass.methods] == ["init", "get"]
    assert [p.lexeme for p in klass.methods[0].params] == ["x"]


def test_panic_mode_recovery_keeps_later_statements():
    """
    Test that the parser synchronises and keeps well-formed statements.
    """
    statements, reporter = parse_source("var = 1;\nprint 2;\nprint (;\nprint 3;")
    assert reporter.messages == [
        "[line 1] Error at '=': Expect variable name.",
        "[line 3] Error at ';': Expect expression.",
    ]
    assert len(statements) == 2
    assert all(isinstance(stmt, nodes.Print) for stmt in statements)


def test_error_at_end_of_input():
    """
    Test that errors at EOF are reported as 'at end'.
    """
    _, reporter = parse_source("print 1")
    assert reporter.messages == ["[line 1] Error at end: Expect ';' after value."]


def test_too_many_arguments_is_reported_but_parsed():
    """
    Test the 255 argument limit.
    """
    args = ", ".join(["1"] * 256)
    statements, reporter = parse_source(f"f({args});")
    assert reporter.messages == ["[line 1] Error at '1': Can't have more than 255 arguments."]
    assert len(statements[0].expression.arguments) == 256


def test_too_many_parameters_is_reported():
    """
    Test the 255 parameter limit.
    """
    params = ", ".join(f"p{i}" for i in range(256))
    statements, reporter = parse_source(f"fn f({params}) {{ }}")
    assert reporter.messages == ["[line 1] Error at 'p255': Can't have more than 255 parameters."]
    assert len(statements[0].params) == 256


def test_identical_references_are_distinct_nodes():
    """
    Test that equal-looking nodes are still distinct for the side table.
    """
    statements, _ = parse_source("x; x;")
    first = statements[0].expression
    second = statements[1].expression
    assert first is not second
    assert first != second
    assert len({first, second}) == 2


def test_excessive_nesting_is_reported():
    """
    Test that input nested deeper than the host stack allows is a syntax error.
    """
    statements, reporter = parse_source("print " + "(" * 5000 + "1" + ")" * 5000 + ";")
    assert statements == []
    assert reporter.had_error
    assert reporter.messages == ["[line 1] Error at '(': Too much nesting."]
