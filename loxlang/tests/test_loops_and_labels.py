"""
Tests for loops, break, continue and loop labels
"""
from loxlang.tests.utils import run_source


def test_while_loop():
    """
    Test a plain while loop.
    """
    lines, _ = run_source("var i = 0; while i < 3 { print i; i = i + 1; }")
    assert lines == ["0", "1", "2"]


def test_for_loop():
    """
    Test the parenthesized for loop.
    """
    lines, _ = run_source("for (var i=0; i<3; i=i+1) { print i; }")
    assert lines == ["0", "1", "2"]


def test_break_leaves_innermost_loop():
    """
    Test an unlabeled break.
    """
    lines, _ = run_source(
        "for var i = 0; i < 3; i = i + 1 {\n"
        "    for var j = 0; j < 3; j = j + 1 {\n"
        "        if j == 1 { break; }\n"
        "        print i * 10 + j;\n"
        "    }\n"
        "}\n"
    )
    assert lines == ["0", "10", "20"]


def test_continue_still_runs_the_increment():
    """
    Test that continue in a for loop does not skip the increment.
    """
    lines, _ = run_source(
        "for var i = 0; i < 5; i = i + 1 {\n"
        "    if i == 2 { continue; }\n"
        "    print i;\n"
        "}\n"
    )
    assert lines == ["0", "1", "3", "4"]


def test_labeled_break_leaves_outer_loop():
    """
    Test that a labeled break propagates past the inner loop.
    """
    lines, _ = run_source(
        "outer: for var i = 0; i < 3; i = i + 1 {\n"
        "    for var j = 0; j < 3; j = j + 1 {\n"
        "        if i == 1 { break outer; }\n"
        "        print i * 10 + j;\n"
        "    }\n"
        "}\n"
        'print "done";\n'
    )
    assert lines == ["0", "1", "2", "done"]


def test_labeled_continue_resumes_outer_loop():
    """
    Test that a labeled continue skips the rest of the inner loop and runs
    the outer increment.
    """
    lines, _ = run_source(
        "outer: for var i = 0; i < 3; i = i + 1 {\n"
        "    for var j = 0; j < 3; j = j + 1 {\n"
        "        if j == 1 { continue outer; }\n"
        "        print i * 10 + j;\n"
        "    }\n"
        "}\n"
        'print "done";\n'
    )
    assert lines == ["0", "10", "20", "done"]


def test_labeled_while():
    """
    Test labels on while loops.
    """
    lines, _ = run_source(
        "var i = 0;\n"
        "loop: while true {\n"
        "    i = i + 1;\n"
        "    while true { if i > 2 { break loop; } continue loop; }\n"
        "}\n"
        "print i;\n"
    )
    assert lines == ["3"]


def test_break_inside_nested_blocks():
    """
    Test that break propagates through blocks and ifs.
    """
    lines, _ = run_source(
        "var i = 0;\n"
        "while true { { if true { { break; } } } }\n"
        'print "out";\n'
    )
    assert lines == ["out"]


def test_return_from_inside_loop():
    """
    Test that return is not consumed by a loop.
    """
    lines, _ = run_source(
        "fn first() { for var i = 5; i < 10; i = i + 1 { return i; } }\n"
        "print first();\n"
    )
    assert lines == ["5"]
