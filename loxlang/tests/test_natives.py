"""
Tests for golox built-in functions
"""
import time

from loxlang.callables import VARIADIC
from loxlang.natives import NATIVES, LoxArray

from loxlang.tests.utils import run_source


def test_natives_are_defined():
    """
    Test the set of built-ins and their arities.
    """
    arities = {native.name: native.arity() for native in NATIVES}
    assert arities == {"clock": 0, "array": VARIADIC, "len": 1, "append": VARIADIC}


def test_clock_returns_whole_seconds(monkeypatch):
    """
    Test that clock reads the wall clock and truncates to seconds.
    """
    monkeypatch.setattr(time, "time", lambda: 1700000000.75)
    lines, _ = run_source("print clock();")
    assert lines == ["1700000000"]


def test_clock_arity():
    """
    Test that clock takes no arguments.
    """
    _, reporter = run_source("clock(1);")
    assert reporter.messages == ["[line 1] Error at ')': Expected 0 arguments but got 1."]


def test_array_len_and_append():
    """
    Test building and growing an array.
    """
    lines, reporter = run_source(
        "var a = array(1, \"two\");\n"
        "print a;\n"
        "print len(a);\n"
        "print append(a, nil, true);\n"
        "print a;\n"
        "print len(a);\n"
        "print array();\n"
    )
    assert not reporter.had_runtime_error
    assert lines == ["[1, two]", "2", "nil", "[1, two, nil, true]", "4", "[]"]


def test_arrays_are_shared_by_reference():
    """
    Test that append mutates the array seen through every reference.
    """
    lines, _ = run_source(
        "var a = array();\n"
        "fn add(arr) { append(arr, 1); }\n"
        "add(a); add(a);\n"
        "print len(a);\n"
    )
    assert lines == ["2"]


def test_len_on_non_array():
    """
    Test that len rejects non-arrays.
    """
    _, reporter = run_source('len("abc");')
    assert reporter.messages == ["[line 1] Error at ')': Can only call 'len' on arrays."]


def test_append_on_non_array():
    """
    Test that append rejects a non-array or missing first argument.
    """
    _, reporter = run_source("append(1, 2);")
    assert reporter.messages == ["[line 1] Error at ')': Can only call 'append' on arrays."]

    _, reporter = run_source("append();")
    assert reporter.messages == ["[line 1] Error at ')': Can only call 'append' on arrays."]


def test_array_value():
    """
    Test the host-side array type.
    """
    arr = LoxArray([1, 2.5])
    arr.append(None)
    assert len(arr) == 3
    assert str(arr) == "[1, 2.5, nil]"
