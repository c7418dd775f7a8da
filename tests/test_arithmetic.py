import pytest

from lispy.builtin import arith_builtin
from lispy.types import Error, ErrorKind, ValueType


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(- 5)", -5),
        ("(- -5)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(% 7 3)", 1),
        ("(+ 5)", 5),
        ("(* 7)", 7),
        ("(add 1 2)", 3),
        ("(sub 10 4)", 6),
        ("(mul 3 3)", 9),
        ("(div 9 2)", 4),
        ("(mod 9 2)", 1),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("+ 1 2", 3),
        # truncating division, remainder follows the dividend
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ -7 -2)", 3),
        ("(% -7 2)", -1),
        ("(% 7 -2)", 1),
        ("(% -7 -2)", -1),
    ],
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["(/ 4 0)", "(% 7 0)", "(/ 10 2 0 5)", "(div 1 0)", "(mod 1 0)"])
def test_division_by_zero(run, source):
    assert run(source) == Error(ErrorKind.DIVISION_BY_ZERO)


def test_error_short_circuits_the_whole_expression(run):
    assert run("(+ 1 (/ 1 0) (/ 1 1))") == Error(ErrorKind.DIVISION_BY_ZERO)
    assert run("(+ 1 (/ 1 0) undefined)") == Error(ErrorKind.DIVISION_BY_ZERO)


def test_non_number_argument(run):
    assert run("(+ 1 {2})") == Error(
        ErrorKind.TYPE_MISMATCH,
        function="+",
        index=1,
        expected=ValueType.NUMBER,
        got=ValueType.QEXPR,
    )
    assert run("(* head 2)") == Error(
        ErrorKind.TYPE_MISMATCH,
        function="*",
        index=0,
        expected=ValueType.NUMBER,
        got=ValueType.FUNCTION,
    )


@pytest.mark.parametrize(
    "source",
    [
        "(* 9223372036854775807 2)",
        "(+ 9223372036854775807 1)",
        "(- -9223372036854775808 1)",
        "(- -9223372036854775808)",
        "(/ -9223372036854775808 -1)",
    ],
)
def test_results_outside_64_bits(run, source):
    assert run(source) == Error(ErrorKind.BAD_NUMBER)


def test_fold_without_arguments(env):
    assert arith_builtin.add(env, []) == Error(
        ErrorKind.ARITY_MISMATCH, function="+", expected=1, got=0
    )


def test_fold_stops_at_first_failure():
    assert arith_builtin.fold("/", [8, 2, 0, 0]) == Error(ErrorKind.DIVISION_BY_ZERO)
    assert arith_builtin.fold("-", [1, 2, 3]) == -4
