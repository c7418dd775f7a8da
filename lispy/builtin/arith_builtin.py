"""Integer arithmetic builtins.

All operators fold left over their arguments: (- 10 3 2) => 5. A single
argument to `-` is negated. Division truncates toward zero and the remainder
takes the sign of the dividend, the way a C `long` behaves.
"""

from __future__ import annotations

from typing import Callable

from lispy import LispValue
from lispy.types.environment import Environment
from lispy.types.error import Error, ErrorKind
from lispy.types.value import ValueType
from lispy.builtin.checks import check_all_type, check_min_arity
from lispy.reader.reader import INT64_MAX, INT64_MIN

# An operator returns the combined number, or an Error that stops the fold
BinaryOp = Callable[[int, int], LispValue]


def _truncdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _div(a: int, b: int) -> LispValue:
    if b == 0:
        return Error(ErrorKind.DIVISION_BY_ZERO)
    return _truncdiv(a, b)


def _mod(a: int, b: int) -> LispValue:
    if b == 0:
        return Error(ErrorKind.DIVISION_BY_ZERO)
    return a - b * _truncdiv(a, b)


OPERATORS: dict[str, BinaryOp] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _div,
    "%": _mod,
}


def _checked(result: LispValue) -> LispValue:
    if isinstance(result, int) and not INT64_MIN <= result <= INT64_MAX:
        return Error(ErrorKind.BAD_NUMBER)
    return result


def fold(op: str, args: list[LispValue]) -> LispValue:
    """Left fold of `args` with the operator `op`."""
    if (err := check_min_arity(op, args, 1)) is not None:
        return err
    if (err := check_all_type(op, args, ValueType.NUMBER)) is not None:
        return err

    x = args[0]
    if op == "-" and len(args) == 1:
        return _checked(-x)

    combine = OPERATORS[op]
    for y in args[1:]:
        x = _checked(combine(x, y))
        if isinstance(x, Error):
            return x
    return x


def add(env: Environment, args: list[LispValue]) -> LispValue:
    """(+ 1 2 3) => 6"""
    return fold("+", args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """(- 10 3 2) => 5; (- 5) => -5"""
    return fold("-", args)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """(* 2 3 4) => 24"""
    return fold("*", args)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """(/ 7 2) => 3; (/ 1 0) => Division by zero!"""
    return fold("/", args)


def mod(env: Environment, args: list[LispValue]) -> LispValue:
    """(% 7 3) => 1"""
    return fold("%", args)
