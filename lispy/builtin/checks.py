"""Argument checks shared by the builtins.

Each check returns None when the precondition holds, or the Error value that
the builtin should return in its place. Builtins use them as

    if (err := check_arity("head", args, 1)) is not None:
        return err
"""

from __future__ import annotations

from typing import Optional

from lispy import LispValue
from lispy.types.error import Error, ErrorKind
from lispy.types.value import ValueType, type_of


def check_arity(name: str, args: list[LispValue], expected: int) -> Optional[Error]:
    if len(args) != expected:
        return Error(ErrorKind.ARITY_MISMATCH, function=name, expected=expected, got=len(args))
    return None


def check_min_arity(name: str, args: list[LispValue], minimum: int) -> Optional[Error]:
    if len(args) < minimum:
        return Error(ErrorKind.ARITY_MISMATCH, function=name, expected=minimum, got=len(args))
    return None


def check_type(
    name: str, args: list[LispValue], index: int, expected: ValueType
) -> Optional[Error]:
    actual = type_of(args[index])
    if actual is not expected:
        return Error(
            ErrorKind.TYPE_MISMATCH, function=name, index=index, expected=expected, got=actual
        )
    return None


def check_all_type(name: str, args: list[LispValue], expected: ValueType) -> Optional[Error]:
    for i in range(len(args)):
        if (err := check_type(name, args, i, expected)) is not None:
            return err
    return None


def check_not_empty(name: str, args: list[LispValue], index: int) -> Optional[Error]:
    if not args[index]:
        return Error(ErrorKind.EMPTY_ARGUMENT, function=name, index=index)
    return None


def check_single_qexpr(name: str, args: list[LispValue], non_empty: bool = False) -> Optional[Error]:
    """The common `head`/`tail`/`len` precondition: exactly one Q-expression."""
    if (err := check_arity(name, args, 1)) is not None:
        return err
    if (err := check_type(name, args, 0, ValueType.QEXPR)) is not None:
        return err
    if non_empty:
        return check_not_empty(name, args, 0)
    return None
