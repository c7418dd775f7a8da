"""Operations shared by every value variant: classification, deep copy, rendering."""

from __future__ import annotations

import enum
from io import StringIO

from lispy import LispValue
from lispy.types.error import Error
from lispy.types.expr import Expr, SExpr, QExpr
from lispy.types.function import Function
from lispy.types.symbol import Symbol


class ValueType(enum.Enum):
    NUMBER = "Number"
    ERROR = "Error"
    SYMBOL = "Symbol"
    FUNCTION = "Function"
    SEXPR = "S-Expression"
    QEXPR = "Q-Expression"


def type_of(value: LispValue) -> ValueType:
    """Classify a value; raises TypeError for Python objects outside the value model."""
    # bool is an int subclass but never a Lispy number
    if isinstance(value, int) and not isinstance(value, bool):
        return ValueType.NUMBER
    if isinstance(value, Error):
        return ValueType.ERROR
    if isinstance(value, Symbol):
        return ValueType.SYMBOL
    if isinstance(value, Function):
        return ValueType.FUNCTION
    if isinstance(value, QExpr):
        return ValueType.QEXPR
    if isinstance(value, SExpr):
        return ValueType.SEXPR
    raise TypeError(f"Not a Lispy value: {value!r}")


def copy_value(value: LispValue) -> LispValue:
    """Return a fully independent copy of `value`.

    Numbers, symbols, functions and errors are immutable and are shared as-is;
    containers are rebuilt child by child so no list is ever aliased.
    """
    if isinstance(value, Expr):
        return type(value)(copy_value(child) for child in value)
    return value


def _write(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, Expr):
        buffer.write(value.open_delim)
        for i, child in enumerate(value):
            if i:
                buffer.write(" ")
            _write(child, buffer)
        buffer.write(value.close_delim)
    elif isinstance(value, Error):
        buffer.write(value.message)
    else:
        # int, Symbol and Function all know their own display form
        buffer.write(str(value))


def render(value: LispValue) -> str:
    """Display string for a value: `6`, `{1 2}`, `(+ 1 x)`, `<function>`, or an error message."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
