from lispy.types.symbol import Symbol
from lispy.types.function import Function
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import Expr, SExpr, QExpr
from lispy.types.value import ValueType, type_of, copy_value, render
from lispy.types.environment import Environment

__all__ = (
    "Symbol",
    "Function",
    "Error",
    "ErrorKind",
    "Expr",
    "SExpr",
    "QExpr",
    "ValueType",
    "type_of",
    "copy_value",
    "render",
    "Environment",
)
