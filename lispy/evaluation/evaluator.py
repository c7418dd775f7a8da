"""Core evaluator for the Lispy interpreter.

Reduces a value tree to a single value. S-expressions are evaluated eagerly,
children left to right, and the head is applied as a builtin. Errors are
ordinary values: the first one produced wins and is returned unchanged.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.types.environment import Environment
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import SExpr
from lispy.types.function import Function
from lispy.types.symbol import Symbol
from lispy.types.value import type_of
from lispy.builtin.env_builtin import BUILTINS


def evaluate(expr: LispValue, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`.

    Numbers, errors, functions and Q-expressions evaluate to themselves,
    symbols are looked up and S-expressions are reduced. Recursion follows the
    nesting of `expr`, so Python's recursion limit bounds the input depth.
    """
    if isinstance(expr, Symbol):
        return env.get(expr)
    if isinstance(expr, SExpr):
        return evaluate_sexpr(expr, env)
    return expr


def evaluate_sexpr(expr: SExpr, env: Environment) -> LispValue:
    """Reduce an S-expression in place; `expr` is consumed."""
    for i, child in enumerate(expr):
        expr[i] = evaluate(child, env)

    for child in expr:
        if isinstance(child, Error):
            return child

    if not expr:
        return expr
    if len(expr) == 1:
        return expr[0]

    head = expr.pop(0)
    if not isinstance(head, Function):
        return Error(ErrorKind.NOT_A_FUNCTION, got=type_of(head))
    return apply_function(head, list(expr), env)


def apply_function(fn: Function, args: list[LispValue], env: Environment) -> LispValue:
    """Invoke the builtin named by `fn` with already-evaluated `args`."""
    for arg in args:
        if isinstance(arg, Error):
            return arg
    op = BUILTINS.get(fn.name)
    if op is None:
        return Error(ErrorKind.UNKNOWN_FUNCTION, name=fn.name)
    return op(env, args)
