"""Builtin registry and environment setup.

BUILTINS maps every builtin name to its operation. It is built once at import;
`register` binds a Function value for each name into an environment so the
evaluator can resolve `+`, `head`, `def` and friends like any other symbol.
"""

from __future__ import annotations

import logging

from lispy import BuiltinFn, LispValue
from lispy.types.environment import Environment
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import SExpr
from lispy.types.function import Function
from lispy.types.symbol import Symbol
from lispy.types.value import ValueType, type_of
from lispy.builtin.checks import check_min_arity, check_type
from lispy.builtin import arith_builtin, list_builtin

logger = logging.getLogger(__name__)


def define(env: Environment, args: list[LispValue]) -> LispValue:
    """(def {x y} 1 2) binds x to 1 and y to 2; returns ()."""
    if (err := check_min_arity("def", args, 1)) is not None:
        return err
    if (err := check_type("def", args, 0, ValueType.QEXPR)) is not None:
        return err

    syms, values = args[0], args[1:]
    for sym in syms:
        if not isinstance(sym, Symbol):
            return Error(
                ErrorKind.TYPE_MISMATCH,
                function="def",
                index=0,
                expected=ValueType.SYMBOL,
                got=type_of(sym),
            )
    if len(syms) != len(values):
        return Error(
            ErrorKind.ARITY_MISMATCH, function="def", expected=len(syms), got=len(values)
        )

    for sym, value in zip(syms, values):
        env.put(sym, value)
    return SExpr()


BUILTINS: dict[str, BuiltinFn] = {
    # List functions
    "list": list_builtin.list_builtin,
    "head": list_builtin.head,
    "tail": list_builtin.tail,
    "eval": list_builtin.eval_builtin,
    "join": list_builtin.join,
    "cons": list_builtin.cons,
    "len": list_builtin.length,
    "init": list_builtin.init,
    "def": define,
    # Mathematical functions
    "+": arith_builtin.add,
    "-": arith_builtin.sub,
    "*": arith_builtin.mul,
    "/": arith_builtin.div,
    "%": arith_builtin.mod,
    "add": arith_builtin.add,
    "sub": arith_builtin.sub,
    "mul": arith_builtin.mul,
    "div": arith_builtin.div,
    "mod": arith_builtin.mod,
}


def register(env: Environment) -> None:
    """Bind every builtin in BUILTINS into the given environment."""
    for name in BUILTINS:
        env.put(name, Function(name))
    logger.debug("registered %d builtins", len(BUILTINS))


def build_environment() -> Environment:
    """A fresh environment with all builtins registered."""
    env = Environment()
    register(env)
    return env
