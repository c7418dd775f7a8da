"""List builtins over Q-expressions: list, head, tail, eval, join, cons, len, init.

Every builtin receives the environment and an owned list of evaluated
arguments. Arguments are consumed: a builtin may reuse an argument container
as its result instead of copying it.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.types.environment import Environment
from lispy.types.expr import SExpr, QExpr
from lispy.types.value import ValueType
from lispy.builtin.checks import (
    check_all_type,
    check_arity,
    check_single_qexpr,
    check_type,
)


def list_builtin(env: Environment, args: list[LispValue]) -> QExpr:
    """(list a b c) => {a b c}"""
    return QExpr(args)


def head(env: Environment, args: list[LispValue]) -> LispValue:
    """(head {a b c}) => {a}"""
    if (err := check_single_qexpr("head", args, non_empty=True)) is not None:
        return err
    v = args[0]
    del v[1:]
    return v


def tail(env: Environment, args: list[LispValue]) -> LispValue:
    """(tail {a b c}) => {b c}"""
    if (err := check_single_qexpr("tail", args, non_empty=True)) is not None:
        return err
    v = args[0]
    del v[0]
    return v


def init(env: Environment, args: list[LispValue]) -> LispValue:
    """(init {a b c}) => {a b}"""
    if (err := check_single_qexpr("init", args, non_empty=True)) is not None:
        return err
    v = args[0]
    v.pop()
    return v


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(eval {+ 1 2}) => 3; the Q-expression is relabelled as code and evaluated."""
    if (err := check_single_qexpr("eval", args)) is not None:
        return err
    # Lazy import to avoid circular imports
    from lispy.evaluation.evaluator import evaluate

    return evaluate(SExpr(args[0]), env)


def join(env: Environment, args: list[LispValue]) -> LispValue:
    """(join {a} {b c} {}) => {a b c}"""
    if (err := check_all_type("join", args, ValueType.QEXPR)) is not None:
        return err
    x = QExpr()
    for q in args:
        x.extend(q)
    return x


def cons(env: Environment, args: list[LispValue]) -> LispValue:
    """(cons x {a b}) => {x a b}

    The first argument may be any value; it becomes the new leading element
    as-is, so (cons {1} {2}) => {{1} 2}.
    """
    if (err := check_arity("cons", args, 2)) is not None:
        return err
    if (err := check_type("cons", args, 1, ValueType.QEXPR)) is not None:
        return err
    x = QExpr([args[0]])
    x.extend(args[1])
    return x


def length(env: Environment, args: list[LispValue]) -> LispValue:
    """(len {a b c}) => 3"""
    if (err := check_single_qexpr("len", args)) is not None:
        return err
    return len(args[0])
