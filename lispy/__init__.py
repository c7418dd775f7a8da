# Core type aliases for the Lispy Couch data model.
# Numbers are plain Python ints; every other variant has its own small class:
#   Symbol, Function, Error, SExpr ( ... ) and QExpr { ... }.
#
# Naming guidance:
# - LispValue: any runtime value, evaluated or not (code and data share one tree).
# - BuiltinFn: a primitive operation, called as fn(env, args) with evaluated args.

from typing import Any, Callable

LispValue = Any

BuiltinFn = Callable[..., LispValue]

__version__ = "0.0.3"

from lispy.types.environment import Environment  # noqa: E402
from lispy.types.value import render, copy_value  # noqa: E402
from lispy.reader.grammar import parse  # noqa: E402
from lispy.reader.reader import read  # noqa: E402
from lispy.evaluation.evaluator import evaluate  # noqa: E402
from lispy.builtin.env_builtin import build_environment  # noqa: E402
from lispy.interpreter import Interpreter  # noqa: E402

__all__ = (
    "LispValue",
    "BuiltinFn",
    "Environment",
    "Interpreter",
    "build_environment",
    "copy_value",
    "evaluate",
    "parse",
    "read",
    "render",
)
