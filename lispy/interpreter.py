from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from lispy import LispValue
from lispy.errors import LispyRecursionError
from lispy.types.environment import Environment
from lispy.types.value import render
from lispy.reader.grammar import parse
from lispy.reader.reader import read
from lispy.evaluation.evaluator import evaluate
from lispy.builtin.env_builtin import build_environment

logger = logging.getLogger(__name__)


@contextmanager
def _recursion_guard() -> Iterator[None]:
    try:
        yield
    except RecursionError as e:
        raise LispyRecursionError("Expression is nested too deeply to evaluate") from e


class Interpreter:
    """
    Orchestrates parsing, reading and evaluating Lispy code.
    Maintains one Environment across calls, so definitions persist.
    """

    def __init__(self, env: Optional[Environment] = None):
        self.env: Environment = build_environment() if env is None else env

    def read(self, code: str) -> LispValue:
        """Parse `code` and read it into an (unevaluated) S-expression of its top-level forms."""
        tree = parse(code)
        with _recursion_guard():
            return read(tree)

    def eval(self, code: str) -> LispValue:
        """Evaluate one input line.

        The whole line reads as a single S-expression, so `(+ 1 2)` and `+ 1 2`
        both give 3. Language errors come back as Error values; malformed input
        raises LispySyntaxError.
        """
        expr = self.read(code)
        with _recursion_guard():
            logger.debug("evaluating %r", code)
            return evaluate(expr, self.env)

    def eval_to_string(self, code: str) -> str:
        result = self.eval(code)
        with _recursion_guard():
            return render(result)
