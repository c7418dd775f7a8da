import pytest

from lispy.builtin.env_builtin import build_environment
from lispy.evaluation.evaluator import evaluate
from lispy.reader.grammar import parse
from lispy.reader.reader import read

# Every test gets a fresh environment with the builtins registered, and a
# `run` helper that parses, reads and evaluates one line of source in it, the
# way the REPL does.


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    return build_environment()


@pytest.fixture
def run(env):
    def _run(source):
        return evaluate(read(parse(source)), env)

    return _run
