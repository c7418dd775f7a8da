from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from lispy import __version__
from lispy.config import get_log_level, get_recursion_limit
from lispy.errors import LispyError
from lispy.interpreter import Interpreter
from lispy.repl import repl


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lispy", description="Lispy Couch interpreter")
    parser.add_argument("-e", "--eval", dest="expr", help="evaluate EXPR, print the result and exit")
    parser.add_argument("file", nargs="?", type=Path, help="evaluate every line of FILE and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_lines(interp: Interpreter, lines: Sequence[str]) -> int:
    """Evaluate each non-blank line, printing its result; returns the exit status."""
    status = 0
    for line in lines:
        if not line.strip():
            continue
        try:
            print(interp.eval_to_string(line))
        except LispyError as e:
            print(f"error: {e}", file=sys.stderr)
            status = 1
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    try:
        limit = get_recursion_limit()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if limit is not None:
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    if args.expr is not None:
        return run_lines(interp, [args.expr])
    if args.file is not None:
        return run_lines(interp, args.file.read_text().splitlines())
    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
