r"""
  Lispy grammar, handed to Lark.

  number : /-?[0-9]+/
  symbol : /[a-zA-Z0-9_+\-*\/\\=<>!&%]+/
  sexpr  : '(' expr* ')'
  qexpr  : '{' expr* '}'

- Numbers win over symbols when both match, so `-5` is a number, `-` a symbol
  and `1abc` reads as the number 1 followed by the symbol abc.
- Delimiter tokens are kept in the tree (keep_all_tokens); the reader filters
  them, so the tree mirrors the source exactly.
"""

from __future__ import annotations

import logging

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from lispy.errors import LispySyntaxError

logger = logging.getLogger(__name__)

GRAMMAR = r"""
    start: _expr*

    _expr: NUMBER
         | SYMBOL
         | sexpr
         | qexpr

    sexpr: "(" _expr* ")"
    qexpr: "{" _expr* "}"

    NUMBER.2: /-?[0-9]+/
    SYMBOL: /[a-zA-Z0-9_+\-*\/\\=<>!&%]+/

    %import common.WS
    %ignore WS
"""

parser = Lark(GRAMMAR, parser="lalr", keep_all_tokens=True)


def parse(source: str) -> Tree:
    """Parse a line (or several) of Lispy source into a Lark tree rooted at `start`.

    Raises LispySyntaxError when the text does not match the grammar.
    """
    try:
        tree = parser.parse(source)
    except UnexpectedInput as e:
        # Position is -1 or "?" when the failure is at end of input
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        if not isinstance(line, int) or line < 0 or not isinstance(column, int):
            line = column = None
        message = str(e).strip() or "Unexpected input"
        raise LispySyntaxError(message, line=line, column=column) from e
    logger.debug("parsed %r", source)
    return tree
