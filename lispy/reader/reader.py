"""Reader: converts a parser AST into an owned Lispy value tree.

The AST comes from Lark: Tree nodes carry the rule name in `data`, Token leaves
carry the terminal name in `type` and their matched text as the string value.
Reading is a pure structural translation; nothing is evaluated here.
"""

from __future__ import annotations

from typing import Union

from lark import Token, Tree

from lispy import LispValue
from lispy.errors import LispyError
from lispy.types.error import Error, ErrorKind
from lispy.types.expr import Expr, SExpr, QExpr
from lispy.types.symbol import Symbol

AstNode = Union[Tree, Token]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

DELIMITERS = frozenset("(){}")

# Rule names that open a list
_CONTAINERS: dict[str, type[Expr]] = {
    "start": SExpr,
    "sexpr": SExpr,
    "qexpr": QExpr,
}


def node_tag(node: AstNode) -> str:
    """The grammar classification of a node: rule name for trees, terminal name for tokens."""
    if isinstance(node, Tree):
        return str(node.data)
    return node.type


def _is_structural(node: AstNode) -> bool:
    if not isinstance(node, Token):
        return False
    # Delimiters and anonymous regex terminals carry no value
    return str(node) in DELIMITERS or node.type.startswith("__ANON")


def read_number(text: str) -> LispValue:
    """Parse a base-10 literal; out-of-range literals read as a BAD_NUMBER error."""
    try:
        n = int(text, 10)
    except ValueError:
        return Error(ErrorKind.BAD_NUMBER, name=text)
    if not INT64_MIN <= n <= INT64_MAX:
        return Error(ErrorKind.BAD_NUMBER, name=text)
    return n


def read(node: AstNode) -> LispValue:
    """Convert an AST node (normally the `start` root) into a value."""
    tag = node_tag(node)
    if tag == "NUMBER":
        return read_number(str(node))
    if tag == "SYMBOL":
        return Symbol(str(node))

    container = _CONTAINERS.get(tag)
    if container is None or not isinstance(node, Tree):
        raise LispyError(f"Cannot read AST node tagged {tag!r}")

    x = container()
    for child in node.children:
        if _is_structural(child):
            continue
        x.append(read(child))
    return x
