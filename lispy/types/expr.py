"""List containers for the two expression flavours.

SExpr ( ... ) is reduced by the evaluator; QExpr { ... } is literal data.
Both are plain Python lists underneath, so builtins can pop, slice and extend
them directly. Equality requires the same flavour: SExpr([1]) != QExpr([1]).
"""

from __future__ import annotations


class Expr(list):
    __slots__ = ()

    open_delim = "("
    close_delim = ")"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and list.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self):
        return f"{type(self).__name__}({list.__repr__(self)})"


class SExpr(Expr):
    __slots__ = ()


class QExpr(Expr):
    __slots__ = ()

    open_delim = "{"
    close_delim = "}"
