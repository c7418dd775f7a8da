from __future__ import annotations
import sys


class Symbol:
    """A name in source code, resolved against the environment when evaluated.

    Inside a Q-expression a Symbol is plain data: `(def {x y} 1 2)` receives
    the symbols themselves and binds them.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(str(name))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
