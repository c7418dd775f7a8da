from __future__ import annotations


class Function:
    """A reference to a builtin operation, identified by its registry name.

    The callable itself lives in the builtin table; a Function value only names
    it, so copying one is free and it never needs to be inspected structurally.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = str(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Function) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("function", self.name))

    def __repr__(self):
        return f"Function({self.name!r})"

    def __str__(self):
        return "<function>"
