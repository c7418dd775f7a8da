"""Error values.

Errors in Lispy are first-class values returned through the same channel as
results, not Python exceptions. An Error records *what* went wrong as a kind
tag plus typed context; the human-readable message is formatted only when the
value is rendered.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Optional


class ErrorKind(enum.Enum):
    UNBOUND_SYMBOL = "UnboundSymbol"
    NOT_A_FUNCTION = "NotAFunction"
    TYPE_MISMATCH = "TypeMismatch"
    ARITY_MISMATCH = "ArityMismatch"
    EMPTY_ARGUMENT = "EmptyArgument"
    DIVISION_BY_ZERO = "DivisionByZero"
    BAD_NUMBER = "BadNumber"
    UNKNOWN_FUNCTION = "UnknownFunction"


def _name(value: Any) -> str:
    # ValueType members carry their display name as the enum value
    return getattr(value, "value", value)


_MESSAGES: dict[ErrorKind, Callable[[Error], str]] = {
    ErrorKind.UNBOUND_SYMBOL: lambda e: f"unbound symbol '{e.name}'!",
    ErrorKind.NOT_A_FUNCTION: lambda e: (
        "First element is not a function!"
        if e.got is None
        else f"First element is not a function! Got {_name(e.got)}, Expected Function"
    ),
    ErrorKind.TYPE_MISMATCH: lambda e: (
        f"Function '{e.function}' passed incorrect type for argument {e.index}! "
        f"Got {_name(e.got)}, Expected {_name(e.expected)}"
    ),
    ErrorKind.ARITY_MISMATCH: lambda e: (
        f"Function '{e.function}' passed incorrect number of arguments. "
        f"Got {e.got}, Expected {e.expected}!"
    ),
    ErrorKind.EMPTY_ARGUMENT: lambda e: f"Function '{e.function}' passed {{}}!",
    ErrorKind.DIVISION_BY_ZERO: lambda e: "Division by zero!",
    ErrorKind.BAD_NUMBER: lambda e: (
        "Invalid number!" if e.name is None else f"Invalid number '{e.name}'!"
    ),
    ErrorKind.UNKNOWN_FUNCTION: lambda e: f"Unknown function '{e.name}'!",
}


@dataclass(frozen=True)
class Error:
    """A structured error value.

    Context fields are filled according to the kind:

    - UNBOUND_SYMBOL: name (the symbol)
    - NOT_A_FUNCTION: got (type of the head)
    - TYPE_MISMATCH: function, index, expected, got (ValueType members)
    - ARITY_MISMATCH: function, expected, got (argument counts)
    - EMPTY_ARGUMENT: function, index
    - BAD_NUMBER: name (the literal text, when known)
    - UNKNOWN_FUNCTION: name (the builtin name)
    """

    kind: ErrorKind
    function: Optional[str] = None
    index: Optional[int] = None
    expected: Any = None
    got: Any = None
    name: Optional[str] = None

    @property
    def message(self) -> str:
        return _MESSAGES[self.kind](self)

    def __str__(self):
        return self.message
