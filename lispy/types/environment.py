"""Runtime environment for Lispy.

The Environment is a single flat, ordered table binding symbol names to values.
Values go in and come out as deep copies, so nothing outside the table can
mutate a binding through an alias.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator, Union

from lispy import LispValue
from lispy.types.error import Error, ErrorKind
from lispy.types.symbol import Symbol
from lispy.types.value import copy_value, render

logger = logging.getLogger(__name__)

Name = Union[str, Symbol]


class Environment:
    """Ordered mapping from symbol names to Lisp values."""

    __slots__ = ("vars",)

    def __init__(self):
        # dicts keep insertion order; rebinding a key keeps its position
        self.vars: dict[str, LispValue] = {}

    def get(self, name: Name) -> LispValue:
        """Look up the value bound to `name`.

        Returns a deep copy of the binding, or an UNBOUND_SYMBOL error value
        when the name was never bound.
        """
        key = str(name)
        try:
            value = self.vars[key]
        except KeyError:
            return Error(ErrorKind.UNBOUND_SYMBOL, name=key)
        return copy_value(value)

    def put(self, name: Name, value: LispValue) -> None:
        """Bind `name` to a copy of `value`, replacing any earlier binding."""
        key = str(name)
        if key not in self.vars:
            logger.debug("binding new symbol %r", key)
        self.vars[key] = copy_value(value)

    def names(self) -> list[str]:
        return list(self.vars)

    def __contains__(self, name: object) -> bool:
        return str(name) in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write(", ")
                buffer.write(f"{k}: {render(v)}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"
