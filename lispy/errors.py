from __future__ import annotations

from typing import Optional


class LispyError(Exception):
    """ Base class for host-level Lispy failures (language errors are values)"""
    pass


class LispySyntaxError(LispyError):
    """ Raised when source text is rejected by the grammar"""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column


class LispyRecursionError(LispyError):
    """ Raised when an expression nests deeper than the interpreter can follow"""
