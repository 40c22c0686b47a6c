"""Source positions for loxlang.

Every token, syntax error and runtime error produced by the lexer, parser
and interpreter knows where it came from. A :class:`Position` is either a
``row:col`` pair (both 1-based) or the end-of-input marker
:attr:`Position.EOF`, and a :class:`Located` pairs an arbitrary value with
one of them so the location survives each stage boundary.


File: position.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Position:
    """
    A location in the source text, or the end of input.
    """
    row: int | None
    col: int | None

    EOF: ClassVar["Position"]

    @property
    def is_eof(self) -> bool:
        """
        Whether this is the end-of-input marker.
        """
        return self.row is None

    def __str__(self) -> str:
        if self.is_eof:
            return "eof"
        return f"{self.row}:{self.col}"


Position.EOF = Position(None, None)


@dataclass(frozen=True)
class Located(Generic[T]):
    """
    A value tagged with the position it originated from.
    """
    pos: Position
    value: T

    def co_locate(self, value: U) -> "Located[U]":
        """
        Attach the same position to a different value.
        """
        return Located(self.pos, value)

    def __str__(self) -> str:
        return f"{self.pos}: {self.value}"


__all__ = ["Position", "Located"]
