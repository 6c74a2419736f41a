"""1-based sequence coordinates.

A Position wraps a plain integer that is guaranteed to be >= 1. Arithmetic is
done on the integer (``int(pos) + 1``, ``pos + 1``) and the outcome is
validated again when it is turned back into a Position.
"""
from __future__ import annotations

import operator
from functools import total_ordering
from typing import Any, Union

from .exceptions import InvalidPosition

MIN_POSITION = 1


@total_ordering
class Position:
    """Validated 1-based position in a sequence."""

    __slots__ = ("_value",)

    def __init__(self, value: Union[int, "Position"]) -> None:
        try:
            value = operator.index(value)
        except TypeError:
            raise InvalidPosition("position must be an integer, got {!r}".format(value))
        if value < MIN_POSITION:
            raise InvalidPosition("invalid position: {} (positions start at {})".format(value, MIN_POSITION))
        self._value = value

    def __index__(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __add__(self, other: int) -> int:
        return self._value + operator.index(other)

    __radd__ = __add__

    def __sub__(self, other: Union[int, "Position"]) -> int:
        return self._value - operator.index(other)

    def __rsub__(self, other: int) -> int:
        return operator.index(other) - self._value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Position):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, (Position, int)):
            return self._value < operator.index(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return "Position({})".format(self._value)


def distance(a: Union[int, Position], b: Union[int, Position]) -> int:
    """Absolute distance between two positions.

    Python integers don't underflow, so this is safe whatever the order.
    """
    return abs(operator.index(a) - operator.index(b))
