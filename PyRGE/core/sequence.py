"""Immutable nucleobase sequences addressed by 1-based positions."""
from __future__ import annotations

from typing import Union

import numpy as np
import numpy.typing as npt

from .exceptions import InvalidPosition
from .position import Position

MASKED_NUCLEOBASES = (ord('N'), ord('n'))


class Sequence:
    """Fixed run of single-byte nucleobase codes.

    Bases are stored as ``bytes`` so a Sequence owns its data and cannot be
    changed once created. ``get`` and ``get_range`` take 1-based positions and
    ranges are inclusive at both ends, mirroring FASTA coordinates.

    Attributes:
        data: Raw nucleobase codes
    """

    __slots__ = ("_data",)

    def __init__(self, data: Union[bytes, bytearray, memoryview, str]) -> None:
        if isinstance(data, str):
            data = data.encode("ascii")
        self._data = bytes(data)

    @property
    def data(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        if len(self._data) > 20:
            return "Sequence({!r}... len={})".format(self._data[:20], len(self._data))
        return "Sequence({!r})".format(self._data)

    def _check(self, position: Union[int, Position]) -> Position:
        position = Position(position)
        if int(position) > len(self._data):
            raise InvalidPosition(
                "position {} is beyond the end of a sequence of length {}".format(position, len(self._data))
            )
        return position

    def get(self, position: Union[int, Position]) -> int:
        """Return the base code at a 1-based position.

        Raises:
            InvalidPosition: If the position is outside ``1..len(self)``
        """
        position = self._check(position)
        return self._data[int(position) - 1]

    def get_range(self, start: Union[int, Position], end: Union[int, Position]) -> bytes:
        """Return the bases in the inclusive range ``[start, end]``."""
        start = self._check(start)
        end = self._check(end)
        if end < start:
            raise InvalidPosition("range end {} precedes start {}".format(end, start))
        return self._data[int(start) - 1:int(end)]

    def is_masked(self, position: Union[int, Position]) -> bool:
        """Check whether the base at a position is an unknown (N/n) base."""
        return self.get(position) in MASKED_NUCLEOBASES

    @property
    def last_position(self) -> Position:
        """Final valid position. Raises InvalidPosition for an empty sequence."""
        return Position(len(self._data))

    def as_array(self) -> npt.NDArray[np.uint8]:
        """Read-only numpy view of the bases (0-based)."""
        return np.frombuffer(self._data, dtype=np.uint8)


def masked_mask(bases: npt.NDArray[np.uint8]) -> npt.NDArray[np.bool_]:
    """Boolean array marking the N/n positions of ``bases``."""
    return np.isin(bases, MASKED_NUCLEOBASES)
