from __future__ import annotations

from enum import Enum


class Occupancy(Enum):
    BLACK = "black"
    WHITE = "white"
    EMPTY = "empty"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def is_empty(self) -> bool:
        return self is Occupancy.EMPTY

    @property
    def opponent(self) -> "Occupancy":
        if self is Occupancy.WHITE:
            return Occupancy.BLACK
        if self is Occupancy.BLACK:
            return Occupancy.WHITE
        raise ValueError("An empty square has no opponent.")

    @property
    def direction(self) -> int:
        """Row step of a forward move: white heads for row 0, black for row 7."""
        if self is Occupancy.WHITE:
            return -1
        if self is Occupancy.BLACK:
            return 1
        raise ValueError("An empty square cannot move.")


_SYMBOLS = {
    Occupancy.BLACK: "b",
    Occupancy.WHITE: "w",
    Occupancy.EMPTY: "-",
}
