from __future__ import annotations

from dataclasses import dataclass

Coordinate = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Move:
    start: Coordinate
    end: Coordinate

    @property
    def is_jump(self) -> bool:
        return abs(self.end[0] - self.start[0]) == 2 and abs(self.end[1] - self.start[1]) == 2

    @property
    def midpoint(self) -> Coordinate | None:
        if not self.is_jump:
            return None
        return ((self.start[0] + self.end[0]) // 2, (self.start[1] + self.end[1]) // 2)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (*self.start, *self.end)

    def __str__(self) -> str:
        connector = " x " if self.is_jump else " - "
        return connector.join(f"{row},{col}" for row, col in (self.start, self.end))
