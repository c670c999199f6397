from __future__ import annotations

from dataclasses import dataclass

from .pieces import Occupancy


@dataclass(frozen=True)
class Player:
    name: str
    color: Occupancy

    def __post_init__(self) -> None:
        if self.color.is_empty:
            raise ValueError("A player must play white or black.")

    @classmethod
    def white(cls, name: str) -> "Player":
        return cls(name=name, color=Occupancy.WHITE)

    @classmethod
    def black(cls, name: str) -> "Player":
        return cls(name=name, color=Occupancy.BLACK)
