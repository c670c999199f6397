from __future__ import annotations

from typing import Callable, Optional

from core.game import Game, MoveCoordinates
from core.move import Coordinate

from .schemas import parse_coordinate

SOURCE_PROMPT = "Enter the coordinates of the piece you want to move (row column): "
TARGET_PROMPT = "Enter the coordinates of the square you want to move the piece to (row column): "


class ConsoleUI:
    def __init__(
        self,
        game: Game,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.game = game
        self.input_fn = input_fn
        self.output_fn = output_fn

    def run(self) -> None:
        self.game.play(self.request_move, self.output_fn)

    def request_move(self, game: Game) -> Optional[MoveCoordinates]:
        start = self.read_coordinate(SOURCE_PROMPT)
        if start is None:
            return None
        end = self.read_coordinate(TARGET_PROMPT)
        if end is None:
            return None
        return (*start, *end)

    def read_coordinate(self, prompt: str) -> Optional[Coordinate]:
        # Malformed lines do not cost the turn; ask the same player again.
        while True:
            try:
                text = self.input_fn(prompt)
            except (EOFError, KeyboardInterrupt):
                return None
            try:
                coordinate = parse_coordinate(text)
            except ValueError as exc:
                self.output_fn(f"Invalid input: {exc}")
                continue
            return (coordinate.row, coordinate.col)
