from __future__ import annotations

from .move import Coordinate, Move
from .pieces import Occupancy

BOARD_SIZE = 8
STARTING_ROWS = 3


class Board:
    """Flat row-major grid of 64 squares.

    Squares are addressed by ``(row, col)``. The pieces of a colour are always
    derived from the grid, so there is no second copy that could go stale.
    """

    def __init__(self) -> None:
        self.boardSize = BOARD_SIZE
        self.squares: list[Occupancy] = [Occupancy.EMPTY] * (BOARD_SIZE * BOARD_SIZE)
        self._set_start_pieces()

    @classmethod
    def empty(cls) -> "Board":
        board = cls.__new__(cls)
        board.boardSize = BOARD_SIZE
        board.squares = [Occupancy.EMPTY] * (BOARD_SIZE * BOARD_SIZE)
        return board

    def getOccupancy(self, row: int, col: int) -> Occupancy:
        return self.squares[self._index(row, col)]

    def setOccupancy(self, row: int, col: int, occupancy: Occupancy) -> None:
        self.squares[self._index(row, col)] = occupancy

    def movePiece(self, fromRow: int, fromCol: int, toRow: int, toCol: int) -> None:
        # Legality is the caller's job; a two-by-two step always clears the midpoint.
        self.setOccupancy(toRow, toCol, self.getOccupancy(fromRow, fromCol))
        self.setOccupancy(fromRow, fromCol, Occupancy.EMPTY)

        captured = Move(start=(fromRow, fromCol), end=(toRow, toCol)).midpoint
        if captured is not None:
            self.setOccupancy(*captured, Occupancy.EMPTY)

    def getPieces(self, color: Occupancy) -> list[Coordinate]:
        return [divmod(index, BOARD_SIZE) for index, square in enumerate(self.squares) if square is color]

    def countPieces(self, color: Occupancy) -> int:
        return sum(1 for square in self.squares if square is color)

    def render(self) -> str:
        lines = ["  " + " ".join(str(col) for col in range(BOARD_SIZE))]
        for row in range(BOARD_SIZE):
            line = f"{row} "
            for col in range(BOARD_SIZE):
                line += self.getOccupancy(row, col).symbol + " "
            lines.append(line)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def _set_start_pieces(self) -> None:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if (row + col) % 2 == 1:
                    if row < STARTING_ROWS:
                        self.setOccupancy(row, col, Occupancy.BLACK)
                    elif row >= BOARD_SIZE - STARTING_ROWS:
                        self.setOccupancy(row, col, Occupancy.WHITE)

    def _is_within_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize

    def _index(self, row: int, col: int) -> int:
        if not self._is_within_bounds(row, col):
            raise ValueError(f"Square ({row}, {col}) is outside the board.")
        return row * self.boardSize + col
