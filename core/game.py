from __future__ import annotations

import time
from typing import Callable, Optional

from .board import Board
from .move import Move
from .player import Player

MoveCoordinates = tuple[int, int, int, int]
MoveSource = Callable[["Game"], Optional[MoveCoordinates]]
Output = Callable[[str], None]


class Game:
    """Two players sharing one board; white (player 1) moves first.

    A rejected move still ends the turn: the current player always switches
    after a move attempt, legal or not.
    """

    def __init__(self, player1_name: str = "Player 1", player2_name: str = "Player 2"):
        self.board = Board()
        self.player1 = Player.white(player1_name)
        self.player2 = Player.black(player2_name)
        self.current_player = self.player1
        self.started_at = time.time()

    def switchTurn(self) -> None:
        self.current_player = self.player2 if self.current_player is self.player1 else self.player1

    def getOpponent(self) -> Player:
        return self.player2 if self.current_player is self.player1 else self.player1

    def isValidMove(self, fromRow: int, fromCol: int, toRow: int, toCol: int) -> bool:
        coords = (fromRow, fromCol, toRow, toCol)
        if any(not 0 <= value < self.board.boardSize for value in coords):
            return False

        color = self.current_player.color
        if self.board.getOccupancy(fromRow, fromCol) is not color:
            return False
        if not self.board.getOccupancy(toRow, toCol).is_empty:
            return False

        direction = color.direction

        if toRow == fromRow + direction and abs(toCol - fromCol) == 1:
            return True

        if toRow == fromRow + 2 * direction and abs(toCol - fromCol) == 2:
            captured = self.board.getOccupancy(fromRow + direction, (fromCol + toCol) // 2)
            return captured is color.opponent

        return False

    def getValidMoves(self) -> list[Move]:
        return list(self._iter_valid_moves())

    def isGameOver(self) -> bool:
        return next(self._iter_valid_moves(), None) is None

    def getWinner(self) -> Optional[Player]:
        if not self.isGameOver():
            return None
        return self.getOpponent()

    def makeMove(self, fromRow: int, fromCol: int, toRow: int, toCol: int) -> bool:
        applied = self.isValidMove(fromRow, fromCol, toRow, toCol)
        if applied:
            self.board.movePiece(fromRow, fromCol, toRow, toCol)
        self.switchTurn()
        return applied

    def elapsed(self) -> float:
        return time.time() - self.started_at

    def play(self, move_source: MoveSource, output: Output = print) -> Optional[Player]:
        """Run turns until the side to move is stuck.

        ``move_source`` is asked for ``(fromRow, fromCol, toRow, toCol)`` each
        turn; returning ``None`` aborts the session. Returns the winner, or
        ``None`` when the session was aborted.
        """
        while not self.isGameOver():
            output(self.board.render())
            output(f"{self.current_player.name}, it's your turn!")
            coords = move_source(self)
            if coords is None:
                output("Game aborted.")
                return None
            fromRow, fromCol, toRow, toCol = coords
            move = Move(start=(fromRow, fromCol), end=(toRow, toCol))
            if not self.makeMove(*move.as_tuple()):
                output(f"Invalid move {move}, turn passes.")

        winner = self.getOpponent()
        output(self.board.render())
        output(f"{self.current_player.name} has no moves left.")
        white = self.board.countPieces(self.player1.color)
        black = self.board.countPieces(self.player2.color)
        output(f"Pieces left: white {white}, black {black}.")
        output(f"Game over! Winner: {winner.name} ({winner.color.value}) after {self.elapsed():.0f}s.")
        return winner

    def _iter_valid_moves(self):
        size = self.board.boardSize
        for fromRow, fromCol in self.board.getPieces(self.current_player.color):
            for toRow in range(size):
                for toCol in range(size):
                    if self.isValidMove(fromRow, fromCol, toRow, toCol):
                        yield Move(start=(fromRow, fromCol), end=(toRow, toCol))
