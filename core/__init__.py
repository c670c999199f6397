"""Core checkers engine package."""

from .board import Board
from .game import Game
from .move import Coordinate, Move
from .pieces import Occupancy
from .player import Player

__all__ = ["Board", "Game", "Move", "Coordinate", "Occupancy", "Player"]
