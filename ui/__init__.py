"""Console front end for the checkers engine."""

from .console import ConsoleUI

__all__ = ["ConsoleUI"]
