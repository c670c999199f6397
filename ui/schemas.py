from __future__ import annotations

from pydantic import BaseModel, ValidationError


class CoordinateInput(BaseModel):
    row: int
    col: int


def parse_coordinate(text: str) -> CoordinateInput:
    """Parse a ``"row column"`` line typed at the console.

    Range is not checked here; off-board numbers are left for the game to reject.
    """
    tokens = text.replace(",", " ").split()
    if len(tokens) != 2:
        raise ValueError("Expected two numbers: row and column.")
    try:
        return CoordinateInput.model_validate({"row": tokens[0], "col": tokens[1]})
    except ValidationError as exc:
        raise ValueError(f"Row and column must be whole numbers, got '{text.strip()}'.") from exc
