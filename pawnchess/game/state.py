"""Sides, board cells, and move rejection errors for Pawns-Only Chess."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from pawnchess.game.board import BOARD_SIZE, STARTING_RANKS, rc_to_notation


class Side(IntEnum):
    WHITE = 0
    BLACK = 1

    # Turn order aliases
    FIRST = 0
    SECOND = 1

    @property
    def label(self) -> str:
        return "white" if self is Side.WHITE else "black"

    @property
    def marker(self) -> str:
        return self.label[0].upper()

    @property
    def initial_rank(self) -> int:
        return STARTING_RANKS[self.marker]

    @property
    def forward(self) -> int:
        """Rank direction this side's pawns advance in."""
        return 1 if self is Side.WHITE else -1

    @property
    def back_offset(self) -> int:
        """Rank offset from a landing square to the square behind it."""
        return -self.forward

    @property
    def last_rank(self) -> int:
        return BOARD_SIZE - 1 if self is Side.WHITE else 0

    @property
    def opposite(self) -> Side:
        return Side(1 - self)


@dataclass(frozen=True)
class Cell:
    """A board square. Rank is the axis of pawn advance, file is lateral."""
    rank: int
    file: int

    def __str__(self) -> str:
        return rc_to_notation(self.rank, self.file)

    def on_board(self) -> bool:
        return 0 <= self.rank < BOARD_SIZE and 0 <= self.file < BOARD_SIZE


class InvalidInputError(ValueError):
    """Command is malformed or breaks the pawn movement rules."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message)


class NoPawnError(InvalidInputError):
    """Command is well formed but the mover has no pawn on the origin square."""

    def __init__(self, side: Side, square: str):
        super().__init__(f"No {side.label} pawn at {square}")
        self.side = side
        self.square = square
