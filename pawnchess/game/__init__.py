"""Pawns-Only Chess game engine: board, sides, notation, rules."""

from pawnchess.game.state import Side, Cell, InvalidInputError, NoPawnError
from pawnchess.game.rules import BoardEngine
from pawnchess.game.board import BOARD_SIZE, render_board
from pawnchess.game.notation import translate, command_for, is_command

__all__ = [
    "Side", "Cell", "InvalidInputError", "NoPawnError",
    "BoardEngine",
    "BOARD_SIZE", "render_board",
    "translate", "command_for", "is_command",
]
