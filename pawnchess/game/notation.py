"""Move command parser and emitter.

A command names the origin and destination squares back to back:

  e2e4     Pawn on e2 advances to e4
  d5e6     Pawn on d5 captures on e6 (en passant when e6 is empty)
"""

from __future__ import annotations

import re

from pawnchess.game.board import notation_to_rc
from pawnchess.game.state import Cell, InvalidInputError

_COMMAND_RE = re.compile(r"([a-h][1-8])([a-h][1-8])")


def is_command(text: str) -> bool:
    """Return True if text has the two-square command shape."""
    return _COMMAND_RE.fullmatch(text) is not None


def translate(command: str) -> tuple[Cell, Cell]:
    """Parse a command string into (origin, destination) cells.

    Raises:
        InvalidInputError: If the command is not two squares like 'e2e4'.
    """
    m = _COMMAND_RE.fullmatch(command)
    if not m:
        raise InvalidInputError()
    from_cell = Cell(*notation_to_rc(m.group(1)))
    to_cell = Cell(*notation_to_rc(m.group(2)))
    return from_cell, to_cell


def command_for(from_cell: Cell, to_cell: Cell) -> str:
    """Inverse of translate."""
    return f"{from_cell}{to_cell}"
