"""Move validation, move execution, en passant bookkeeping, end-of-game checks.

Pawns move one square straight forward, or two from their starting rank, onto
an empty square. They capture one square diagonally forward, either onto an
opposing pawn or, en passant, onto the square an opposing pawn skipped with its
last double step.
"""

from __future__ import annotations

import logging
from typing import Optional

from pawnchess.game.board import BOARD_SIZE, render_board
from pawnchess.game.notation import command_for, translate
from pawnchess.game.state import Cell, InvalidInputError, NoPawnError, Side

logger = logging.getLogger("pawnchess.rules")


def _step(from_cell: Cell, to_cell: Cell, side: Side) -> int:
    """Signed rank distance, positive toward the opponent's edge for side."""
    return (to_cell.rank - from_cell.rank) * side.forward


class BoardEngine:
    """Board state for one game of Pawns-Only Chess."""

    def __init__(self):
        self.board: list[list[Optional[Side]]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        # Square behind a side's last double step, keyed by the side that moved
        self.en_passant: dict[Side, Cell] = {}
        self._setup_starting_position()

    def _setup_starting_position(self):
        for side in Side:
            self.board[side.initial_rank] = [side] * BOARD_SIZE

    def piece_at(self, cell: Cell) -> Optional[Side]:
        """Get the side occupying cell, or None."""
        if cell.on_board():
            return self.board[cell.rank][cell.file]
        return None

    def pawns(self, side: Side) -> list[Cell]:
        return [Cell(rank, file)
                for rank in range(BOARD_SIZE)
                for file in range(BOARD_SIZE)
                if self.board[rank][file] == side]

    def count_pawns(self, side: Side) -> int:
        return sum(row.count(side) for row in self.board)

    @staticmethod
    def translate(command: str) -> tuple[Cell, Cell]:
        return translate(command)

    def is_legal_move(self, from_cell: Cell, to_cell: Cell, side: Side) -> bool:
        """Straight advance onto an empty square.

        A double step only checks the landing square, not the one it passes.
        """
        if from_cell.file != to_cell.file or self.piece_at(to_cell) is not None:
            return False

        step = _step(from_cell, to_cell, side)
        return step == 1 or (from_cell.rank == side.initial_rank and step == 2)

    def is_legal_capture(self, from_cell: Cell, to_cell: Cell, side: Side) -> bool:
        """Diagonal capture of an opposing pawn, or en passant."""
        dest = self.piece_at(to_cell)
        if dest == side:
            return False
        if abs(from_cell.file - to_cell.file) != 1:
            return False

        return _step(from_cell, to_cell, side) == 1 and (
            dest == side.opposite
            or (dest is None and self.en_passant.get(side.opposite) == to_cell)
        )

    def validate(self, command: str, side: Side) -> tuple[Cell, Cell]:
        """Check a command for side and return its (origin, destination).

        Raises:
            InvalidInputError: Malformed command or illegal pawn move.
            NoPawnError: The origin square holds no pawn of side.
        """
        from_cell, to_cell = translate(command)

        if self.piece_at(from_cell) != side:
            raise NoPawnError(side, str(from_cell))

        if from_cell == to_cell:
            raise InvalidInputError()

        if not (self.is_legal_move(from_cell, to_cell, side)
                or self.is_legal_capture(from_cell, to_cell, side)):
            raise InvalidInputError()

        return from_cell, to_cell

    def check_move(self, command: str, side: Side) -> bool:
        """Return True if side may play command. Never changes the board."""
        try:
            self.validate(command, side)
        except InvalidInputError as e:
            logger.debug("Rejected %r for %s: %s", command, side.label, e)
            return False
        return True

    def _update_en_passant(self, from_cell: Cell, to_cell: Cell, side: Side):
        if _step(from_cell, to_cell, side) == 2 and from_cell.rank == side.initial_rank:
            self.en_passant[side] = Cell(to_cell.rank + side.back_offset, to_cell.file)
            logger.debug("En passant target for %s: %s", side.label, self.en_passant[side])
        elif self.en_passant.pop(side, None) is not None:
            logger.debug("En passant target for %s cleared", side.label)

    def apply_move(self, command: str, side: Side):
        """Play command for side.

        The command must already have passed check_move; it is not re-validated.
        An empty destination means the pawn behind it is removed, which is the
        en passant capture (for a straight advance that square is already empty).
        """
        from_cell, to_cell = translate(command)
        en_passant_capture = to_cell == self.en_passant.get(side.opposite)
        self._update_en_passant(from_cell, to_cell, side)

        self.board[from_cell.rank][from_cell.file] = None
        if self.board[to_cell.rank][to_cell.file] is None:
            behind = to_cell.rank + side.back_offset
            if en_passant_capture:
                logger.debug("%s captures en passant on %s", side.label, to_cell)
            self.board[behind][to_cell.file] = None
        self.board[to_cell.rank][to_cell.file] = side

        logger.debug("%s played %s", side.label, command)

    def winner(self) -> Optional[Side]:
        """Return the side that has won, or None while the game goes on.

        A side wins by reaching its last rank or by leaving the opponent
        without pawns.
        """
        for side in Side:
            if side in self.board[side.last_rank]:
                return side
        for side in Side:
            if self.count_pawns(side.opposite) == 0:
                return side
        return None

    def has_won(self) -> bool:
        return self.winner() is not None

    def _candidate_targets(self, cell: Cell, side: Side) -> list[Cell]:
        """Every square a pawn on cell could possibly reach this turn."""
        ahead = cell.rank + side.forward
        targets = [
            Cell(ahead, cell.file),
            Cell(cell.rank + 2 * side.forward, cell.file),
            Cell(ahead, cell.file - 1),
            Cell(ahead, cell.file + 1),
        ]
        return [t for t in targets if t.on_board()]

    def legal_moves(self, side: Side) -> list[str]:
        """Generate every command side could legally play."""
        moves = []
        for from_cell in self.pawns(side):
            for to_cell in self._candidate_targets(from_cell, side):
                if (self.is_legal_move(from_cell, to_cell, side)
                        or self.is_legal_capture(from_cell, to_cell, side)):
                    moves.append(command_for(from_cell, to_cell))
        return moves

    def is_stalemate(self, side: Side) -> bool:
        """True if no pawn of side can move or capture.

        Vacuously true when side has no pawns left; has_won covers that case.
        """
        return not self.legal_moves(side)

    def to_display_board(self) -> list[list]:
        """Convert to the format expected by render_board."""
        return [[cell.marker if cell is not None else None for cell in row]
                for row in self.board]

    def render(self) -> str:
        return render_board(self.to_display_board())
