"""Board constants, starting layout, and text-based rendering."""

from __future__ import annotations

BOARD_SIZE = 8

# Starting rank index per side marker. White on rank 2, Black on rank 7.
STARTING_RANKS: dict[str, int] = {
    "W": 1,
    "B": 6,
}

# File labels for notation
FILE_LABELS = "abcdefgh"
# Rank labels for notation (1-indexed, rank 0 = "1", rank 7 = "8")
RANK_LABELS = "12345678"

_BORDER = "  +---+---+---+---+---+---+---+---+"
_FILES = "    a   b   c   d   e   f   g   h"


def rc_to_notation(rank: int, file: int) -> str:
    """Convert (rank, file) to algebraic notation like 'e2'."""
    return FILE_LABELS[file] + RANK_LABELS[rank]


def notation_to_rc(sq: str) -> tuple[int, int]:
    """Convert algebraic notation like 'e2' to (rank, file)."""
    file = FILE_LABELS.index(sq[0])
    rank = RANK_LABELS.index(sq[1])
    return (rank, file)


def render_board(board) -> str:
    """Render the board as a text string.

    Args:
        board: 8x8 list of rows indexed by rank. Each cell is None or a
            one-character marker.

    Rank 8 is drawn on top, files a-h along the bottom, followed by an
    empty line.
    """
    lines = [_BORDER]

    for rank in range(BOARD_SIZE - 1, -1, -1):
        row_str = f"{rank + 1} |"
        for file in range(BOARD_SIZE):
            cell = board[rank][file]
            row_str += f" {cell if cell is not None else ' '} |"
        lines.append(row_str)
        lines.append(_BORDER)

    lines.append(_FILES)
    lines.append("")

    return "\n".join(lines)
