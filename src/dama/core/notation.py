"""Plain-text board diagrams and move notation.

A diagram is eight lines of eight characters, row 0 first::

    ........
    bbbbbbbb
    bbbbbbbb
    ........
    ........
    wwwwwwww
    wwwwwwww
    ........

``.`` is an empty cell, ``w``/``b`` are men and ``W``/``B`` kings.
"""

from __future__ import annotations

from collections.abc import Iterable

from dama.core.board import Board
from dama.core.move import Move
from dama.core.piece import Piece
from dama.core.types import BOARD_SIZE, Square

STARTING_DIAGRAM = "\n".join(
    [
        "........",
        "bbbbbbbb",
        "bbbbbbbb",
        "........",
        "........",
        "wwwwwwww",
        "wwwwwwww",
        "........",
    ]
)


def board_from_text(text: str) -> Board:
    """Parse a diagram into a :class:`Board`.

    Blank lines and surrounding whitespace are ignored.  Pieces get ids of
    the form ``"<player>-<row>-<col>"`` matching :meth:`Board.initial`.
    """
    rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid diagram (must contain 8 rows): {text!r}")

    board = Board()
    for r, line in enumerate(rows):
        if len(line) != BOARD_SIZE:
            raise ValueError(f"Invalid diagram row width: {line!r}")
        for c, ch in enumerate(line):
            if ch == ".":
                continue
            piece = Piece.from_char(ch, "")
            board[r, c] = Piece(f"{piece.owner}-{r}-{c}", piece.owner, piece.is_king)
    return board


def board_to_text(board: Board) -> str:
    """Render *board* as a diagram accepted by :func:`board_from_text`."""
    lines: list[str] = []
    for r in range(BOARD_SIZE):
        lines.append(
            "".join(str(board[r, c] or ".") for c in range(BOARD_SIZE))
        )
    return "\n".join(lines)


def move_to_text(move: Move) -> str:
    """``a3-a4`` for simple moves, ``a3xa5xc5`` for capture chains."""
    return str(move)


def find_move(moves: Iterable[Move], text: str) -> Move | None:
    """Return the move in *moves* whose text form is *text*, if any."""
    text = text.strip()
    for move in moves:
        if str(move) == text:
            return move
    return None


def find_move_between(
    moves: Iterable[Move], from_sq: Square, to_sq: Square
) -> Move | None:
    """First move in *moves* going from *from_sq* to *to_sq*, if any."""
    for move in moves:
        if move.from_sq == from_sq and move.to_sq == to_sq:
            return move
    return None
