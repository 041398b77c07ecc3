"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from dama.core.enums import Player
from dama.core.piece import Piece
from dama.core.types import ALL_SQUARES, BOARD_SIZE, Square

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Rows filled with men at the start of a game.
_STARTING_ROWS: dict[Player, tuple[int, int]] = {
    Player.BLACK: (1, 2),
    Player.WHITE: (5, 6),
}


def _index(sq: tuple[int, int]) -> int:
    return sq[0] * BOARD_SIZE + sq[1]


class Board:
    """Mutable 64-cell board holding at most one piece per cell."""

    __slots__ = ("_cells", "_counts")

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * _CELL_COUNT
        # [player] -> number of pieces on the board.
        self._counts: list[int] = [0, 0]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        return self._cells[_index(sq)]

    def __setitem__(self, sq: tuple[int, int], piece: Piece | None) -> None:
        idx = _index(sq)
        old_piece = self._cells[idx]
        if old_piece is not None:
            self._counts[int(old_piece.owner)] -= 1
        self._cells[idx] = piece
        if piece is not None:
            self._counts[int(piece.owner)] += 1

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self._cells[_index(sq)] is None

    # -- Query helpers ------------------------------------------------------

    def items(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, row by row."""
        for sq, piece in zip(ALL_SQUARES, self._cells):
            if piece is not None:
                yield sq, piece

    def squares_of(self, player: Player) -> list[Square]:
        """All squares occupied by *player*."""
        return [sq for sq, piece in self.items() if piece.owner == player]

    def count(self, player: Player) -> int:
        return self._counts[int(player)]

    def total(self) -> int:
        return self._counts[0] + self._counts[1]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        b._counts = self._counts.copy()
        return b

    def clear(self) -> None:
        self._cells = [None] * _CELL_COUNT
        self._counts = [0, 0]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting position: two full ranks of men per side."""
        b = cls()
        for player, rows in _STARTING_ROWS.items():
            for r in rows:
                for c in range(BOARD_SIZE):
                    b[r, c] = Piece(f"{player}-{r}-{c}", player)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for r in range(BOARD_SIZE):
            row = []
            for c in range(BOARD_SIZE):
                p = self[r, c]
                row.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - r} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
