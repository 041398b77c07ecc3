"""Square type and coordinate helpers.

Board layout (row-major, row 0 at the top):
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """Immutable (row, col) coordinate, both 0–7."""

    row: int
    col: int

    def offset(self, dr: int, dc: int) -> Square:
        return Square(self.row + dr, self.col + dc)

    def __str__(self) -> str:
        return square_name(self)


def in_bounds(row: int, col: int) -> bool:
    """Whether (row, col) lies on the 8x8 grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark(sq: Square) -> bool:
    """Dark squares are those where row + col is odd."""
    return (sq.row + sq.col) % 2 == 1


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 0) → 'a1', (0, 7) → 'h8'."""
    return chr(ord("a") + sq.col) + str(BOARD_SIZE - sq.row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'a1' → Square(7, 0)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
)
