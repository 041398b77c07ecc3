"""Static position evaluation."""

from __future__ import annotations

from dama.core.board import Board
from dama.core.enums import Player

MAN_VALUE = 100
KING_VALUE = 400
CENTER_BONUS = 25

# Opponent men are weighted up as they advance, so the search treats
# their progress as a threat and prefers blocking it.
THREAT_PER_ROW = 20
THREAT_NEAR_PROMOTION = 150
THREAT_OPEN_COLUMN = 100

ADVANCE_PER_ROW = 10
HOME_ROW_BONUS = 50

_CENTER = range(2, 6)
_NEAR_PROMOTION_ADVANCE = 5


def evaluate(board: Board, perspective: Player) -> int:
    """Score *board* for *perspective*; positive favours *perspective*."""
    guarded_cols = {sq.col for sq, p in board.items() if p.owner == perspective}

    score = 0
    for sq, piece in board.items():
        value = KING_VALUE if piece.is_king else MAN_VALUE

        if not piece.is_king:
            advance = piece.owner.rows_advanced(sq.row)
            if piece.owner != perspective:
                value += advance * THREAT_PER_ROW
                if advance >= _NEAR_PROMOTION_ADVANCE:
                    value += THREAT_NEAR_PROMOTION
                if sq.col not in guarded_cols:
                    value += THREAT_OPEN_COLUMN
            else:
                value += advance * ADVANCE_PER_ROW
                if advance == 0:
                    value += HOME_ROW_BONUS

        if sq.row in _CENTER and sq.col in _CENTER:
            value += CENTER_BONUS

        score += value if piece.owner == perspective else -value
    return score
