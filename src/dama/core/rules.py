"""Move application and game-outcome rules."""

from __future__ import annotations

from dama.core.board import Board
from dama.core.enums import GameResult, Player
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator


def apply_move(board: Board, move: Move) -> Board:
    """Return a new board with *move* played; *board* is left untouched.

    Captured pieces are removed, and a man finishing the move on its
    crowning row becomes a king.  Intermediate landings never promote.
    """
    next_board = board.copy()
    piece = next_board[move.from_sq]
    if piece is None:
        return next_board

    next_board[move.from_sq] = None
    for victim in move.captured:
        next_board[victim] = None

    if not piece.is_king and move.to_sq.row == piece.owner.promotion_row:
        piece = piece.crowned()
    next_board[move.to_sq] = piece
    return next_board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def piece_count(board: Board, player: Player) -> int:
        return board.count(player)

    @staticmethod
    def total_pieces(board: Board) -> int:
        return board.total()

    @staticmethod
    def legal_moves(board: Board, player: Player) -> list[Move]:
        return MoveGenerator(board).generate_legal_moves(player)

    @staticmethod
    def has_mandatory_capture(board: Board, player: Player) -> bool:
        """Whether *player* is obliged to capture this turn."""
        moves = MoveGenerator(board).generate_legal_moves(player)
        return bool(moves) and moves[0].is_capture

    @staticmethod
    def is_blocked(board: Board, player: Player) -> bool:
        """*player* still has pieces but none of them can move."""
        return board.count(player) > 0 and not MoveGenerator(board).has_legal_moves(
            player
        )

    @staticmethod
    def game_result(board: Board, side_to_move: Player) -> GameResult:
        """Determine the result after a move, with *side_to_move* to play.

        A side with no pieces loses; so does a side to move without a
        legal move.
        """
        if board.count(Player.WHITE) == 0:
            return GameResult.BLACK_WINS
        if board.count(Player.BLACK) == 0:
            return GameResult.WHITE_WINS
        if not MoveGenerator(board).has_legal_moves(side_to_move):
            return GameResult.win_for(side_to_move.opposite)
        return GameResult.IN_PROGRESS
