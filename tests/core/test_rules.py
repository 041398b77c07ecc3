"""Tests for move application and game-result rules."""

from dama.core.board import Board
from dama.core.enums import GameResult, Player
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator
from dama.core.notation import board_from_text, board_to_text
from dama.core.rules import Rules, apply_move
from dama.core.types import Square

BLOCKED_WHITE = """
    ........
    ........
    ........
    ........
    ........
    b.......
    b.......
    wbb.....
"""


class TestApplyMove:
    def test_simple_move(self) -> None:
        board = Board.initial()
        piece = board[5, 3]
        after = apply_move(board, Move.simple(Square(5, 3), Square(4, 3)))
        assert after[5, 3] is None
        assert after[4, 3] == piece

    def test_input_board_untouched(self) -> None:
        board = Board.initial()
        before = board_to_text(board)
        apply_move(board, Move.simple(Square(5, 3), Square(4, 3)))
        assert board_to_text(board) == before
        assert board == Board.initial()

    def test_chain_removes_all_captured(self) -> None:
        board = board_from_text(
            """
            ........
            ........
            ........
            b.......
            ........
            b.......
            w.......
            .......b
            """
        )
        move = MoveGenerator(board).moves_for_square(Square(6, 0))[0]
        after = apply_move(board, move)
        assert after[5, 0] is None
        assert after[3, 0] is None
        assert after[2, 0] is not None and after[2, 0].owner == Player.WHITE
        assert after.count(Player.BLACK) == 1
        assert board.count(Player.BLACK) == 3

    def test_promotion_on_crowning_row(self) -> None:
        board = board_from_text(
            """
            ........
            ...w....
            ........
            ........
            ........
            ........
            ........
            b.......
            """
        )
        after = apply_move(board, Move.simple(Square(1, 3), Square(0, 3)))
        piece = after[0, 3]
        assert piece is not None and piece.is_king
        assert piece.piece_id == board[1, 3].piece_id

    def test_black_promotes_on_row_seven(self) -> None:
        board = board_from_text(
            """
            w.......
            ........
            ........
            ........
            ........
            ........
            ....b...
            ........
            """
        )
        after = apply_move(board, Move.simple(Square(6, 4), Square(7, 4)))
        assert after[7, 4] is not None and after[7, 4].is_king

    def test_capture_onto_crowning_row_promotes(self) -> None:
        board = board_from_text(
            """
            .b......
            b.......
            w.......
            ........
            ........
            ........
            ........
            ........
            """
        )
        (move,) = MoveGenerator(board).generate_legal_moves(Player.WHITE)
        after = apply_move(board, move)
        assert after[0, 0] is not None and after[0, 0].is_king
        assert after[0, 1] is not None  # chain stopped on the crowning row

    def test_no_promotion_elsewhere(self) -> None:
        board = Board.initial()
        for move in MoveGenerator(board).generate_legal_moves(Player.WHITE):
            after = apply_move(board, move)
            assert not any(p.is_king for _, p in after.items())

    def test_king_stays_king(self) -> None:
        board = board_from_text(
            """
            ........
            ........
            ........
            ........
            ........
            ........
            ........
            W......b
            """
        )
        after = apply_move(board, Move.simple(Square(7, 0), Square(3, 0)))
        assert after[3, 0] is not None and after[3, 0].is_king

    def test_empty_origin_is_noop(self) -> None:
        board = Board.initial()
        after = apply_move(board, Move.simple(Square(4, 4), Square(3, 4)))
        assert after == board
        assert after is not board


class TestGameResult:
    def test_in_progress_at_start(self) -> None:
        assert Rules.game_result(Board.initial(), Player.WHITE) == GameResult.IN_PROGRESS

    def test_no_white_pieces(self) -> None:
        board = board_from_text(
            """
            ........
            ...b....
            ........
            ........
            ........
            ........
            ........
            ........
            """
        )
        assert Rules.piece_count(board, Player.WHITE) == 0
        assert Rules.game_result(board, Player.BLACK) == GameResult.BLACK_WINS

    def test_no_black_pieces(self) -> None:
        board = board_from_text(
            """
            ........
            ........
            ........
            ........
            ........
            ........
            ...w....
            ........
            """
        )
        assert Rules.game_result(board, Player.BLACK) == GameResult.WHITE_WINS

    def test_blocked_side_to_move_loses(self) -> None:
        board = board_from_text(BLOCKED_WHITE)
        assert Rules.is_blocked(board, Player.WHITE)
        assert Rules.game_result(board, Player.WHITE) == GameResult.BLACK_WINS

    def test_blocked_side_not_to_move_is_fine(self) -> None:
        board = board_from_text(BLOCKED_WHITE)
        assert Rules.game_result(board, Player.BLACK) == GameResult.IN_PROGRESS


class TestRuleHelpers:
    def test_total_pieces(self) -> None:
        assert Rules.total_pieces(Board.initial()) == 32

    def test_mandatory_capture(self) -> None:
        board = board_from_text(
            """
            ........
            ........
            ........
            ........
            ........
            ...b....
            ...w....
            ........
            """
        )
        assert Rules.has_mandatory_capture(board, Player.WHITE)
        assert not Rules.has_mandatory_capture(Board.initial(), Player.WHITE)

    def test_legal_moves(self) -> None:
        assert len(Rules.legal_moves(Board.initial(), Player.BLACK)) == 8
