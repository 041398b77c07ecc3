"""Tests for the static evaluation."""

from dama.core.board import Board
from dama.core.enums import Player
from dama.core.notation import board_from_text
from dama.engine.evaluate import evaluate


class TestEvaluate:
    def test_starting_position_is_symmetric(self) -> None:
        board = Board.initial()
        assert evaluate(board, Player.BLACK) == -240
        assert evaluate(board, Player.WHITE) == -240

    def test_empty_board(self) -> None:
        assert evaluate(Board(), Player.BLACK) == 0

    def test_own_king(self) -> None:
        board = board_from_text(
            """
            B.......
            ........
            ........
            ........
            ........
            ........
            ........
            ........
            """
        )
        assert evaluate(board, Player.BLACK) == 400
        assert evaluate(board, Player.WHITE) == -400

    def test_own_man_on_home_row(self) -> None:
        board = board_from_text(
            """
            b.......
            ........
            ........
            ........
            ........
            ........
            ........
            ........
            """
        )
        assert evaluate(board, Player.BLACK) == 150

    def test_center_bonus(self) -> None:
        board = board_from_text(
            """
            ........
            ........
            ........
            ...B....
            ........
            ........
            ........
            ........
            """
        )
        assert evaluate(board, Player.BLACK) == 425

    def test_advanced_opponent_in_open_column(self) -> None:
        board = board_from_text(
            """
            ........
            w.......
            ........
            ........
            ........
            ........
            ........
            ........
            """
        )
        # 100 base + 6 rows * 20 + 150 near promotion + 100 unguarded column
        assert evaluate(board, Player.BLACK) == -470

    def test_guarded_column_lowers_threat(self) -> None:
        board = board_from_text(
            """
            b.......
            w.......
            ........
            ........
            ........
            ........
            ........
            ........
            """
        )
        assert evaluate(board, Player.BLACK) == 150 - 370

    def test_opponent_king_has_no_threat_terms(self) -> None:
        board = board_from_text(
            """
            ........
            W.......
            ........
            ........
            ........
            ........
            ........
            ........
            """
        )
        assert evaluate(board, Player.BLACK) == -400
