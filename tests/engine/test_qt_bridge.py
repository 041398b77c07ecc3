"""Tests for Qt engine bridge worker."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from dama.core.board import Board
from dama.core.enums import Difficulty, Player
from dama.core.move_generator import MoveGenerator
from dama.core.notation import board_from_text
from dama.engine.qt_bridge import EngineWorker
from dama.engine.search import SearchLimits, SearchResult

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


class _FailingEngine:
    def search(
        self,
        _board: Board,
        _player: Player,
        _limits: SearchLimits,
    ) -> SearchResult:
        raise RuntimeError("boom")


@pytest.mark.usefixtures("qapp")
class TestEngineWorker:
    def test_emits_best_move(self) -> None:
        board = Board.initial()
        worker = EngineWorker(difficulty=Difficulty.BEGINNER, seed=1)

        best_moves = QSignalSpy(worker.best_move_ready)
        errors = QSignalSpy(worker.search_error)

        worker.request_move(board, int(Player.BLACK), 3)

        assert len(best_moves) == 1
        assert best_moves[0][0] == 3
        legal = MoveGenerator(board).generate_legal_moves(Player.BLACK)
        assert best_moves[0][1] in legal
        assert best_moves[0][3] == 2  # depth
        assert len(errors) == 0
        assert not worker.is_busy

    def test_emits_no_move_when_blocked(self) -> None:
        worker = EngineWorker(difficulty=Difficulty.BEGINNER)

        no_move = QSignalSpy(worker.search_no_move)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(board_from_text(BLOCKED_WHITE), int(Player.WHITE), 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(best_moves) == 0

    def test_rejects_invalid_board(self) -> None:
        worker = EngineWorker()
        errors = QSignalSpy(worker.search_error)

        worker.request_move("not a board", int(Player.BLACK), 5)

        assert len(errors) == 1
        assert errors[0][0] == 5

    def test_reports_engine_failure(self) -> None:
        worker = EngineWorker()
        worker._engine = _FailingEngine()
        errors = QSignalSpy(worker.search_error)

        worker.request_move(Board.initial(), int(Player.BLACK), 8)

        assert len(errors) == 1
        assert errors[0][1] == "boom"
        assert not worker.is_busy

    def test_rejects_request_while_busy(self) -> None:
        worker = EngineWorker(difficulty=Difficulty.BEGINNER)
        rejected = QSignalSpy(worker.search_rejected)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker._busy.acquire()
        try:
            worker.request_move(Board.initial(), int(Player.BLACK), 9)
        finally:
            worker._busy.release()

        assert len(rejected) == 1
        assert rejected[0][0] == 9
        assert len(best_moves) == 0

    def test_set_difficulty(self) -> None:
        worker = EngineWorker()
        assert worker.difficulty == Difficulty.NORMAL
        worker.set_difficulty(int(Difficulty.EXPERT))
        assert worker.difficulty == Difficulty.EXPERT
