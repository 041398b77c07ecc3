"""Pure-Python draughts search (minimax + alpha-beta)."""

from __future__ import annotations

import logging
import random

from dama.core.board import Board
from dama.core.enums import Difficulty, Player
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator
from dama.core.rules import apply_move
from dama.engine.evaluate import evaluate
from dama.engine.search import IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000
_LOSS_SCORE = 50_000


def _by_captures_desc(move: Move) -> int:
    return -move.capture_count


class MinimaxEngine(IEngine):
    """Fixed-depth minimax where *ai_player* is always the maximising side.

    Only the root move list is shuffled, with an engine-owned RNG, so
    equally scored root moves vary between games unless *seed* is fixed.
    """

    __slots__ = ("_ai_player", "_rng", "_nodes")

    def __init__(self, ai_player: Player = Player.BLACK, seed: int | None = None) -> None:
        self._ai_player = ai_player
        self._rng = random.Random(seed)
        self._nodes = 0

    @property
    def ai_player(self) -> Player:
        return self._ai_player

    def reseed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def best_move(
        self, board: Board, player: Player, difficulty: Difficulty
    ) -> Move | None:
        """Pick a move for *player*, or ``None`` when it has no legal move."""
        limits = SearchLimits.for_difficulty(difficulty, board.total())
        return self.search(board, player, limits).best_move

    def search(
        self,
        board: Board,
        player: Player,
        limits: SearchLimits,
    ) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._nodes = 0
        root_moves = MoveGenerator(board).generate_legal_moves(player)
        if not root_moves:
            score = -_LOSS_SCORE if player == self._ai_player else _LOSS_SCORE
            return SearchResult(None, score, 0, self._nodes)

        maximizing = player == self._ai_player
        shuffled = root_moves.copy()
        self._rng.shuffle(shuffled)

        best_move: Move | None = None
        best_score = -_INF_SCORE if maximizing else _INF_SCORE
        for move in shuffled:
            score = self._minimax(
                apply_move(board, move),
                limits.max_depth - 1,
                -_INF_SCORE,
                _INF_SCORE,
                not maximizing,
            )
            if (maximizing and score > best_score) or (
                not maximizing and score < best_score
            ):
                best_score = score
                best_move = move

        _LOGGER.debug(
            "search %s depth=%d nodes=%d best=%s score=%d",
            player,
            limits.max_depth,
            self._nodes,
            best_move,
            best_score,
        )
        return SearchResult(best_move, best_score, limits.max_depth, self._nodes)

    def _minimax(
        self,
        board: Board,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
    ) -> int:
        self._nodes += 1
        if depth <= 0:
            return evaluate(board, self._ai_player)

        side = self._ai_player if maximizing else self._ai_player.opposite
        moves = MoveGenerator(board).generate_legal_moves(side)
        if not moves:
            # The side unable to move has lost.
            return -_LOSS_SCORE if maximizing else _LOSS_SCORE

        moves.sort(key=_by_captures_desc)

        if maximizing:
            value = -_INF_SCORE
            for move in moves:
                value = max(
                    value,
                    self._minimax(apply_move(board, move), depth - 1, alpha, beta, False),
                )
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return value

        value = _INF_SCORE
        for move in moves:
            value = min(
                value,
                self._minimax(apply_move(board, move), depth - 1, alpha, beta, True),
            )
            beta = min(beta, value)
            if beta <= alpha:
                break
        return value
