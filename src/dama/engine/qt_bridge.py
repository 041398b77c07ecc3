"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from dama.core.board import Board
from dama.core.enums import Difficulty, Player
from dama.engine.minimax import MinimaxEngine
from dama.engine.search import SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes AI moves on demand.

    Only one search runs at a time; a request arriving while another is in
    flight is answered with ``search_rejected`` instead of being queued.
    """

    best_move_ready = pyqtSignal(int, object, int, int, int)
    search_no_move = pyqtSignal(int, int, int, int)
    search_error = pyqtSignal(int, str)
    search_rejected = pyqtSignal(int)

    __slots__ = ("_busy", "_difficulty", "_engine")

    def __init__(
        self,
        *,
        ai_player: Player = Player.BLACK,
        difficulty: Difficulty = Difficulty.NORMAL,
        seed: int | None = None,
    ) -> None:
        super().__init__()
        self._engine = MinimaxEngine(ai_player=ai_player, seed=seed)
        self._difficulty = difficulty
        self._busy = threading.Lock()

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def is_busy(self) -> bool:
        return self._busy.locked()

    @pyqtSlot(object, int, int)
    def request_move(self, board_obj: object, player: int, request_id: int) -> None:
        """Search for *player*'s best move on *board_obj* and emit the result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        if not self._busy.acquire(blocking=False):
            _LOGGER.debug("search request %d rejected: search in progress", request_id)
            self.search_rejected.emit(request_id)
            return

        try:
            limits = SearchLimits.for_difficulty(self._difficulty, board_obj.total())
            result = self._engine.search(board_obj, Player(player), limits)
        except Exception as exc:
            _LOGGER.exception("search request %d failed", request_id)
            self.search_error.emit(request_id, str(exc))
            return
        finally:
            self._busy.release()

        if result.best_move is None:
            self.search_no_move.emit(
                request_id,
                result.score,
                result.depth,
                result.nodes,
            )
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )

    @pyqtSlot(int)
    def set_difficulty(self, difficulty: int) -> None:
        """Update difficulty (takes effect on the next search)."""
        self._difficulty = Difficulty(difficulty)
