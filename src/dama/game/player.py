"""Concrete player implementations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from dama.core.enums import Difficulty, Player
from dama.engine.minimax import MinimaxEngine
from dama.game.interfaces import IPlayer
from dama.settings import GameSettings

if TYPE_CHECKING:
    from dama.core.board import Board
    from dama.core.move import Move

_LOGGER = logging.getLogger(__name__)


class HumanPlayer(IPlayer):
    """A human participant; moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_side", "_name")

    def __init__(self, side: Player, name: str = "") -> None:
        self._side = side
        self._name = name or f"Player ({side})"

    @property
    def side(self) -> Player:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> None:
        pass  # Human moves arrive via controller.submit_move()


class AIPlayer(IPlayer):
    """An AI participant.

    With an ``on_request_move`` callback the search is delegated: in a Qt
    host the callback emits a request to an ``EngineWorker`` living in a
    ``QThread`` and the result comes back through
    ``GameController.submit_move``.

    Without a callback the player searches synchronously with its own
    :class:`MinimaxEngine`, configured from *settings* (difficulty and
    seed), and hands the chosen move to ``on_move_ready``.

    Args:
        side: Side the AI plays.
        name: Display name.
        on_request_move: ``(Board) -> None``, called when the game
            controller asks the AI to start thinking.
        settings: Difficulty and seed for the built-in engine.
        on_move_ready: ``(Move) -> None``, receives the built-in
            engine's choice.
    """

    __slots__ = (
        "_side",
        "_name",
        "_on_request_move",
        "_on_move_ready",
        "_difficulty",
        "_engine",
    )

    def __init__(
        self,
        side: Player,
        name: str = "Engine",
        on_request_move: Callable[[Board], None] | None = None,
        settings: GameSettings | None = None,
        on_move_ready: Callable[[Move], None] | None = None,
    ) -> None:
        settings = settings or GameSettings(ai_player=side)
        self._side = side
        self._name = name
        self._on_request_move = on_request_move
        self._on_move_ready = on_move_ready
        self._difficulty = settings.difficulty
        self._engine = MinimaxEngine(ai_player=side, seed=settings.seed)

    @property
    def side(self) -> Player:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def set_move_handler(self, handler: Callable[[Move], None] | None) -> None:
        self._on_move_ready = handler

    def choose_move(self, board: Board) -> Move | None:
        """Best move for this side on *board*, ``None`` if it is blocked."""
        return self._engine.best_move(board, self._side, self._difficulty)

    def request_move(self, board: Board) -> None:
        if self._on_request_move is not None:
            self._on_request_move(board)
            return
        move = self.choose_move(board)
        if move is None:
            _LOGGER.debug("%s has no legal move", self._name)
            return
        if self._on_move_ready is not None:
            self._on_move_ready(move)
