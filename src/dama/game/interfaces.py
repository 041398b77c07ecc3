"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on the concrete player and
timer implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from dama.core.enums import Player

if TYPE_CHECKING:
    from dama.core.board import Board
    from dama.core.move import Move
    from dama.settings import GameSettings


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # AI is computing
    GAME_OVER = auto()


class DrawOffer(IntEnum):
    """Draw offer status between players."""

    NONE = 0
    OFFERED = auto()
    ACCEPTED = auto()
    DECLINED = auto()


class GameEndReason(IntEnum):
    """Why a finished game ended."""

    NONE = 0
    NO_PIECES = auto()
    NO_MOVES = auto()
    TIMEOUT = auto()
    RESIGNATION = auto()
    DRAW_AGREED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def side(self) -> Player: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via UI).
        For AI this kicks off a search.
        """


class IClock(ABC):
    """Interface for the per-turn thinking timer."""

    @abstractmethod
    def start(self) -> None:
        """Start a fresh turn budget."""

    @abstractmethod
    def stop(self) -> None:
        """Pause the running timer."""

    @abstractmethod
    def remaining(self) -> float:
        """Seconds left in the current turn."""

    @abstractmethod
    def is_expired(self) -> bool:
        """Has the current turn run out of time?"""


class IGameController(ABC):
    """Interface for the turn driver."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        settings: GameSettings | None = None,
        board: Board | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def resign(self, side: Player) -> None:
        """Player of *side* resigns."""

    @abstractmethod
    def offer_draw(self, side: Player) -> None:
        """Player offers a draw."""

    @abstractmethod
    def accept_draw(self, side: Player) -> None:
        """Opponent accepts the draw offer."""

    @abstractmethod
    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
