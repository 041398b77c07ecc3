"""GameController, the turn driver of a draughts game.

Coordinates: Players, TurnTimer, GameState, MoveGenerator.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from dama.core.board import Board
from dama.core.enums import GameResult, Player
from dama.core.move import Move
from dama.core.notation import find_move_between
from dama.core.types import Square
from dama.game.clock import TurnTimer
from dama.game.interfaces import (
    DrawOffer,
    GameEndReason,
    GamePhase,
    IGameController,
    IPlayer,
)
from dama.game.player import AIPlayer
from dama.game.state import GameState, MoveRecord
from dama.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]
WarningCallback = Callable[[str], None]

MANDATORY_CAPTURE = "mandatory_capture"


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_warning: list[WarningCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, runs the turn timer,
    switches turns, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).  AI results arrive via ``submit_move``.  A move
    submitted while another one is being applied is rejected.
    """

    __slots__ = (
        "_state",
        "_players",
        "_settings",
        "_timer",
        "_applying",
        "events",
    )

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Player, IPlayer] = {}
        self._settings = GameSettings()
        self._timer: TurnTimer | None = None
        self._applying = False
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def timer(self) -> TurnTimer | None:
        return self._timer

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, side: Player) -> IPlayer | None:
        return self._players.get(side)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        settings: GameSettings | None = None,
        board: Board | None = None,
        timer: TurnTimer | None = None,
    ) -> None:
        self._players = {Player.WHITE: white, Player.BLACK: black}
        for p in (white, black):
            if isinstance(p, AIPlayer):
                p.set_move_handler(self._submit_engine_move)
        self._settings = settings or GameSettings()
        self._timer = timer or TurnTimer(self._settings.thinking_time_limit)
        self._applying = False

        self._state = GameState()
        self._state.setup(board)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def moves_from(self, sq: Square) -> list[Move]:
        """Legal moves starting on *sq* for the side to move.

        Emits a mandatory-capture warning when the piece belongs to the
        side to move but cannot be used because a capture is required.
        """
        if self._state.is_game_over:
            return []
        piece = self._state.board[sq]
        if piece is None or piece.owner != self._state.side_to_move:
            return []

        legal = self._state.legal_moves()
        moves = [m for m in legal if m.from_sq == sq]
        if not moves and legal and legal[0].is_capture:
            self._emit_warning(MANDATORY_CAPTURE)
        return moves

    def find_move(self, from_sq: Square, to_sq: Square) -> Move | None:
        """Resolve a from/to pair against the current legal moves."""
        if self._state.is_game_over:
            return None
        return find_move_between(self._state.legal_moves(), from_sq, to_sq)

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over or self._applying:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        # Validate legality
        if move not in self._state.legal_moves():
            _LOGGER.debug("rejected illegal move %s", move)
            return False

        cp = self.current_player
        if self._timer is not None:
            self._timer.stop()
            if cp is not None and cp.is_human and self._timer.is_expired():
                self._state.flag_timeout()
                self._emit_game_over(self._state.result)
                return False

        # Listeners run before the next move may be submitted.
        self._applying = True
        try:
            record = self._state.apply_move(move)
            self._emit_move(record)
        finally:
            self._applying = False

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return True

        self._prompt_current_player()
        return True

    def check_timeout(self) -> bool:
        """Poll the turn timer; ends the game if a human ran out of time."""
        if self._state.is_game_over or self._timer is None:
            return False
        cp = self.current_player
        if cp is None or not cp.is_human or not self._timer.is_expired():
            return False
        self._timer.stop()
        self._state.flag_timeout()
        self._emit_game_over(self._state.result)
        return True

    def resign(self, side: Player) -> None:
        if self._state.is_game_over:
            return
        if self._timer:
            self._timer.stop()
        self._state.resign(side)
        self._emit_game_over(self._state.result)

    def offer_draw(self, side: Player) -> None:
        if self._state.is_game_over:
            return
        if self._state.draw_offer == DrawOffer.OFFERED:
            return
        self._state.draw_offer = DrawOffer.OFFERED
        self._state.draw_offer_by = side

    def accept_draw(self, side: Player) -> None:
        if self._state.is_game_over:
            return
        if self._state.draw_offer != DrawOffer.OFFERED:
            return
        if self._state.draw_offer_by in (None, side):
            return
        if self._timer:
            self._timer.stop()
        self._state.draw_offer = DrawOffer.ACCEPTED
        self._state.draw_offer_by = None
        self._state.set_draw(GameEndReason.DRAW_AGREED)
        self._emit_game_over(GameResult.DRAW)

    def decline_draw(self) -> None:
        if self._state.is_game_over or self._state.draw_offer != DrawOffer.OFFERED:
            return
        self._state.draw_offer = DrawOffer.DECLINED
        self._state.draw_offer_by = None

    def undo_move(self) -> bool:
        if self._state.is_game_over or self._applying:
            return False
        if not self._state.history:
            return False

        self._state.undo_last_move()
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
            if self._timer is not None:
                self._timer.start()
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.info(
            "game over: %s (%s) after %d moves",
            result.name,
            self._state.end_reason.name,
            self._state.ply_count,
        )
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_warning(self, code: str) -> None:
        for cb in self.events.on_warning:
            cb(code)
