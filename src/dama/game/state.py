"""Game state machine: board, turn, result and undo history."""

from __future__ import annotations

from dataclasses import dataclass, field

from dama.core.board import Board
from dama.core.enums import GameResult, Player
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator
from dama.core.rules import Rules, apply_move
from dama.game.interfaces import DrawOffer, GameEndReason, GamePhase


@dataclass(frozen=True)
class Snapshot:
    """Board and turn before a move, kept for undo."""

    board: Board
    side_to_move: Player


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    side: Player
    notation: str
    was_promotion: bool = False

    @property
    def was_capture(self) -> bool:
        return self.move.is_capture


@dataclass
class GameState:
    """Session value object: everything that changes during one game.

    This is a pure data/logic class with no threading and no UI.  Boards are
    never shared with history: every applied move produces a new board.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Player = field(default=Player.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason = field(default=GameEndReason.NONE, init=False)
    draw_offer: DrawOffer = field(default=DrawOffer.NONE, init=False)
    draw_offer_by: Player | None = field(default=None, init=False)
    history: list[Snapshot] = field(default_factory=list, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Player = Player.WHITE) -> None:
        """Initialise (or reset) the game."""
        self.board = board.copy() if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = GameEndReason.NONE
        self.draw_offer = DrawOffer.NONE
        self.draw_offer_by = None
        self.history.clear()
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        piece = self.board[move.from_sq]
        was_king = piece is not None and piece.is_king

        self.history.append(Snapshot(self.board, self.side_to_move))
        self.board = apply_move(self.board, move)

        landed = self.board[move.to_sq]
        record = MoveRecord(
            move=move,
            side=self.side_to_move,
            notation=str(move),
            was_promotion=not was_king and landed is not None and landed.is_king,
        )
        self.move_history.append(record)
        self.side_to_move = self.side_to_move.opposite

        self._check_game_over()
        self.draw_offer = DrawOffer.NONE  # any move cancels a pending offer
        self.draw_offer_by = None

        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.history:
            return None

        snapshot = self.history.pop()
        record = self.move_history.pop()
        self.board = snapshot.board
        self.side_to_move = snapshot.side_to_move

        # Reset result if we un-did a game-ending move
        if self.result != GameResult.IN_PROGRESS:
            self.result = GameResult.IN_PROGRESS
            self.end_reason = GameEndReason.NONE
            self.phase = GamePhase.AWAITING_MOVE

        return record.move

    # ── Resignation / draw / timeout ─────────────────────────────────────

    def resign(self, side: Player) -> None:
        self._finish(GameResult.win_for(side.opposite), GameEndReason.RESIGNATION)

    def set_draw(self, reason: GameEndReason = GameEndReason.DRAW_AGREED) -> None:
        self._finish(GameResult.DRAW, reason)

    def flag_timeout(self) -> None:
        """The side to move ran out of thinking time."""
        self._finish(GameResult.TIMEOUT, GameEndReason.TIMEOUT)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of moves played."""
        return len(self.move_history)

    def piece_count(self, side: Player) -> int:
        return self.board.count(side)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.board).generate_legal_moves(self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _finish(self, result: GameResult, reason: GameEndReason) -> None:
        self.result = result
        self.end_reason = reason
        self.phase = GamePhase.GAME_OVER
        # An offer still open when the game ends can no longer be answered.
        if self.draw_offer == DrawOffer.OFFERED:
            self.draw_offer = DrawOffer.NONE
            self.draw_offer_by = None

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board, self.side_to_move)
        if result == GameResult.IN_PROGRESS:
            return
        if self.board.count(Player.WHITE) == 0 or self.board.count(Player.BLACK) == 0:
            self._finish(result, GameEndReason.NO_PIECES)
        else:
            self._finish(result, GameEndReason.NO_MOVES)
