"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from dama.core.enums import Difficulty

if TYPE_CHECKING:
    from dama.core.board import Board
    from dama.core.enums import Player
    from dama.core.move import Move

_DEPTH_BY_DIFFICULTY: dict[Difficulty, int] = {
    Difficulty.BEGINNER: 2,
    Difficulty.NORMAL: 4,
    Difficulty.EXPERT: 6,
}
_ENDGAME_DEPTH = 8
_ENDGAME_PIECE_THRESHOLD = 12


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 4

    @classmethod
    def for_difficulty(cls, difficulty: Difficulty, piece_count: int) -> SearchLimits:
        """Depth table; expert searches deeper once fewer than 12 pieces remain."""
        if difficulty == Difficulty.EXPERT and piece_count < _ENDGAME_PIECE_THRESHOLD:
            return cls(max_depth=_ENDGAME_DEPTH)
        return cls(max_depth=_DEPTH_BY_DIFFICULTY[difficulty])


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def search(
        self,
        board: Board,
        player: Player,
        limits: SearchLimits,
    ) -> SearchResult: ...
