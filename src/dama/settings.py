"""User-configurable game settings."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from dama.core.enums import Difficulty, Player

DEFAULT_THINKING_TIME_LIMIT = 120.0


@dataclass(frozen=True)
class GameSettings:
    """All user-configurable settings for one game."""

    # Engine
    difficulty: Difficulty = Difficulty.NORMAL
    ai_player: Player = Player.BLACK
    seed: int | None = None

    # Turn timer (seconds per human turn, ``inf`` disables it)
    thinking_time_limit: float = DEFAULT_THINKING_TIME_LIMIT

    @property
    def human_player(self) -> Player:
        return self.ai_player.opposite

    def with_changes(self, **changes: Any) -> GameSettings:
        """Copy of these settings with *changes* applied."""
        return replace(self, **changes)
