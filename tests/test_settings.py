"""Tests for GameSettings."""

import dataclasses

import pytest

from dama.core.enums import Difficulty, Player
from dama.settings import GameSettings


class TestGameSettings:
    def test_defaults(self) -> None:
        s = GameSettings()
        assert s.difficulty == Difficulty.NORMAL
        assert s.ai_player == Player.BLACK
        assert s.human_player == Player.WHITE
        assert s.thinking_time_limit == 120.0
        assert s.seed is None

    def test_with_changes(self) -> None:
        s = GameSettings()
        changed = s.with_changes(difficulty=Difficulty.EXPERT, seed=9)
        assert changed.difficulty == Difficulty.EXPERT
        assert changed.seed == 9
        assert s.difficulty == Difficulty.NORMAL

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            GameSettings().seed = 1  # type: ignore[misc]
