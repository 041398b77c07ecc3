"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side identity.

    WHITE starts at the bottom of the board and moves toward row 0,
    BLACK starts at the top and moves toward row 7.
    """

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a forward step."""
        return -1 if self is Player.WHITE else 1

    @property
    def promotion_row(self) -> int:
        """Row on which this side's men are crowned."""
        return 0 if self is Player.WHITE else 7

    @property
    def home_row(self) -> int:
        return 7 if self is Player.WHITE else 0

    def rows_advanced(self, row: int) -> int:
        """Distance of *row* from this side's home edge."""
        return abs(row - self.home_row)

    def __str__(self) -> str:
        return self.name.lower()


class Difficulty(IntEnum):
    """AI strength presets."""

    BEGINNER = 0
    NORMAL = 1
    EXPERT = 2

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
    TIMEOUT = 4

    @classmethod
    def win_for(cls, player: Player) -> GameResult:
        return cls.WHITE_WINS if player is Player.WHITE else cls.BLACK_WINS
