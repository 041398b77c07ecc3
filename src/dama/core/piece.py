"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from dama.core.enums import Player

# Text character ↔ (Player, is_king)
_CHAR_MAP: dict[str, tuple[Player, bool]] = {
    "w": (Player.WHITE, False),
    "W": (Player.WHITE, True),
    "b": (Player.BLACK, False),
    "B": (Player.BLACK, True),
}

_UNICODE: dict[tuple[Player, bool], str] = {
    (Player.WHITE, False): "⛀",
    (Player.WHITE, True): "⛁",
    (Player.BLACK, False): "⛂",
    (Player.BLACK, True): "⛃",
}

_TEXT_CHARS: dict[tuple[Player, bool], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a man or a king.

    ``piece_id`` is stable for the lifetime of a game so collaborators can
    track a piece across moves (animation, highlighting).
    """

    piece_id: str
    owner: Player
    is_king: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Text character (lowercase = man, uppercase = king)."""
        return _TEXT_CHARS[(self.owner, self.is_king)]

    @classmethod
    def from_char(cls, char: str, piece_id: str) -> Piece:
        """Create piece from text character, e.g. 'W' → white king."""
        try:
            owner, is_king = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(piece_id, owner, is_king)

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛂."""
        return _UNICODE[(self.owner, self.is_king)]

    def crowned(self) -> Piece:
        """Copy of this piece promoted to king."""
        return replace(self, is_king=True)
