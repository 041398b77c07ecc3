"""Game management layer — controller, players, turn timer, state machine.

Quick start::

    from dama.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Player.WHITE, "Alice"),
        black=HumanPlayer(Player.BLACK, "Bob"),
    )
"""

from dama.game.clock import TurnTimer
from dama.game.controller import MANDATORY_CAPTURE, GameController, GameEvents
from dama.game.interfaces import (
    DrawOffer,
    GameEndReason,
    GamePhase,
    IClock,
    IGameController,
    IPlayer,
)
from dama.game.player import AIPlayer, HumanPlayer
from dama.game.state import GameState, MoveRecord, Snapshot

__all__ = [
    # Interfaces
    "DrawOffer",
    "GameEndReason",
    "GamePhase",
    "IClock",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MANDATORY_CAPTURE",
    "MoveRecord",
    "Snapshot",
    "TurnTimer",
]
