"""Core domain layer — pure draughts logic with zero external dependencies.

Quick start::

    from dama.core import Board, MoveGenerator, Player, apply_move

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.generate_legal_moves(Player.WHITE):
        print(move)
"""

from dama.core.board import Board
from dama.core.enums import Difficulty, GameResult, Player
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator
from dama.core.notation import (
    STARTING_DIAGRAM,
    board_from_text,
    board_to_text,
    find_move,
    find_move_between,
    move_to_text,
)
from dama.core.piece import Piece
from dama.core.rules import Rules, apply_move
from dama.core.types import Square, in_bounds, is_dark, parse_square, square_name

__all__ = [
    # Enums
    "Difficulty",
    "GameResult",
    "Player",
    # Types / helpers
    "Square",
    "in_bounds",
    "is_dark",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "apply_move",
    # Notation
    "STARTING_DIAGRAM",
    "board_from_text",
    "board_to_text",
    "find_move",
    "find_move_between",
    "move_to_text",
]
