"""Legal move generation: simple moves, capture chains, mandatory capture."""

from __future__ import annotations

from dama.core.board import Board
from dama.core.enums import Player
from dama.core.move import Move
from dama.core.types import Square, in_bounds

ORTHOGONAL_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))

# Men step and jump sideways or forward, never backward.
_MAN_DIRS: dict[Player, tuple[tuple[int, int], ...]] = {
    Player.WHITE: ((0, 1), (0, -1), (-1, 0)),
    Player.BLACK: ((0, 1), (0, -1), (1, 0)),
}


class MoveGenerator:
    """Generates moves for a fixed :class:`Board`.

    The board is never mutated; capture chains are explored on copies so
    sibling branches never observe each other's state.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # ── Public API ───────────────────────────────────────────────────────

    def generate_legal_moves(self, player: Player) -> list[Move]:
        """All legal moves for *player* under the maximum-capture rule.

        When any piece can capture, only the longest chains (across all
        pieces) are returned; ties are all kept.
        """
        moves: list[Move] = []
        for sq in self._board.squares_of(player):
            moves.extend(self.moves_for_square(sq))

        longest = max((m.capture_count for m in moves), default=0)
        if longest == 0:
            return moves
        return [m for m in moves if m.capture_count == longest]

    def moves_for_square(self, sq: Square) -> list[Move]:
        """Moves for the piece on *sq*, ignoring the other pieces' captures.

        Capture chains take precedence over simple moves for the piece.
        """
        piece = self._board[sq]
        if piece is None:
            return []

        captures = self._capture_paths(
            self._board, sq, piece.owner, piece.is_king, (), (), sq
        )
        if captures:
            return captures
        return self._simple_moves(sq, piece.owner, piece.is_king)

    def has_legal_moves(self, player: Player) -> bool:
        return any(
            self.moves_for_square(sq) for sq in self._board.squares_of(player)
        )

    # ── Simple moves ─────────────────────────────────────────────────────

    def _simple_moves(self, sq: Square, player: Player, is_king: bool) -> list[Move]:
        board = self._board
        moves: list[Move] = []
        dirs = ORTHOGONAL_DIRS if is_king else _MAN_DIRS[player]

        for dr, dc in dirs:
            r, c = sq.row + dr, sq.col + dc
            if is_king:
                while in_bounds(r, c) and board.is_empty((r, c)):
                    moves.append(Move.simple(sq, Square(r, c)))
                    r += dr
                    c += dc
            elif in_bounds(r, c) and board.is_empty((r, c)):
                moves.append(Move.simple(sq, Square(r, c)))
        return moves

    # ── Capture chains ───────────────────────────────────────────────────

    def _capture_paths(
        self,
        board: Board,
        sq: Square,
        player: Player,
        is_king: bool,
        path: tuple[Square, ...],
        captured: tuple[Square, ...],
        origin: Square,
    ) -> list[Move]:
        """Every maximal capture chain starting from *sq* on *board*.

        A branch that can continue only reports its continuations; a
        branch that cannot is emitted as a finished :class:`Move`.
        """
        # A man on its crowning row stops; promotion happens after the move.
        if not is_king and sq.row == player.promotion_row:
            return []

        chains: list[Move] = []
        for jumped, landing in self._jumps(board, sq, player, is_king, captured):
            next_board = board.copy()
            next_board[landing] = board[sq]
            next_board[sq] = None
            next_board[jumped] = None

            next_path = path + (landing,)
            next_captured = captured + (jumped,)
            deeper = self._capture_paths(
                next_board, landing, player, is_king, next_path, next_captured, origin
            )
            if deeper:
                chains.extend(deeper)
            else:
                chains.append(Move(origin, landing, next_path, next_captured))
        return chains

    @staticmethod
    def _jumps(
        board: Board,
        sq: Square,
        player: Player,
        is_king: bool,
        captured: tuple[Square, ...],
    ) -> list[tuple[Square, Square]]:
        """Single-hop captures from *sq* as ``(jumped, landing)`` pairs."""
        jumps: list[tuple[Square, Square]] = []

        if not is_king:
            for dr, dc in _MAN_DIRS[player]:
                land_r, land_c = sq.row + 2 * dr, sq.col + 2 * dc
                if not in_bounds(land_r, land_c):
                    continue
                enemy_sq = Square(sq.row + dr, sq.col + dc)
                enemy = board[enemy_sq]
                # Jumped pieces are already off the branch board; the
                # captured check only guards against reuse.
                if (
                    enemy is not None
                    and enemy.owner != player
                    and enemy_sq not in captured
                    and board.is_empty((land_r, land_c))
                ):
                    jumps.append((enemy_sq, Square(land_r, land_c)))
            return jumps

        for dr, dc in ORTHOGONAL_DIRS:
            r, c = sq.row + dr, sq.col + dc
            target: Square | None = None
            while in_bounds(r, c):
                occupant = board[r, c]
                if occupant is not None:
                    # Own piece or a second piece blocks. Jumped pieces are
                    # already removed, so the captured check is only a guard.
                    if occupant.owner == player or target is not None:
                        break
                    if (r, c) in captured:
                        break
                    target = Square(r, c)
                elif target is not None:
                    jumps.append((target, Square(r, c)))
                r += dr
                c += dc
        return jumps
