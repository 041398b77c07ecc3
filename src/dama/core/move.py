"""Move value object."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from dama.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing one turn of play.

    A capture chain is a single move: ``from_sq`` is where the chain
    started, ``to_sq`` the final landing square, ``path`` every landing
    square in order and ``captured`` the jumped pieces in the same order.
    A simple move has ``path == (to_sq,)`` and no captures.
    """

    from_sq: Square
    to_sq: Square
    path: tuple[Square, ...] = ()
    captured: tuple[Square, ...] = ()

    @classmethod
    def simple(cls, from_sq: Square, to_sq: Square) -> Move:
        return cls(from_sq, to_sq, (to_sq,), ())

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)

    @property
    def capture_count(self) -> int:
        return len(self.captured)

    def hops(self) -> Iterator[tuple[Square, Square | None]]:
        """Yield ``(landing, captured)`` per hop for step-by-step playback."""
        if not self.captured:
            yield self.to_sq, None
            return
        yield from zip(self.path, self.captured)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if not self.captured:
            return f"{square_name(self.from_sq)}-{square_name(self.to_sq)}"
        names = [square_name(self.from_sq)] + [square_name(sq) for sq in self.path]
        return "x".join(names)
