"""Per-turn thinking timer."""

from __future__ import annotations

import time
from collections.abc import Callable

from dama.game.interfaces import IClock
from dama.settings import DEFAULT_THINKING_TIME_LIMIT

TimeSource = Callable[[], float]


class TurnTimer(IClock):
    """Countdown restarted at the beginning of every turn.

    Uses monotonic time by default; tests may inject their own source.
    """

    __slots__ = ("_limit", "_elapsed", "_started_at", "_running", "_now")

    def __init__(
        self,
        limit_seconds: float = DEFAULT_THINKING_TIME_LIMIT,
        time_source: TimeSource = time.monotonic,
    ) -> None:
        self._limit = limit_seconds
        self._elapsed = 0.0
        self._started_at = 0.0
        self._running = False
        self._now = time_source

    # ── IClock implementation ────────────────────────────────────────────

    def start(self) -> None:
        self._elapsed = 0.0
        self._started_at = self._now()
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._elapsed += self._now() - self._started_at
            self._running = False

    def remaining(self) -> float:
        elapsed = self._elapsed
        if self._running:
            elapsed += self._now() - self._started_at
        return max(0.0, self._limit - elapsed)

    def is_expired(self) -> bool:
        return self.remaining() <= 0.0

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def limit(self) -> float:
        return self._limit

    @property
    def is_unlimited(self) -> bool:
        return self._limit == float("inf")

    @property
    def is_running(self) -> bool:
        return self._running
