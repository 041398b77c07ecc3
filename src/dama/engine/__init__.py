"""Draughts engine package: evaluation, search and Qt worker bridge."""

from dama.engine.evaluate import evaluate
from dama.engine.minimax import MinimaxEngine
from dama.engine.qt_bridge import EngineWorker
from dama.engine.search import IEngine, SearchLimits, SearchResult

__all__ = [
    "EngineWorker",
    "IEngine",
    "MinimaxEngine",
    "SearchLimits",
    "SearchResult",
    "evaluate",
]
