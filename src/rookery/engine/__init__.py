"""Chess engine package: search strategies and the Qt worker bridge."""

from rookery.engine._default import ENGINES, DefaultEngine, make_engine, select_move
from rookery.engine.evaluation import evaluate
from rookery.engine.heuristic_search import HeuristicSearchEngine
from rookery.engine.minimax_search import MinimaxSearchEngine
from rookery.engine.qt_bridge import EngineWorker
from rookery.engine.search import (
    MAX_SEARCH_DEPTH,
    IEngine,
    SearchLimits,
    SearchResult,
    depth_for_level,
)

__all__ = [
    "DefaultEngine",
    "ENGINES",
    "EngineWorker",
    "HeuristicSearchEngine",
    "IEngine",
    "MAX_SEARCH_DEPTH",
    "MinimaxSearchEngine",
    "SearchLimits",
    "SearchResult",
    "depth_for_level",
    "evaluate",
    "make_engine",
    "select_move",
]
