"""Engine registry and the ``select_move`` entry point.

Both ``rookery.engine.__init__`` and ``rookery.engine.qt_bridge`` import from
here instead of from each other, breaking the import cycle.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from rookery.engine.heuristic_search import HeuristicSearchEngine
from rookery.engine.minimax_search import MinimaxSearchEngine
from rookery.engine.search import CancelCheck, IEngine, SearchLimits

if TYPE_CHECKING:
    from rookery.core.move import Move
    from rookery.core.state import GameState

DefaultEngine: type[IEngine] = MinimaxSearchEngine

ENGINES: dict[str, type[IEngine]] = {
    "minimax": MinimaxSearchEngine,
    "heuristic": HeuristicSearchEngine,
}


def make_engine(strategy: str = "minimax", rng: random.Random | None = None) -> IEngine:
    """Instantiate the engine registered under *strategy*."""
    try:
        engine_cls = ENGINES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown engine strategy: {strategy!r} (expected one of {sorted(ENGINES)})"
        ) from None
    if engine_cls is HeuristicSearchEngine:
        return HeuristicSearchEngine(rng)
    return engine_cls()


def select_move(
    state: GameState,
    level: int = 1,
    *,
    strategy: str = "minimax",
    rng: random.Random | None = None,
    time_limit_ms: int | None = None,
    is_cancelled: CancelCheck | None = None,
) -> Move | None:
    """Pick a move for the side to move, or None when it has no legal move.

    ``None`` only means "no move available"; whether that is mate or
    stalemate is for the caller to read off ``state``.
    """
    engine = make_engine(strategy, rng)
    limits = SearchLimits.for_level(level, time_limit_ms=time_limit_ms)
    return engine.search(state, limits, is_cancelled=is_cancelled).best_move
