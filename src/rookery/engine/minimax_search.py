"""Pure-Python minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging
from time import perf_counter

from rookery.core.enums import Color
from rookery.core.state import GameState, apply_move
from rookery.engine.evaluation import evaluate
from rookery.engine.search import (
    MAX_SEARCH_DEPTH,
    CancelCheck,
    IEngine,
    SearchLimits,
    SearchResult,
)

_LOGGER = logging.getLogger(__name__)
_INF_SCORE = float("inf")


def _never_cancelled() -> bool:
    return False


class MinimaxSearchEngine(IEngine):
    """Fixed-depth minimax: white maximises, black minimises.

    Leaves are positions at depth zero or terminal positions (checkmate or
    stalemate) and are scored with :func:`~rookery.engine.evaluation.evaluate`.
    Among equally scored root moves the first one generated wins, so the
    result is deterministic for a given state and depth.

    The recursion depth never exceeds :data:`MAX_SEARCH_DEPTH`.
    """

    __slots__ = ("_cancel_check", "_deadline", "_nodes")

    def __init__(self) -> None:
        self._nodes = 0
        self._deadline: float | None = None
        self._cancel_check: CancelCheck = _never_cancelled

    def search(
        self,
        state: GameState,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        depth = min(limits.max_depth, MAX_SEARCH_DEPTH)
        self._nodes = 0
        self._cancel_check = is_cancelled or _never_cancelled
        self._deadline = None
        if limits.time_limit_ms is not None:
            self._deadline = perf_counter() + (limits.time_limit_ms / 1000.0)

        root_moves = state.legal_moves()
        if not root_moves:
            _LOGGER.debug("No legal moves for %s", state.side_to_move)
            return SearchResult(None, evaluate(state), 0, self._nodes)

        maximizing = state.side_to_move == Color.WHITE
        best_move = root_moves[0]
        best_score = -_INF_SCORE if maximizing else _INF_SCORE
        alpha = -_INF_SCORE
        beta = _INF_SCORE
        completed_depth = depth

        for move in root_moves:
            if self._should_stop():
                completed_depth = 0
                break

            child = apply_move(state, move.from_sq, move.to_sq, validate=False)
            score = self._minimax(child, depth - 1, alpha, beta)
            if self._should_stop():
                # The subtree was cut short; its score is not comparable.
                completed_depth = 0
                break

            if maximizing:
                if score > best_score:
                    best_score = score
                    best_move = move
                alpha = max(alpha, score)
            else:
                if score < best_score:
                    best_score = score
                    best_move = move
                beta = min(beta, score)

        if best_score in (_INF_SCORE, -_INF_SCORE):
            # Stopped before the first move finished.
            best_score = evaluate(state)

        if completed_depth == 0:
            _LOGGER.debug("Search stopped after %d nodes", self._nodes)
        _LOGGER.debug(
            "Search depth=%d nodes=%d best=%s score=%.2f",
            completed_depth,
            self._nodes,
            best_move,
            best_score,
        )
        return SearchResult(best_move, best_score, completed_depth, self._nodes)

    def _minimax(
        self,
        state: GameState,
        depth: int,
        alpha: float,
        beta: float,
    ) -> float:
        self._nodes += 1

        if depth <= 0 or state.is_checkmate or state.is_stalemate:
            return evaluate(state)
        if self._should_stop():
            return evaluate(state)

        if state.side_to_move == Color.WHITE:
            best = -_INF_SCORE
            for move in state.legal_moves():
                child = apply_move(state, move.from_sq, move.to_sq, validate=False)
                score = self._minimax(child, depth - 1, alpha, beta)
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha or self._should_stop():
                    break
            return best

        best = _INF_SCORE
        for move in state.legal_moves():
            child = apply_move(state, move.from_sq, move.to_sq, validate=False)
            score = self._minimax(child, depth - 1, alpha, beta)
            best = min(best, score)
            beta = min(beta, score)
            if beta <= alpha or self._should_stop():
                break
        return best

    def _should_stop(self) -> bool:
        if self._cancel_check():
            return True
        return self._deadline is not None and perf_counter() >= self._deadline
