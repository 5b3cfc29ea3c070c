"""Tests for the minimax alpha-beta engine."""

import pytest

from rookery.core.move import Move
from rookery.core.notation import position_from_fen
from rookery.core.state import GameState
from rookery.core.types import parse_square
from rookery.engine.evaluation import evaluate
from rookery.engine.minimax_search import MinimaxSearchEngine
from rookery.engine.search import (
    MAX_SEARCH_DEPTH,
    SearchLimits,
    depth_for_level,
)

KINGS_ONLY = "k7/8/8/8/8/8/8/K7 w - - 0 1"


class TestLimits:
    @pytest.mark.parametrize(
        ("level", "depth"), [(1, 2), (2, 3), (3, 4), (4, 5), (5, 5), (9, 5)]
    )
    def test_depth_for_level(self, level: int, depth: int) -> None:
        assert depth_for_level(level) == depth

    def test_for_level(self) -> None:
        limits = SearchLimits.for_level(2, time_limit_ms=500)
        assert limits.max_depth == 3
        assert limits.time_limit_ms == 500

    def test_invalid_depth(self) -> None:
        with pytest.raises(ValueError):
            SearchLimits(max_depth=0)

    def test_invalid_time_limit(self) -> None:
        with pytest.raises(ValueError):
            SearchLimits(max_depth=2, time_limit_ms=0)


class TestMinimaxSearch:
    def test_white_takes_hanging_queen(self) -> None:
        state = position_from_fen("4k3/8/8/3q4/8/8/8/3RK3 w - - 0 1")
        result = MinimaxSearchEngine().search(state, SearchLimits(max_depth=2))
        assert result.best_move == Move.from_uci("d1d5")
        assert result.score > 0
        assert result.depth == 2
        assert result.nodes > 0

    def test_black_takes_hanging_queen(self) -> None:
        state = position_from_fen("3rk3/8/8/8/3Q4/8/8/4K3 b - - 0 1")
        result = MinimaxSearchEngine().search(state, SearchLimits(max_depth=2))
        assert result.best_move == Move.from_uci("d8d4")
        assert result.score < 0

    def test_result_is_legal(self, start: GameState) -> None:
        result = MinimaxSearchEngine().search(start, SearchLimits(max_depth=2))
        assert result.best_move in start.legal_moves()

    def test_deterministic(self, start: GameState) -> None:
        engine = MinimaxSearchEngine()
        first = engine.search(start, SearchLimits(max_depth=2))
        second = engine.search(start, SearchLimits(max_depth=2))
        assert first == second

    def test_no_move_when_checkmated(self, fools_mate: GameState) -> None:
        result = MinimaxSearchEngine().search(fools_mate, SearchLimits(max_depth=2))
        assert result.best_move is None
        assert result.depth == 0
        assert result.score == evaluate(fools_mate)

    def test_no_move_when_stalemated(self, stalemate: GameState) -> None:
        result = MinimaxSearchEngine().search(stalemate, SearchLimits(max_depth=2))
        assert result.best_move is None

    def test_depth_is_capped(self) -> None:
        state = position_from_fen(KINGS_ONLY)
        result = MinimaxSearchEngine().search(state, SearchLimits(max_depth=12))
        assert result.depth == MAX_SEARCH_DEPTH
        assert result.best_move in state.legal_moves()


class TestStopping:
    def test_cancel_returns_first_legal_move(self, start: GameState) -> None:
        result = MinimaxSearchEngine().search(
            start, SearchLimits(max_depth=4), is_cancelled=lambda: True
        )
        assert result.best_move == start.legal_moves()[0]
        assert result.depth == 0
        assert result.score == evaluate(start)

    def test_cancel_mid_search(self, start: GameState) -> None:
        calls = 0

        def cancel_after_a_while() -> bool:
            nonlocal calls
            calls += 1
            return calls > 50

        result = MinimaxSearchEngine().search(
            start, SearchLimits(max_depth=4), is_cancelled=cancel_after_a_while
        )
        assert result.depth == 0
        assert result.best_move in start.legal_moves()

    def test_time_limit_still_returns_a_move(self, start: GameState) -> None:
        result = MinimaxSearchEngine().search(
            start, SearchLimits(max_depth=5, time_limit_ms=1)
        )
        assert result.best_move in start.legal_moves()


@pytest.mark.slow
class TestDeeperSearch:
    def test_attacked_queen_moves_or_captures(self) -> None:
        # The c5 pawn attacks the d4 queen.
        state = position_from_fen("4k3/8/8/2p5/3Q4/8/8/4K3 w - - 0 1")
        result = MinimaxSearchEngine().search(state, SearchLimits.for_level(2))
        assert result.best_move is not None
        assert result.best_move.from_sq == parse_square("d4")
        assert result.depth == 3
