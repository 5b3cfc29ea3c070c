"""Tests for GameSession: playing, undo and engine moves."""

import random

import pytest

from rookery.core.enums import Color, GameResult
from rookery.core.errors import IllegalMoveError
from rookery.core.move import Move
from rookery.core.state import GameState
from rookery.core.types import parse_square
from rookery.game.session import GameSession

FOOLS_MATE_MOVES = ("f2f3", "e7e5", "g2g4", "d8h4")


class TestPlay:
    def test_starts_at_initial_position(self) -> None:
        session = GameSession()
        assert session.state == GameState.initial()
        assert session.side_to_move == Color.WHITE
        assert session.ply_count == 0
        assert session.moves == []

    def test_play_advances(self) -> None:
        session = GameSession()
        session.play(parse_square("e2"), parse_square("e4"))
        assert session.side_to_move == Color.BLACK
        assert session.ply_count == 1
        assert session.moves == [Move.from_uci("e2e4")]

    def test_illegal_move_leaves_session_unchanged(self) -> None:
        session = GameSession()
        with pytest.raises(IllegalMoveError):
            session.play_uci("e2e5")
        assert session.state == GameState.initial()
        assert session.history == []

    def test_fools_mate(self) -> None:
        session = GameSession()
        for text in FOOLS_MATE_MOVES:
            session.play_uci(text)
        assert session.is_over
        assert session.result == GameResult.BLACK_WINS
        assert session.legal_moves() == []
        assert [m.uci for m in session.moves] == list(FOOLS_MATE_MOVES)

    def test_from_fen(self) -> None:
        session = GameSession.from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert session.is_over
        assert session.result == GameResult.DRAW


class TestUndo:
    def test_undo_restores_previous_state(self) -> None:
        session = GameSession()
        before = session.state
        session.play_uci("g1f3")
        assert session.undo() == Move.from_uci("g1f3")
        assert session.state == before
        assert session.ply_count == 0

    def test_undo_empty(self) -> None:
        assert GameSession().undo() is None

    def test_undo_out_of_mate(self) -> None:
        session = GameSession()
        for text in FOOLS_MATE_MOVES:
            session.play_uci(text)
        session.undo()
        assert not session.is_over
        assert session.side_to_move == Color.BLACK

    def test_reset(self) -> None:
        session = GameSession()
        session.play_uci("e2e4")
        session.reset()
        assert session.state == GameState.initial()
        assert session.history == []


class TestEngineMove:
    def test_engine_replies(self) -> None:
        session = GameSession()
        session.play_uci("e2e4")
        move = session.engine_move(1)
        assert move is not None
        assert session.side_to_move == Color.WHITE
        assert session.moves[-1] == move

    def test_heuristic_game_runs(self) -> None:
        session = GameSession()
        rng = random.Random(1)
        for _ in range(12):
            if session.engine_move(strategy="heuristic", rng=rng) is None:
                break
        assert session.ply_count > 0
        assert len(session.moves) == session.ply_count

    def test_no_move_when_over(self) -> None:
        session = GameSession.from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert session.engine_move(1) is None
        assert session.ply_count == 0
