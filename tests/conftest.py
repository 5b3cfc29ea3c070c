"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from rookery.core.notation import position_from_fen
from rookery.core.state import GameState, apply_move
from rookery.core.types import parse_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

FOOLS_MATE_FEN = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"
STALEMATE_FEN = "7k/8/5KQ1/8/8/8/8/8 b - - 0 1"
CASTLING_FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"


def _play(state: GameState, *moves: str) -> GameState:
    for text in moves:
        state = apply_move(state, parse_square(text[:2]), parse_square(text[2:4]))
    return state


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for worker tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def start() -> GameState:
    return GameState.initial()


@pytest.fixture
def fools_mate() -> GameState:
    return position_from_fen(FOOLS_MATE_FEN)


@pytest.fixture
def stalemate() -> GameState:
    return position_from_fen(STALEMATE_FEN)


@pytest.fixture
def castling_ready() -> GameState:
    return position_from_fen(CASTLING_FEN)


@pytest.fixture
def play() -> Callable[..., GameState]:
    """``play(state, "e2e4", "e7e5")`` applies coordinate moves in order."""
    return _play
