"""Rookery - chess rules engine and automated opponent.

The functional surface a host application needs::

    import rookery

    state = rookery.initial_state()
    targets = rookery.legal_moves(rookery.parse_square("e2"), state)
    state = rookery.apply_move(state, rookery.parse_square("e2"), targets[-1])
    reply = rookery.select_move(state, 2)

Every call takes a :class:`GameState` and returns new values; nothing is
kept between calls.
"""

from rookery.core import (
    STARTING_FEN,
    Board,
    ChessError,
    Color,
    GameResult,
    GameState,
    IllegalMoveError,
    Move,
    Piece,
    PieceType,
    Square,
    apply_move,
    initialize_board,
    is_checkmate,
    is_in_check,
    is_stalemate,
    legal_moves,
    parse_square,
    position_from_fen,
    position_to_fen,
    square_name,
    square_under_attack,
)
from rookery.engine import evaluate, select_move

__version__ = "0.1.0"


def initial_state() -> GameState:
    """Standard starting position, white to move."""
    return GameState.initial()


__all__ = [
    "STARTING_FEN",
    "Board",
    "ChessError",
    "Color",
    "GameResult",
    "GameState",
    "IllegalMoveError",
    "Move",
    "Piece",
    "PieceType",
    "Square",
    "apply_move",
    "evaluate",
    "initial_state",
    "initialize_board",
    "is_checkmate",
    "is_in_check",
    "is_stalemate",
    "legal_moves",
    "parse_square",
    "position_from_fen",
    "position_to_fen",
    "select_move",
    "square_name",
    "square_under_attack",
]
