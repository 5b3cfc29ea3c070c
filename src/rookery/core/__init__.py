"""Core domain layer - pure chess rules with zero external dependencies.

Quick start::

    from rookery.core import GameState, MoveGenerator, parse_square

    state = GameState.initial()
    gen = MoveGenerator(state)
    for move in gen.generate_legal_moves():
        print(move)
"""

from rookery.core.attacks import is_square_attacked, king_adjacent
from rookery.core.board import Board
from rookery.core.enums import Color, GameResult, PieceType
from rookery.core.errors import ChessError, IllegalMoveError
from rookery.core.move import Move
from rookery.core.move_generator import MoveGenerator, legal_moves
from rookery.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from rookery.core.piece import PIECE_VALUES, Piece
from rookery.core.rules import (
    Rules,
    is_checkmate,
    is_in_check,
    is_stalemate,
    square_under_attack,
)
from rookery.core.state import GameState, apply_move, initialize_board
from rookery.core.types import Square, is_on_board, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "GameState",
    "Move",
    "MoveGenerator",
    "PIECE_VALUES",
    "Piece",
    "Rules",
    # Errors
    "ChessError",
    "IllegalMoveError",
    # Operations
    "apply_move",
    "initialize_board",
    "is_checkmate",
    "is_in_check",
    "is_square_attacked",
    "is_stalemate",
    "king_adjacent",
    "legal_moves",
    "square_under_attack",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
