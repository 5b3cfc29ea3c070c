"""Static position evaluation.

The weights below are hand tuned and define how strong the engine plays;
changing them changes which moves the search prefers.
"""

from __future__ import annotations

from rookery.core.enums import Color
from rookery.core.move_generator import MoveGenerator
from rookery.core.piece import PIECE_VALUES
from rookery.core.state import GameState
from rookery.core.types import Square

MOBILITY_WEIGHT = 0.1
CENTER_WEIGHT = 0.1
CHECK_PENALTY = 0.5

CENTER_SQUARES: tuple[Square, ...] = (
    Square(3, 3),
    Square(3, 4),
    Square(4, 3),
    Square(4, 4),
)


def material_balance(state: GameState) -> int:
    """White material minus black material, in pawns."""
    score = 0
    for _, piece in state.board:
        value = PIECE_VALUES[piece.piece_type]
        score += value if piece.color == Color.WHITE else -value
    return score


def mobility_balance(state: GameState) -> int:
    """White legal-move count minus black legal-move count."""
    gen = MoveGenerator(state)
    return gen.count_legal_moves(Color.WHITE) - gen.count_legal_moves(Color.BLACK)


def center_balance(state: GameState) -> int:
    """Occupied centre squares: +1 per white piece, -1 per black piece."""
    score = 0
    for sq in CENTER_SQUARES:
        piece = state.board[sq]
        if piece is not None:
            score += 1 if piece.color == Color.WHITE else -1
    return score


def evaluate(state: GameState) -> float:
    """Score *state* from white's point of view (positive favours white)."""
    score = float(material_balance(state))
    score += MOBILITY_WEIGHT * mobility_balance(state)
    score += CENTER_WEIGHT * center_balance(state)
    if state.is_check:
        score += -CHECK_PENALTY if state.side_to_move == Color.WHITE else CHECK_PENALTY
    return score
