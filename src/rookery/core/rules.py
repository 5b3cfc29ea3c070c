"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookery.core.attacks import is_king_attacked, is_square_attacked
from rookery.core.enums import Color, GameResult
from rookery.core.move_generator import MoveGenerator
from rookery.core.types import Square

if TYPE_CHECKING:
    from rookery.core.state import GameState


class Rules:
    """Static rule-checker that operates on a :class:`GameState`.

    These recompute from the board every time; :class:`GameState` caches
    the same answers in its ``is_check`` / ``is_checkmate`` /
    ``is_stalemate`` fields when it is built.
    """

    # Product policy: the only terminal states are checkmate and stalemate.
    # No repetition, fifty-move or insufficient-material draws.

    @staticmethod
    def is_in_check(state: GameState) -> bool:
        return is_king_attacked(state.board, state.side_to_move)

    @staticmethod
    def has_legal_moves(state: GameState) -> bool:
        return MoveGenerator(state).has_legal_move(state.side_to_move)

    @staticmethod
    def is_checkmate(state: GameState) -> bool:
        if not Rules.is_in_check(state):
            return False
        return not Rules.has_legal_moves(state)

    @staticmethod
    def is_stalemate(state: GameState) -> bool:
        if Rules.is_in_check(state):
            return False
        return not Rules.has_legal_moves(state)

    @staticmethod
    def game_result(state: GameState) -> GameResult:
        """Determine the current game result."""
        if Rules.has_legal_moves(state):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(state):
            return (
                GameResult.BLACK_WINS
                if state.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate


def square_under_attack(sq: Square, state: GameState, defending_color: Color) -> bool:
    """Is *sq* attacked by any piece not belonging to *defending_color*?"""
    return is_square_attacked(state.board, Square(*sq), defending_color.opposite)


def is_in_check(state: GameState) -> bool:
    return Rules.is_in_check(state)


def is_checkmate(state: GameState) -> bool:
    return Rules.is_checkmate(state)


def is_stalemate(state: GameState) -> bool:
    return Rules.is_stalemate(state)
