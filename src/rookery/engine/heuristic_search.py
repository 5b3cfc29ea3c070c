"""One-ply heuristic move picker.

An alternative to :class:`~rookery.engine.minimax_search.MinimaxSearchEngine`
for a weaker, livelier opponent: each legal move gets a quick score and one
of the best few is chosen at random.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from rookery.core.attacks import BACK_ROW, PAWN_START_ROW
from rookery.core.enums import PieceType
from rookery.core.move import Move
from rookery.core.piece import PIECE_VALUES
from rookery.core.state import GameState, apply_move
from rookery.core.types import Square
from rookery.engine.search import CancelCheck, IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

CAPTURE_WEIGHT = 10
CENTRALIZATION_WEIGHT = 1
PAWN_ADVANCE_WEIGHT = 1
DEVELOPMENT_BONUS = 2
CASTLING_BONUS = 5
CHECK_BONUS = 3
CHECKMATE_BONUS = 1_000
DEFAULT_TOP_N = 3

_MINOR_PIECES = (PieceType.KNIGHT, PieceType.BISHOP)


@dataclass(slots=True, frozen=True)
class ScoredMove:
    move: Move
    score: float


def _centralization(sq: Square) -> int:
    """3 on the four centre squares, falling to 0 on the edge."""
    ring = max(abs(2 * sq.row - 7), abs(2 * sq.col - 7)) // 2
    return 3 - ring


class HeuristicSearchEngine(IEngine):
    """Scores every legal move one ply deep and picks among the top few.

    Args:
        rng: Source of randomness. Pass a seeded :class:`random.Random` for
            reproducible choices.
        seed: Convenience alternative to *rng*.
        top_n: How many of the best-scored moves to choose from.
    """

    __slots__ = ("_rng", "_top_n")

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        seed: int | None = None,
        top_n: int = DEFAULT_TOP_N,
    ) -> None:
        if top_n < 1:
            raise ValueError("top_n must be >= 1")
        self._rng = rng if rng is not None else random.Random(seed)
        self._top_n = top_n

    def search(
        self,
        state: GameState,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        del limits  # always one ply
        scored = self.rank_moves(state, is_cancelled)
        if not scored:
            return SearchResult(None, 0.0, 0, 0)

        candidates = scored[: self._top_n]
        choice = self._rng.choice(candidates)
        _LOGGER.debug(
            "Heuristic pick %s (score %.1f) from %s",
            choice.move,
            choice.score,
            [str(c.move) for c in candidates],
        )
        return SearchResult(choice.move, choice.score, 1, len(scored))

    def rank_moves(
        self,
        state: GameState,
        is_cancelled: CancelCheck | None = None,
    ) -> list[ScoredMove]:
        """Legal moves sorted best first; ties keep generation order."""
        scored: list[ScoredMove] = []
        for move in state.legal_moves():
            if scored and is_cancelled is not None and is_cancelled():
                break
            scored.append(ScoredMove(move, self.score_move(state, move)))
        scored.sort(key=lambda s: s.score, reverse=True)
        return scored

    def score_move(self, state: GameState, move: Move) -> float:
        board = state.board
        piece = board[move.from_sq]
        if piece is None:
            return float("-inf")

        score = 0.0
        target = board[move.to_sq]
        if target is not None:
            score += CAPTURE_WEIGHT * PIECE_VALUES[target.piece_type]

        if piece.piece_type != PieceType.KING:
            score += CENTRALIZATION_WEIGHT * (
                _centralization(move.to_sq) - _centralization(move.from_sq)
            )

        if piece.piece_type == PieceType.PAWN:
            advance = abs(move.to_sq.row - PAWN_START_ROW[piece.color])
            score += PAWN_ADVANCE_WEIGHT * advance

        if (
            piece.piece_type in _MINOR_PIECES
            and not piece.has_moved
            and move.from_sq.row == BACK_ROW[piece.color]
        ):
            score += DEVELOPMENT_BONUS

        is_castling = (
            piece.piece_type == PieceType.KING
            and abs(move.to_sq.col - move.from_sq.col) == 2
        )
        if is_castling:
            score += CASTLING_BONUS

        after = apply_move(state, move.from_sq, move.to_sq, validate=False)
        if after.is_checkmate:
            score += CHECKMATE_BONUS
        elif after.is_check:
            score += CHECK_BONUS
        return score
