"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rookery.core.move import Move
    from rookery.core.state import GameState

CancelCheck = Callable[[], bool]

# Deepest search any difficulty level may request, in plies.
MAX_SEARCH_DEPTH = 5
MIN_LEVEL = 1


def depth_for_level(level: int) -> int:
    """Search depth for a difficulty level: level 1 -> 2 plies, capped at 5."""
    return min(max(level, MIN_LEVEL) + 1, MAX_SEARCH_DEPTH)


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 3
    time_limit_ms: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")
        if self.time_limit_ms is not None and self.time_limit_ms <= 0:
            raise ValueError("Time limit must be positive")

    @classmethod
    def for_level(cls, level: int, time_limit_ms: int | None = None) -> SearchLimits:
        return cls(max_depth=depth_for_level(level), time_limit_ms=time_limit_ms)


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``score`` is from white's point of view, in pawns.
    """

    best_move: Move | None
    score: float
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines that pick a move for the side to move."""

    def search(
        self,
        state: GameState,
        limits: SearchLimits,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult: ...
